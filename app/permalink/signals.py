# django-permalink/app/permalink/signals.py
from django.db.models.signals import post_save
from django.dispatch import receiver
from .mixins import HasPermalinks, after_save


@receiver(post_save)
def update_permalink_after_save(sender, instance, raw=False, **kwargs):
    """
    Runs the permalink refresh for every saved HasPermalinks instance.
    """
    if raw or not isinstance(instance, HasPermalinks):
        return # Fixture loading or not a permalink owner

    after_save(instance)
