# django-permalink/app/permalink/mixins.py
import logging
from django.db import models
from django.contrib.contenttypes.fields import GenericRelation
from django.contrib.contenttypes.models import ContentType
from .models import Permalink

logger = logging.getLogger(__name__)


class HasPermalinks(models.Model):
    """
    Gives any model an optional one-to-one permalink.

    Models that want their permalink refreshed on save implement
    `update_permalink_on_save()` and `update_permalink()`; see `after_save`.
    """
    permalinks = GenericRelation(Permalink, content_type_field='content_type', object_id_field='object_id')

    class Meta:
        abstract = True

    @property
    def permalink(self):
        """The permalink owned by this instance, or None."""
        if self.pk is None:
            return None
        return self.permalinks.first()

    def has_permalink(self):
        return self.permalink is not None

    def store_permalink(self, seo):
        """
        Create or update the single permalink of this instance with the given SEO data.
        """
        content_type = ContentType.objects.get_for_model(self)
        permalink, created = Permalink.objects.update_or_create(
            content_type=content_type,
            object_id=self.pk,
            defaults={'seo': seo or {}},
        )
        logger.info(f"[store_permalink] {'Created' if created else 'Updated'} permalink for {content_type.model} #{self.pk}")
        return permalink


def after_save(entity):
    """
    Refresh the permalink of a freshly saved entity if it asks for it.

    Entities without an `update_permalink_on_save` method are left alone.
    Errors raised by `update_permalink()` are not caught.
    """
    decide = getattr(entity, 'update_permalink_on_save', None)
    if not callable(decide):
        return False

    if not decide():
        return False

    entity.update_permalink()
    return True
