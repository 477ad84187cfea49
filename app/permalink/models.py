# django-permalink/app/permalink/models.py
from django.db import models
from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType


class Permalink(models.Model):
    """
    SEO configuration owned by exactly one model instance of any type.
    """
    content_type = models.ForeignKey(ContentType, on_delete=models.CASCADE, related_name='+')
    object_id = models.PositiveBigIntegerField()
    permalinkable = GenericForeignKey('content_type', 'object_id')

    seo = models.JSONField(
        default=dict,
        blank=True,
        help_text="Section name to SEO data, e.g. {\"title\": \"Home\", \"meta\": {\"description\": \"...\"}}."
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['content_type', 'object_id']
        constraints = [
            models.UniqueConstraint(fields=['content_type', 'object_id'], name='unique_permalink_owner'),
        ]

    def __str__(self):
        return f"Permalink for {self.content_type.model} #{self.object_id}"
