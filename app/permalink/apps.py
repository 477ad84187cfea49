# django-permalink/app/permalink/apps.py
from django.apps import AppConfig

class PermalinkConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'permalink'

    def ready(self):
        # Registers the post_save receiver
        import permalink.signals

        from .conf import get_static_permalinks
        from .registry import static_permalinks
        static_permalinks.replace(get_static_permalinks())
