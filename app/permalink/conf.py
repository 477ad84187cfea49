# django-permalink/app/permalink/conf.py
from django.conf import settings

DEFAULT_BUILDERS = {
    'base': 'permalink.builders.BaseBuilder',
    'meta': 'permalink.builders.MetaTagsBuilder',
    'opengraph': 'permalink.builders.OpenGraphBuilder',
    'twitter': 'permalink.builders.TwitterBuilder',
}


def get_builders():
    """Section name -> dotted path of the builder class."""
    return getattr(settings, 'PERMALINK_BUILDERS', DEFAULT_BUILDERS)


def get_static_permalinks():
    return getattr(settings, 'PERMALINK_STATIC', {})


def get_defaults():
    """Initial values of the SEO helper, before any builder runs."""
    defaults = getattr(settings, 'PERMALINK_DEFAULTS', None)
    if defaults is None:
        defaults = {'title': getattr(settings, 'SITE_NAME', '')}
    return defaults
