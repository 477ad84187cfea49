# django-permalink/app/permalink/context_processors.py
from .conf import get_defaults
from .manager import PermalinkManager
from .registry import BuilderContainer
from .seo import SeoHelper

REQUEST_CACHE_ATTRIBUTE = '_permalink_seo'


def get_seo(request):
    """
    Returns the SEO helper of the request, running the builders the first
    time it is asked for. Later calls reuse the same helper.
    """
    seo = getattr(request, REQUEST_CACHE_ATTRIBUTE, None)
    if seo is not None:
        return seo

    seo = SeoHelper(get_defaults())
    manager = PermalinkManager(request, BuilderContainer.from_settings(seo))
    manager.run_builders()

    setattr(request, REQUEST_CACHE_ATTRIBUTE, seo)
    return seo


def seo_tags(request):
    """
    Context processor to load SEO tags for the current page.
    Usage in a template: {{ seo }} or {{ seo.title }}
    """
    return {
        'seo': get_seo(request),
    }
