# django-permalink/app/permalink/templatetags/permalink_tags.py
from django import template
from permalink.context_processors import get_seo

register = template.Library()

@register.simple_tag(takes_context=True)
def permalink_seo(context):
    """
    Renders the SEO tags of the current request.
    Usage: {% load permalink_tags %} ... <head>{% permalink_seo %}</head>
    """
    request = context.get('request')
    if request is None:
        return ''

    return get_seo(request).render()
