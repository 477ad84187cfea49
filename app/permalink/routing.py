# django-permalink/app/permalink/routing.py
from .models import Permalink

REQUEST_ATTRIBUTE = '_bound_permalink'


def bind_permalink(request, obj):
    """
    Attach the permalink of the page being served to the request.

    `obj` is either a Permalink or a model instance that owns one.
    Usage inside a view: bind_permalink(request, post)
    """
    if obj is not None and not isinstance(obj, Permalink) and hasattr(obj, 'has_permalink'):
        obj = obj.permalink
    setattr(request, REQUEST_ATTRIBUTE, obj)
    return obj


class CurrentRoute:
    """
    The matched route of a request, as seen by the permalink manager.
    """

    def __init__(self, request):
        self.request = request

    def permalink(self):
        return getattr(self.request, REQUEST_ATTRIBUTE, None)

    def get_name(self):
        match = getattr(self.request, 'resolver_match', None)
        if match is None:
            return None
        # view_name carries the namespace, e.g. 'blog:post_detail'
        return match.view_name
