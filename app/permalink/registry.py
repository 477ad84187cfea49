# django-permalink/app/permalink/registry.py
import logging
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string
from .conf import get_builders

logger = logging.getLogger(__name__)

BINDING_PREFIX = 'permalink.'


def builder_identifier(section):
    return f"{BINDING_PREFIX}{section}"


class BuilderContainer:
    """
    Explicit registry of SEO builders, one per section.

    Builders are registered under "permalink.<section>" and created on demand
    with the SEO helper of the current request.
    """

    def __init__(self, seo=None, bindings=None):
        self.seo = seo
        self._bindings = {}
        for section, factory in (bindings or {}).items():
            self.register(section, factory)

    @classmethod
    def from_settings(cls, seo=None):
        bindings = {}
        for section, path in get_builders().items():
            try:
                bindings[section] = import_string(path)
            except ImportError as e:
                raise ImproperlyConfigured(f"PERMALINK_BUILDERS['{section}'] = '{path}' could not be imported: {e}") from e
        return cls(seo, bindings)

    def register(self, section, factory):
        self._bindings[builder_identifier(section)] = factory
        return self

    def has(self, identifier):
        return identifier in self._bindings

    def make(self, identifier):
        try:
            factory = self._bindings[identifier]
        except KeyError:
            raise KeyError(f"No builder registered as '{identifier}'.") from None
        return factory(self.seo)


class StaticPermalinkTable:
    """
    Route name -> SEO data, for pages that have no permalink owner.

    Filled while the project is configured and only read while serving requests.
    """

    def __init__(self, permalinks=None):
        self._permalinks = dict(permalinks or {})

    def replace(self, permalinks):
        self._permalinks = dict(permalinks or {})
        logger.debug(f"[static_permalinks] Registered {len(self._permalinks)} static permalink(s).")

    def add(self, route, seo=None):
        self._permalinks[route] = seo if seo is not None else {}

    def get(self, route):
        if route is None:
            return None
        return self._permalinks.get(route)

    def __contains__(self, route):
        return route in self._permalinks

    def __len__(self):
        return len(self._permalinks)


static_permalinks = StaticPermalinkTable()
