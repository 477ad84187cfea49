# django-permalink/app/permalink/manager.py
import logging
from .models import Permalink
from .registry import builder_identifier, static_permalinks
from .routing import CurrentRoute

logger = logging.getLogger(__name__)

RESERVED_SECTIONS = ('meta', 'opengraph', 'twitter')


class PermalinkManager:
    """
    Runs the SEO builders matching the permalink of the current request.

    The SEO data comes from the permalink bound to the request's route or,
    failing that, from the static permalink registered for the route name.
    """

    def __init__(self, request, container, static=None):
        self._request = request
        self.container = container
        self.static_permalinks = static if static is not None else static_permalinks

    def run_builders(self):
        seo = self.get_current_permalink_seo()
        if seo is None:
            logger.debug("[run_builders] No permalink for the current route.")
            return

        for section, data in self.prepare_builders(seo).items():
            if data is None:
                continue

            binding = builder_identifier(section)
            if not self.container.has(binding):
                logger.debug(f"[run_builders] No builder registered as '{binding}', skipping.")
                continue

            logger.debug(f"[run_builders] Running '{binding}'.")
            self.container.make(binding).build(section, data)

    def prepare_builders(self, seo):
        """
        Split the SEO data into sections: the reserved ones plus 'base',
        which gathers every other key and comes first when present.
        """
        builders = {key: seo.get(key) for key in RESERVED_SECTIONS}
        base = {key: value for key, value in seo.items() if key not in RESERVED_SECTIONS}

        if base:
            return {'base': base, **builders}

        return builders

    def get_current_permalink_seo(self):
        route = CurrentRoute(self._request)

        permalink = route.permalink()
        if isinstance(permalink, Permalink):
            return permalink.seo

        return self.static_permalinks.get(route.get_name())

    # --- Configuration ---
    def permalinks(self, permalinks):
        self.static_permalinks.replace(permalinks)
        return self

    def add_permalink(self, route, seo=None):
        self.static_permalinks.add(route, seo)
        return self

    def request(self, request):
        self._request = request
        return self

    def get_container(self):
        return self.container

    def set_container(self, container):
        self.container = container
