# django-permalink/app/permalink/contracts.py
from abc import ABC, abstractmethod


class MetaBuilder(ABC):
    """
    Translates one section of a permalink's SEO data into SEO helper state.

    Every tag a builder writes is recorded under its section name, so that
    `disable()` can take back exactly what the builder contributed.
    """
    section = None

    def __init__(self, seo):
        self.seo = seo

    def build(self, section, data):
        """
        Entry point used by the manager. `False` data switches the builder off.
        """
        self.section = section

        if data is False:
            self.disable()
        else:
            self.translate(data)

    @abstractmethod
    def translate(self, data=None):
        """Populate the SEO helper from the section data (None means {})."""

    @abstractmethod
    def disable(self):
        """Remove everything this builder contributes to the SEO helper."""
