# django-permalink/app/permalink/builders.py
from .contracts import MetaBuilder


class BaseBuilder(MetaBuilder):
    """
    Handles the top-level keys of the SEO data ("title", "description"...),
    which apply to every tag group at once.
    """
    section = 'base'

    def translate(self, data=None):
        data = data or {}

        if data.get('title'):
            self.seo.set_title(data['title'], source=self.section)
        if data.get('description'):
            self.seo.set_description(data['description'], source=self.section)
        if data.get('canonical'):
            self.seo.set_canonical(data['canonical'], source=self.section)
        if data.get('image'):
            self.seo.add_image(data['image'], source=self.section)

    def disable(self):
        self.seo.forget(self.section)


class MetaTagsBuilder(MetaBuilder):
    """Plain <title>, <link rel="canonical"> and <meta name=...> tags."""
    section = 'meta'

    def translate(self, data=None):
        for name, content in (data or {}).items():
            if name == 'keywords' and isinstance(content, str):
                content = [keyword.strip() for keyword in content.split(',') if keyword.strip()]
            self.seo.put('meta', name, content, self.section)

    def disable(self):
        self.seo.forget(self.section)


class OpenGraphBuilder(MetaBuilder):
    section = 'opengraph'

    def translate(self, data=None):
        for prop, content in (data or {}).items():
            self.seo.put('opengraph', prop, content, self.section)

    def disable(self):
        self.seo.forget(self.section)


class TwitterBuilder(MetaBuilder):
    section = 'twitter'

    def translate(self, data=None):
        for name, content in (data or {}).items():
            self.seo.put('twitter', name, content, self.section)

    def disable(self):
        self.seo.forget(self.section)
