# django-permalink/app/permalink/seo.py
from django.utils.html import format_html
from django.utils.safestring import mark_safe


class SeoHelper:
    """
    Holds the SEO tags of a single response and renders them as HTML.

    Tags are kept in three groups, one per builder family:
      - meta: title, description, keywords, canonical, robots and any named <meta> tag
      - opengraph: og:* properties, stored without the prefix
      - twitter: twitter:* cards, stored without the prefix
    """

    def __init__(self, defaults=None):
        # (group, key) -> name of the builder that last wrote it
        self._sources = {}
        self.reset()

        defaults = defaults or {}
        if defaults.get('title'):
            self.set_title(defaults['title'], source='defaults')
        if defaults.get('description'):
            self.set_description(defaults['description'], source='defaults')

    # --- Groups ---
    def reset_meta(self):
        self.meta = {}
        self._drop_sources('meta')

    def reset_opengraph(self):
        self.opengraph = {}
        self._drop_sources('opengraph')

    def reset_twitter(self):
        self.twitter = {}
        self._drop_sources('twitter')

    def reset(self):
        self.reset_meta()
        self.reset_opengraph()
        self.reset_twitter()

    def _drop_sources(self, group):
        self._sources = {slot: owner for slot, owner in self._sources.items() if slot[0] != group}

    # --- Writes tracked per source ---
    def put(self, group, key, value, source=None):
        getattr(self, group)[key] = value
        self._sources[(group, key)] = source

    def forget(self, source):
        """
        Remove every tag last written by `source`. Tags it wrote that another
        source overwrote afterwards stay.
        """
        for (group, key), owner in list(self._sources.items()):
            if owner == source:
                getattr(self, group).pop(key, None)
                del self._sources[(group, key)]

    # --- Shortcuts shared by every group ---
    def set_title(self, title, source=None):
        for group in ('meta', 'opengraph', 'twitter'):
            self.put(group, 'title', title, source)

    def set_description(self, description, source=None):
        for group in ('meta', 'opengraph', 'twitter'):
            self.put(group, 'description', description, source)

    def set_canonical(self, url, source=None):
        self.put('meta', 'canonical', url, source)
        self.put('opengraph', 'url', url, source)

    def add_image(self, url, source=None):
        self.put('opengraph', 'image', url, source)
        self.put('twitter', 'image', url, source)

    @property
    def title(self):
        return self.meta.get('title', '')

    # --- Output ---
    def render(self):
        tags = []

        for name, content in self.meta.items():
            if content in (None, '', []):
                continue
            if name == 'title':
                tags.append(format_html('<title>{}</title>', content))
            elif name == 'canonical':
                tags.append(format_html('<link rel="canonical" href="{}">', content))
            else:
                if isinstance(content, (list, tuple)):
                    content = ', '.join(str(item) for item in content)
                tags.append(format_html('<meta name="{}" content="{}">', name, content))

        for prop, content in self.opengraph.items():
            if content not in (None, ''):
                tags.append(format_html('<meta property="og:{}" content="{}">', prop, content))

        for name, content in self.twitter.items():
            if content not in (None, ''):
                tags.append(format_html('<meta name="twitter:{}" content="{}">', name, content))

        # Every tag above is already escaped by format_html
        return mark_safe('\n'.join(tags))

    def __str__(self):
        return self.render()

    def __html__(self):
        return self.render()
