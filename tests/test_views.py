"""Request-level tests: binding, context processor and template tag."""

import pytest
from django.template import Context, Template
from django.test import RequestFactory
from django.urls import resolve

from permalink import context_processors
from permalink.context_processors import get_seo, seo_tags
from permalink.routing import CurrentRoute, bind_permalink
from tests.testapp.models import Page, Tag


@pytest.mark.django_db
class TestPages:
    def test_bound_permalink_is_rendered(self, client) -> None:
        Page.objects.create(title='Home', slug='home', summary='Welcome home')

        response = client.get('/pages/home/')

        content = response.content.decode()
        assert '<title>Home</title>' in content
        assert '<meta name="description" content="Welcome home">' in content
        assert '<meta property="og:type" content="article">' in content
        assert '<h1>Home</h1>' in content

    def test_static_permalink_is_rendered(self, client) -> None:
        response = client.get('/about/')

        content = response.content.decode()
        assert '<title>About</title>' in content
        # Untouched groups keep the site defaults
        assert '<meta property="og:title" content="Test Site">' in content

    def test_page_without_permalink_falls_back_to_defaults(self, client) -> None:
        Page.objects.create(title='Hidden', slug='hidden', refresh_permalink=False)

        response = client.get('/pages/hidden/')

        assert '<title>Test Site</title>' in response.content.decode()


class TestRouting:
    def test_current_route_name(self) -> None:
        request = RequestFactory().get('/about/')
        request.resolver_match = resolve('/about/')

        assert CurrentRoute(request).get_name() == 'static-about'
        assert CurrentRoute(request).permalink() is None

    @pytest.mark.django_db
    def test_bind_owner_binds_its_permalink(self) -> None:
        tag = Tag.objects.create(name='python')
        permalink = tag.store_permalink({'title': 'Python'})
        request = RequestFactory().get('/')

        assert bind_permalink(request, tag) == permalink
        assert CurrentRoute(request).permalink() == permalink

    @pytest.mark.django_db
    def test_bind_owner_without_permalink(self) -> None:
        request = RequestFactory().get('/')

        assert bind_permalink(request, Tag.objects.create(name='python')) is None


class TestGetSeo:
    def test_builders_run_once_per_request(self, monkeypatch) -> None:
        calls = []
        original = context_processors.PermalinkManager.run_builders

        def counting(self):
            calls.append(self)
            return original(self)

        monkeypatch.setattr(context_processors.PermalinkManager, 'run_builders', counting)
        request = RequestFactory().get('/about/')
        request.resolver_match = resolve('/about/')

        first = get_seo(request)
        second = seo_tags(request)['seo']

        assert first is second
        assert len(calls) == 1
        assert first.meta['title'] == 'About'

    def test_defaults_from_settings(self, settings) -> None:
        settings.PERMALINK_DEFAULTS = {'title': 'Custom', 'description': 'Hello'}

        seo = get_seo(RequestFactory().get('/'))

        assert seo.meta == {'title': 'Custom', 'description': 'Hello'}

    def test_template_tag_without_request(self) -> None:
        template = Template('{% load permalink_tags %}[{% permalink_seo %}]')

        assert template.render(Context({})) == '[]'
