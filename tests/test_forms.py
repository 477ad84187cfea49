import json

import pytest

from permalink.forms import PermalinkForm


def form_for(seo):
    return PermalinkForm(data={'seo': json.dumps(seo)})


@pytest.mark.parametrize('seo', [
    {'title': 'Home', 'meta': {'description': 'd'}},
    {'opengraph': False, 'twitter': None},
    {},
])
def test_valid_seo(seo) -> None:
    form = form_for(seo)

    assert form.is_valid(), form.errors
    assert form.cleaned_data['seo'] == seo


@pytest.mark.parametrize('seo', [
    ['not', 'a', 'mapping'],
    {'meta': 'description'},
    {'twitter': ['card']},
])
def test_invalid_seo(seo) -> None:
    form = form_for(seo)

    assert not form.is_valid()
    assert 'seo' in form.errors


def test_blank_seo_becomes_empty_mapping() -> None:
    form = PermalinkForm(data={'seo': ''})

    assert form.is_valid(), form.errors
    assert form.cleaned_data['seo'] == {}


def test_admin_uses_permalink_form() -> None:
    from django.contrib import admin
    from permalink.admin import PermalinkInline
    from permalink.models import Permalink

    assert admin.site.is_registered(Permalink)
    assert admin.site._registry[Permalink].form is PermalinkForm
    assert PermalinkInline.max_num == 1
