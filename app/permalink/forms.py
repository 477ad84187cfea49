# django-permalink/app/permalink/forms.py
from django import forms
from .manager import RESERVED_SECTIONS
from .models import Permalink

class PermalinkForm(forms.ModelForm):
    class Meta:
        model = Permalink
        fields = ['seo']
        widgets = {
            'seo': forms.Textarea(attrs={'rows': 8}),
        }

    def clean_seo(self):
        seo = self.cleaned_data.get('seo')
        if seo is None:
            return {}

        if not isinstance(seo, dict):
            raise forms.ValidationError("SEO data must be a JSON object.")

        for section in RESERVED_SECTIONS:
            value = seo.get(section)
            # false turns the section's builder off
            if value is None or value is False:
                continue
            if not isinstance(value, dict):
                raise forms.ValidationError(f"'{section}' must be an object, false or null.")

        return seo
