# django-permalink/app/permalink/admin.py
from django.contrib import admin
from django.contrib.contenttypes.admin import GenericStackedInline
from .forms import PermalinkForm
from .models import Permalink

@admin.register(Permalink)
class PermalinkAdmin(admin.ModelAdmin):
    form = PermalinkForm
    list_display = ('__str__', 'content_type', 'object_id', 'updated_at')
    list_filter = ('content_type',)
    readonly_fields = ('content_type', 'object_id', 'created_at', 'updated_at')

    # Permalinks are created by their owners, never by hand
    def has_add_permission(self, request):
        return False


class PermalinkInline(GenericStackedInline):
    """
    Add to the admin of any HasPermalinks model:
        inlines = [PermalinkInline]
    """
    model = Permalink
    form = PermalinkForm
    ct_field = 'content_type'
    ct_fk_field = 'object_id'
    extra = 0
    max_num = 1
