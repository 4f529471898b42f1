from django.contrib import admin
from .models import Batch


@admin.register(Batch)
class BatchAdmin(admin.ModelAdmin):
    list_display = ('recipe', 'made_on', 'user', 'created_at')
    list_filter = ('made_on',)
    search_fields = ('recipe__title', 'user__email', 'notes')
    date_hierarchy = 'made_on'
    ordering = ('-made_on',)
    list_select_related = ('recipe', 'user')

    # Batches are write-once: admin may add and delete, never change.
    def has_change_permission(self, request, obj=None):
        return False
