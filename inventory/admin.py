from django.contrib import admin
from .models import InventoryItem


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ('ingredient', 'brand', 'size', 'location', 'purchase_date', 'user')
    list_filter = ('purchase_date', 'location')
    search_fields = ('ingredient__name', 'brand', 'user__email')
    date_hierarchy = 'purchase_date'
    ordering = ('-purchase_date',)
    list_select_related = ('ingredient', 'user')
    readonly_fields = ('created_at', 'updated_at')
