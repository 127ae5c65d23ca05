# sales/admin.py - READ-ONLY RECEIPTS

from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from .models import Receipt


@admin.register(Receipt)
class ReceiptAdmin(admin.ModelAdmin):
    list_display = [
        'id',
        'customer_name',
        'date',
        'item_count_display',
        'total',
        'timestamp',
        'pdf_link',
    ]

    list_filter = ['date']
    search_fields = ['customer_name']
    date_hierarchy = 'timestamp'

    readonly_fields = [
        'customer_name',
        'date',
        'items',
        'total',
        'timestamp',
        'pdf_link',
    ]

    def item_count_display(self, obj):
        return obj.item_count
    item_count_display.short_description = 'Items'

    def pdf_link(self, obj):
        if not obj.pk:
            return '-'
        return format_html('<a href="{}">Download PDF</a>', reverse('sales:receipt-pdf', args=[obj.pk]))
    pdf_link.short_description = 'Receipt'

    # ============================================
    # RECEIPTS ARE APPEND-ONLY
    # ============================================

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
