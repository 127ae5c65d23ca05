from django.contrib import admin
from django.http import HttpResponse
import csv

from .models import Category, Product

# ============================================
# CUSTOM ACTIONS
# ============================================

def export_to_csv(modeladmin, request, queryset):
    """Export selected items to CSV"""
    opts = modeladmin.model._meta
    response = HttpResponse(content_type='text/csv')
    response['Content-Disposition'] = f'attachment; filename={opts.verbose_name_plural}.csv'

    writer = csv.writer(response)
    fields = [field for field in opts.get_fields() if not field.many_to_many and not field.one_to_many]

    # Write headers
    writer.writerow([field.verbose_name for field in fields])

    # Write data
    for obj in queryset:
        writer.writerow([getattr(obj, field.name) for field in fields])

    return response
export_to_csv.short_description = "Export to CSV"


# ============================================
# INLINE ADMINS
# ============================================

class ProductInline(admin.TabularInline):
    model = Product
    extra = 0
    fields = ['name', 'price', 'quantity', 'category_name']
    readonly_fields = ['category_name']
    show_change_link = True


# ============================================
# CATEGORY ADMIN
# ============================================

@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'description', 'product_count', 'created_at']
    search_fields = ['name']
    inlines = [ProductInline]
    actions = [export_to_csv]

    def product_count(self, obj):
        return obj.products.count()
    product_count.short_description = 'Products'

    def save_formset(self, request, form, formset, change):
        # Inline products never go through ProductAdmin.save_model
        if formset.model is not Product:
            return super().save_formset(request, form, formset, change)

        for product in formset.save(commit=False):
            product.category_name = product.category.name
            product.save()
        for product in formset.deleted_objects:
            product.delete()
        formset.save_m2m()


# ============================================
# PRODUCT ADMIN
# ============================================

@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['name', 'category_name', 'price', 'quantity', 'updated_at']
    list_filter = ['category']
    search_fields = ['name', 'category_name']
    readonly_fields = ['category_name', 'created_at', 'updated_at']
    actions = [export_to_csv]

    def save_model(self, request, obj, form, change):
        # New products, or products moved to another category, get a fresh snapshot
        if not change or 'category' in form.changed_data:
            obj.category_name = obj.category.name
        super().save_model(request, obj, form, change)
