from django.shortcuts import render
from django.views import View
from django.contrib.auth.mixins import LoginRequiredMixin
from rest_framework import status, viewsets
from rest_framework.response import Response
import traceback
import logging

from .exceptions import DocumentNotFound, ReferentialIntegrityError, StoreError
from .forms import CategoryForm, ProductForm, ProductUpdateForm
from .models import Category, Product
from .serializers import CategorySerializer, ProductSerializer
from .services import (
    CategoryStore,
    ProductStore,
    resolve_or_create_category,
    search_categories,
    search_products,
)
from .utils import STORE_ERROR_MESSAGE, first_form_error, respond


logger = logging.getLogger(__name__)

PRODUCT_LIST = 'inventory:product-list'
CATEGORY_LIST = 'inventory:category-list'


# ====================================
# REST API VIEWSETS
# ====================================

class CategoryViewSet(viewsets.ModelViewSet):
    """API endpoint for categories. Deletes go through the product guard."""
    queryset = Category.objects.all()
    serializer_class = CategorySerializer

    def destroy(self, request, *args, **kwargs):
        category = self.get_object()
        try:
            CategoryStore().delete(category.pk)
        except ReferentialIntegrityError as e:
            return Response({'detail': str(e)}, status=status.HTTP_409_CONFLICT)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ProductViewSet(viewsets.ModelViewSet):
    """API endpoint for products"""
    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def get_queryset(self):
        """Filter products by category id"""
        queryset = Product.objects.select_related('category').all()

        category_id = self.request.query_params.get('category', None)
        if category_id:
            queryset = queryset.filter(category_id=category_id)

        return queryset

    def list(self, request, *args, **kwargs):
        search = request.query_params.get('search', None)
        if not search:
            return super().list(request, *args, **kwargs)

        # Same in-memory match the Inventory screen uses
        products = search_products(self.get_queryset(), search)
        page = self.paginate_queryset(products)
        if page is not None:
            return self.get_paginated_response(self.get_serializer(page, many=True).data)
        return Response(self.get_serializer(products, many=True).data)


# ====================================
# PRODUCT VIEWS (Inventory screen)
# ====================================

class ProductListView(LoginRequiredMixin, View):
    template_name = "inventory/product_list.html"

    def get(self, request, form=None):
        search = request.GET.get('search', '').strip()
        editing = request.GET.get('edit')
        context = {
            'active_tab': 'inventory',
            'search': search,
            'form': form or ProductForm(),
            'products': [],
            'total_products': 0,
            'editing_id': None,
        }
        try:
            products = ProductStore().list()
            context['products'] = search_products(products, search)
            context['total_products'] = len(products)
            for product in context['products']:
                if editing and str(product.pk) == editing:
                    context['editing_id'] = product.pk
                    context['edit_form'] = ProductUpdateForm(instance=product)
        except StoreError:
            logger.error(f"Loading products failed:\n{traceback.format_exc()}")
            context['load_error'] = STORE_ERROR_MESSAGE
        return render(request, self.template_name, context)


class ProductCreateView(LoginRequiredMixin, View):

    def post(self, request):
        form = ProductForm(request.POST)
        if not form.is_valid():
            logger.info(f"Product form invalid: {form.errors.as_json()}")
            return respond(request, False, first_form_error(form), PRODUCT_LIST,
                           errors=dict(form.errors))

        data = form.cleaned_data
        try:
            category = data['category']
            if category is None:
                category, _ = resolve_or_create_category(data['new_category'])

            product = ProductStore().create(
                name=data['name'],
                price=data['price'],
                quantity=data['quantity'],
                category=category,
            )
        except StoreError:
            logger.error(f"Adding product failed:\n{traceback.format_exc()}")
            return respond(request, False, STORE_ERROR_MESSAGE, PRODUCT_LIST, status=500)

        return respond(
            request, True, f'Product "{product.name}" saved successfully!', PRODUCT_LIST,
            product_id=product.pk, category_id=category.pk,
        )


class ProductUpdateView(LoginRequiredMixin, View):
    """Direct edit of name, price and quantity"""

    def post(self, request, pk):
        products = ProductStore()
        try:
            product = products.get(pk)
            form = ProductUpdateForm(request.POST, instance=product)
            if not form.is_valid():
                return respond(request, False, first_form_error(form), PRODUCT_LIST,
                               errors=dict(form.errors))
            products.update(pk, **form.cleaned_data)
        except DocumentNotFound:
            return respond(request, False, 'Product not found', PRODUCT_LIST, status=404)
        except StoreError:
            logger.error(f"Updating product {pk} failed:\n{traceback.format_exc()}")
            return respond(request, False, STORE_ERROR_MESSAGE, PRODUCT_LIST, status=500)

        return respond(request, True, 'Product updated successfully', PRODUCT_LIST)


class ProductAdjustQuantityView(LoginRequiredMixin, View):
    """+1 / -1 buttons"""

    def post(self, request, pk):
        try:
            delta = int(request.POST.get('delta', 0))
        except ValueError:
            delta = 0
        if delta not in (1, -1):
            return respond(request, False, 'Invalid quantity change', PRODUCT_LIST)

        try:
            product = ProductStore().adjust_quantity(pk, delta)
        except DocumentNotFound:
            return respond(request, False, 'Product not found', PRODUCT_LIST, status=404)
        except StoreError:
            logger.error(f"Adjusting product {pk} failed:\n{traceback.format_exc()}")
            return respond(request, False, STORE_ERROR_MESSAGE, PRODUCT_LIST, status=500)

        return respond(
            request, True, f'"{product.name}" quantity is now {product.quantity}', PRODUCT_LIST,
            quantity=product.quantity,
        )


class ProductDeleteView(LoginRequiredMixin, View):

    def post(self, request, pk):
        products = ProductStore()
        try:
            product = products.get(pk)
            products.delete(pk)
        except DocumentNotFound:
            return respond(request, False, 'Product not found', PRODUCT_LIST, status=404)
        except StoreError:
            logger.error(f"Deleting product {pk} failed:\n{traceback.format_exc()}")
            return respond(request, False, STORE_ERROR_MESSAGE, PRODUCT_LIST, status=500)

        return respond(request, True, f'Product "{product.name}" deleted successfully', PRODUCT_LIST)


# ====================================
# CATEGORY VIEWS (Categories screen)
# ====================================

class CategoryListView(LoginRequiredMixin, View):
    template_name = "inventory/category_list.html"

    def get(self, request):
        search = request.GET.get('search', '').strip()
        editing = request.GET.get('edit')
        context = {
            'active_tab': 'categories',
            'search': search,
            'form': CategoryForm(),
            'categories': [],
            'editing_id': None,
        }
        try:
            categories = search_categories(CategoryStore().list(), search)
            context['categories'] = categories
            for category in categories:
                if editing and str(category.pk) == editing:
                    context['editing_id'] = category.pk
                    context['edit_form'] = CategoryForm(instance=category)
        except StoreError:
            logger.error(f"Loading categories failed:\n{traceback.format_exc()}")
            context['load_error'] = STORE_ERROR_MESSAGE
        return render(request, self.template_name, context)


class CategoryCreateView(LoginRequiredMixin, View):

    def post(self, request):
        form = CategoryForm(request.POST)
        if not form.is_valid():
            return respond(request, False, first_form_error(form), CATEGORY_LIST,
                           errors=dict(form.errors))
        try:
            category = CategoryStore().create(
                form.cleaned_data['name'], form.cleaned_data.get('description', '')
            )
        except StoreError:
            logger.error(f"Adding category failed:\n{traceback.format_exc()}")
            return respond(request, False, STORE_ERROR_MESSAGE, CATEGORY_LIST, status=500)

        return respond(
            request, True, f'Category "{category.name}" created successfully', CATEGORY_LIST,
            category_id=category.pk,
        )


class CategoryUpdateView(LoginRequiredMixin, View):

    def post(self, request, pk):
        categories = CategoryStore()
        try:
            category = categories.get(pk)
            form = CategoryForm(request.POST, instance=category)
            if not form.is_valid():
                return respond(request, False, first_form_error(form), CATEGORY_LIST,
                               errors=dict(form.errors))
            categories.update(pk, **form.cleaned_data)
        except DocumentNotFound:
            return respond(request, False, 'Category not found', CATEGORY_LIST, status=404)
        except StoreError:
            logger.error(f"Updating category {pk} failed:\n{traceback.format_exc()}")
            return respond(request, False, STORE_ERROR_MESSAGE, CATEGORY_LIST, status=500)

        return respond(request, True, 'Category updated successfully', CATEGORY_LIST)


class CategoryDeleteView(LoginRequiredMixin, View):

    def post(self, request, pk):
        try:
            CategoryStore().delete(pk)
        except ReferentialIntegrityError as e:
            return respond(request, False, str(e), CATEGORY_LIST, status=409)
        except DocumentNotFound:
            return respond(request, False, 'Category not found', CATEGORY_LIST, status=404)
        except StoreError:
            logger.error(f"Deleting category {pk} failed:\n{traceback.format_exc()}")
            return respond(request, False, STORE_ERROR_MESSAGE, CATEGORY_LIST, status=500)

        return respond(request, True, 'Category deleted successfully', CATEGORY_LIST)
