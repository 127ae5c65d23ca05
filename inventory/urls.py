from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

# REST API Router
router = DefaultRouter()
router.register(r'categories', views.CategoryViewSet, basename='category-api')
router.register(r'products', views.ProductViewSet, basename='product-api')

app_name = 'inventory'

urlpatterns = [
    # ============================================
    # REST API ENDPOINTS
    # ============================================
    path('api/', include(router.urls)),

    # ============================================
    # CATEGORY URLS
    # ============================================
    path('categories/', views.CategoryListView.as_view(), name='category-list'),
    path('categories/create/', views.CategoryCreateView.as_view(), name='category-create'),
    path('categories/<int:pk>/edit/', views.CategoryUpdateView.as_view(), name='category-update'),
    path('categories/<int:pk>/delete/', views.CategoryDeleteView.as_view(), name='category-delete'),

    # ============================================
    # PRODUCT URLS
    # ============================================
    path('products/', views.ProductListView.as_view(), name='product-list'),
    path('products/create/', views.ProductCreateView.as_view(), name='product-create'),
    path('products/<int:pk>/edit/', views.ProductUpdateView.as_view(), name='product-update'),
    path('products/<int:pk>/adjust/', views.ProductAdjustQuantityView.as_view(), name='product-adjust'),
    path('products/<int:pk>/delete/', views.ProductDeleteView.as_view(), name='product-delete'),
]
