from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

# REST API Router
router = DefaultRouter()
router.register(r'receipts', views.ReceiptViewSet, basename='receipt-api')

app_name = 'sales'

urlpatterns = [
    path('api/', include(router.urls)),

    # Receipt screen
    path('receipt/', views.ReceiptView.as_view(), name='receipt'),
    path('receipt/add/', views.CartAddView.as_view(), name='cart-add'),
    path('receipt/update/', views.CartUpdateView.as_view(), name='cart-update'),
    path('receipt/remove/', views.CartRemoveView.as_view(), name='cart-remove'),
    path('receipt/clear/', views.CartClearView.as_view(), name='cart-clear'),
    path('receipt/generate/', views.GenerateReceiptView.as_view(), name='receipt-generate'),
    path('receipts/<int:pk>/pdf/', views.ReceiptPdfView.as_view(), name='receipt-pdf'),

    # Reports screen
    path('reports/', views.ReportsView.as_view(), name='reports'),
]
