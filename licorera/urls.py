from django.contrib import admin
from django.contrib.auth.views import LoginView, LogoutView
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path('admin/', admin.site.urls),

    # Auth
    path('login/', LoginView.as_view(redirect_authenticated_user=True), name='login'),
    path('logout/', LogoutView.as_view(), name='logout'),

    # Screens
    path('inventory/', include('inventory.urls')),
    path('sales/', include('sales.urls')),

    path('', RedirectView.as_view(pattern_name='inventory:product-list', permanent=False), name='home'),
]
