from django.urls import path
from . import views

app_name = 'shop'

urlpatterns = [
    # GET         /api/settings - Get shop settings
    # PUT / PATCH /api/settings - Update shop settings
    path('settings', views.shop_settings, name='settings'),
]
