from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # Dashboard
    path('daily-summary', views.daily_summary, name='daily-summary'),

    # Customer analytics
    path(
        'customers/<uuid:customer_id>/lifetime-total',
        views.customer_lifetime_total,
        name='customer-lifetime-total'
    ),
]
