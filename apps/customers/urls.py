from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'customers'

router = SimpleRouter(trailing_slash=False)
router.register(r'customers', views.CustomerViewSet, basename='customer')

urlpatterns = [
    # Customer ViewSet routes
    # GET    /api/customers               - List customers
    # POST   /api/customers               - Create customer
    # GET    /api/customers/{id}          - Get customer
    # PUT    /api/customers/{id}          - Update customer
    # DELETE /api/customers/{id}          - Delete customer (no invoices only)

    # Custom actions
    # GET    /api/customers/phone/{phone} - Lookup by phone (null if absent)

    path('', include(router.urls)),
]
