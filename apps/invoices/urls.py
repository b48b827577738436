from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'invoices'

router = SimpleRouter(trailing_slash=False)
router.register(r'invoices', views.InvoiceViewSet, basename='invoice')

urlpatterns = [
    # Invoice ViewSet routes
    # GET    /api/invoices                          - List invoices (search, range, status)
    # POST   /api/invoices                          - Create invoice
    # GET    /api/invoices/{id}                     - Get invoice
    # PUT    /api/invoices/{id}                     - Update invoice
    # DELETE /api/invoices/{id}                     - Delete invoice

    # Custom actions
    # GET    /api/invoices/customer/{customer_id}   - Invoices of one customer
    # GET    /api/invoices/{id}/share               - WhatsApp message and link

    path('', include(router.urls)),
]
