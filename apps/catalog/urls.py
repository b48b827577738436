from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'catalog'

router = SimpleRouter(trailing_slash=False)
router.register(r'categories', views.CategoryViewSet, basename='category')
router.register(r'products', views.ProductViewSet, basename='product')

urlpatterns = [
    # Category ViewSet routes
    # GET    /api/categories          - List categories (seeds defaults when empty)
    # POST   /api/categories          - Create category
    # GET    /api/categories/{id}     - Get category
    # PUT    /api/categories/{id}     - Update category
    # DELETE /api/categories/{id}     - Delete category

    # Product ViewSet routes
    # GET    /api/products            - List products
    # POST   /api/products            - Create product
    # GET    /api/products/{id}       - Get product
    # PUT    /api/products/{id}       - Update product
    # DELETE /api/products/{id}       - Delete product

    path('', include(router.urls)),
]
