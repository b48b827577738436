from rest_framework import viewsets, status
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    CategorySerializer,
    CategoryInputSerializer,
    ProductSerializer,
    ProductInputSerializer,
)
from .services import (
    list_categories,
    get_category_by_id,
    create_category,
    update_category,
    delete_category,
    list_products,
    get_product_by_id,
    create_product,
    update_product,
    delete_product,
    CategoryNotFoundError,
    DuplicateCategoryError,
    InvalidCategoryError,
    ProductNotFoundError,
)


class CategoryViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Category CRUD operations.

    list: Get all categories by sort order (defaults are seeded on first run)
    create: Create a new category
    retrieve: Get a specific category
    update: Update a category
    destroy: Delete a category; invoices keep their category ids
    """

    serializer_class = CategorySerializer

    def get_queryset(self):
        return list_categories()

    def retrieve(self, request, *args, **kwargs):
        try:
            category = get_category_by_id(category_pk=kwargs['pk'])
        except CategoryNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(CategorySerializer(category).data)

    @extend_schema(request=CategoryInputSerializer, responses={201: CategorySerializer})
    def create(self, request, *args, **kwargs):
        serializer = CategoryInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            category = create_category(**serializer.validated_data)
        except (DuplicateCategoryError, InvalidCategoryError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            CategorySerializer(category).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=CategoryInputSerializer, responses={200: CategorySerializer})
    def update(self, request, *args, **kwargs):
        serializer = CategoryInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            category = update_category(
                category_pk=kwargs['pk'],
                data=serializer.validated_data
            )
        except CategoryNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (DuplicateCategoryError, InvalidCategoryError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CategorySerializer(category).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_category(category_pk=kwargs['pk'])
        except CategoryNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)


class ProductViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Product CRUD operations.

    Products carry a category id and a default price that the client
    uses to prefill invoice items.
    """

    serializer_class = ProductSerializer

    def get_queryset(self):
        return list_products()

    def retrieve(self, request, *args, **kwargs):
        try:
            product = get_product_by_id(product_id=kwargs['pk'])
        except ProductNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(ProductSerializer(product).data)

    @extend_schema(request=ProductInputSerializer, responses={201: ProductSerializer})
    def create(self, request, *args, **kwargs):
        serializer = ProductInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = create_product(**serializer.validated_data)

        return Response(
            ProductSerializer(product).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=ProductInputSerializer, responses={200: ProductSerializer})
    def update(self, request, *args, **kwargs):
        serializer = ProductInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            product = update_product(
                product_id=kwargs['pk'],
                data=serializer.validated_data
            )
        except ProductNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(ProductSerializer(product).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_product(product_id=kwargs['pk'])
        except ProductNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)
