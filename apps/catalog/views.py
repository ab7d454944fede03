from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .models import Unit
from .serializers import (
    CategorySerializer,
    CategoryInputSerializer,
    UnitSerializer,
    UnitInputSerializer,
    ItemSerializer,
    ItemInputSerializer,
)
from .services import (
    get_categories,
    create_category,
    update_category,
    delete_category,
    create_unit,
    update_unit,
    delete_unit,
    search_items,
    create_item,
    update_item,
    delete_item,
    # Exceptions
    InvalidCatalogNameError,
    CategoryNotFoundError,
    UnitNotFoundError,
    ItemNotFoundError,
    DuplicateCategoryError,
    DuplicateUnitError,
    DuplicateItemError,
    ProtectedDefaultCategoryError,
    UnitInUseError,
)


UUID_REGEX = '[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'


class CategoryViewSet(viewsets.ModelViewSet):
    """
    ViewSet for shared product categories.

    destroy: items of the deleted category move to the fallback category
    """

    serializer_class = CategorySerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_REGEX

    def get_queryset(self):
        return get_categories()

    @extend_schema(request=CategoryInputSerializer, responses={201: CategorySerializer})
    def create(self, request, *args, **kwargs):
        serializer = CategoryInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            category = create_category(**serializer.validated_data)
        except InvalidCatalogNameError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DuplicateCategoryError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(CategorySerializer(category).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=CategoryInputSerializer, responses={200: CategorySerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = CategoryInputSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            category = update_category(category_id=kwargs['pk'], **serializer.validated_data)
        except CategoryNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (InvalidCatalogNameError, ProtectedDefaultCategoryError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DuplicateCategoryError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(CategorySerializer(category).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_category(category_id=kwargs['pk'])
        except CategoryNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except ProtectedDefaultCategoryError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(status=status.HTTP_204_NO_CONTENT)


class UnitViewSet(viewsets.ModelViewSet):
    """ViewSet for units of measure."""

    queryset = Unit.objects.order_by('name')
    serializer_class = UnitSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_REGEX

    @extend_schema(request=UnitInputSerializer, responses={201: UnitSerializer})
    def create(self, request, *args, **kwargs):
        serializer = UnitInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            unit = create_unit(name=serializer.validated_data['name'])
        except InvalidCatalogNameError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DuplicateUnitError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(UnitSerializer(unit).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=UnitInputSerializer, responses={200: UnitSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = UnitInputSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            unit = update_unit(unit_id=kwargs['pk'], **serializer.validated_data)
        except UnitNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidCatalogNameError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DuplicateUnitError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(UnitSerializer(unit).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_unit(unit_id=kwargs['pk'])
        except UnitNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnitInUseError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(status=status.HTTP_204_NO_CONTENT)


class ItemViewSet(viewsets.ModelViewSet):
    """
    ViewSet for catalog items.

    list: case-insensitive name search via ?search=
    """

    serializer_class = ItemSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_REGEX

    def get_queryset(self):
        return search_items(query=self.request.query_params.get('search'))

    @extend_schema(parameters=[
        OpenApiParameter('search', str, description='Substring of the item name'),
    ])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=ItemInputSerializer, responses={201: ItemSerializer})
    def create(self, request, *args, **kwargs):
        serializer = ItemInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            item = create_item(**serializer.validated_data)
        except (CategoryNotFoundError, UnitNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidCatalogNameError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DuplicateItemError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(ItemSerializer(item).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ItemInputSerializer, responses={200: ItemSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = ItemInputSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            item = update_item(item_id=kwargs['pk'], **serializer.validated_data)
        except (ItemNotFoundError, CategoryNotFoundError, UnitNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidCatalogNameError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DuplicateItemError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(ItemSerializer(item).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_item(item_id=kwargs['pk'])
        except ItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)
