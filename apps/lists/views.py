from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from .serializers import (
    ShoppingListSerializer,
    ShoppingListDetailSerializer,
    ShoppingListCreateSerializer,
    ShoppingListUpdateSerializer,
    ListSharesSerializer,
    ListItemSerializer,
    ListItemCreateSerializer,
    ListItemUpdateSerializer,
)
from .permissions import IsListOwner

from apps.lists.services import (
    visible_lists,
    get_list_for_user,
    create_list,
    update_list,
    delete_list,
    get_list_shares,
    update_list_shares,
    add_list_item,
    update_list_item,
    toggle_list_item,
    remove_list_item,
    # Exceptions
    ListNotFoundError,
    ListItemNotFoundError,
    CatalogItemNotFoundError,
    InvalidListNameError,
    DuplicateListNameError,
    InvalidQuantityError,
    InvalidShareRecipientsError,
    InsufficientPermissionsError,
)


UUID_REGEX = '[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'


class ShoppingListPagination(PageNumberPagination):
    """Custom pagination for shopping lists."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ShoppingListViewSet(viewsets.ModelViewSet):
    """
    ViewSet for ShoppingList CRUD operations.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Get all lists visible to the user
    create: Create a new list
    retrieve: Get a visible list with its items
    update: Rename / toggle global sharing (owner only)
    partial_update: Partially update a list (owner only)
    destroy: Delete a list (owner only)
    """

    serializer_class = ShoppingListSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = ShoppingListPagination
    lookup_value_regex = UUID_REGEX

    def get_queryset(self):
        """Return only lists visible to the user."""
        return visible_lists(user=self.request.user)

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'retrieve':
            return ShoppingListDetailSerializer
        elif self.action == 'create':
            return ShoppingListCreateSerializer
        elif self.action in ['update', 'partial_update']:
            return ShoppingListUpdateSerializer
        return ShoppingListSerializer

    def get_permissions(self):
        """Set permissions based on action."""
        if self.action in ['update', 'partial_update', 'destroy']:
            return [IsAuthenticated(), IsListOwner()]
        return [IsAuthenticated()]

    def retrieve(self, request, *args, **kwargs):
        try:
            shopping_list = get_list_for_user(list_id=kwargs['pk'], user=request.user)
        except ListNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        serializer = ShoppingListDetailSerializer(shopping_list, context={'request': request})
        return Response(serializer.data)

    def create(self, request, *args, **kwargs):
        """Create a new list."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            shopping_list = create_list(
                name=serializer.validated_data['name'],
                owner=request.user,
                is_shared=serializer.validated_data['is_shared'],
            )
        except InvalidListNameError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DuplicateListNameError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        output_serializer = ShoppingListSerializer(shopping_list, context={'request': request})
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """Rename a list or toggle global sharing."""
        # 404 when not visible, 403 when visible but not owned
        self.get_object()

        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            shopping_list = update_list(
                list_id=kwargs['pk'],
                user=request.user,
                name=serializer.validated_data.get('name'),
                is_shared=serializer.validated_data.get('is_shared'),
            )
        except ListNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidListNameError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DuplicateListNameError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        output_serializer = ShoppingListSerializer(shopping_list, context={'request': request})
        return Response(output_serializer.data)

    def destroy(self, request, *args, **kwargs):
        """Delete a list."""
        self.get_object()

        try:
            delete_list(list_id=kwargs['pk'], user=request.user)
            return Response(status=status.HTTP_204_NO_CONTENT)
        except ListNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    @extend_schema(request=ListSharesSerializer, responses={200: ListSharesSerializer})
    @action(detail=True, methods=['get', 'put'])
    def shares(self, request, pk=None):
        """
        Get or replace the users a list is specifically shared with (owner only).

        PUT body: {"user_ids": [...]}. Ownership is checked before the body.
        """
        # Lists the user cannot see answer 404 before ownership is checked
        self.get_object()

        try:
            if request.method == 'GET':
                user_ids = get_list_shares(list_id=pk, user=request.user)
            else:
                user_ids = update_list_shares(
                    list_id=pk,
                    user=request.user,
                    user_ids=request.data.get('user_ids'),
                )
        except ListNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidShareRecipientsError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ListSharesSerializer({'user_ids': user_ids}).data)

    @extend_schema(request=ListItemCreateSerializer, responses={201: ListItemSerializer})
    @action(detail=True, methods=['post'])
    def items(self, request, pk=None):
        """Add a catalog item to the list."""
        serializer = ListItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            list_item = add_list_item(
                list_id=pk,
                user=request.user,
                **serializer.validated_data
            )
        except (ListNotFoundError, CatalogItemNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidQuantityError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ListItemSerializer(list_item).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ListItemUpdateSerializer, responses={200: ListItemSerializer})
    @action(
        detail=True,
        methods=['patch', 'delete'],
        url_path=rf'items/(?P<list_item_id>{UUID_REGEX})',
        url_name='item-detail',
    )
    def item_detail(self, request, pk=None, list_item_id=None):
        """Update quantity/comment of a list entry, or remove it."""
        try:
            if request.method == 'DELETE':
                remove_list_item(list_id=pk, list_item_id=list_item_id, user=request.user)
                return Response(status=status.HTTP_204_NO_CONTENT)

            serializer = ListItemUpdateSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            list_item = update_list_item(
                list_id=pk,
                list_item_id=list_item_id,
                user=request.user,
                **serializer.validated_data
            )
        except (ListNotFoundError, ListItemNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidQuantityError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ListItemSerializer(list_item).data)

    @extend_schema(request=None, responses={200: ListItemSerializer})
    @action(
        detail=True,
        methods=['post'],
        url_path=rf'items/(?P<list_item_id>{UUID_REGEX})/toggle',
        url_name='item-toggle',
    )
    def toggle_item(self, request, pk=None, list_item_id=None):
        """Check or uncheck a list entry."""
        try:
            list_item = toggle_list_item(list_id=pk, list_item_id=list_item_id, user=request.user)
        except (ListNotFoundError, ListItemNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(ListItemSerializer(list_item).data)
