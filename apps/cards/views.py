from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes, parser_classes
from rest_framework.parsers import MultiPartParser, FormParser, JSONParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    DiscountCardSerializer,
    DiscountCardInputSerializer,
    CardIdentifierSerializer,
    CardIdentifierInputSerializer,
    ResolveCardSerializer,
)
from .permissions import IsCardOwner

from apps.cards.services import (
    get_user_cards,
    create_card,
    update_card,
    toggle_card,
    delete_card,
    add_identifier,
    update_identifier,
    remove_identifier,
    resolve_card,
    # Exceptions
    CardNotFoundError,
    IdentifierNotFoundError,
    InvalidCardNameError,
    InvalidIdentifierError,
    DuplicateIdentifierError,
    InsufficientPermissionsError,
)


UUID_REGEX = '[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'


class DiscountCardViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the current user's discount cards.

    Other users' cards are never listed and answer 404.

    list: Get the user's cards with identifiers
    create: Create a new card
    retrieve: Get a card
    update: Rename a card / change its comment
    partial_update: Partially update a card
    destroy: Delete a card and its identifier images
    """

    serializer_class = DiscountCardSerializer
    permission_classes = [IsAuthenticated, IsCardOwner]
    pagination_class = None
    lookup_value_regex = UUID_REGEX
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get_queryset(self):
        return get_user_cards(user=self.request.user)

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return DiscountCardInputSerializer
        return DiscountCardSerializer

    def create(self, request, *args, **kwargs):
        """Create a new card."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            card = create_card(
                owner=request.user,
                name=serializer.validated_data['name'],
                comment=serializer.validated_data.get('comment'),
            )
        except InvalidCardNameError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(DiscountCardSerializer(card).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """Rename a card or change its comment."""
        self.get_object()

        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            card = update_card(
                card_id=kwargs['pk'],
                user=request.user,
                name=serializer.validated_data.get('name'),
                comment=serializer.validated_data.get('comment'),
            )
        except CardNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidCardNameError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(DiscountCardSerializer(self.get_object()).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a card."""
        self.get_object()

        try:
            delete_card(card_id=kwargs['pk'], user=request.user)
            return Response(status=status.HTTP_204_NO_CONTENT)
        except CardNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    @extend_schema(request=None, responses={200: DiscountCardSerializer})
    @action(detail=True, methods=['post'])
    def toggle(self, request, pk=None):
        """Activate or deactivate a card."""
        self.get_object()

        try:
            toggle_card(card_id=pk, user=request.user)
        except CardNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(DiscountCardSerializer(self.get_object()).data)

    @extend_schema(request=CardIdentifierInputSerializer, responses={201: CardIdentifierSerializer})
    @action(detail=True, methods=['post'])
    def identifiers(self, request, pk=None):
        """
        Attach an identifier to a card.

        Multipart body: type, value, optional image file.
        """
        self.get_object()

        serializer = CardIdentifierInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            identifier = add_identifier(
                card_id=pk,
                user=request.user,
                type=serializer.validated_data['type'],
                value=serializer.validated_data.get('value'),
                image=serializer.validated_data.get('image'),
            )
        except CardNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidIdentifierError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DuplicateIdentifierError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(CardIdentifierSerializer(identifier).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=CardIdentifierInputSerializer,
    responses={200: CardIdentifierSerializer, 204: None},
    description="Replace or remove a card identifier (card owner only).",
    tags=['cards'],
)
@api_view(['PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
@parser_classes([MultiPartParser, FormParser, JSONParser])
def identifier_detail(request, identifier_id):
    """Replace or remove an identifier."""
    try:
        if request.method == 'DELETE':
            remove_identifier(identifier_id=identifier_id, user=request.user)
            return Response(status=status.HTTP_204_NO_CONTENT)

        serializer = CardIdentifierInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        identifier = update_identifier(
            identifier_id=identifier_id,
            user=request.user,
            **serializer.validated_data
        )
    except IdentifierNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InsufficientPermissionsError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except InvalidIdentifierError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except DuplicateIdentifierError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return Response(CardIdentifierSerializer(identifier).data)


@extend_schema(
    request=ResolveCardSerializer,
    responses={200: DiscountCardSerializer},
    description="Find the active card behind a scanned or typed identifier.",
    tags=['cards'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def resolve(request):
    """Resolve a card by identifier value."""
    serializer = ResolveCardSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        card = resolve_card(value=serializer.validated_data['value'])
    except CardNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(DiscountCardSerializer(card).data)
