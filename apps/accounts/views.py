from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema

from .serializers import (
    UserSerializer,
    UserPublicSerializer,
    UserRegistrationSerializer,
    UserLoginSerializer,
    UpdateNameSerializer,
    UpdateEmailSerializer,
    ChangePasswordSerializer,
)
from .services import (
    register_user,
    get_profile,
    authenticate_user,
    update_user_name,
    update_user_email,
    change_password,
    list_users,
    # Exceptions
    InvalidUserNameError,
    InvalidPasswordError,
    DuplicateUserNameError,
    DuplicateEmailError,
    InvalidCredentialsError,
    ExternalAccountError,
    InactiveAccountError,
    UserNotFoundError,
)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def _auth_response(user, status_code=status.HTTP_200_OK):
    refresh = RefreshToken.for_user(user)
    return Response({
        'user': UserSerializer(user).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }
    }, status=status_code)


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Register a new user account and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = register_user(**serializer.validated_data)
    except (InvalidUserNameError, InvalidPasswordError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except (DuplicateUserNameError, DuplicateEmailError) as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return _auth_response(user, status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Authenticate with user name or email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with name (or email) and password."""
    serializer = UserLoginSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        user = authenticate_user(**serializer.validated_data)
    except UserNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except (InvalidCredentialsError, ExternalAccountError) as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return _auth_response(user)


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return Response(UserSerializer(get_profile(user_id=request.user.id)).data)


@extend_schema(
    request=UpdateNameSerializer,
    responses={
        200: UserSerializer,
        400: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Change the current user's name.",
    tags=['auth'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_name(request):
    serializer = UpdateNameSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = update_user_name(
            user_id=request.user.id,
            name=serializer.validated_data['name']
        )
    except InvalidUserNameError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except DuplicateUserNameError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return Response(UserSerializer(user).data)


@extend_schema(
    request=UpdateEmailSerializer,
    responses={
        200: UserSerializer,
        409: ErrorResponseSerializer,
    },
    description="Set or clear the current user's email.",
    tags=['auth'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_email(request):
    serializer = UpdateEmailSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = update_user_email(
            user_id=request.user.id,
            email=serializer.validated_data.get('email')
        )
    except DuplicateEmailError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return Response(UserSerializer(user).data)


@extend_schema(
    request=ChangePasswordSerializer,
    responses={
        200: UserSerializer,
        400: ErrorResponseSerializer,
    },
    description="Set a new password (minimum 4 characters).",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def update_password(request):
    serializer = ChangePasswordSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = change_password(
            user_id=request.user.id,
            new_password=serializer.validated_data['new_password']
        )
    except InvalidPasswordError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(UserSerializer(user).data)


@extend_schema(
    responses={200: UserPublicSerializer(many=True)},
    description="List users ordered by name (for sharing lists).",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def users(request):
    serializer = UserPublicSerializer(list_users(), many=True)
    return Response(serializer.data)
