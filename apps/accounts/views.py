from django.conf import settings
from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema

from apps.common.handlers import extract_message
from apps.common.responses import envelope
from .serializers import (
    SignupSerializer,
    SigninSerializer,
    UserPublicSerializer,
    UserSerializer,
    UserUpdateSerializer,
    PasswordResetRequestSerializer,
    PasswordResetConfirmSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    request_password_reset as request_password_reset_service,
    confirm_password_reset as confirm_password_reset_service,
    update_user_profile,
    AccountsServiceError,
)


# Response serializers for API documentation
class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserPublicSerializer()
    token = serializers.CharField()
    refresh = serializers.CharField()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def _error(message, status_code=status.HTTP_400_BAD_REQUEST):
    return Response({'error': message}, status=status_code)


def _auth_payload(user, message):
    refresh = RefreshToken.for_user(user)
    return {
        'message': message,
        'user': UserPublicSerializer(user).data,
        'token': str(refresh.access_token),
        'refresh': str(refresh),
    }


@extend_schema(
    request=SignupSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new user account and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def signup(request):
    """Register a new user account."""
    serializer = SignupSerializer(data=request.data)
    if not serializer.is_valid():
        return _error(extract_message(serializer.errors))

    try:
        user = register_user(**serializer.validated_data)
    except AccountsServiceError as e:
        return _error(e.message, e.status_code)

    return Response(
        _auth_payload(user, 'User registered successfully'),
        status=status.HTTP_201_CREATED,
    )


@extend_schema(
    request=SigninSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def signin(request):
    """Login with email and password."""
    serializer = SigninSerializer(data=request.data)
    if not serializer.is_valid():
        return _error('Email and password are required')

    try:
        user = authenticate_user(**serializer.validated_data)
    except AccountsServiceError as e:
        return _error(e.message, e.status_code)

    return Response(_auth_payload(user, 'Login successful'))


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return envelope('User retrieved successfully', UserSerializer(request.user).data)


@extend_schema(
    request=PasswordResetRequestSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Request a password reset token.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def request_password_reset(request):
    """Issue a password reset token."""
    serializer = PasswordResetRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return _error('Email is required')

    try:
        user = request_password_reset_service(email=serializer.validated_data['email'])
    except AccountsServiceError as e:
        return _error(e.message, e.status_code)

    payload = {
        'message': 'Password reset token generated',
        'expires_at': user.reset_token_expiry,
    }
    if settings.PASSWORD_RESET_EXPOSE_TOKEN:
        payload['token'] = user.reset_token
    return Response(payload)


@extend_schema(
    request=PasswordResetConfirmSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Confirm password reset with token and set new password.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def confirm_password_reset(request):
    """Confirm password reset with token."""
    serializer = PasswordResetConfirmSerializer(data=request.data)
    if not serializer.is_valid():
        return _error('Email, token and new password are required')

    try:
        confirm_password_reset_service(**serializer.validated_data)
    except AccountsServiceError as e:
        return _error(e.message, e.status_code)

    return Response({'message': 'Password reset successful'})


@extend_schema(
    request=UserUpdateSerializer,
    responses={200: UserSerializer},
    description="Update a user profile. Fund managers may also change is_active.",
    tags=['users'],
)
@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated])
def update_user(request, pk):
    """Update own profile, or a managed member's profile."""
    serializer = UserUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = update_user_profile(
        user_id=pk,
        requested_by=request.user,
        **serializer.validated_data
    )
    return envelope('User updated successfully', UserSerializer(user).data)
