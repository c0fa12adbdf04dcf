import pytest
from datetime import date, timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.teams.models import Team, TeamMembership


def client_for(user):
    """Return an API client authenticated as ``user``."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def signup_data():
    """Valid signup payload for an adult."""
    return {
        'full_name': 'New Member',
        'email': 'NewMember@Example.com',
        'phone': '+1 (555) 123-4567',
        'password': 'SecurePass123!',
        'date_of_birth': '1990-05-17',
    }


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        full_name='Test User',
        phone='+1 555 400 0001',
        date_of_birth=date(1992, 8, 1),
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        full_name='Inactive User',
        phone='+1 555 400 0002',
        is_active=False,
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        email='otheruser@example.com',
        password='OtherPass123!',
        full_name='Other User',
        phone='+1 555 400 0003',
    )


@pytest.fixture
def fund_manager(db):
    """Create and return a user who manages funds of ``shared_team``."""
    return User.objects.create_user(
        email='manager@example.com',
        password='TestPass123!',
        full_name='Fund Manager',
        phone='+1 555 400 0004',
    )


@pytest.fixture
def shared_team(db, fund_manager, user):
    """Team where ``fund_manager`` manages funds and ``user`` is a member."""
    team = Team.objects.create(name='Shared Team', created_by=fund_manager)
    TeamMembership.objects.create(team=team, user=fund_manager, is_fund_manager=True)
    TeamMembership.objects.create(team=team, user=user)
    user.current_team = team
    user.save()
    return team


@pytest.fixture
def authenticated_client(user):
    """Return an API client authenticated as ``user``."""
    return client_for(user)


@pytest.fixture
def manager_client(fund_manager):
    return client_for(fund_manager)


@pytest.fixture
def other_client(other_user):
    return client_for(other_user)


@pytest.fixture
def user_with_reset_token(db):
    """Create a user with a pending password reset token."""
    user = User.objects.create_user(
        email='resetuser@example.com',
        password='OldPass123!',
        full_name='Reset User',
        phone='+1 555 400 0005',
    )
    user.reset_token = 'valid-reset-token-12345'
    user.reset_token_expiry = timezone.now() + timedelta(hours=1)
    user.save()
    return user


@pytest.fixture
def user_with_expired_token(db):
    """Create a user whose reset token expired a minute ago."""
    user = User.objects.create_user(
        email='expired@example.com',
        password='OldPass123!',
        full_name='Expired Token User',
        phone='+1 555 400 0006',
    )
    user.reset_token = 'expired-reset-token-12345'
    user.reset_token_expiry = timezone.now() - timedelta(minutes=1)
    user.save()
    return user
