import pytest
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
def team_lead(db):
    """Create and return the team lead."""
    return User.objects.create_user(
        email='lead@example.com',
        password='TestPass123!',
        full_name='Team Lead',
        phone='+1 555 000 0001',
    )


@pytest.fixture
def fund_manager(db):
    """Create and return a fund manager."""
    return User.objects.create_user(
        email='funds@example.com',
        password='TestPass123!',
        full_name='Fund Manager',
        phone='+1 555 000 0002',
    )


@pytest.fixture
def member_user(db):
    """Create and return a member without roles."""
    return User.objects.create_user(
        email='member@example.com',
        password='TestPass123!',
        full_name='Plain Member',
        phone='+1 555 000 0003',
    )


@pytest.fixture
def outsider(db):
    """Create and return a user not in any team."""
    return User.objects.create_user(
        email='outsider@example.com',
        password='TestPass123!',
        full_name='Outsider',
        phone='+1 555 000 0004',
    )


@pytest.fixture
def team(db, team_lead):
    """Create a team with the lead holding all roles."""
    team = Team.objects.create(
        name='Alpha',
        description='Snack fund of team Alpha',
        created_by=team_lead,
    )
    TeamMembership.objects.create(
        team=team,
        user=team_lead,
        is_team_lead=True,
        is_fund_manager=True,
        is_food_manager=True,
    )
    team_lead.current_team = team
    team_lead.save()
    return team


@pytest.fixture
def team_with_members(team, fund_manager, member_user):
    """Team with lead, fund manager and a plain member."""
    TeamMembership.objects.create(team=team, user=fund_manager, is_fund_manager=True)
    TeamMembership.objects.create(team=team, user=member_user)
    for user in (fund_manager, member_user):
        user.current_team = team
        user.save()
    return team


@pytest.fixture
def lead_client(team_lead):
    return client_for(team_lead)


@pytest.fixture
def fund_manager_client(fund_manager):
    return client_for(fund_manager)


@pytest.fixture
def member_client(member_user):
    return client_for(member_user)


@pytest.fixture
def outsider_client(outsider):
    return client_for(outsider)
