import pytest
from decimal import Decimal
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.teams.models import Team, TeamMembership
from apps.snacks.models import Snack, SnackContribution


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
def food_manager(db):
    """Create and return the food manager."""
    return User.objects.create_user(
        email='chef@example.com',
        password='TestPass123!',
        full_name='Snack Chef',
        phone='+1 555 300 0001',
    )


@pytest.fixture
def contributor(db):
    """Create and return a member who chips in."""
    return User.objects.create_user(
        email='contributor@example.com',
        password='TestPass123!',
        full_name='Generous Member',
        phone='+1 555 300 0002',
    )


@pytest.fixture
def second_contributor(db):
    """Create and return another member who chips in."""
    return User.objects.create_user(
        email='second@example.com',
        password='TestPass123!',
        full_name='Second Member',
        phone='+1 555 300 0003',
    )


@pytest.fixture
def outsider(db):
    """Create and return a user outside the team."""
    return User.objects.create_user(
        email='passerby@example.com',
        password='TestPass123!',
        full_name='Passer By',
        phone='+1 555 300 0004',
    )


@pytest.fixture
def snack_team(db, food_manager, contributor, second_contributor):
    """Team with one food manager and two plain members."""
    team = Team.objects.create(name='Snack Team', created_by=food_manager)
    TeamMembership.objects.create(team=team, user=food_manager, is_team_lead=True, is_food_manager=True)
    TeamMembership.objects.create(team=team, user=contributor)
    TeamMembership.objects.create(team=team, user=second_contributor)
    for user in (food_manager, contributor, second_contributor):
        user.current_team = team
        user.save()
    return team


def _snack(team, created_by, food_item, snack_date, shares):
    snack = Snack.objects.create(
        team=team,
        food_item=food_item,
        expense=sum(shares.values(), Decimal('0.00')),
        date=snack_date,
        created_by=created_by,
    )
    for user, amount in shares.items():
        SnackContribution.objects.create(snack=snack, user=user, amount=amount)
    snack.recalculate_total()
    return snack


@pytest.fixture
def snack(snack_team, food_manager, contributor):
    return _snack(snack_team, food_manager, 'Samosas', date(2024, 1, 15), {
        contributor: Decimal('4.00'),
        food_manager: Decimal('2.00'),
    })


@pytest.fixture
def snack_history(snack_team, food_manager, contributor, second_contributor):
    """Snacks on 2024-01-10, 2024-01-20 and 2024-02-05."""
    return [
        _snack(snack_team, food_manager, 'Donuts', date(2024, 1, 10), {contributor: Decimal('3.00')}),
        _snack(snack_team, food_manager, 'Fruit', date(2024, 1, 20), {second_contributor: Decimal('5.00')}),
        _snack(snack_team, food_manager, 'Pizza', date(2024, 2, 5), {
            contributor: Decimal('10.00'),
            second_contributor: Decimal('10.00'),
        }),
    ]


@pytest.fixture
def chef_client(food_manager):
    return client_for(food_manager)


@pytest.fixture
def member_client(contributor):
    return client_for(contributor)


@pytest.fixture
def outsider_client(outsider):
    return client_for(outsider)
