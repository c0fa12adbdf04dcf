import pytest
from decimal import Decimal
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.teams.models import Team, TeamMembership
from apps.funds.models import BankAccount, Expense, Payment


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
def fund_manager(db):
    """Create and return the fund manager of the team."""
    return User.objects.create_user(
        email='treasurer@example.com',
        password='TestPass123!',
        full_name='Team Treasurer',
        phone='+1 555 100 0001',
    )


@pytest.fixture
def spender(db):
    """Create and return a member without roles."""
    return User.objects.create_user(
        email='spender@example.com',
        password='TestPass123!',
        full_name='Snack Spender',
        phone='+1 555 100 0002',
    )


@pytest.fixture
def other_member(db):
    """Create and return a second member without roles."""
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        full_name='Other Member',
        phone='+1 555 100 0003',
    )


@pytest.fixture
def outsider(db):
    """Create and return a user outside the team."""
    return User.objects.create_user(
        email='stranger@example.com',
        password='TestPass123!',
        full_name='Stranger',
        phone='+1 555 100 0004',
    )


@pytest.fixture
def fund_team(db, fund_manager, spender, other_member):
    """Team where the treasurer holds every role and two plain members."""
    team = Team.objects.create(name='Fund Team', created_by=fund_manager)
    TeamMembership.objects.create(
        team=team,
        user=fund_manager,
        is_team_lead=True,
        is_fund_manager=True,
        is_food_manager=True,
    )
    TeamMembership.objects.create(team=team, user=spender)
    TeamMembership.objects.create(team=team, user=other_member)
    for user in (fund_manager, spender, other_member):
        user.current_team = team
        user.save()
    return team


@pytest.fixture
def other_team(db, outsider):
    """Unrelated team the outsider works in."""
    team = Team.objects.create(name='Other Team', created_by=outsider)
    TeamMembership.objects.create(
        team=team,
        user=outsider,
        is_team_lead=True,
        is_fund_manager=True,
        is_food_manager=True,
    )
    outsider.current_team = team
    outsider.save()
    return team


@pytest.fixture
def bank_account(fund_team, spender):
    return BankAccount.objects.create(
        team=fund_team,
        user=spender,
        bank_name='City Bank',
        branch='Downtown',
        account_no='0012345678',
        account_title='Snack Spender',
        routing_number='225261732',
    )


@pytest.fixture
def expense(fund_team, spender):
    """Expense recorded by the spender for themselves."""
    return Expense.objects.create(
        team=fund_team,
        user=spender,
        amount=Decimal('12.50'),
        reason='Biscuits',
        date=date(2024, 3, 1),
        created_by=spender,
    )


@pytest.fixture
def payment(fund_team, spender):
    """Payment made by the spender into the fund."""
    return Payment.objects.create(
        team=fund_team,
        paid_by=spender,
        amount=Decimal('20.00'),
        date=date(2024, 3, 2),
        created_by=spender,
    )


@pytest.fixture
def manager_client(fund_manager):
    return client_for(fund_manager)


@pytest.fixture
def spender_client(spender):
    return client_for(spender)


@pytest.fixture
def other_member_client(other_member):
    return client_for(other_member)


@pytest.fixture
def outsider_client(outsider):
    return client_for(outsider)
