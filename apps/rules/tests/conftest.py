import pytest
from decimal import Decimal
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.teams.models import Team, TeamMembership
from apps.rules.models import Rule, RuleViolation


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
def enforcer(db):
    """Create and return the fund manager who logs fines."""
    return User.objects.create_user(
        email='enforcer@example.com',
        password='TestPass123!',
        full_name='Rule Enforcer',
        phone='+1 555 200 0001',
    )


@pytest.fixture
def second_manager(db):
    """Create and return another fund manager."""
    return User.objects.create_user(
        email='deputy@example.com',
        password='TestPass123!',
        full_name='Deputy Manager',
        phone='+1 555 200 0002',
    )


@pytest.fixture
def late_member(db):
    """Create and return a member who keeps breaking rules."""
    return User.objects.create_user(
        email='late@example.com',
        password='TestPass123!',
        full_name='Late Member',
        phone='+1 555 200 0003',
    )


@pytest.fixture
def outsider(db):
    """Create and return a user outside the team."""
    return User.objects.create_user(
        email='visitor@example.com',
        password='TestPass123!',
        full_name='Visitor',
        phone='+1 555 200 0004',
    )


@pytest.fixture
def rules_team(db, enforcer, second_manager, late_member):
    team = Team.objects.create(name='Rules Team', created_by=enforcer)
    TeamMembership.objects.create(
        team=team,
        user=enforcer,
        is_team_lead=True,
        is_fund_manager=True,
        is_food_manager=True,
    )
    TeamMembership.objects.create(team=team, user=second_manager, is_fund_manager=True)
    TeamMembership.objects.create(team=team, user=late_member)
    for user in (enforcer, second_manager, late_member):
        user.current_team = team
        user.save()
    return team


@pytest.fixture
def foreign_rule(db, outsider):
    """Rule of a team the other fixtures have nothing to do with."""
    team = Team.objects.create(name='Foreign Team', created_by=outsider)
    TeamMembership.objects.create(team=team, user=outsider, is_team_lead=True, is_fund_manager=True)
    outsider.current_team = team
    outsider.save()
    return Rule.objects.create(team=team, title='No phones', amount=Decimal('2.00'))


@pytest.fixture
def rule(rules_team):
    return Rule.objects.create(
        team=rules_team,
        title='Late to standup',
        amount=Decimal('5.00'),
        description='Arriving after 10:00',
    )


@pytest.fixture
def violation(rules_team, rule, late_member, enforcer):
    return RuleViolation.objects.create(
        team=rules_team,
        violator=late_member,
        rule=rule,
        additional_amount=Decimal('1.50'),
        updated_by=enforcer,
        date=date(2024, 2, 14),
    )


@pytest.fixture
def enforcer_client(enforcer):
    return client_for(enforcer)


@pytest.fixture
def deputy_client(second_manager):
    return client_for(second_manager)


@pytest.fixture
def member_client(late_member):
    return client_for(late_member)


@pytest.fixture
def outsider_client(outsider):
    return client_for(outsider)
