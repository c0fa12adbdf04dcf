"""
Team management service.

Handles team creation, lookup and switching the active team.
"""

import logging
from typing import List
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import Prefetch

from apps.accounts.models import User
from apps.common.validation import require_text
from apps.teams.models import Team, TeamMembership

from .authorization import require_active_member
from .exceptions import (
    NotMemberError,
    TeamNameTakenError,
    TeamNotFoundError,
)

logger = logging.getLogger(__name__)


@transaction.atomic
def create_team(
    *,
    name: str,
    created_by: User,
    description: str = '',
) -> Team:
    """
    Create a new team and make the creator its lead.

    This is a multi-step operation wrapped in a transaction:
    1. Create the team (unique name)
    2. Create the creator's membership with all three roles
    3. Point the creator's current team at the new team

    Args:
        name: Team name, globally unique
        created_by: User creating the team
        description: Optional team description

    Returns:
        Created Team instance

    Raises:
        InvalidInputError: If the name is empty
        TeamNameTakenError: If the name is already used
    """
    name = require_text(name, 'Team name')

    try:
        with transaction.atomic():
            team = Team.objects.create(
                name=name,
                description=(description or '').strip(),
                created_by=created_by,
            )
    except IntegrityError:
        raise TeamNameTakenError()

    TeamMembership.objects.create(
        team=team,
        user=created_by,
        is_team_lead=True,
        is_fund_manager=True,
        is_food_manager=True,
        is_active=True,
    )

    created_by.current_team = team
    created_by.save(update_fields=['current_team', 'updated_at'])

    logger.info("Team %s created by user %s", team.id, created_by.id)
    return team


def get_team_by_id(*, team_id: UUID) -> Team:
    """
    Get a team by ID with its memberships prefetched.

    Raises:
        TeamNotFoundError: If team doesn't exist
    """
    try:
        return (
            Team.objects
            .select_related('created_by')
            .prefetch_related(
                Prefetch(
                    'memberships',
                    queryset=TeamMembership.objects.select_related('user')
                )
            )
            .get(id=team_id)
        )
    except Team.DoesNotExist:
        raise TeamNotFoundError()


def get_team_for_member(*, team_id: UUID, user: User) -> Team:
    """
    Get a team the user is an active member of.

    Raises:
        TeamNotFoundError: If team doesn't exist
        NotMemberError: If user is not an active member
    """
    team = get_team_by_id(team_id=team_id)
    require_active_member(team_id=team.id, user=user)
    return team


def get_user_teams(*, user: User) -> List[TeamMembership]:
    """Return the user's memberships (active or not) with their teams."""
    return list(
        TeamMembership.objects
        .filter(user=user)
        .select_related('team', 'team__created_by')
        .order_by('-joined_at')
    )


@transaction.atomic
def switch_team(*, user: User, team_id: UUID) -> Team:
    """
    Make ``team_id`` the user's current team.

    Last write wins; no history of previous teams is kept.

    Raises:
        NotMemberError: If user is not an active member of the team
    """
    membership = (
        TeamMembership.objects
        .select_related('team')
        .filter(team_id=team_id, user=user, is_active=True)
        .first()
    )
    if membership is None:
        raise NotMemberError()

    user.current_team = membership.team
    user.save(update_fields=['current_team', 'updated_at'])

    logger.info("User %s switched to team %s", user.id, team_id)
    return membership.team
