"""
Team-scoped authorization.

Role checks always re-read the membership row, so a role change takes
effect on the very next request. A membership only grants anything while
it is active.
"""

import logging
from typing import Optional
from uuid import UUID

from apps.teams.models import Team, TeamMembership

from .exceptions import (
    InsufficientPermissionsError,
    MemberNotFoundError,
    NoActiveTeamError,
    NotMemberError,
)

logger = logging.getLogger(__name__)


def get_membership(*, team_id: UUID, user) -> Optional[TeamMembership]:
    """Return the (team, user) membership row or None."""
    return (
        TeamMembership.objects
        .filter(team_id=team_id, user_id=user.id)
        .first()
    )


def require_active_member(*, team_id: UUID, user) -> TeamMembership:
    """
    Require an active membership in the team.

    Raises:
        NotMemberError: If there is no membership or it was deactivated
    """
    membership = get_membership(team_id=team_id, user=user)
    if membership is None or not membership.is_active:
        raise NotMemberError()
    return membership


def _require_role(team_id, user, flag, message) -> TeamMembership:
    membership = get_membership(team_id=team_id, user=user)
    if membership is None or not membership.is_active or not getattr(membership, flag):
        logger.warning("User %s lacks %s in team %s", user.id, flag, team_id)
        raise InsufficientPermissionsError(message)
    return membership


def require_team_lead(*, team_id: UUID, user, message='Only team leads can perform this action') -> TeamMembership:
    return _require_role(team_id, user, 'is_team_lead', message)


def require_fund_manager(*, team_id: UUID, user, message='Only fund managers can perform this action') -> TeamMembership:
    return _require_role(team_id, user, 'is_fund_manager', message)


def require_food_manager(*, team_id: UUID, user, message='Only food managers can perform this action') -> TeamMembership:
    return _require_role(team_id, user, 'is_food_manager', message)


def is_fund_manager_over(manager, member) -> bool:
    """True if ``manager`` manages funds in any team ``member`` belongs to."""
    member_team_ids = TeamMembership.objects.filter(user_id=member.id).values('team_id')
    return TeamMembership.objects.filter(
        user_id=manager.id,
        is_active=True,
        is_fund_manager=True,
        team_id__in=member_team_ids,
    ).exists()


def resolve_current_team(user) -> Team:
    """
    Return the caller's current team.

    Raises:
        NoActiveTeamError: If the user has not selected a team
        NotMemberError: If the user is no longer an active member there
    """
    if user.current_team_id is None:
        raise NoActiveTeamError()

    membership = (
        TeamMembership.objects
        .select_related('team')
        .filter(team_id=user.current_team_id, user_id=user.id, is_active=True)
        .first()
    )
    if membership is None:
        raise NotMemberError()
    return membership.team


def require_member_user(*, team_id: UUID, user_id):
    """
    Return the user behind an active membership of the team.

    Used when a record names another member (spender, payer, violator,
    contributor).

    Raises:
        MemberNotFoundError: If the user is not an active member
    """
    membership = (
        TeamMembership.objects
        .select_related('user')
        .filter(team_id=team_id, user_id=user_id, is_active=True)
        .first()
    )
    if membership is None:
        raise MemberNotFoundError('User is not an active member of this team')
    return membership.user


def require_self_or_fund_manager(*, team_id: UUID, user, owner_id, message) -> None:
    """
    Allow acting on ``owner_id``'s records only for the owner or a fund manager.

    Raises:
        NotMemberError: If user is not an active member
        InsufficientPermissionsError: If user is neither owner nor fund manager
    """
    membership = require_active_member(team_id=team_id, user=user)
    if str(owner_id) == str(user.id):
        return
    if not membership.is_fund_manager:
        logger.warning("User %s denied access to records of %s in team %s", user.id, owner_id, team_id)
        raise InsufficientPermissionsError(message)
