"""
Membership management service.

Handles adding, listing and deactivating team members.
"""

import logging
from typing import Optional
from uuid import UUID

from django.contrib.auth import get_user_model
from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.common.exceptions import InvalidInputError, NotFoundError
from apps.teams.models import Team, TeamMembership

from .authorization import require_active_member, require_team_lead
from .exceptions import (
    AlreadyMemberError,
    CannotDeactivateSelfError,
    MemberNotFoundError,
    TeamNotFoundError,
)

logger = logging.getLogger(__name__)

User = get_user_model()


def _get_team(team_id):
    try:
        return Team.objects.get(id=team_id)
    except Team.DoesNotExist:
        raise TeamNotFoundError()


def _find_user(user_id, email):
    if user_id is None and not email:
        raise InvalidInputError('User id or email is required')

    lookup = {'id': user_id} if user_id is not None else {'email': email.strip().lower()}
    try:
        return User.objects.get(**lookup)
    except (User.DoesNotExist, ValueError):
        raise NotFoundError('User not found')


def add_team_member(
    *,
    team_id: UUID,
    added_by: User,
    user_id: Optional[UUID] = None,
    email: Optional[str] = None,
) -> TeamMembership:
    """
    Add a user to a team (team lead only).

    The membership starts active with no roles. Duplicates are caught by
    the ``(team, user)`` unique constraint rather than a pre-check.

    Args:
        team_id: UUID of the team
        added_by: User performing the add (must be team lead)
        user_id: UUID of the user to add
        email: Email of the user to add, used when ``user_id`` is absent

    Returns:
        Created TeamMembership instance

    Raises:
        TeamNotFoundError: If team doesn't exist
        InsufficientPermissionsError: If added_by is not a team lead
        NotFoundError: If the target user doesn't exist
        AlreadyMemberError: If the user already has a membership
    """
    team = _get_team(team_id)
    require_team_lead(
        team_id=team.id,
        user=added_by,
        message='Only team leads can add members',
    )
    user = _find_user(user_id, email)

    try:
        with transaction.atomic():
            membership = TeamMembership.objects.create(
                team=team,
                user=user,
                is_active=True,
            )
    except IntegrityError:
        raise AlreadyMemberError()

    if user.current_team_id is None:
        user.current_team = team
        user.save(update_fields=['current_team', 'updated_at'])

    logger.info("User %s added %s to team %s", added_by.id, user.id, team.id)
    return membership


def get_team_members(*, team_id: UUID, user: User) -> QuerySet:
    """
    Get all memberships of a team, active and deactivated.

    Raises:
        TeamNotFoundError: If team doesn't exist
        NotMemberError: If user is not an active member
    """
    team = _get_team(team_id)
    require_active_member(team_id=team.id, user=user)

    return (
        TeamMembership.objects
        .filter(team=team)
        .select_related('user')
        .order_by('joined_at')
    )


@transaction.atomic
def deactivate_team_member(
    *,
    team_id: UUID,
    member_user_id: UUID,
    requested_by: User,
) -> TeamMembership:
    """
    Deactivate a member (team lead only).

    Deactivation is terminal: the row is kept with ``is_active=False`` and
    there is no way back.

    Raises:
        TeamNotFoundError: If team doesn't exist
        InsufficientPermissionsError: If requested_by is not a team lead
        MemberNotFoundError: If the user has no membership in the team
        CannotDeactivateSelfError: If the lead targets their own membership
    """
    team = _get_team(team_id)
    require_team_lead(
        team_id=team.id,
        user=requested_by,
        message='Only team leads can deactivate members',
    )

    try:
        membership = (
            TeamMembership.objects
            .select_for_update()
            .select_related('user')
            .get(team=team, user_id=member_user_id)
        )
    except TeamMembership.DoesNotExist:
        raise MemberNotFoundError()

    if membership.user_id == requested_by.id:
        raise CannotDeactivateSelfError()

    membership.is_active = False
    membership.save(update_fields=['is_active', 'updated_at'])

    logger.info(
        "User %s deactivated member %s in team %s",
        requested_by.id, member_user_id, team.id,
    )
    return membership
