"""
Role management service.

Handles granting and revoking the three team roles.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.teams.models import Team, TeamMembership

from .authorization import get_membership
from .exceptions import (
    InsufficientPermissionsError,
    InvalidRoleAssignmentError,
    MemberNotFoundError,
    NotMemberError,
    TeamNotFoundError,
)

logger = logging.getLogger(__name__)

# role flag -> roles allowed to change it
ROLE_GRANTORS = {
    'is_team_lead': ('is_team_lead',),
    'is_fund_manager': ('is_team_lead', 'is_fund_manager'),
    'is_food_manager': ('is_team_lead', 'is_food_manager'),
}

ROLE_LABELS = {
    'is_team_lead': 'team lead',
    'is_fund_manager': 'fund manager',
    'is_food_manager': 'food manager',
}


def can_assign_role(requester: TeamMembership, flag: str) -> bool:
    """True if the requester's membership may change ``flag`` on others."""
    if requester is None or not requester.is_active:
        return False
    return any(getattr(requester, role) for role in ROLE_GRANTORS[flag])


@transaction.atomic
def assign_roles(
    *,
    team_id: UUID,
    member_user_id: UUID,
    requested_by: User,
    is_team_lead: Optional[bool] = None,
    is_fund_manager: Optional[bool] = None,
    is_food_manager: Optional[bool] = None,
) -> TeamMembership:
    """
    Set role flags on a member.

    Every requested flag is checked before anything is written, so a
    partially permitted request leaves the membership unchanged:
    - team lead role: requires team lead
    - fund manager role: requires team lead or fund manager
    - food manager role: requires team lead or food manager

    Args:
        team_id: UUID of the team
        member_user_id: UUID of the member whose roles change
        requested_by: User performing the change
        is_team_lead, is_fund_manager, is_food_manager: new flag values;
            None leaves a flag as it is

    Returns:
        Updated TeamMembership instance

    Raises:
        TeamNotFoundError: If team doesn't exist
        InvalidRoleAssignmentError: If no flag is given
        NotMemberError: If requested_by has no active membership
        InsufficientPermissionsError: If requested_by may not set a flag
        MemberNotFoundError: If the target has no membership
    """
    changes = {
        flag: value
        for flag, value in (
            ('is_team_lead', is_team_lead),
            ('is_fund_manager', is_fund_manager),
            ('is_food_manager', is_food_manager),
        )
        if value is not None
    }
    if not changes:
        raise InvalidRoleAssignmentError()

    if not Team.objects.filter(id=team_id).exists():
        raise TeamNotFoundError()

    requester = get_membership(team_id=team_id, user=requested_by)
    if requester is None or not requester.is_active:
        raise NotMemberError()

    for flag in changes:
        if not can_assign_role(requester, flag):
            logger.warning(
                "User %s denied %s assignment in team %s",
                requested_by.id, flag, team_id,
            )
            if flag == 'is_team_lead':
                raise InsufficientPermissionsError('Only team leads can assign team lead role')
            raise InsufficientPermissionsError(
                f"Only team leads or {ROLE_LABELS[flag]}s can assign {ROLE_LABELS[flag]} role"
            )

    try:
        membership = (
            TeamMembership.objects
            .select_for_update()
            .select_related('user')
            .get(team_id=team_id, user_id=member_user_id)
        )
    except TeamMembership.DoesNotExist:
        raise MemberNotFoundError()

    for flag, value in changes.items():
        setattr(membership, flag, bool(value))
    membership.save(update_fields=list(changes) + ['updated_at'])

    logger.info(
        "User %s set roles %s for %s in team %s",
        requested_by.id, changes, member_user_id, team_id,
    )
    return membership
