"""
Teams app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions; uniqueness is enforced by
database constraints.
"""

from .exceptions import (
    TeamsServiceError,
    TeamNotFoundError,
    TeamNameTakenError,
    MemberNotFoundError,
    AlreadyMemberError,
    NotMemberError,
    InsufficientPermissionsError,
    CannotDeactivateSelfError,
    NoActiveTeamError,
    InvalidRoleAssignmentError,
)

from .authorization import (
    get_membership,
    require_active_member,
    require_team_lead,
    require_fund_manager,
    require_food_manager,
    require_member_user,
    require_self_or_fund_manager,
    resolve_current_team,
)

from .team_management import (
    create_team,
    get_team_by_id,
    get_team_for_member,
    get_user_teams,
    switch_team,
)

from .membership_management import (
    add_team_member,
    get_team_members,
    deactivate_team_member,
)

from .role_management import (
    assign_roles,
)


__all__ = [
    # Exceptions
    'TeamsServiceError',
    'TeamNotFoundError',
    'TeamNameTakenError',
    'MemberNotFoundError',
    'AlreadyMemberError',
    'NotMemberError',
    'InsufficientPermissionsError',
    'CannotDeactivateSelfError',
    'NoActiveTeamError',
    'InvalidRoleAssignmentError',

    # Authorization
    'get_membership',
    'require_active_member',
    'require_team_lead',
    'require_fund_manager',
    'require_food_manager',
    'require_member_user',
    'require_self_or_fund_manager',
    'resolve_current_team',

    # Team Management
    'create_team',
    'get_team_by_id',
    'get_team_for_member',
    'get_user_teams',
    'switch_team',

    # Membership Management
    'add_team_member',
    'get_team_members',
    'deactivate_team_member',

    # Role Management
    'assign_roles',
]
