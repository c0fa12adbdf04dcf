"""
Domain-specific exceptions for teams app.

These exceptions represent business rule violations. They propagate out of
the views and are converted to the response envelope by the project
exception handler.
"""

from apps.common.exceptions import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    PermissionDeniedError,
    ServiceError,
)


class TeamsServiceError(ServiceError):
    """Base exception for all teams service errors."""
    pass


class TeamNotFoundError(NotFoundError, TeamsServiceError):
    """Raised when a team does not exist."""
    default_message = 'Team not found'


class TeamNameTakenError(ConflictError, TeamsServiceError):
    """Raised when another team already uses the name."""
    default_message = 'Team name already exists'


class MemberNotFoundError(NotFoundError, TeamsServiceError):
    """Raised when a user is not a member of the team."""
    default_message = 'Member not found in team'


class AlreadyMemberError(ConflictError, TeamsServiceError):
    """Raised when adding a user who already has a membership."""
    default_message = 'User is already a member of this team'


class NotMemberError(PermissionDeniedError, TeamsServiceError):
    """Raised when the caller holds no active membership in the team."""
    default_message = 'You are not an active member of this team'


class InsufficientPermissionsError(PermissionDeniedError, TeamsServiceError):
    """Raised when a member lacks the role an action requires."""
    pass


class CannotDeactivateSelfError(InvalidInputError, TeamsServiceError):
    """Raised when a team lead tries to deactivate their own membership."""
    default_message = 'You cannot deactivate yourself'


class NoActiveTeamError(InvalidInputError, TeamsServiceError):
    """Raised when the caller has not selected a current team."""
    default_message = 'No active team selected. Create or switch to a team first'


class InvalidRoleAssignmentError(InvalidInputError, TeamsServiceError):
    """Raised when a role assignment request carries no roles."""
    default_message = 'At least one role must be provided'
