"""Services for team rules and rule violations."""

from .exceptions import (
    RulesServiceError,
    RuleNotFoundError,
    ViolationNotFoundError,
    UserNotFoundError,
)
from .rule_management import (
    add_rule,
    list_rules,
    get_rule,
    update_rule,
    delete_rule,
)
from .violation_management import (
    add_violation,
    list_violations,
    list_violations_by_violator,
    list_violations_by_rule,
    get_violation,
    update_violation,
    delete_violation,
)

__all__ = [
    # Exceptions
    'RulesServiceError',
    'RuleNotFoundError',
    'ViolationNotFoundError',
    'UserNotFoundError',
    # Rules
    'add_rule',
    'list_rules',
    'get_rule',
    'update_rule',
    'delete_rule',
    # Violations
    'add_violation',
    'list_violations',
    'list_violations_by_violator',
    'list_violations_by_rule',
    'get_violation',
    'update_violation',
    'delete_violation',
]
