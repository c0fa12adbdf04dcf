"""
Rule violation service.

Fund managers log violations (fines) against members. The last editor is
always recorded in ``updated_by``.
"""

import logging
from datetime import date as date_type
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.common.validation import require_non_negative, to_date
from apps.rules.models import RuleViolation
from apps.teams.models import Team
from apps.teams.services.authorization import (
    require_active_member,
    require_fund_manager,
    require_member_user,
)

from .exceptions import UserNotFoundError, ViolationNotFoundError
from .rule_management import get_team_rule

logger = logging.getLogger(__name__)


def _violations():
    return RuleViolation.objects.select_related('violator', 'rule', 'updated_by')


@transaction.atomic
def add_violation(
    *,
    team: Team,
    user: User,
    violator_id: UUID,
    rule_id: UUID,
    additional_amount: Decimal = Decimal('0.00'),
    date: Optional[date_type] = None,
    note: str = '',
) -> RuleViolation:
    """
    Record a rule violation (fund manager only).

    Args:
        team: Team the violation belongs to
        user: Acting fund manager, stored as ``updated_by``
        violator_id: Member who broke the rule
        rule_id: Rule of the same team
        additional_amount: Charged on top of the rule amount
        date: Day of the violation, today when omitted
        note: Optional free text

    Returns:
        Created RuleViolation instance

    Raises:
        InsufficientPermissionsError: If user is not a fund manager
        MemberNotFoundError: If the violator is not an active member
        RuleNotFoundError: If the rule is not one of the team's rules
        InvalidInputError: If additional amount is negative
    """
    require_fund_manager(team_id=team.id, user=user)

    additional_amount = require_non_negative(additional_amount, 'additional amount')
    violation_date = to_date(date) if date else timezone.localdate()
    violator = require_member_user(team_id=team.id, user_id=violator_id)
    rule = get_team_rule(team=team, rule_id=rule_id)

    violation = RuleViolation.objects.create(
        team=team,
        violator=violator,
        rule=rule,
        additional_amount=additional_amount,
        updated_by=user,
        note=(note or '').strip(),
        date=violation_date,
    )

    logger.info("Violation %s of rule %s logged for user %s", violation.id, rule.id, violator.id)
    return violation


def list_violations(*, team: Team, user: User) -> QuerySet:
    require_active_member(team_id=team.id, user=user)
    return _violations().filter(team=team)


def list_violations_by_violator(*, team: Team, user: User, violator_id: UUID) -> QuerySet:
    require_active_member(team_id=team.id, user=user)
    if not User.objects.filter(id=violator_id).exists():
        raise UserNotFoundError()
    return _violations().filter(team=team, violator_id=violator_id)


def list_violations_by_rule(*, team: Team, user: User, rule_id: UUID) -> QuerySet:
    """
    List violations of one of the team's rules.

    Raises:
        RuleNotFoundError: If the rule is not one of the team's rules
    """
    require_active_member(team_id=team.id, user=user)
    rule = get_team_rule(team=team, rule_id=rule_id)
    return _violations().filter(team=team, rule=rule)


def get_violation(*, team: Team, user: User, violation_id: UUID) -> RuleViolation:
    require_active_member(team_id=team.id, user=user)
    return _get_violation(team, violation_id)


def _get_violation(team, violation_id, for_update=False):
    queryset = _violations()
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=violation_id, team=team)
    except RuleViolation.DoesNotExist:
        raise ViolationNotFoundError()


@transaction.atomic
def update_violation(
    *,
    team: Team,
    user: User,
    violation_id: UUID,
    violator_id: Optional[UUID] = None,
    rule_id: Optional[UUID] = None,
    additional_amount: Optional[Decimal] = None,
    date: Optional[date_type] = None,
    note: Optional[str] = None,
) -> RuleViolation:
    """
    Update a violation (fund manager only); ``updated_by`` becomes ``user``.

    Raises:
        ViolationNotFoundError: If no such violation exists in the team
        RuleNotFoundError: If a new rule is not one of the team's rules
        MemberNotFoundError: If a new violator is not an active member
    """
    require_fund_manager(team_id=team.id, user=user)
    violation = _get_violation(team, violation_id, for_update=True)

    if violator_id is not None:
        violation.violator = require_member_user(team_id=team.id, user_id=violator_id)
    if rule_id is not None:
        violation.rule = get_team_rule(team=team, rule_id=rule_id)
    if additional_amount is not None:
        violation.additional_amount = require_non_negative(additional_amount, 'additional amount')
    if date is not None:
        violation.date = to_date(date)
    if note is not None:
        violation.note = note.strip()

    violation.updated_by = user
    violation.save()
    return violation


@transaction.atomic
def delete_violation(*, team: Team, user: User, violation_id: UUID) -> None:
    require_fund_manager(team_id=team.id, user=user)
    violation = _get_violation(team, violation_id, for_update=True)
    violation.delete()

    logger.info("Violation %s deleted by user %s", violation_id, user.id)
