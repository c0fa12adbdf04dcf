"""Rule management service."""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.common.validation import require_non_negative, require_text
from apps.rules.models import Rule
from apps.teams.models import Team
from apps.teams.services.authorization import require_active_member, require_fund_manager

from .exceptions import RuleNotFoundError

logger = logging.getLogger(__name__)


def add_rule(
    *,
    team: Team,
    user: User,
    title: str,
    amount: Decimal,
    description: str = '',
) -> Rule:
    """
    Create a team rule (fund manager only).

    Raises:
        InsufficientPermissionsError: If user is not a fund manager
        InvalidInputError: If title is empty or amount is negative
    """
    require_fund_manager(team_id=team.id, user=user)

    rule = Rule.objects.create(
        team=team,
        title=require_text(title, 'Rule title'),
        amount=require_non_negative(amount),
        description=(description or '').strip(),
    )

    logger.info("Rule %s created in team %s", rule.id, team.id)
    return rule


def list_rules(*, team: Team, user: User) -> QuerySet:
    require_active_member(team_id=team.id, user=user)
    return Rule.objects.filter(team=team)


def get_rule(*, team: Team, user: User, rule_id: UUID) -> Rule:
    require_active_member(team_id=team.id, user=user)
    return get_team_rule(team=team, rule_id=rule_id)


def get_team_rule(*, team: Team, rule_id: UUID, for_update: bool = False) -> Rule:
    """
    Get a rule that belongs to ``team``.

    Raises:
        RuleNotFoundError: If the rule is missing or belongs to another team
    """
    queryset = Rule.objects.all()
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=rule_id, team=team)
    except (Rule.DoesNotExist, ValueError):
        raise RuleNotFoundError()


@transaction.atomic
def update_rule(
    *,
    team: Team,
    user: User,
    rule_id: UUID,
    title: Optional[str] = None,
    amount: Optional[Decimal] = None,
    description: Optional[str] = None,
) -> Rule:
    require_fund_manager(team_id=team.id, user=user)
    rule = get_team_rule(team=team, rule_id=rule_id, for_update=True)

    update_fields = ['updated_at']
    if title is not None:
        rule.title = require_text(title, 'Rule title')
        update_fields.append('title')
    if amount is not None:
        rule.amount = require_non_negative(amount)
        update_fields.append('amount')
    if description is not None:
        rule.description = description.strip()
        update_fields.append('description')

    rule.save(update_fields=update_fields)
    return rule


@transaction.atomic
def delete_rule(*, team: Team, user: User, rule_id: UUID) -> None:
    """
    Delete a rule (fund manager only).

    Existing violations keep their other fields and lose the rule link.
    """
    require_fund_manager(team_id=team.id, user=user)
    rule = get_team_rule(team=team, rule_id=rule_id, for_update=True)
    rule.delete()

    logger.info("Rule %s deleted by user %s", rule_id, user.id)
