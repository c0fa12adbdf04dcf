"""
Snack management service.

Food managers record snack purchases together with who chipped in.
``total_contribution`` always equals the sum of the contribution rows.
"""

import logging
from datetime import date as date_type
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple
from uuid import UUID

from django.db import transaction
from django.db.models import Prefetch, QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.common.exceptions import InvalidInputError
from apps.common.validation import require_non_negative, require_text, to_amount, to_date
from apps.snacks.models import Snack, SnackContribution
from apps.teams.models import Team
from apps.teams.services.authorization import (
    require_active_member,
    require_food_manager,
    require_member_user,
)

from .exceptions import InvalidContributionError, InvalidDateRangeError, SnackNotFoundError

logger = logging.getLogger(__name__)


def _snacks():
    return Snack.objects.prefetch_related(
        Prefetch('contributions', queryset=SnackContribution.objects.select_related('user'))
    )


def _validate_date(value) -> date_type:
    snack_date = to_date(value) if value else timezone.localdate()
    if snack_date > timezone.localdate():
        raise InvalidInputError('Date cannot be in the future')
    return snack_date


def _validate_contributions(team, contributions) -> List[Tuple[User, Decimal]]:
    """
    Resolve contributors and amounts.

    Raises:
        InvalidContributionError: If the list is empty or an entry is malformed
        MemberNotFoundError: If a contributor is not an active member
    """
    if not contributions:
        raise InvalidContributionError()

    resolved = []
    for entry in contributions:
        user_id = entry.get('user_id')
        if not user_id:
            raise InvalidContributionError('Each contribution must have a valid user ID')
        try:
            amount = to_amount(entry.get('amount'))
        except InvalidInputError:
            raise InvalidContributionError('Each contribution must have a valid amount')
        if amount < 0:
            raise InvalidContributionError('Each contribution must have a valid amount')
        resolved.append((require_member_user(team_id=team.id, user_id=user_id), amount))
    return resolved


def _contribution_total(resolved) -> Decimal:
    """Sum the amounts, rejecting totals that do not fit ``Snack.total_contribution``."""
    total = sum((amount for _, amount in resolved), Decimal('0.00'))
    field = Snack._meta.get_field('total_contribution')
    if total >= Decimal(10) ** (field.max_digits - field.decimal_places):
        raise InvalidContributionError('Total contribution is too large')
    return total


def _store_contributions(snack, resolved) -> None:
    SnackContribution.objects.bulk_create([
        SnackContribution(snack=snack, user=user, amount=amount)
        for user, amount in resolved
    ])


@transaction.atomic
def add_snack(
    *,
    team: Team,
    user: User,
    food_item: str,
    expense: Decimal,
    contributions: Iterable[dict],
    date: Optional[date_type] = None,
    note: str = '',
) -> Snack:
    """
    Record a snack purchase (food manager only).

    Args:
        team: Team the snack belongs to
        user: Acting food manager
        food_item: What was bought
        expense: Non-negative cost of the purchase
        contributions: ``[{'user_id': ..., 'amount': ...}, ...]``, at least one
        date: Day of the purchase, today when omitted, never in the future
        note: Optional free text

    Returns:
        Created Snack with contributions prefetched

    Raises:
        InsufficientPermissionsError: If user is not a food manager
        InvalidInputError: If any field is invalid
        MemberNotFoundError: If a contributor is not an active member
    """
    require_food_manager(team_id=team.id, user=user)

    food_item = require_text(food_item, 'Food item name')
    expense = require_non_negative(expense, 'expense')
    snack_date = _validate_date(date)
    resolved = _validate_contributions(team, list(contributions or []))
    total = _contribution_total(resolved)

    snack = Snack.objects.create(
        team=team,
        food_item=food_item,
        expense=expense,
        total_contribution=total,
        note=(note or '').strip(),
        date=snack_date,
        created_by=user,
    )
    _store_contributions(snack, resolved)

    logger.info("Snack %s recorded in team %s", snack.id, team.id)
    return _snacks().get(id=snack.id)


def list_snacks(*, team: Team, user: User) -> QuerySet:
    require_active_member(team_id=team.id, user=user)
    return _snacks().filter(team=team)


def list_snacks_by_date_range(*, team: Team, user: User, start_date, end_date) -> QuerySet:
    """
    List snacks whose date lies in ``[start_date, end_date]``.

    Raises:
        InvalidDateRangeError: If a bound is missing or start is after end
    """
    require_active_member(team_id=team.id, user=user)

    if not start_date or not end_date:
        raise InvalidDateRangeError()
    start = to_date(start_date, 'start date')
    end = to_date(end_date, 'end date')
    if start > end:
        raise InvalidDateRangeError('Start date must be before or equal to end date')

    return _snacks().filter(team=team, date__gte=start, date__lte=end)


def get_snack(*, team: Team, user: User, snack_id: UUID) -> Snack:
    require_active_member(team_id=team.id, user=user)
    return _get_snack(team, snack_id)


def _get_snack(team, snack_id, for_update=False):
    queryset = _snacks()
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=snack_id, team=team)
    except Snack.DoesNotExist:
        raise SnackNotFoundError()


@transaction.atomic
def update_snack(
    *,
    team: Team,
    user: User,
    snack_id: UUID,
    food_item: Optional[str] = None,
    expense: Optional[Decimal] = None,
    contributions: Optional[Iterable[dict]] = None,
    date: Optional[date_type] = None,
    note: Optional[str] = None,
) -> Snack:
    """
    Update a snack (food manager only).

    A new contribution list replaces the old one and the total is
    recomputed from it.
    """
    require_food_manager(team_id=team.id, user=user)
    snack = _get_snack(team, snack_id, for_update=True)

    resolved = None
    if contributions is not None:
        resolved = _validate_contributions(team, list(contributions))
        _contribution_total(resolved)

    if food_item is not None:
        snack.food_item = require_text(food_item, 'Food item name')
    if expense is not None:
        snack.expense = require_non_negative(expense, 'expense')
    if date is not None:
        snack.date = _validate_date(date)
    if note is not None:
        snack.note = note.strip()
    snack.save()

    if resolved is not None:
        snack.contributions.all().delete()
        _store_contributions(snack, resolved)
        snack.recalculate_total()

    return _snacks().get(id=snack.id)


@transaction.atomic
def delete_snack(*, team: Team, user: User, snack_id: UUID) -> None:
    require_food_manager(team_id=team.id, user=user)
    snack = _get_snack(team, snack_id, for_update=True)
    snack.delete()

    logger.info("Snack %s deleted by user %s", snack_id, user.id)
