"""
Expense service.

Members record their own expenses; fund managers can also record, edit
and delete expenses of other members.
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
from apps.common.validation import require_non_negative, require_text, to_date
from apps.funds.models import Expense
from apps.teams.models import Team
from apps.teams.services.authorization import (
    require_active_member,
    require_member_user,
    require_self_or_fund_manager,
)

from .exceptions import ExpenseNotFoundError, UserNotFoundError

logger = logging.getLogger(__name__)


@transaction.atomic
def add_expense(
    *,
    team: Team,
    user: User,
    amount: Decimal,
    reason: str,
    date: Optional[date_type] = None,
    note: str = '',
    spender_id: Optional[UUID] = None,
) -> Expense:
    """
    Record an expense.

    Args:
        team: Team the expense belongs to
        user: Acting user
        amount: Non-negative amount
        reason: What the money was spent on
        date: Day of the expense, today when omitted
        note: Optional free text
        spender_id: Member who spent the money, defaults to ``user``

    Returns:
        Created Expense instance

    Raises:
        NotMemberError: If user is not an active member
        InsufficientPermissionsError: If recording for someone else
            without being fund manager
        MemberNotFoundError: If the spender is not an active member
        InvalidInputError: If amount or reason is invalid
    """
    spender_id = spender_id or user.id
    require_self_or_fund_manager(
        team_id=team.id,
        user=user,
        owner_id=spender_id,
        message='Only fund managers can record expenses for other members',
    )

    amount = require_non_negative(amount)
    reason = require_text(reason, 'Reason')
    expense_date = to_date(date) if date else timezone.localdate()
    spender = require_member_user(team_id=team.id, user_id=spender_id)

    expense = Expense.objects.create(
        team=team,
        user=spender,
        amount=amount,
        reason=reason,
        date=expense_date,
        note=(note or '').strip(),
        created_by=user,
    )

    logger.info("Expense %s of %s recorded in team %s", expense.id, amount, team.id)
    return expense


def list_expenses(*, team: Team, user: User) -> QuerySet:
    require_active_member(team_id=team.id, user=user)
    return Expense.objects.filter(team=team).select_related('user')


def list_expenses_by_user(*, team: Team, user: User, spender_id: UUID) -> QuerySet:
    """
    List the team's expenses of one member.

    Raises:
        UserNotFoundError: If no user has this id
    """
    require_active_member(team_id=team.id, user=user)
    if not User.objects.filter(id=spender_id).exists():
        raise UserNotFoundError()
    return Expense.objects.filter(team=team, user_id=spender_id).select_related('user')


def get_expense(*, team: Team, user: User, expense_id: UUID) -> Expense:
    require_active_member(team_id=team.id, user=user)
    return _get_expense(team, expense_id)


def _get_expense(team, expense_id, for_update=False):
    queryset = Expense.objects.select_related('user')
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=expense_id, team=team)
    except Expense.DoesNotExist:
        raise ExpenseNotFoundError()


@transaction.atomic
def update_expense(
    *,
    team: Team,
    user: User,
    expense_id: UUID,
    amount: Optional[Decimal] = None,
    reason: Optional[str] = None,
    date: Optional[date_type] = None,
    note: Optional[str] = None,
) -> Expense:
    """
    Update an expense; only fields that are not None change.

    Raises:
        ExpenseNotFoundError: If no such expense exists in the team
        InsufficientPermissionsError: If the expense is someone else's and
            user is not fund manager
    """
    require_active_member(team_id=team.id, user=user)
    expense = _get_expense(team, expense_id, for_update=True)
    require_self_or_fund_manager(
        team_id=team.id,
        user=user,
        owner_id=expense.user_id,
        message='You can only modify your own expenses',
    )

    update_fields = ['updated_at']
    if amount is not None:
        expense.amount = require_non_negative(amount)
        update_fields.append('amount')
    if reason is not None:
        expense.reason = require_text(reason, 'Reason')
        update_fields.append('reason')
    if date is not None:
        expense.date = to_date(date)
        update_fields.append('date')
    if note is not None:
        expense.note = note.strip()
        update_fields.append('note')

    expense.save(update_fields=update_fields)
    return expense


@transaction.atomic
def delete_expense(*, team: Team, user: User, expense_id: UUID) -> None:
    require_active_member(team_id=team.id, user=user)
    expense = _get_expense(team, expense_id, for_update=True)
    require_self_or_fund_manager(
        team_id=team.id,
        user=user,
        owner_id=expense.user_id,
        message='You can only delete your own expenses',
    )
    expense.delete()

    logger.info("Expense %s deleted by user %s", expense_id, user.id)
