"""
Payment service.

Payments are contributions into the team fund. Same ownership rules as
expenses, but the amount must be strictly positive.
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
from apps.common.validation import require_positive, to_date
from apps.funds.models import Payment
from apps.teams.models import Team
from apps.teams.services.authorization import (
    require_active_member,
    require_member_user,
    require_self_or_fund_manager,
)

from .exceptions import PaymentNotFoundError, UserNotFoundError

logger = logging.getLogger(__name__)


@transaction.atomic
def add_payment(
    *,
    team: Team,
    user: User,
    amount: Decimal,
    date: Optional[date_type] = None,
    note: str = '',
    paid_by_id: Optional[UUID] = None,
) -> Payment:
    """
    Record a payment into the team fund.

    ``paid_by_id`` defaults to the acting user; recording a payment for
    another member requires fund manager.

    Raises:
        NotMemberError: If user is not an active member
        InsufficientPermissionsError: If recording for someone else
            without being fund manager
        MemberNotFoundError: If the payer is not an active member
        InvalidInputError: If amount is not greater than 0
    """
    paid_by_id = paid_by_id or user.id
    require_self_or_fund_manager(
        team_id=team.id,
        user=user,
        owner_id=paid_by_id,
        message='Only fund managers can record payments for other members',
    )

    amount = require_positive(amount)
    payment_date = to_date(date) if date else timezone.localdate()
    payer = require_member_user(team_id=team.id, user_id=paid_by_id)

    payment = Payment.objects.create(
        team=team,
        paid_by=payer,
        amount=amount,
        date=payment_date,
        note=(note or '').strip(),
        created_by=user,
    )

    logger.info("Payment %s of %s recorded in team %s", payment.id, amount, team.id)
    return payment


def list_payments(*, team: Team, user: User) -> QuerySet:
    require_active_member(team_id=team.id, user=user)
    return Payment.objects.filter(team=team).select_related('paid_by')


def list_payments_by_user(*, team: Team, user: User, paid_by_id: UUID) -> QuerySet:
    require_active_member(team_id=team.id, user=user)
    if not User.objects.filter(id=paid_by_id).exists():
        raise UserNotFoundError()
    return Payment.objects.filter(team=team, paid_by_id=paid_by_id).select_related('paid_by')


def get_payment(*, team: Team, user: User, payment_id: UUID) -> Payment:
    require_active_member(team_id=team.id, user=user)
    return _get_payment(team, payment_id)


def _get_payment(team, payment_id, for_update=False):
    queryset = Payment.objects.select_related('paid_by')
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=payment_id, team=team)
    except Payment.DoesNotExist:
        raise PaymentNotFoundError()


@transaction.atomic
def update_payment(
    *,
    team: Team,
    user: User,
    payment_id: UUID,
    amount: Optional[Decimal] = None,
    date: Optional[date_type] = None,
    note: Optional[str] = None,
) -> Payment:
    require_active_member(team_id=team.id, user=user)
    payment = _get_payment(team, payment_id, for_update=True)
    require_self_or_fund_manager(
        team_id=team.id,
        user=user,
        owner_id=payment.paid_by_id,
        message='You can only modify your own payments',
    )

    update_fields = ['updated_at']
    if amount is not None:
        payment.amount = require_positive(amount)
        update_fields.append('amount')
    if date is not None:
        payment.date = to_date(date)
        update_fields.append('date')
    if note is not None:
        payment.note = note.strip()
        update_fields.append('note')

    payment.save(update_fields=update_fields)
    return payment


@transaction.atomic
def delete_payment(*, team: Team, user: User, payment_id: UUID) -> None:
    require_active_member(team_id=team.id, user=user)
    payment = _get_payment(team, payment_id, for_update=True)
    require_self_or_fund_manager(
        team_id=team.id,
        user=user,
        owner_id=payment.paid_by_id,
        message='You can only delete your own payments',
    )
    payment.delete()

    logger.info("Payment %s deleted by user %s", payment_id, user.id)
