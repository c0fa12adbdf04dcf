"""
Bank account service.

Fund managers register one payout account per member and team. Any
active member can read them.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.common.validation import require_text
from apps.funds.models import BankAccount
from apps.teams.models import Team
from apps.teams.services.authorization import (
    require_active_member,
    require_fund_manager,
    require_member_user,
)

from .exceptions import BankAccountExistsError, BankAccountNotFoundError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {
    'bank_name': 'Bank name',
    'branch': 'Branch',
    'account_title': 'Account title',
    'routing_number': 'Routing number',
}


def add_bank_account(
    *,
    team: Team,
    user: User,
    account_user_id: UUID,
    bank_name: str,
    branch: str,
    account_no: str,
    account_title: str,
    routing_number: str,
) -> BankAccount:
    """
    Register a member's bank account (fund manager only).

    Args:
        team: Team the account belongs to
        user: Acting user (must be fund manager)
        account_user_id: Member who owns the account

    Returns:
        Created BankAccount instance

    Raises:
        InsufficientPermissionsError: If user is not a fund manager
        InvalidInputError: If a field is empty
        MemberNotFoundError: If the owner is not an active member
        BankAccountExistsError: If the owner already has an account here
    """
    require_fund_manager(
        team_id=team.id,
        user=user,
        message='Only fund managers can add bank accounts',
    )

    fields = {
        'bank_name': require_text(bank_name, 'Bank name'),
        'branch': require_text(branch, 'Branch'),
        'account_no': require_text(account_no, 'Account number'),
        'account_title': require_text(account_title, 'Account title'),
        'routing_number': require_text(routing_number, 'Routing number'),
    }
    owner = require_member_user(team_id=team.id, user_id=account_user_id)

    try:
        with transaction.atomic():
            account = BankAccount.objects.create(team=team, user=owner, **fields)
    except IntegrityError:
        raise BankAccountExistsError()

    logger.info("Bank account %s added for user %s in team %s", account.id, owner.id, team.id)
    return account


def list_bank_accounts(*, team: Team, user: User) -> QuerySet:
    require_active_member(team_id=team.id, user=user)
    return BankAccount.objects.filter(team=team).select_related('user')


def get_bank_account(*, team: Team, user: User, account_id: UUID) -> BankAccount:
    """
    Get a bank account of the team.

    Raises:
        NotMemberError: If user is not an active member
        BankAccountNotFoundError: If no such account exists in the team
    """
    require_active_member(team_id=team.id, user=user)
    return _get_account(team, account_id)


def _get_account(team, account_id, for_update=False):
    queryset = BankAccount.objects.select_related('user')
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=account_id, team=team)
    except BankAccount.DoesNotExist:
        raise BankAccountNotFoundError()


@transaction.atomic
def update_bank_account(
    *,
    team: Team,
    user: User,
    account_id: UUID,
    bank_name: Optional[str] = None,
    branch: Optional[str] = None,
    account_title: Optional[str] = None,
    routing_number: Optional[str] = None,
) -> BankAccount:
    """
    Update a bank account (fund manager only).

    The account number cannot be changed; register a new account instead.
    """
    require_fund_manager(
        team_id=team.id,
        user=user,
        message='Only fund managers can update bank accounts',
    )
    account = _get_account(team, account_id, for_update=True)

    changes = {
        'bank_name': bank_name,
        'branch': branch,
        'account_title': account_title,
        'routing_number': routing_number,
    }
    update_fields = ['updated_at']
    for field, value in changes.items():
        if value is None:
            continue
        setattr(account, field, require_text(value, UPDATABLE_FIELDS[field]))
        update_fields.append(field)

    account.save(update_fields=update_fields)
    return account


@transaction.atomic
def delete_bank_account(*, team: Team, user: User, account_id: UUID) -> None:
    require_fund_manager(
        team_id=team.id,
        user=user,
        message='Only fund managers can delete bank accounts',
    )
    account = _get_account(team, account_id, for_update=True)
    account.delete()

    logger.info("Bank account %s deleted by user %s", account_id, user.id)
