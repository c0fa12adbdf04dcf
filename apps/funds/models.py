from django.db import models
from django.utils import timezone
import uuid


class BankAccount(models.Model):
    """Payout account of a member, one per team."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey('teams.Team', on_delete=models.CASCADE, related_name='bank_accounts')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='bank_accounts')

    bank_name = models.CharField(max_length=150)
    branch = models.CharField(max_length=150)
    account_no = models.CharField(max_length=50)
    account_title = models.CharField(max_length=150)
    routing_number = models.CharField(max_length=50)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'bank_accounts'
        constraints = [
            models.UniqueConstraint(fields=['team', 'user'], name='unique_team_bank_account'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.bank_name} ({self.account_title})"


class Expense(models.Model):
    """Money a member spent on behalf of the team."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey('teams.Team', on_delete=models.CASCADE, related_name='expenses')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='expenses')

    amount = models.DecimalField(max_digits=10, decimal_places=2)
    reason = models.CharField(max_length=255)
    date = models.DateField(default=timezone.localdate)
    note = models.TextField(blank=True)

    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'expenses'
        indexes = [
            models.Index(fields=['team', 'date'], name='expenses_team_date_idx'),
            models.Index(fields=['user', 'date'], name='expenses_user_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.reason} - {self.amount}"


class Payment(models.Model):
    """Money a member paid into the team fund."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey('teams.Team', on_delete=models.CASCADE, related_name='payments')
    paid_by = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='payments')

    amount = models.DecimalField(max_digits=10, decimal_places=2)
    date = models.DateField(default=timezone.localdate)
    note = models.TextField(blank=True)

    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'payments'
        indexes = [
            models.Index(fields=['team', 'date'], name='payments_team_date_idx'),
            models.Index(fields=['paid_by', 'date'], name='payments_payer_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.paid_by} paid {self.amount}"
