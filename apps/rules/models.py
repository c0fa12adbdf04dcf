from decimal import Decimal

from django.db import models
from django.utils import timezone
import uuid


class Rule(models.Model):
    """Team rule with the fine charged when it is broken."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey('teams.Team', on_delete=models.CASCADE, related_name='rules')

    title = models.CharField(max_length=200)
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    description = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'rules'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} ({self.amount})"


class RuleViolation(models.Model):
    """A member breaking a rule, charged the rule amount plus extras."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey('teams.Team', on_delete=models.CASCADE, related_name='rule_violations')
    violator = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='rule_violations')

    # Deleting a rule keeps its violations
    rule = models.ForeignKey(
        Rule,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='violations',
    )
    additional_amount = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    updated_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
    )
    note = models.TextField(blank=True)
    date = models.DateField(default=timezone.localdate)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'rule_violations'
        indexes = [
            models.Index(fields=['team', 'date'], name='violations_team_date_idx'),
            models.Index(fields=['violator', 'date'], name='violations_user_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        rule = self.rule.title if self.rule else 'Deleted rule'
        return f"{self.violator} - {rule}"

    @property
    def total_amount(self):
        base = self.rule.amount if self.rule else Decimal('0.00')
        return base + self.additional_amount
