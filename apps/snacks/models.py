from decimal import Decimal

from django.db import models
from django.db.models import Sum
from django.utils import timezone
import uuid


class Snack(models.Model):
    """Snack purchase paid for by member contributions."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey('teams.Team', on_delete=models.CASCADE, related_name='snacks')

    food_item = models.CharField(max_length=200)
    expense = models.DecimalField(max_digits=10, decimal_places=2)
    total_contribution = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    note = models.TextField(blank=True)
    date = models.DateField(default=timezone.localdate)

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
        db_table = 'snacks'
        indexes = [
            models.Index(fields=['team', 'date'], name='snacks_team_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.food_item} ({self.date})"

    def recalculate_total(self):
        """Set ``total_contribution`` from the stored contribution rows."""
        total = self.contributions.aggregate(total=Sum('amount'))['total']
        self.total_contribution = total or Decimal('0.00')
        self.save(update_fields=['total_contribution', 'updated_at'])


class SnackContribution(models.Model):
    """A member's share of a snack purchase."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    snack = models.ForeignKey(Snack, on_delete=models.CASCADE, related_name='contributions')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='snack_contributions')
    amount = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        db_table = 'snack_contributions'
        ordering = ['id']

    def __str__(self):
        return f"{self.user} - {self.amount}"
