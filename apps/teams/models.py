# ==========================================
# apps/teams/models.py
# ==========================================

from django.db import models
import uuid


class Team(models.Model):
    """Team sharing a snack fund."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, unique=True)
    description = models.TextField(blank=True)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='created_teams',
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'teams'
        indexes = [
            models.Index(fields=['created_by', 'created_at'], name='teams_creator_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class TeamMembership(models.Model):
    """User membership in a team with independent role flags."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name='memberships')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='team_memberships')

    is_team_lead = models.BooleanField(default=False)
    is_fund_manager = models.BooleanField(default=False)
    is_food_manager = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)

    joined_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'team_memberships'
        constraints = [
            models.UniqueConstraint(fields=['team', 'user'], name='unique_team_membership'),
        ]
        indexes = [
            models.Index(fields=['team', 'is_active'], name='memberships_team_active_idx'),
            models.Index(fields=['user', 'joined_at'], name='memberships_user_joined_idx'),
        ]
        ordering = ['joined_at']

    def __str__(self):
        return f"{self.user.get_display_name()} in {self.team.name} ({', '.join(self.role_names) or 'member'})"

    @property
    def role_names(self):
        roles = []
        if self.is_team_lead:
            roles.append('team lead')
        if self.is_fund_manager:
            roles.append('fund manager')
        if self.is_food_manager:
            roles.append('food manager')
        return roles
