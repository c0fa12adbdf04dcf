# ==========================================
# apps/teams/admin.py
# ==========================================

from django.contrib import admin
from apps.teams.models import Team, TeamMembership


class TeamMembershipInline(admin.TabularInline):
    """Inline admin for team memberships."""
    model = TeamMembership
    extra = 0
    fields = ['user', 'is_team_lead', 'is_fund_manager', 'is_food_manager', 'is_active', 'joined_at']
    readonly_fields = ['joined_at']


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    """Admin interface for Teams."""

    list_display = [
        'name',
        'created_by',
        'member_count',
        'created_at'
    ]
    list_filter = ['created_at']
    search_fields = ['name', 'description', 'created_by__email']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [TeamMembershipInline]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'description')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def member_count(self, obj):
        """Show number of active members."""
        return obj.memberships.filter(is_active=True).count()
    member_count.short_description = 'Members'

    def save_model(self, request, obj, form, change):
        if not change:
            obj.created_by = request.user
        super().save_model(request, obj, form, change)


@admin.register(TeamMembership)
class TeamMembershipAdmin(admin.ModelAdmin):
    """Admin interface for Team Memberships."""

    list_display = ['user', 'team', 'is_team_lead', 'is_fund_manager', 'is_food_manager', 'is_active', 'joined_at']
    list_filter = ['is_team_lead', 'is_fund_manager', 'is_food_manager', 'is_active', 'joined_at']
    search_fields = ['user__email', 'user__full_name', 'team__name']
    readonly_fields = ['joined_at', 'updated_at']
    date_hierarchy = 'joined_at'
    ordering = ['-joined_at']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('user', 'team')
