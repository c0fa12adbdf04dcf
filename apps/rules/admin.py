from django.contrib import admin
from .models import Rule, RuleViolation


@admin.register(Rule)
class RuleAdmin(admin.ModelAdmin):
    """Admin interface for rules."""

    list_display = ['title', 'amount', 'team', 'violation_count', 'created_at']
    list_filter = ['team', 'created_at']
    search_fields = ['title', 'description', 'team__name']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['-created_at']

    def violation_count(self, obj):
        return obj.violations.count()
    violation_count.short_description = 'Violations'


@admin.register(RuleViolation)
class RuleViolationAdmin(admin.ModelAdmin):
    """Admin interface for rule violations."""

    list_display = ['violator', 'rule', 'additional_amount', 'total_amount', 'team', 'date', 'updated_by']
    list_filter = ['date', 'team']
    search_fields = ['violator__email', 'rule__title', 'note']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'date'
    ordering = ['-date']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('violator', 'rule', 'team', 'updated_by')
