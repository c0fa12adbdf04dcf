from django.contrib import admin
from .models import Snack, SnackContribution


class SnackContributionInline(admin.TabularInline):
    """Inline admin for snack contributions."""
    model = SnackContribution
    extra = 0
    fields = ['user', 'amount']


@admin.register(Snack)
class SnackAdmin(admin.ModelAdmin):
    """Admin interface for snacks."""

    list_display = ['food_item', 'expense', 'total_contribution', 'team', 'date', 'created_by']
    list_filter = ['date', 'team']
    search_fields = ['food_item', 'note', 'team__name']
    readonly_fields = ['total_contribution', 'created_at', 'updated_at']
    inlines = [SnackContributionInline]
    date_hierarchy = 'date'
    ordering = ['-date']

    def save_related(self, request, form, formsets, change):
        super().save_related(request, form, formsets, change)
        form.instance.recalculate_total()

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('team', 'created_by')
