from django.contrib import admin
from .models import BankAccount, Expense, Payment


@admin.register(BankAccount)
class BankAccountAdmin(admin.ModelAdmin):
    """Admin interface for bank accounts."""

    list_display = ['account_title', 'bank_name', 'branch', 'user', 'team', 'created_at']
    list_filter = ['bank_name', 'created_at']
    search_fields = ['account_title', 'account_no', 'user__email', 'team__name']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['-created_at']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('user', 'team')


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    """Admin interface for expenses."""

    list_display = ['reason', 'amount', 'user', 'team', 'date', 'created_by']
    list_filter = ['date', 'team']
    search_fields = ['reason', 'note', 'user__email', 'team__name']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'date'
    ordering = ['-date']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('user', 'team', 'created_by')


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    """Admin interface for payments."""

    list_display = ['paid_by', 'amount', 'team', 'date', 'created_by']
    list_filter = ['date', 'team']
    search_fields = ['note', 'paid_by__email', 'team__name']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'date'
    ordering = ['-date']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('paid_by', 'team', 'created_by')
