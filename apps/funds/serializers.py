from rest_framework import serializers
from .models import BankAccount, Expense, Payment
from apps.accounts.serializers import UserPublicSerializer


class BankAccountSerializer(serializers.ModelSerializer):
    """Bank account with its owner's public profile."""

    user = UserPublicSerializer(read_only=True)

    class Meta:
        model = BankAccount
        fields = [
            'id',
            'team',
            'user',
            'bank_name',
            'branch',
            'account_no',
            'account_title',
            'routing_number',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class BankAccountCreateSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    bank_name = serializers.CharField(max_length=150)
    branch = serializers.CharField(max_length=150)
    account_no = serializers.CharField(max_length=50)
    account_title = serializers.CharField(max_length=150)
    routing_number = serializers.CharField(max_length=50)


class BankAccountUpdateSerializer(serializers.Serializer):
    """Account number is immutable and therefore not accepted."""

    bank_name = serializers.CharField(max_length=150, required=False)
    branch = serializers.CharField(max_length=150, required=False)
    account_title = serializers.CharField(max_length=150, required=False)
    routing_number = serializers.CharField(max_length=50, required=False)


class ExpenseSerializer(serializers.ModelSerializer):
    """Expense with the spender's public profile."""

    user = UserPublicSerializer(read_only=True)

    class Meta:
        model = Expense
        fields = [
            'id',
            'team',
            'user',
            'amount',
            'reason',
            'date',
            'note',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ExpenseCreateSerializer(serializers.Serializer):
    user_id = serializers.UUIDField(required=False)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    reason = serializers.CharField(max_length=255)
    date = serializers.DateField(required=False)
    note = serializers.CharField(required=False, allow_blank=True, default='')


class ExpenseUpdateSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    reason = serializers.CharField(max_length=255, required=False)
    date = serializers.DateField(required=False)
    note = serializers.CharField(required=False, allow_blank=True)


class PaymentSerializer(serializers.ModelSerializer):
    """Payment with the payer's public profile."""

    paid_by = UserPublicSerializer(read_only=True)

    class Meta:
        model = Payment
        fields = [
            'id',
            'team',
            'paid_by',
            'amount',
            'date',
            'note',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class PaymentCreateSerializer(serializers.Serializer):
    paid_by = serializers.UUIDField(required=False)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    date = serializers.DateField(required=False)
    note = serializers.CharField(required=False, allow_blank=True, default='')


class PaymentUpdateSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    date = serializers.DateField(required=False)
    note = serializers.CharField(required=False, allow_blank=True)
