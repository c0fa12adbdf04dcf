from rest_framework import serializers
from .models import Rule, RuleViolation
from apps.accounts.serializers import UserPublicSerializer


class RuleSerializer(serializers.ModelSerializer):

    class Meta:
        model = Rule
        fields = ['id', 'team', 'title', 'amount', 'description', 'created_at', 'updated_at']
        read_only_fields = fields


class RuleMinimalSerializer(serializers.ModelSerializer):
    """Minimal rule info for nested serialization."""

    class Meta:
        model = Rule
        fields = ['id', 'title', 'amount']
        read_only_fields = fields


class RuleCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    description = serializers.CharField(required=False, allow_blank=True, default='')


class RuleUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200, required=False)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    description = serializers.CharField(required=False, allow_blank=True)


class RuleViolationSerializer(serializers.ModelSerializer):
    """Violation with violator, rule and last editor nested in."""

    violator = UserPublicSerializer(read_only=True)
    rule = RuleMinimalSerializer(read_only=True, allow_null=True)
    updated_by = UserPublicSerializer(read_only=True, allow_null=True)
    total_amount = serializers.DecimalField(max_digits=11, decimal_places=2, read_only=True)

    class Meta:
        model = RuleViolation
        fields = [
            'id',
            'team',
            'violator',
            'rule',
            'additional_amount',
            'total_amount',
            'updated_by',
            'note',
            'date',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class RuleViolationCreateSerializer(serializers.Serializer):
    violator_id = serializers.UUIDField()
    rule_id = serializers.UUIDField()
    additional_amount = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, default='0.00'
    )
    date = serializers.DateField(required=False)
    note = serializers.CharField(required=False, allow_blank=True, default='')


class RuleViolationUpdateSerializer(serializers.Serializer):
    violator_id = serializers.UUIDField(required=False)
    rule_id = serializers.UUIDField(required=False)
    additional_amount = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    date = serializers.DateField(required=False)
    note = serializers.CharField(required=False, allow_blank=True)
