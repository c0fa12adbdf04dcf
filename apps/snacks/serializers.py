from rest_framework import serializers
from .models import Snack, SnackContribution
from apps.accounts.serializers import UserPublicSerializer


class SnackContributionSerializer(serializers.ModelSerializer):
    """Contribution with the contributor's public profile."""

    user = UserPublicSerializer(read_only=True)

    class Meta:
        model = SnackContribution
        fields = ['id', 'user', 'amount']
        read_only_fields = fields


class SnackSerializer(serializers.ModelSerializer):
    contributions = SnackContributionSerializer(many=True, read_only=True)

    class Meta:
        model = Snack
        fields = [
            'id',
            'team',
            'food_item',
            'expense',
            'total_contribution',
            'contributions',
            'note',
            'date',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ContributionInputSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    amount = serializers.DecimalField(max_digits=10, decimal_places=2)


class SnackCreateSerializer(serializers.Serializer):
    food_item = serializers.CharField(max_length=200)
    expense = serializers.DecimalField(max_digits=10, decimal_places=2)
    contributions = ContributionInputSerializer(many=True)
    date = serializers.DateField(required=False)
    note = serializers.CharField(required=False, allow_blank=True, default='')


class SnackUpdateSerializer(serializers.Serializer):
    food_item = serializers.CharField(max_length=200, required=False)
    expense = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    contributions = ContributionInputSerializer(many=True, required=False)
    date = serializers.DateField(required=False)
    note = serializers.CharField(required=False, allow_blank=True)


class DateRangeSerializer(serializers.Serializer):
    """Query parameters of the date-range listing."""

    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)
