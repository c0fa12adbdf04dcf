from rest_framework import serializers
from .models import Team, TeamMembership
from apps.accounts.serializers import UserPublicSerializer


class TeamMemberSerializer(serializers.ModelSerializer):
    """Membership row with the member's public profile."""

    user = UserPublicSerializer(read_only=True)

    class Meta:
        model = TeamMembership
        fields = [
            'id',
            'user',
            'is_team_lead',
            'is_fund_manager',
            'is_food_manager',
            'is_active',
            'joined_at',
            'updated_at',
        ]
        read_only_fields = fields


class TeamSerializer(serializers.ModelSerializer):
    """Team with its creator and member list."""

    created_by = UserPublicSerializer(read_only=True)
    members = TeamMemberSerializer(source='memberships', many=True, read_only=True)

    class Meta:
        model = Team
        fields = [
            'id',
            'name',
            'description',
            'created_by',
            'members',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class TeamListSerializer(serializers.ModelSerializer):
    """Lightweight team info for list views."""

    created_by = UserPublicSerializer(read_only=True)

    class Meta:
        model = Team
        fields = ['id', 'name', 'description', 'created_by', 'created_at']
        read_only_fields = fields


class UserTeamSerializer(serializers.ModelSerializer):
    """One of the caller's teams together with the caller's membership."""

    team = TeamListSerializer(read_only=True)
    is_current = serializers.SerializerMethodField()

    class Meta:
        model = TeamMembership
        fields = [
            'id',
            'team',
            'is_team_lead',
            'is_fund_manager',
            'is_food_manager',
            'is_active',
            'is_current',
            'joined_at',
        ]
        read_only_fields = fields

    def get_is_current(self, obj):
        request = self.context.get('request')
        if request and request.user.is_authenticated:
            return request.user.current_team_id == obj.team_id
        return False


class TeamCreateSerializer(serializers.Serializer):
    """Serializer for creating teams."""

    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')


class AddMemberSerializer(serializers.Serializer):
    """Identify the user to add by id or email."""

    user_id = serializers.UUIDField(required=False)
    email = serializers.CharField(required=False)

    def validate(self, attrs):
        if not attrs.get('user_id') and not attrs.get('email'):
            raise serializers.ValidationError('User id or email is required')
        return attrs


class UpdateMemberSerializer(serializers.Serializer):
    """Deactivate a member or change their roles."""

    ACTION_DEACTIVATE = 'deactivate'
    ACTION_ASSIGN_ROLE = 'assign_role'

    action = serializers.ChoiceField(choices=[ACTION_DEACTIVATE, ACTION_ASSIGN_ROLE])
    is_team_lead = serializers.BooleanField(required=False)
    is_fund_manager = serializers.BooleanField(required=False)
    is_food_manager = serializers.BooleanField(required=False)
