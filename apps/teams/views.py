from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from apps.common.responses import envelope
from .serializers import (
    TeamSerializer,
    TeamListSerializer,
    TeamMemberSerializer,
    UserTeamSerializer,
    TeamCreateSerializer,
    AddMemberSerializer,
    UpdateMemberSerializer,
)
from apps.teams.services import (
    create_team,
    get_team_by_id,
    get_team_for_member,
    get_user_teams,
    switch_team,
    add_team_member,
    get_team_members,
    deactivate_team_member,
    assign_roles,
    resolve_current_team,
)

UUID_PATTERN = r'[0-9a-fA-F-]{36}'


class CurrentTeamViewSet(viewsets.ViewSet):
    """
    Base ViewSet for ledger records scoped to the caller's current team.

    The team is resolved on every request, so switching teams or losing a
    membership takes effect immediately.
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_PATTERN

    def get_team(self):
        return resolve_current_team(self.request.user)


class TeamViewSet(viewsets.ViewSet):
    """
    ViewSet for teams and their members.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Get the caller's teams with the caller's membership
    create: Create a new team (caller becomes team lead)
    retrieve: Get a team with its members
    switch: Make a team the caller's current team
    members: List or add members
    member_detail: Deactivate a member or assign roles
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_PATTERN

    @extend_schema(responses={200: UserTeamSerializer(many=True)}, tags=['teams'])
    def list(self, request):
        """Get all teams the user has a membership in."""
        memberships = get_user_teams(user=request.user)
        serializer = UserTeamSerializer(memberships, many=True, context={'request': request})
        return envelope('Teams retrieved successfully', serializer.data)

    @extend_schema(request=TeamCreateSerializer, responses={201: TeamSerializer}, tags=['teams'])
    def create(self, request):
        """Create a new team."""
        serializer = TeamCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        team = create_team(
            name=serializer.validated_data['name'],
            created_by=request.user,
            description=serializer.validated_data.get('description', ''),
        )

        team = get_team_by_id(team_id=team.id)
        return envelope(
            'Team created successfully',
            TeamSerializer(team).data,
            status_code=status.HTTP_201_CREATED,
        )

    @extend_schema(responses={200: TeamSerializer}, tags=['teams'])
    def retrieve(self, request, pk=None):
        """Get a team the caller belongs to."""
        team = get_team_for_member(team_id=pk, user=request.user)
        return envelope('Team retrieved successfully', TeamSerializer(team).data)

    @extend_schema(request=None, responses={200: TeamListSerializer}, tags=['teams'])
    @action(detail=True, methods=['post'])
    def switch(self, request, pk=None):
        """Switch the caller's current team."""
        team = switch_team(user=request.user, team_id=pk)
        return envelope('Team switched successfully', TeamListSerializer(team).data)

    @extend_schema(
        methods=['GET'],
        responses={200: TeamMemberSerializer(many=True)},
        tags=['teams'],
    )
    @extend_schema(
        methods=['POST'],
        request=AddMemberSerializer,
        responses={201: TeamMemberSerializer},
        tags=['teams'],
    )
    @action(detail=True, methods=['get', 'post'])
    def members(self, request, pk=None):
        """List members, or add one (team lead only)."""
        if request.method == 'GET':
            memberships = get_team_members(team_id=pk, user=request.user)
            serializer = TeamMemberSerializer(memberships, many=True)
            return envelope('Team members retrieved successfully', serializer.data)

        serializer = AddMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        membership = add_team_member(
            team_id=pk,
            added_by=request.user,
            user_id=serializer.validated_data.get('user_id'),
            email=serializer.validated_data.get('email'),
        )
        return envelope(
            'Member added successfully',
            TeamMemberSerializer(membership).data,
            status_code=status.HTTP_201_CREATED,
        )

    @extend_schema(
        request=UpdateMemberSerializer,
        responses={200: TeamMemberSerializer},
        tags=['teams'],
    )
    @action(
        detail=True,
        methods=['put', 'patch'],
        url_path=rf'members/(?P<user_id>{UUID_PATTERN})',
        url_name='member-detail',
    )
    def member_detail(self, request, pk=None, user_id=None):
        """Deactivate a member (team lead) or change their roles."""
        serializer = UpdateMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        if data['action'] == UpdateMemberSerializer.ACTION_DEACTIVATE:
            membership = deactivate_team_member(
                team_id=pk,
                member_user_id=user_id,
                requested_by=request.user,
            )
            return envelope('Member deactivated successfully', TeamMemberSerializer(membership).data)

        membership = assign_roles(
            team_id=pk,
            member_user_id=user_id,
            requested_by=request.user,
            is_team_lead=data.get('is_team_lead'),
            is_fund_manager=data.get('is_fund_manager'),
            is_food_manager=data.get('is_food_manager'),
        )
        return envelope('Roles updated successfully', TeamMemberSerializer(membership).data)
