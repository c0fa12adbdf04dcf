from rest_framework import status
from rest_framework.decorators import action
from drf_spectacular.utils import extend_schema

from apps.common.responses import envelope
from apps.teams.views import CurrentTeamViewSet, UUID_PATTERN
from .serializers import (
    RuleSerializer,
    RuleCreateSerializer,
    RuleUpdateSerializer,
    RuleViolationSerializer,
    RuleViolationCreateSerializer,
    RuleViolationUpdateSerializer,
)
from apps.rules.services import (
    add_rule,
    list_rules,
    get_rule,
    update_rule,
    delete_rule,
    add_violation,
    list_violations,
    list_violations_by_violator,
    list_violations_by_rule,
    get_violation,
    update_violation,
    delete_violation,
)


@extend_schema(tags=['rules'])
class RuleViewSet(CurrentTeamViewSet):
    """
    Rules of the current team.

    Fund managers create, update and delete rules; members read them.
    """

    @extend_schema(responses={200: RuleSerializer(many=True)})
    def list(self, request):
        rules = list_rules(team=self.get_team(), user=request.user)
        return envelope('Rules retrieved successfully', RuleSerializer(rules, many=True).data)

    @extend_schema(request=RuleCreateSerializer, responses={201: RuleSerializer})
    def create(self, request):
        serializer = RuleCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        rule = add_rule(team=self.get_team(), user=request.user, **serializer.validated_data)
        return envelope(
            'Rule added successfully',
            RuleSerializer(rule).data,
            status_code=status.HTTP_201_CREATED,
        )

    @extend_schema(responses={200: RuleSerializer})
    def retrieve(self, request, pk=None):
        rule = get_rule(team=self.get_team(), user=request.user, rule_id=pk)
        return envelope('Rule retrieved successfully', RuleSerializer(rule).data)

    @extend_schema(request=RuleUpdateSerializer, responses={200: RuleSerializer})
    def update(self, request, pk=None):
        serializer = RuleUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        rule = update_rule(
            team=self.get_team(),
            user=request.user,
            rule_id=pk,
            **serializer.validated_data
        )
        return envelope('Rule updated successfully', RuleSerializer(rule).data)

    partial_update = update

    def destroy(self, request, pk=None):
        delete_rule(team=self.get_team(), user=request.user, rule_id=pk)
        return envelope('Rule deleted successfully')


@extend_schema(tags=['rule-violations'])
class RuleViolationViewSet(CurrentTeamViewSet):
    """
    Rule violations of the current team.

    Fund managers log and edit violations; members read them.
    """

    @extend_schema(responses={200: RuleViolationSerializer(many=True)})
    def list(self, request):
        violations = list_violations(team=self.get_team(), user=request.user)
        return envelope(
            'Rule violations retrieved successfully',
            RuleViolationSerializer(violations, many=True).data,
        )

    @extend_schema(request=RuleViolationCreateSerializer, responses={201: RuleViolationSerializer})
    def create(self, request):
        serializer = RuleViolationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        violation = add_violation(team=self.get_team(), user=request.user, **serializer.validated_data)
        return envelope(
            'Rule violation added successfully',
            RuleViolationSerializer(violation).data,
            status_code=status.HTTP_201_CREATED,
        )

    @extend_schema(responses={200: RuleViolationSerializer})
    def retrieve(self, request, pk=None):
        violation = get_violation(team=self.get_team(), user=request.user, violation_id=pk)
        return envelope('Rule violation retrieved successfully', RuleViolationSerializer(violation).data)

    @extend_schema(request=RuleViolationUpdateSerializer, responses={200: RuleViolationSerializer})
    def update(self, request, pk=None):
        serializer = RuleViolationUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        violation = update_violation(
            team=self.get_team(),
            user=request.user,
            violation_id=pk,
            **serializer.validated_data
        )
        return envelope('Rule violation updated successfully', RuleViolationSerializer(violation).data)

    partial_update = update

    def destroy(self, request, pk=None):
        delete_violation(team=self.get_team(), user=request.user, violation_id=pk)
        return envelope('Rule violation deleted successfully')

    @extend_schema(responses={200: RuleViolationSerializer(many=True)})
    @action(
        detail=False,
        methods=['get'],
        url_path=rf'violator/(?P<violator_id>{UUID_PATTERN})',
        url_name='by-violator',
    )
    def by_violator(self, request, violator_id=None):
        """Violations of one member in the current team."""
        violations = list_violations_by_violator(
            team=self.get_team(),
            user=request.user,
            violator_id=violator_id,
        )
        return envelope(
            'Rule violations retrieved successfully',
            RuleViolationSerializer(violations, many=True).data,
        )

    @extend_schema(responses={200: RuleViolationSerializer(many=True)})
    @action(
        detail=False,
        methods=['get'],
        url_path=rf'rule/(?P<rule_id>{UUID_PATTERN})',
        url_name='by-rule',
    )
    def by_rule(self, request, rule_id=None):
        """Violations of one rule in the current team."""
        violations = list_violations_by_rule(
            team=self.get_team(),
            user=request.user,
            rule_id=rule_id,
        )
        return envelope(
            'Rule violations retrieved successfully',
            RuleViolationSerializer(violations, many=True).data,
        )
