from rest_framework import status
from rest_framework.decorators import action
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.common.responses import envelope
from apps.teams.views import CurrentTeamViewSet
from .serializers import (
    SnackSerializer,
    SnackCreateSerializer,
    SnackUpdateSerializer,
    DateRangeSerializer,
)
from apps.snacks.services import (
    add_snack,
    list_snacks,
    list_snacks_by_date_range,
    get_snack,
    update_snack,
    delete_snack,
)


@extend_schema(tags=['snacks'])
class SnackViewSet(CurrentTeamViewSet):
    """
    Snack purchases of the current team.

    Food managers create, update and delete snacks; members read them.
    """

    @extend_schema(responses={200: SnackSerializer(many=True)})
    def list(self, request):
        snacks = list_snacks(team=self.get_team(), user=request.user)
        return envelope('Snacks retrieved successfully', SnackSerializer(snacks, many=True).data)

    @extend_schema(request=SnackCreateSerializer, responses={201: SnackSerializer})
    def create(self, request):
        serializer = SnackCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        snack = add_snack(team=self.get_team(), user=request.user, **serializer.validated_data)
        return envelope(
            'Snack added successfully',
            SnackSerializer(snack).data,
            status_code=status.HTTP_201_CREATED,
        )

    @extend_schema(responses={200: SnackSerializer})
    def retrieve(self, request, pk=None):
        snack = get_snack(team=self.get_team(), user=request.user, snack_id=pk)
        return envelope('Snack retrieved successfully', SnackSerializer(snack).data)

    @extend_schema(request=SnackUpdateSerializer, responses={200: SnackSerializer})
    def update(self, request, pk=None):
        serializer = SnackUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        snack = update_snack(
            team=self.get_team(),
            user=request.user,
            snack_id=pk,
            **serializer.validated_data
        )
        return envelope('Snack updated successfully', SnackSerializer(snack).data)

    partial_update = update

    def destroy(self, request, pk=None):
        delete_snack(team=self.get_team(), user=request.user, snack_id=pk)
        return envelope('Snack deleted successfully')

    @extend_schema(
        parameters=[
            OpenApiParameter('start_date', str, description='First day (YYYY-MM-DD), inclusive'),
            OpenApiParameter('end_date', str, description='Last day (YYYY-MM-DD), inclusive'),
        ],
        responses={200: SnackSerializer(many=True)},
    )
    @action(detail=False, methods=['get'], url_path='date-range', url_name='date-range')
    def date_range(self, request):
        """Snacks between two dates, both inclusive."""
        serializer = DateRangeSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)

        snacks = list_snacks_by_date_range(
            team=self.get_team(),
            user=request.user,
            start_date=serializer.validated_data.get('start_date'),
            end_date=serializer.validated_data.get('end_date'),
        )
        return envelope('Snacks retrieved successfully', SnackSerializer(snacks, many=True).data)
