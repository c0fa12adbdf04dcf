from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'teams'

# Router for ViewSets
router = DefaultRouter()
router.register(r'', views.TeamViewSet, basename='team')

urlpatterns = [
    # Team ViewSet routes
    # GET    /api/teams/                          - List user's teams
    # POST   /api/teams/                          - Create team
    # GET    /api/teams/{id}/                     - Team details with members

    # Custom team actions
    # POST   /api/teams/{id}/switch/              - Switch current team
    # GET    /api/teams/{id}/members/             - List members
    # POST   /api/teams/{id}/members/             - Add member (team lead)
    # PUT    /api/teams/{id}/members/{user_id}/   - Deactivate or assign roles
    # PATCH  /api/teams/{id}/members/{user_id}/   - Same as PUT

    path('', include(router.urls)),
]
