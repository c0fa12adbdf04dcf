import pytest
from uuid import uuid4
from django.urls import reverse
from rest_framework import status
from apps.teams.models import Team, TeamMembership


def member_url(team, user):
    return reverse('teams:team-member-detail', kwargs={'pk': team.id, 'user_id': user.id})


# =============================================================================
# Team CRUD Tests
# =============================================================================

@pytest.mark.django_db
class TestTeamList:
    """Tests for GET /api/teams/"""

    def test_list_teams_returns_user_teams(self, lead_client, team):
        url = reverse('teams:team-list')
        response = lead_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['statusCode'] == 200
        assert len(response.data['data']) == 1
        entry = response.data['data'][0]
        assert entry['team']['name'] == team.name
        assert entry['is_team_lead'] is True
        assert entry['is_current'] is True

    def test_list_teams_excludes_other_teams(self, outsider_client, team):
        url = reverse('teams:team-list')
        response = outsider_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data'] == []

    def test_list_teams_unauthenticated(self, api_client):
        url = reverse('teams:team-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False
        assert response.data['statusCode'] == 401


@pytest.mark.django_db
class TestTeamCreate:
    """Tests for POST /api/teams/"""

    def test_create_team(self, outsider_client, outsider):
        url = reverse('teams:team-list')
        response = outsider_client.post(url, {'name': 'Beta', 'description': 'New team'})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['message'] == 'Team created successfully'
        assert response.data['data']['name'] == 'Beta'
        assert response.data['data']['created_by']['id'] == str(outsider.id)
        assert len(response.data['data']['members']) == 1

        outsider.refresh_from_db()
        assert outsider.current_team.name == 'Beta'

    def test_create_team_duplicate_name(self, outsider_client, team):
        url = reverse('teams:team-list')
        response = outsider_client.post(url, {'name': team.name})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Team name already exists'
        assert Team.objects.filter(name=team.name).count() == 1

    def test_create_team_missing_name(self, outsider_client):
        url = reverse('teams:team-list')
        response = outsider_client.post(url, {})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False
        assert response.data['message'].startswith('name:')


@pytest.mark.django_db
class TestTeamDetail:
    """Tests for GET /api/teams/{id}/"""

    def test_retrieve_team(self, member_client, team_with_members):
        url = reverse('teams:team-detail', kwargs={'pk': team_with_members.id})
        response = member_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['data']['members']) == 3
        for member in response.data['data']['members']:
            assert 'password' not in member['user']

    def test_retrieve_team_non_member(self, outsider_client, team):
        url = reverse('teams:team-detail', kwargs={'pk': team.id})
        response = outsider_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_retrieve_missing_team(self, lead_client, team):
        url = reverse('teams:team-detail', kwargs={'pk': uuid4()})
        response = lead_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['message'] == 'Team not found'


@pytest.mark.django_db
class TestTeamSwitch:
    """Tests for POST /api/teams/{id}/switch/"""

    def test_switch_team(self, member_client, member_user, team_with_members, outsider):
        other = Team.objects.create(name='Other', created_by=outsider)
        TeamMembership.objects.create(team=other, user=member_user)

        url = reverse('teams:team-switch', kwargs={'pk': other.id})
        response = member_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        member_user.refresh_from_db()
        assert member_user.current_team_id == other.id

    def test_switch_to_team_without_membership(self, outsider_client, team):
        url = reverse('teams:team-switch', kwargs={'pk': team.id})
        response = outsider_client.post(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN


# =============================================================================
# Member Tests
# =============================================================================

@pytest.mark.django_db
class TestTeamMembers:
    """Tests for /api/teams/{id}/members/"""

    def test_list_members(self, member_client, team_with_members):
        url = reverse('teams:team-members', kwargs={'pk': team_with_members.id})
        response = member_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['data']) == 3

    def test_add_member(self, lead_client, team, outsider):
        url = reverse('teams:team-members', kwargs={'pk': team.id})
        response = lead_client.post(url, {'user_id': str(outsider.id)})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['data']['user']['email'] == outsider.email
        assert response.data['data']['is_active'] is True
        assert response.data['data']['is_fund_manager'] is False

    def test_add_member_by_email(self, lead_client, team, outsider):
        url = reverse('teams:team-members', kwargs={'pk': team.id})
        response = lead_client.post(url, {'email': outsider.email})

        assert response.status_code == status.HTTP_201_CREATED

    def test_add_member_twice(self, lead_client, team, outsider):
        url = reverse('teams:team-members', kwargs={'pk': team.id})
        lead_client.post(url, {'user_id': str(outsider.id)})
        response = lead_client.post(url, {'user_id': str(outsider.id)})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'User is already a member of this team'

    def test_add_member_not_team_lead(self, fund_manager_client, team_with_members, outsider):
        url = reverse('teams:team-members', kwargs={'pk': team_with_members.id})
        response = fund_manager_client.post(url, {'user_id': str(outsider.id)})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not TeamMembership.objects.filter(user=outsider).exists()

    def test_add_member_without_target(self, lead_client, team):
        url = reverse('teams:team-members', kwargs={'pk': team.id})
        response = lead_client.post(url, {})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestTeamMemberUpdate:
    """Tests for PUT /api/teams/{id}/members/{user_id}/"""

    def test_deactivate_member(self, lead_client, team_with_members, member_user):
        response = lead_client.put(member_url(team_with_members, member_user), {'action': 'deactivate'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['is_active'] is False

    def test_team_lead_deactivate_self(self, lead_client, team, team_lead):
        response = lead_client.put(member_url(team, team_lead), {'action': 'deactivate'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'You cannot deactivate yourself'

    def test_deactivate_by_non_lead(self, fund_manager_client, team_with_members, team_lead):
        response = fund_manager_client.put(member_url(team_with_members, team_lead), {'action': 'deactivate'})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_deactivate_non_member(self, lead_client, team, outsider):
        response = lead_client.put(member_url(team, outsider), {'action': 'deactivate'})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_assign_role(self, lead_client, team_with_members, member_user):
        response = lead_client.patch(
            member_url(team_with_members, member_user),
            {'action': 'assign_role', 'is_food_manager': True},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['is_food_manager'] is True

    def test_assign_role_denied(self, fund_manager_client, team_with_members, member_user):
        response = fund_manager_client.patch(
            member_url(team_with_members, member_user),
            {'action': 'assign_role', 'is_food_manager': True},
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        membership = TeamMembership.objects.get(team=team_with_members, user=member_user)
        assert membership.is_food_manager is False

    def test_unknown_action(self, lead_client, team_with_members, member_user):
        response = lead_client.put(member_url(team_with_members, member_user), {'action': 'promote'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'].startswith('action:')
