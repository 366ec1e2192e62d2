from unittest.mock import patch
from django.urls import reverse
from rest_framework import status

from teamup.constants.messages import ApiErrors, AppMessages
from teamup.dto.team_dto import TeamMemberDTO
from teamup.dto.user_profile_dto import JoinRequestProfileDTO
from teamup.exceptions.team_exceptions import (
    DuplicateTeamMemberException,
    TeamActionForbiddenException,
    TeamCapacityException,
)
from teamup.models.team import TeamModel
from teamup.tests.fixtures.team import LEAD_ID, REQUESTER_ID, team_db_data
from teamup.tests.unit.views.base_view_test import AuthenticatedViewTestCase


class TeamJoinRequestListViewTests(AuthenticatedViewTestCase):
    @patch("teamup.views.join_request.TeamService.get_join_request_profiles")
    def test_get_profiles(self, mock_get_profiles):
        mock_get_profiles.return_value = [
            JoinRequestProfileDTO(id=REQUESTER_ID, name="Riley Requester", skills=["Python", "Docker"])
        ]

        response = self.client.get(reverse("team_join_requests", args=[self.team.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["team_id"], self.team.id)
        self.assertEqual(response.data["total"], 1)
        self.assertEqual(response.data["profiles"][0]["skills"], ["Python", "Docker"])

    @patch("teamup.views.join_request.TeamService.add_join_request")
    def test_request_to_join(self, mock_add_join_request):
        response = self.client.post(reverse("team_join_requests", args=[self.team.id]))

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data, {"message": AppMessages.JOIN_REQUEST_SENT})
        mock_add_join_request.assert_called_once_with(self.team.id, LEAD_ID, requested_by=LEAD_ID)

    @patch("teamup.views.join_request.TeamService.add_join_request")
    def test_request_to_join_as_member_conflicts(self, mock_add_join_request):
        mock_add_join_request.side_effect = DuplicateTeamMemberException(LEAD_ID)

        response = self.client.post(reverse("team_join_requests", args=[self.team.id]))

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)


class AcceptJoinRequestViewTests(AuthenticatedViewTestCase):
    @patch("teamup.views.join_request.TeamService.accept_join_request")
    @patch("teamup.views.join_request.UserProfileService.build_team_member")
    def test_accept(self, mock_build_member, mock_accept):
        member = TeamMemberDTO(id=REQUESTER_ID, name="Riley Requester")
        mock_build_member.return_value = member
        mock_accept.return_value = self.team

        response = self.client.post(reverse("accept_join_request", args=[self.team.id, REQUESTER_ID]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], AppMessages.JOIN_REQUEST_ACCEPTED)
        mock_build_member.assert_called_once_with(REQUESTER_ID)
        mock_accept.assert_called_once_with(self.team.id, member, requested_by=LEAD_ID)

    @patch("teamup.views.join_request.TeamService.accept_join_request")
    @patch("teamup.views.join_request.UserProfileService.build_team_member")
    def test_accept_into_full_team(self, mock_build_member, mock_accept):
        mock_build_member.return_value = TeamMemberDTO(id=REQUESTER_ID)
        mock_accept.side_effect = TeamCapacityException(4)

        response = self.client.post(reverse("accept_join_request", args=[self.team.id, REQUESTER_ID]))

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    @patch("teamup.services.team_service.TeamRepository.add_member")
    @patch("teamup.services.team_service.TeamRepository.get_by_id")
    @patch("teamup.views.join_request.UserProfileService.build_team_member")
    def test_accepting_yourself_without_a_request_is_not_found(self, mock_build, mock_get_by_id, mock_add_member):
        other_team = TeamModel(**team_db_data[1])
        mock_build.return_value = TeamMemberDTO(id=LEAD_ID)
        mock_get_by_id.return_value = other_team

        response = self.client.post(reverse("accept_join_request", args=[other_team.id, LEAD_ID]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], ApiErrors.JOIN_REQUEST_NOT_FOUND.format(LEAD_ID))
        mock_add_member.assert_not_called()


class TeamJoinRequestDetailViewTests(AuthenticatedViewTestCase):
    @patch("teamup.views.join_request.TeamService.reject_join_request")
    def test_reject(self, mock_reject):
        response = self.client.delete(reverse("team_join_request_detail", args=[self.team.id, REQUESTER_ID]))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        mock_reject.assert_called_once_with(self.team.id, REQUESTER_ID, requested_by=LEAD_ID)

    @patch("teamup.views.join_request.TeamService.reject_join_request")
    def test_reject_by_outsider_forbidden(self, mock_reject):
        mock_reject.side_effect = TeamActionForbiddenException()

        response = self.client.delete(reverse("team_join_request_detail", args=[self.team.id, REQUESTER_ID]))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class UserJoinRequestListViewTests(AuthenticatedViewTestCase):
    @patch("teamup.views.join_request.TeamService.get_teams_with_join_request_from_user")
    def test_lists_pending_requests(self, mock_get_teams):
        mock_get_teams.return_value = [self.team]

        response = self.client.get(reverse("user_join_requests"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["total"], 1)
        mock_get_teams.assert_called_once_with(LEAD_ID)
