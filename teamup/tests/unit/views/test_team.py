from unittest.mock import patch
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from teamup.constants.messages import ApiErrors, AppMessages, AuthErrorMessages, ValidationErrors
from teamup.dto.team_dto import CreateTeamDTO, TeamMemberDTO, UpdateTeamDTO
from teamup.exceptions.team_exceptions import (
    DuplicateTeamMemberException,
    TeamActionForbiddenException,
    TeamNotFoundException,
)
from teamup.tests.fixtures.team import LEAD_ID, MEMBER_ID
from teamup.tests.unit.views.base_view_test import AuthenticatedViewTestCase


class TeamListViewTests(AuthenticatedViewTestCase):
    @patch("teamup.views.team.TeamService.get_user_teams")
    def test_get_user_teams(self, mock_get_user_teams):
        mock_get_user_teams.return_value = [self.team]

        response = self.client.get(reverse("teams"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        mock_get_user_teams.assert_called_once_with(LEAD_ID)
        self.assertEqual(response.data["total"], 1)
        self.assertEqual(response.data["teams"][0]["team_code"], "AB12CD")

    def test_requires_authentication(self):
        response = APIClient().get(reverse("teams"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()["message"], AuthErrorMessages.AUTHENTICATION_REQUIRED)

    @patch("teamup.views.team.TeamService.get_team_or_raise")
    @patch("teamup.views.team.TeamService.create_team")
    @patch("teamup.views.team.UserProfileService.build_team_member")
    def test_create_team_adds_creator_as_team_lead(self, mock_build_member, mock_create_team, mock_get_team):
        lead = TeamMemberDTO(id=LEAD_ID, name="Lena Lead", role="Team Lead")
        mock_build_member.return_value = lead
        mock_create_team.return_value = self.team.id
        mock_get_team.return_value = self.team

        response = self.client.post(
            reverse("teams"),
            data={
                "name": "Byte Busters",
                "hackathon_id": "hack-2024",
                "hackathon_name": "Green Hack 2024",
                "required_skills": ["React", "Python", "Docker"],
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["message"], AppMessages.TEAM_CREATED)
        self.assertEqual(response.data["team"]["id"], self.team.id)

        dto = mock_create_team.call_args.args[0]
        self.assertIsInstance(dto, CreateTeamDTO)
        self.assertEqual(dto.created_by, LEAD_ID)
        self.assertEqual(dto.max_members, 4)
        self.assertEqual(dto.members, [lead])
        mock_build_member.assert_called_once()
        self.assertEqual(mock_build_member.call_args.kwargs["fallback_name"], "Lena Lead")

    @patch("teamup.views.team.TeamService.create_team")
    def test_create_team_rejects_out_of_range_max_members(self, mock_create_team):
        response = self.client.post(
            reverse("teams"),
            data={"name": "Too Big", "hackathon_id": "hack", "hackathon_name": "Hack", "max_members": 11},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"][0]["source"], {"parameter": "max_members"})
        mock_create_team.assert_not_called()


class TeamSearchViewTests(AuthenticatedViewTestCase):
    @patch("teamup.views.team.TeamService.search_teams_by_skills")
    def test_splits_comma_separated_skills(self, mock_search):
        mock_search.return_value = [self.team]

        response = self.client.get(reverse("search_teams"), {"skills": "React, Python,,"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        mock_search.assert_called_once_with(["React", "Python"])

    def test_blank_skills_rejected(self):
        response = self.client.get(reverse("search_teams"), {"skills": " , "})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"][0]["source"], {"parameter": "skills"})
        self.assertEqual(response.data["errors"][0]["detail"], ValidationErrors.NO_SEARCH_SKILLS)

    @patch("teamup.views.team.TeamService.get_available_teams")
    def test_available_teams(self, mock_available):
        mock_available.return_value = [self.team]

        response = self.client.get(reverse("available_teams"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["total"], 1)


class TeamCodeViewTests(AuthenticatedViewTestCase):
    @patch("teamup.views.team.TeamService.get_team_by_code")
    def test_get_team_by_code(self, mock_get_by_code):
        mock_get_by_code.return_value = self.team

        response = self.client.get(reverse("team_by_code", args=["ab12cd"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "Byte Busters")
        mock_get_by_code.assert_called_once_with("ab12cd")

    @patch("teamup.views.team.TeamService.get_team_by_code")
    def test_unknown_code_returns_404(self, mock_get_by_code):
        mock_get_by_code.return_value = None

        response = self.client.get(reverse("team_by_code", args=["zz00zz"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], ApiErrors.TEAM_CODE_NOT_FOUND.format("ZZ00ZZ"))

    @patch("teamup.views.team.TeamService.join_team_by_code")
    @patch("teamup.views.team.UserProfileService.build_team_member")
    def test_join_by_code_normalises_code(self, mock_build_member, mock_join):
        member = TeamMemberDTO(id=LEAD_ID, name="Lena Lead")
        mock_build_member.return_value = member
        mock_join.return_value = self.team

        response = self.client.post(reverse("join_team_by_code"), data={"team_code": " ab12cd "}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], AppMessages.TEAM_JOINED)
        mock_join.assert_called_once_with("AB12CD", member)

    @patch("teamup.views.team.TeamService.join_team_by_code")
    @patch("teamup.views.team.UserProfileService.build_team_member")
    def test_join_by_code_when_already_member(self, mock_build_member, mock_join):
        mock_build_member.return_value = TeamMemberDTO(id=LEAD_ID)
        mock_join.side_effect = DuplicateTeamMemberException(LEAD_ID)

        response = self.client.post(reverse("join_team_by_code"), data={"team_code": "AB12CD"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)


class TeamDetailViewTests(AuthenticatedViewTestCase):
    @patch("teamup.views.team.TeamService.get_team_or_raise")
    def test_get_team(self, mock_get_team):
        mock_get_team.return_value = self.team

        response = self.client.get(reverse("team_detail", args=[self.team.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["max_members"], 4)
        self.assertEqual(len(response.data["members"]), 2)

    @patch("teamup.views.team.TeamService.get_team_or_raise")
    def test_get_missing_team(self, mock_get_team):
        mock_get_team.side_effect = TeamNotFoundException("missing")

        response = self.client.get(reverse("team_detail", args=["missing"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["errors"][0]["source"], {"path": "team_id"})

    @patch("teamup.views.team.TeamService.update_team")
    def test_patch_passes_only_supplied_fields(self, mock_update_team):
        mock_update_team.return_value = self.team

        response = self.client.patch(
            reverse("team_detail", args=[self.team.id]), data={"max_members": 5}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        team_id, dto = mock_update_team.call_args.args
        self.assertEqual(team_id, self.team.id)
        self.assertIsInstance(dto, UpdateTeamDTO)
        self.assertEqual(dto.model_dump(exclude_unset=True), {"max_members": 5})
        self.assertEqual(mock_update_team.call_args.kwargs["requested_by"], LEAD_ID)

    def test_patch_with_empty_body_rejected(self):
        response = self.client.patch(reverse("team_detail", args=[self.team.id]), data={}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], ValidationErrors.EMPTY_UPDATE)

    @patch("teamup.views.team.TeamService.update_team")
    def test_patch_by_non_creator_forbidden(self, mock_update_team):
        mock_update_team.side_effect = TeamActionForbiddenException()

        response = self.client.patch(reverse("team_detail", args=[self.team.id]), data={"name": "X"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    @patch("teamup.views.team.TeamService.delete_team")
    def test_delete_team(self, mock_delete_team):
        response = self.client.delete(reverse("team_detail", args=[self.team.id]))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        mock_delete_team.assert_called_once_with(self.team.id, requested_by=LEAD_ID)


class TeamMemberViewTests(AuthenticatedViewTestCase):
    @patch("teamup.views.team.TeamService.remove_team_member")
    def test_remove_member(self, mock_remove):
        response = self.client.delete(reverse("team_member_detail", args=[self.team.id, MEMBER_ID]))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        mock_remove.assert_called_once_with(self.team.id, MEMBER_ID, requested_by=LEAD_ID)

    @patch("teamup.views.team.TeamService.refresh_member_snapshots")
    def test_refresh_members(self, mock_refresh):
        mock_refresh.return_value = self.team

        response = self.client.post(reverse("refresh_team_members", args=[self.team.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], AppMessages.MEMBERS_REFRESHED)
        mock_refresh.assert_called_once_with(self.team.id, requested_by=LEAD_ID)
