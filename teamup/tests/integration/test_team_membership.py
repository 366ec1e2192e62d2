from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch
from rest_framework import status
from rest_framework.reverse import reverse

from teamup.constants.team import TeamMemberRole
from teamup.dto.team_dto import CreateTeamDTO, TeamMemberDTO, UpdateTeamDTO
from teamup.exceptions.team_exceptions import (
    DuplicateTeamMemberException,
    JoinRequestNotFoundException,
    TeamCapacityException,
    TeamMembershipConflictException,
)
from teamup.services.team_service import TeamService
from teamup.tests.integration.base_mongo_test import AuthenticatedMongoTestCase, BaseMongoTestCase


def member(user_id: str, role: TeamMemberRole = TeamMemberRole.MEMBER) -> TeamMemberDTO:
    return TeamMemberDTO(id=user_id, name=f"Name {user_id}", role=role.value)


class TeamMembershipIntegrationTests(BaseMongoTestCase):
    def _create_team(self, max_members=3, members=None, **overrides) -> str:
        data = {
            "name": "Integration Team",
            "hackathon_id": "hack-1",
            "hackathon_name": "Hack One",
            "created_by": "lead",
            "max_members": max_members,
            "members": members if members is not None else [member("lead", TeamMemberRole.TEAM_LEAD)],
            "required_skills": ["Python"],
        }
        data.update(overrides)
        return TeamService.create_team(CreateTeamDTO(**data))

    def test_create_team_persists_defaults_and_unique_code(self):
        team_id = self._create_team()

        stored = self.db.teams.find_one({"_id": team_id})
        self.assertEqual(stored["join_requests"], [])
        self.assertEqual(len(stored["team_code"]), 6)
        self.assertEqual(self.db.audit_logs.count_documents({"team_id": team_id, "action": "team_created"}), 1)

    def test_created_team_reads_back_as_written(self):
        dto = CreateTeamDTO(
            name="Round Trip",
            description="Reads back intact",
            hackathon_id="hack-rt",
            hackathon_name="Round Trip Hack",
            created_by="lead",
            max_members=5,
            required_skills=["React", "Python"],
            members=[member("lead", TeamMemberRole.TEAM_LEAD)],
        )

        team_id = TeamService.create_team(dto)
        team = TeamService.get_team(team_id)

        self.assertEqual(team.id, team_id)
        self.assertRegex(team.team_code, r"^[0-9A-Z]{6}$")
        self.assertEqual(team.join_requests, [])
        self.assertEqual(team.model_dump(include=set(CreateTeamDTO.model_fields)), dto.model_dump())

    def test_create_team_retries_when_code_is_taken(self):
        first_id = self._create_team()
        taken_code = self.db.teams.find_one({"_id": first_id})["team_code"]

        with patch("teamup.services.team_service.generate_team_code", side_effect=[taken_code, "NEWCDE"]):
            second_id = self._create_team()

        self.assertEqual(self.db.teams.find_one({"_id": second_id})["team_code"], "NEWCDE")

    def test_get_team_by_code_ignores_case_and_padding(self):
        team_id = self._create_team()
        code = self.db.teams.find_one({"_id": team_id})["team_code"]

        team = TeamService.get_team_by_code(f"  {code.lower()} ")

        self.assertEqual(team.id, team_id)

    def test_add_member_until_full_then_capacity_error(self):
        team_id = self._create_team(max_members=2)
        TeamService.add_team_member(team_id, member("second"))

        with self.assertRaises(TeamCapacityException):
            TeamService.add_team_member(team_id, member("third"))

        self.assertEqual(len(self.db.teams.find_one({"_id": team_id})["members"]), 2)

    def test_get_user_teams_finds_teams_by_member_id(self):
        team_id = self._create_team()
        TeamService.add_team_member(team_id, TeamMemberDTO(id="joiner", name="Renamed Later"))
        self.db.teams.update_one({"_id": team_id, "members.id": "joiner"}, {"$set": {"members.$.name": "Other"}})

        teams = TeamService.get_user_teams("joiner")

        self.assertEqual([team.id for team in teams], [team_id])

    def test_accept_join_request_moves_user_from_requests_to_members(self):
        team_id = self._create_team()
        TeamService.add_join_request(team_id, "requester")
        TeamService.add_join_request(team_id, "requester")

        self.assertEqual(self.db.teams.find_one({"_id": team_id})["join_requests"], ["requester"])

        TeamService.accept_join_request(team_id, member("requester"))

        stored = self.db.teams.find_one({"_id": team_id})
        self.assertEqual(stored["join_requests"], [])
        self.assertIn("requester", [m["id"] for m in stored["members"]])

    def test_user_without_request_cannot_accept_themselves(self):
        team_id = self._create_team()

        with self.assertRaises(JoinRequestNotFoundException):
            TeamService.accept_join_request(team_id, member("stranger"), requested_by="stranger")

        self.assertEqual([m["id"] for m in self.db.teams.find_one({"_id": team_id})["members"]], ["lead"])

    def test_join_request_from_member_is_rejected(self):
        team_id = self._create_team()

        with self.assertRaises(DuplicateTeamMemberException):
            TeamService.add_join_request(team_id, "lead")

        self.assertEqual(self.db.teams.find_one({"_id": team_id})["join_requests"], [])

    def test_concurrent_accepts_never_exceed_capacity(self):
        team_id = self._create_team(max_members=2)
        candidates = [f"candidate-{i}" for i in range(6)]
        for candidate in candidates:
            TeamService.add_join_request(team_id, candidate)

        def accept(candidate):
            try:
                TeamService.accept_join_request(team_id, member(candidate))
                return True
            except (TeamCapacityException, TeamMembershipConflictException):
                return False

        with ThreadPoolExecutor(max_workers=len(candidates)) as executor:
            results = list(executor.map(accept, candidates))

        stored = self.db.teams.find_one({"_id": team_id})
        self.assertEqual(results.count(True), 1)
        self.assertEqual(len(stored["members"]), 2)

    def test_update_changes_only_supplied_fields(self):
        team_id = self._create_team()
        before = TeamService.get_team(team_id)

        TeamService.update_team(team_id, UpdateTeamDTO(name="Renamed"))

        after = TeamService.get_team(team_id)
        self.assertEqual(after.name, "Renamed")
        self.assertEqual(after.model_dump(exclude={"name"}), before.model_dump(exclude={"name"}))

    def test_removals_are_idempotent(self):
        team_id = self._create_team()
        TeamService.add_team_member(team_id, member("second"))

        TeamService.remove_team_member(team_id, "second")
        TeamService.remove_team_member(team_id, "second")
        TeamService.reject_join_request(team_id, "nobody")

        stored = self.db.teams.find_one({"_id": team_id})
        self.assertEqual([m["id"] for m in stored["members"]], ["lead"])


class TeamApiIntegrationTests(AuthenticatedMongoTestCase):
    def test_create_team_adds_creator_as_team_lead(self):
        response = self.client.post(
            reverse("teams"),
            data={"name": "API Team", "hackathon_id": "hack-9", "hackathon_name": "Hack Nine"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        team = response.json()["team"]
        self.assertEqual(team["created_by"], self.user_id)
        self.assertEqual(team["max_members"], 4)
        self.assertEqual(team["members"][0]["id"], self.user_id)
        self.assertEqual(team["members"][0]["role"], "Team Lead")
        self.assertEqual(team["members"][0]["name"], self.user_data["name"])

    def test_get_unknown_team_returns_404(self):
        response = self.client.get(reverse("team_detail", args=["does-not-exist"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()["statusCode"], 404)
