from unittest import TestCase
from pydantic import ValidationError

from teamup.models.team import TeamModel, TeamMemberModel
from teamup.tests.fixtures.team import team_db_data


class TeamModelTest(TestCase):
    def setUp(self) -> None:
        self.valid_team_data = team_db_data[0]

    def test_team_model_reads_document_id_alias(self):
        team = TeamModel(**self.valid_team_data)

        self.assertEqual(team.id, self.valid_team_data["_id"])
        self.assertEqual(team.model_dump(by_alias=True)["_id"], self.valid_team_data["_id"])

    def test_team_model_throws_error_when_missing_required_fields(self):
        required_fields = ["hackathon_id", "hackathon_name", "team_code", "created_by"]

        for field in required_fields:
            with self.subTest(f"missing field: {field}"):
                incomplete_data = self.valid_team_data.copy()
                incomplete_data.pop(field, None)

                with self.assertRaises(ValidationError) as context:
                    TeamModel(**incomplete_data)

                error_fields = [e["loc"][0] for e in context.exception.errors()]
                self.assertIn(field, error_fields)

    def test_team_model_applies_defaults(self):
        team = TeamModel(hackathon_id="h", hackathon_name="H", team_code="ABCDEF", created_by="u")

        self.assertEqual(team.max_members, 4)
        self.assertEqual(team.members, [])
        self.assertEqual(team.join_requests, [])
        self.assertIsNotNone(team.created_at.tzinfo)

    def test_is_full_and_has_member(self):
        team = TeamModel(**team_db_data[1])

        self.assertTrue(team.is_full)
        self.assertTrue(team.has_member("user-a"))
        self.assertFalse(team.has_member("user-z"))
        self.assertFalse(TeamModel(**self.valid_team_data).is_full)

    def test_member_defaults_and_avatar_omitted_when_absent(self):
        member = TeamMemberModel(id="user-1")

        self.assertEqual(member.name, "Anonymous")
        self.assertEqual(member.role, "Member")
        self.assertNotIn("avatar", member.model_dump(exclude_none=True))
