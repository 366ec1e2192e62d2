from pydantic import BaseModel, Field
from typing import ClassVar, List, Optional
from datetime import datetime, timezone

from teamup.constants.team import DEFAULT_MAX_MEMBERS, DEFAULT_MEMBER_NAME, TeamMemberRole
from teamup.models.common.document import Document


class TeamMemberModel(BaseModel):
    """
    Display copy of a user embedded in a team.

    name, avatar and skills are snapshots taken when the member was added and are
    only refreshed by an explicit reconciliation step.
    """

    id: str
    name: str = DEFAULT_MEMBER_NAME
    role: str = TeamMemberRole.MEMBER.value
    skills: List[str] = []
    avatar: Optional[str] = None


class TeamModel(Document):
    """
    Model for hackathon teams.
    """

    collection_name: ClassVar[str] = "teams"

    name: str = ""
    description: str = ""
    hackathon_id: str
    hackathon_name: str
    team_code: str
    members: List[TeamMemberModel] = []
    required_skills: List[str] = []
    max_members: int = DEFAULT_MAX_MEMBERS
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    created_by: str
    join_requests: List[str] = []

    def has_member(self, user_id: str) -> bool:
        return any(member.id == user_id for member in self.members)

    @property
    def is_full(self) -> bool:
        return len(self.members) >= self.max_members
