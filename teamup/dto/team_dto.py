from pydantic import BaseModel, field_validator
from typing import List, Optional
from datetime import datetime

from teamup.constants.team import DEFAULT_MAX_MEMBERS, DEFAULT_MEMBER_NAME, TeamMemberRole


class TeamMemberDTO(BaseModel):
    id: str
    name: str = DEFAULT_MEMBER_NAME
    role: str = TeamMemberRole.MEMBER.value
    skills: List[str] = []
    avatar: Optional[str] = None


class CreateTeamDTO(BaseModel):
    """
    Team creation data. Required hackathon and creator fields are checked by the
    service so that an empty value surfaces as a TeamValidationException.
    """

    name: str = ""
    description: str = ""
    hackathon_id: str = ""
    hackathon_name: str = ""
    required_skills: List[str] = []
    max_members: int = DEFAULT_MAX_MEMBERS
    created_by: str = ""
    members: List[TeamMemberDTO] = []

    @field_validator("name", "description", "hackathon_id", "hackathon_name", "created_by")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if value else ""

    @field_validator("required_skills")
    @classmethod
    def validate_required_skills(cls, value):
        """Drop blank entries. Repeated skills are kept as given."""
        return [skill.strip() for skill in value if skill.strip()]


class UpdateTeamDTO(BaseModel):
    """
    Partial team update. Only fields that were explicitly set are written.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    hackathon_id: Optional[str] = None
    hackathon_name: Optional[str] = None
    required_skills: Optional[List[str]] = None
    max_members: Optional[int] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value):
        if value is not None and not value.strip():
            raise ValueError("Team name cannot be blank")
        return value.strip() if value else None

    @field_validator("description")
    @classmethod
    def validate_description(cls, value):
        if value is not None:
            return value.strip()
        return value

    @field_validator("required_skills")
    @classmethod
    def validate_required_skills(cls, value):
        if value is None:
            return value
        return [skill.strip() for skill in value if skill.strip()]


class TeamDTO(BaseModel):
    id: str
    name: str
    description: str = ""
    hackathon_id: str
    hackathon_name: str
    team_code: str
    members: List[TeamMemberDTO] = []
    required_skills: List[str] = []
    max_members: int
    created_at: datetime
    created_by: str
    join_requests: List[str] = []
