from pydantic import BaseModel, Field
from typing import List, Optional

from teamup.models.user_profile import (
    SkillModel,
    ExperienceModel,
    EducationModel,
    ProjectModel,
    ProfileLinksModel,
)


class UserProfileDTO(BaseModel):
    id: str
    name: str = ""
    title: str = ""
    bio: str = ""
    location: str = ""
    timezone: str = ""
    email: str = ""
    phone: Optional[str] = None
    profile_picture: Optional[str] = None
    technical_skills: List[SkillModel] = []
    soft_skills: List[str] = []
    languages: List[str] = []
    tools: List[str] = []
    experiences: List[ExperienceModel] = []
    education: List[EducationModel] = []
    projects: List[ProjectModel] = []
    links: ProfileLinksModel = Field(default_factory=ProfileLinksModel)


class JoinRequestProfileDTO(BaseModel):
    """Short profile shown to a team lead reviewing join requests."""

    id: str
    name: str
    title: str = ""
    profile_picture: Optional[str] = None
    skills: List[str] = []
