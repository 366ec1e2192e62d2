from pydantic import BaseModel, Field
from typing import ClassVar, List, Optional

from teamup.constants.skill_match import SkillCategory, SkillProficiency
from teamup.models.common.document import Document


class SkillModel(BaseModel):
    name: str
    category: SkillCategory = SkillCategory.OTHER
    proficiency: SkillProficiency = SkillProficiency.BEGINNER


class ExperienceModel(BaseModel):
    id: str
    title: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    technologies: List[str] = []
    type: str = "project"


class EducationModel(BaseModel):
    id: str
    institution: str = ""
    degree: str = ""
    major: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: Optional[str] = None
    relevant_coursework: List[str] = []


class ProjectModel(BaseModel):
    id: str
    name: str = ""
    description: str = ""
    technologies: List[str] = []
    role: str = ""
    start_date: str = ""
    end_date: str = ""
    demo_link: Optional[str] = None
    repo_link: Optional[str] = None


class ProfileLinksModel(BaseModel):
    github: Optional[str] = None
    linkedin: Optional[str] = None
    portfolio: Optional[str] = None
    devpost: Optional[str] = None
    twitter: Optional[str] = None
    other: List[str] = []


class UserProfileModel(Document):
    """
    Model for user profiles. The document id is the identity provider's user id.
    """

    collection_name: ClassVar[str] = "user_profiles"

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

    @property
    def skill_names(self) -> List[str]:
        return [skill.name for skill in self.technical_skills]
