from pydantic import BaseModel
from typing import List, Optional

from teamup.models.user_profile import SkillModel


class SkillMatchDTO(BaseModel):
    """
    A ranked candidate for a team.

    match_percentage is the share of the team's required skills found among the
    candidate's technical skills, in the range 0-100.
    """

    id: str
    name: str
    avatar: Optional[str] = None
    title: str = ""
    bio: str = ""
    skills: List[SkillModel] = []
    match_percentage: float
