from typing import List
from pydantic import BaseModel
from teamup.dto.skill_match_dto import SkillMatchDTO


class SkillMatchResponse(BaseModel):
    team_id: str
    matches: List[SkillMatchDTO] = []
    total: int = 0
