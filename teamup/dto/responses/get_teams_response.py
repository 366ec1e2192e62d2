from typing import List
from pydantic import BaseModel
from teamup.dto.team_dto import TeamDTO


class GetTeamsResponse(BaseModel):
    teams: List[TeamDTO] = []
    total: int = 0


class TeamActionResponse(BaseModel):
    team: TeamDTO | None = None
    message: str
