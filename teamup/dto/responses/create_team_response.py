from pydantic import BaseModel
from teamup.dto.team_dto import TeamDTO


class CreateTeamResponse(BaseModel):
    """Body of a successful team creation: the stored team, including its team code."""

    team: TeamDTO
    message: str
