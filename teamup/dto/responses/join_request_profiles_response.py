from typing import List
from pydantic import BaseModel
from teamup.dto.user_profile_dto import JoinRequestProfileDTO


class JoinRequestProfilesResponse(BaseModel):
    team_id: str
    profiles: List[JoinRequestProfileDTO] = []
    total: int = 0
