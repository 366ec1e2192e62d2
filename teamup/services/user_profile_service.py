import logging
from typing import List, Optional

from teamup.constants.team import DEFAULT_MEMBER_NAME, TeamMemberRole
from teamup.dto.team_dto import TeamMemberDTO
from teamup.dto.user_profile_dto import UserProfileDTO
from teamup.exceptions.user_profile_exceptions import UserProfileNotFoundException
from teamup.models.user_profile import UserProfileModel
from teamup.repositories.user_profile_repository import UserProfileRepository

logger = logging.getLogger(__name__)


class UserProfileService:
    @classmethod
    def get_profile(cls, user_id: str) -> Optional[UserProfileDTO]:
        profile = UserProfileRepository.get_by_id(user_id)
        if not profile:
            return None
        return cls.prepare_profile_dto(profile)

    @classmethod
    def get_profile_or_raise(cls, user_id: str) -> UserProfileDTO:
        profile = cls.get_profile(user_id)
        if not profile:
            raise UserProfileNotFoundException(user_id)
        return profile

    @classmethod
    def save_profile(cls, user_id: str, profile_data: dict) -> UserProfileDTO:
        """
        Merge the supplied fields into the user's stored profile.

        Args:
            user_id: Identity provider user id, also the profile document id
            profile_data: Validated profile fields; fields not present are left untouched

        Returns:
            UserProfileDTO of the profile after the merge
        """
        profile = UserProfileRepository.upsert(user_id, profile_data)
        logger.info(f"Saved profile for user {user_id} (fields: {', '.join(sorted(profile_data)) or 'none'})")
        return cls.prepare_profile_dto(profile)

    @classmethod
    def get_candidate_pool(cls) -> List[UserProfileModel]:
        return UserProfileRepository.get_all()

    @classmethod
    def build_team_member(
        cls,
        user_id: str,
        role: TeamMemberRole = TeamMemberRole.MEMBER,
        fallback_name: Optional[str] = None,
        fallback_avatar: Optional[str] = None,
    ) -> TeamMemberDTO:
        """
        Snapshot of a user for embedding into a team's member list. Profile data
        wins over the token claims passed as fallbacks.
        """
        profile = UserProfileRepository.get_by_id(user_id)
        name = (profile.name if profile else "") or fallback_name or DEFAULT_MEMBER_NAME
        avatar = (profile.profile_picture if profile else None) or fallback_avatar
        skills = profile.skill_names if profile else []
        return TeamMemberDTO(id=user_id, name=name, role=role.value, skills=skills, avatar=avatar)

    @classmethod
    def prepare_profile_dto(cls, profile: UserProfileModel) -> UserProfileDTO:
        return UserProfileDTO(**profile.model_dump(exclude={"id"}), id=profile.id)
