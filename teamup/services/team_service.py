import logging
from typing import List, Optional
from django.conf import settings
from pymongo.errors import DuplicateKeyError

from teamup.constants.messages import ApiErrors, RepositoryErrors, ValidationErrors
from teamup.constants.team import DEFAULT_MEMBER_NAME, REQUIRED_TEAM_FIELDS, TeamAuditAction
from teamup.dto.team_dto import CreateTeamDTO, TeamDTO, TeamMemberDTO, UpdateTeamDTO
from teamup.dto.user_profile_dto import JoinRequestProfileDTO
from teamup.exceptions.team_exceptions import (
    DuplicateTeamMemberException,
    JoinRequestNotFoundException,
    TeamActionForbiddenException,
    TeamCapacityException,
    TeamCodeGenerationException,
    TeamMembershipConflictException,
    TeamNotFoundException,
    TeamValidationException,
)
from teamup.models.audit_log import AuditLogModel
from teamup.models.team import TeamMemberModel, TeamModel
from teamup.repositories.audit_log_repository import AuditLogRepository
from teamup.repositories.team_repository import TeamRepository
from teamup.repositories.user_profile_repository import UserProfileRepository
from teamup.utils.team_code_utils import generate_team_code, normalize_team_code

logger = logging.getLogger(__name__)


class TeamService:
    @classmethod
    def create_team(cls, dto: CreateTeamDTO) -> str:
        """
        Create a new team with a freshly generated team code.

        Args:
            dto: Team creation data. members may already hold the creator as Team Lead.

        Returns:
            The id of the created team

        Raises:
            TeamValidationException: If hackathon_id, hackathon_name or created_by is empty,
                or the initial members break the capacity rule
            TeamCodeGenerationException: If no unused team code was found
        """
        missing_fields = [field for field in REQUIRED_TEAM_FIELDS if not getattr(dto, field)]
        if missing_fields:
            raise TeamValidationException(
                ValidationErrors.MISSING_REQUIRED_FIELDS.format(", ".join(missing_fields)),
                fields=missing_fields,
            )

        member_ids = [member.id for member in dto.members]
        if len(set(member_ids)) != len(member_ids):
            raise TeamValidationException(ValidationErrors.DUPLICATE_INITIAL_MEMBERS, fields=["members"])
        if len(member_ids) > dto.max_members:
            raise TeamValidationException(
                ValidationErrors.TOO_MANY_INITIAL_MEMBERS.format(dto.max_members), fields=["members"]
            )

        max_attempts = settings.TEAM_SETTINGS["TEAM_CODE_MAX_ATTEMPTS"]
        for attempt in range(1, max_attempts + 1):
            team = TeamModel(
                name=dto.name,
                description=dto.description,
                hackathon_id=dto.hackathon_id,
                hackathon_name=dto.hackathon_name,
                team_code=generate_team_code(),
                members=[TeamMemberModel(**member.model_dump()) for member in dto.members],
                required_skills=dto.required_skills,
                max_members=dto.max_members,
                created_by=dto.created_by,
            )
            try:
                created_team = TeamRepository.create(team)
            except DuplicateKeyError:
                logger.warning(f"Team code {team.team_code} already taken (attempt {attempt}/{max_attempts})")
                continue

            cls._audit(created_team.id, TeamAuditAction.TEAM_CREATED, dto.created_by)
            logger.info(f"Team {created_team.id} created by {dto.created_by} with code {created_team.team_code}")
            return created_team.id

        raise TeamCodeGenerationException(RepositoryErrors.TEAM_CODE_GENERATION_FAILED.format(max_attempts))

    @classmethod
    def get_team(cls, team_id: str) -> Optional[TeamDTO]:
        team = TeamRepository.get_by_id(team_id)
        return cls.prepare_team_dto(team) if team else None

    @classmethod
    def get_team_or_raise(cls, team_id: str) -> TeamDTO:
        return cls.prepare_team_dto(cls._get_team_model(team_id))

    @classmethod
    def get_team_by_code(cls, team_code: str) -> Optional[TeamDTO]:
        """
        Look a team up by its shareable code. Surrounding whitespace and letter case
        in the supplied code are ignored.
        """
        normalized_code = normalize_team_code(team_code)
        if not normalized_code:
            return None
        team = TeamRepository.get_by_team_code(normalized_code)
        return cls.prepare_team_dto(team) if team else None

    @classmethod
    def get_user_teams(cls, user_id: str) -> List[TeamDTO]:
        return [cls.prepare_team_dto(team) for team in TeamRepository.get_by_member_id(user_id)]

    @classmethod
    def get_available_teams(cls) -> List[TeamDTO]:
        teams = TeamRepository.get_all()
        return [cls.prepare_team_dto(team) for team in teams if not team.is_full]

    @classmethod
    def search_teams_by_skills(cls, skills: List[str]) -> List[TeamDTO]:
        if not skills:
            return []
        return [cls.prepare_team_dto(team) for team in TeamRepository.get_by_required_skills(skills)]

    @classmethod
    def get_teams_with_join_request_from_user(cls, user_id: str) -> List[TeamDTO]:
        return [cls.prepare_team_dto(team) for team in TeamRepository.get_by_join_request(user_id)]

    @classmethod
    def update_team(cls, team_id: str, dto: UpdateTeamDTO, requested_by: Optional[str] = None) -> TeamDTO:
        """
        Write only the fields that were explicitly set on the DTO.

        Raises:
            TeamNotFoundException: If the team does not exist
            TeamActionForbiddenException: If requested_by is not the team creator
            TeamValidationException: If max_members would drop below the member count
        """
        team = cls._get_team_model(team_id)
        cls._ensure_creator(team, requested_by)

        update_data = {key: value for key, value in dto.model_dump(exclude_unset=True).items() if value is not None}
        if not update_data:
            return cls.prepare_team_dto(team)

        member_limit = update_data.get("max_members")
        if member_limit is not None and member_limit < len(team.members):
            raise TeamValidationException(
                ValidationErrors.MAX_MEMBERS_BELOW_MEMBER_COUNT.format(len(team.members)), fields=["max_members"]
            )

        updated_team = TeamRepository.update(team_id, update_data, member_limit=member_limit)
        if not updated_team:
            if TeamRepository.get_by_id(team_id) is None:
                raise TeamNotFoundException(team_id)
            raise TeamMembershipConflictException(team_id)

        cls._audit(team_id, TeamAuditAction.TEAM_UPDATED, requested_by)
        logger.info(f"Team {team_id} updated ({', '.join(sorted(update_data))})")
        return cls.prepare_team_dto(updated_team)

    @classmethod
    def delete_team(cls, team_id: str, requested_by: Optional[str] = None) -> None:
        if requested_by is not None:
            cls._ensure_creator(cls._get_team_model(team_id), requested_by)

        if not TeamRepository.delete(team_id):
            raise TeamNotFoundException(team_id)

        cls._audit(team_id, TeamAuditAction.TEAM_DELETED, requested_by)
        logger.info(f"Team {team_id} deleted")

    @classmethod
    def add_team_member(cls, team_id: str, member: TeamMemberDTO) -> TeamDTO:
        """
        Add a member to a team.

        Raises:
            TeamNotFoundException: If the team does not exist
            DuplicateTeamMemberException: If the user is already a member
            TeamCapacityException: If the team already has max_members members
            TeamMembershipConflictException: If the team kept changing under concurrent writers
        """
        team = cls._add_member(team_id, member)
        cls._audit(team_id, TeamAuditAction.MEMBER_ADDED, member.id, member.id)
        logger.info(f"User {member.id} joined team {team_id}")
        return cls.prepare_team_dto(team)

    @classmethod
    def join_team_by_code(cls, team_code: str, member: TeamMemberDTO) -> TeamDTO:
        team = cls.get_team_by_code(team_code)
        if not team:
            raise TeamNotFoundException(normalize_team_code(team_code), message_template=ApiErrors.TEAM_CODE_NOT_FOUND)
        return cls.add_team_member(team.id, member)

    @classmethod
    def remove_team_member(cls, team_id: str, member_id: str, requested_by: Optional[str] = None) -> None:
        """
        Remove a member from a team. Removing a user who is not a member is a no-op.
        """
        if requested_by is not None:
            cls._ensure_creator_or_self(cls._get_team_model(team_id), requested_by, member_id)

        if not TeamRepository.remove_member(team_id, member_id):
            raise TeamNotFoundException(team_id)

        action = TeamAuditAction.MEMBER_LEFT if requested_by == member_id else TeamAuditAction.MEMBER_REMOVED
        cls._audit(team_id, action, requested_by, member_id)
        logger.info(f"User {member_id} removed from team {team_id}")

    @classmethod
    def add_join_request(cls, team_id: str, user_id: str, requested_by: Optional[str] = None) -> None:
        """
        Record a request from user_id to join the team. Repeating a request is a no-op.

        Raises:
            TeamNotFoundException: If the team does not exist
            DuplicateTeamMemberException: If the user is already a member
            TeamActionForbiddenException: If requested_by is neither the creator nor the user
        """
        if requested_by is not None:
            cls._ensure_creator_or_self(cls._get_team_model(team_id), requested_by, user_id)

        if TeamRepository.add_join_request(team_id, user_id) is None:
            if TeamRepository.get_by_id(team_id) is None:
                raise TeamNotFoundException(team_id)
            raise DuplicateTeamMemberException(user_id)

        cls._audit(team_id, TeamAuditAction.JOIN_REQUESTED, requested_by or user_id, user_id)
        logger.info(f"Join request from user {user_id} recorded for team {team_id}")

    @classmethod
    def accept_join_request(cls, team_id: str, member: TeamMemberDTO, requested_by: Optional[str] = None) -> TeamDTO:
        """
        Move a user from the team's join requests into its members.

        The member is added and the request removed by the same write. A user with
        no pending request cannot be accepted.

        Raises:
            DuplicateTeamMemberException: If the user is already a member
            JoinRequestNotFoundException: If the user has no pending join request
            TeamCapacityException: If the team is full
            TeamActionForbiddenException: If requested_by is neither the creator nor the user
        """
        if requested_by is not None:
            cls._ensure_creator_or_self(cls._get_team_model(team_id), requested_by, member.id)

        team = cls._add_member(team_id, member, require_join_request=True)
        cls._audit(team_id, TeamAuditAction.JOIN_REQUEST_ACCEPTED, requested_by, member.id)
        logger.info(f"Join request from user {member.id} accepted for team {team_id}")
        return cls.prepare_team_dto(team)

    @classmethod
    def reject_join_request(cls, team_id: str, user_id: str, requested_by: Optional[str] = None) -> None:
        if requested_by is not None:
            cls._ensure_creator_or_self(cls._get_team_model(team_id), requested_by, user_id)

        if not TeamRepository.remove_join_request(team_id, user_id):
            raise TeamNotFoundException(team_id)

        cls._audit(team_id, TeamAuditAction.JOIN_REQUEST_REJECTED, requested_by, user_id)
        logger.info(f"Join request from user {user_id} removed from team {team_id}")

    @classmethod
    def get_join_request_profiles(cls, team_id: str) -> List[JoinRequestProfileDTO]:
        """
        Profiles of the users waiting to join, in request order. Users without a
        stored profile are left out.
        """
        team = cls._get_team_model(team_id)
        profiles = {profile.id: profile for profile in UserProfileRepository.get_by_ids(team.join_requests)}

        result = []
        for user_id in team.join_requests:
            profile = profiles.get(user_id)
            if not profile:
                continue
            result.append(
                JoinRequestProfileDTO(
                    id=user_id,
                    name=profile.name or DEFAULT_MEMBER_NAME,
                    title=profile.title,
                    profile_picture=profile.profile_picture,
                    skills=profile.skill_names,
                )
            )
        return result

    @classmethod
    def refresh_member_snapshots(cls, team_id: str, requested_by: Optional[str] = None) -> TeamDTO:
        """
        Replace placeholder member names with the names from the members' profiles.

        A name is a placeholder when it is empty, the default "Anonymous" or an
        e-mail address. Members with a real name are left as they are.
        """
        team = cls._get_team_model(team_id)
        stale_ids = [member.id for member in team.members if cls._is_placeholder_name(member.name)]
        if not stale_ids:
            return cls.prepare_team_dto(team)

        refreshed = 0
        for profile in UserProfileRepository.get_by_ids(stale_ids):
            if not profile.name or cls._is_placeholder_name(profile.name):
                continue
            if TeamRepository.update_member_snapshot(team_id, profile.id, profile.name, profile.profile_picture):
                refreshed += 1

        if refreshed:
            cls._audit(team_id, TeamAuditAction.MEMBERS_REFRESHED, requested_by)
            logger.info(f"Refreshed {refreshed} member snapshot(s) in team {team_id}")
        return cls.get_team_or_raise(team_id)

    @classmethod
    def _add_member(cls, team_id: str, member: TeamMemberDTO, require_join_request: bool = False) -> TeamModel:
        """
        Validate against the current team, then apply a write that repeats the
        duplicate and capacity conditions. A write that matches nothing means the
        team changed in between, so the checks run again on a fresh read.
        """
        member_model = TeamMemberModel(**member.model_dump())
        max_attempts = settings.TEAM_SETTINGS["MEMBERSHIP_WRITE_ATTEMPTS"]

        for attempt in range(1, max_attempts + 1):
            team = cls._get_team_model(team_id)
            if team.has_member(member.id):
                raise DuplicateTeamMemberException(member.id)
            if require_join_request and member.id not in team.join_requests:
                raise JoinRequestNotFoundException(member.id)
            if team.is_full:
                raise TeamCapacityException(team.max_members)

            updated_team = TeamRepository.add_member(team_id, member_model, require_join_request)
            if updated_team:
                return updated_team

            logger.warning(
                f"Team {team_id} changed while adding user {member.id} (attempt {attempt}/{max_attempts})"
            )

        raise TeamMembershipConflictException(team_id)

    @classmethod
    def _get_team_model(cls, team_id: str) -> TeamModel:
        team = TeamRepository.get_by_id(team_id)
        if not team:
            raise TeamNotFoundException(team_id)
        return team

    @classmethod
    def _ensure_creator(cls, team: TeamModel, requested_by: Optional[str]) -> None:
        if requested_by is not None and requested_by != team.created_by:
            raise TeamActionForbiddenException()

    @classmethod
    def _ensure_creator_or_self(cls, team: TeamModel, requested_by: Optional[str], user_id: str) -> None:
        if requested_by is not None and requested_by not in (team.created_by, user_id):
            raise TeamActionForbiddenException(ApiErrors.CREATOR_OR_SELF_ALLOWED)

    @staticmethod
    def _is_placeholder_name(name: Optional[str]) -> bool:
        return not name or name == DEFAULT_MEMBER_NAME or "@" in name

    @classmethod
    def _audit(
        cls,
        team_id: str,
        action: TeamAuditAction,
        performed_by: Optional[str],
        target_user_id: Optional[str] = None,
    ) -> None:
        AuditLogRepository.create(
            AuditLogModel(
                team_id=team_id,
                action=action.value,
                performed_by=performed_by,
                target_user_id=target_user_id,
            )
        )

    @classmethod
    def prepare_team_dto(cls, team: TeamModel) -> TeamDTO:
        return TeamDTO(
            id=team.id,
            name=team.name,
            description=team.description,
            hackathon_id=team.hackathon_id,
            hackathon_name=team.hackathon_name,
            team_code=team.team_code,
            members=[TeamMemberDTO(**member.model_dump()) for member in team.members],
            required_skills=team.required_skills,
            max_members=team.max_members,
            created_at=team.created_at,
            created_by=team.created_by,
            join_requests=team.join_requests,
        )
