import logging
from typing import Callable, Iterable, List, Optional

from teamup.constants.skill_match import MATCH_THRESHOLD_PERCENTAGE
from teamup.constants.team import DEFAULT_MEMBER_NAME
from teamup.dto.skill_match_dto import SkillMatchDTO
from teamup.dto.team_dto import TeamDTO
from teamup.exceptions.skill_match_exceptions import NoRequiredSkillsException, NoSkillMatchesException
from teamup.models.user_profile import UserProfileModel
from teamup.services.team_service import TeamService
from teamup.services.user_profile_service import UserProfileService

logger = logging.getLogger(__name__)


class SkillMatchSession:
    """
    Caller-driven walk over a ranked list of candidates.

    The list is a snapshot taken when the session was started; it is not
    recomputed when the team changes. reset() rewinds to the first candidate.
    """

    def __init__(self, team_id: str, matches: List[SkillMatchDTO], on_match: Callable[[SkillMatchDTO], None]):
        self.team_id = team_id
        self.matches = list(matches)
        self._on_match = on_match
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def total(self) -> int:
        return len(self.matches)

    @property
    def is_exhausted(self) -> bool:
        return self._position >= len(self.matches)

    @property
    def current(self) -> Optional[SkillMatchDTO]:
        if self.is_exhausted:
            return None
        return self.matches[self._position]

    def match(self) -> Optional[SkillMatchDTO]:
        """
        Issue a join request for the current candidate, then advance.
        The cursor stays put if the join request fails.
        """
        candidate = self.current
        if candidate is None:
            return None
        self._on_match(candidate)
        self._position += 1
        return candidate

    def skip(self) -> Optional[SkillMatchDTO]:
        candidate = self.current
        if candidate is None:
            return None
        self._position += 1
        return candidate

    def reset(self) -> None:
        self._position = 0


class SkillMatchService:
    @classmethod
    def compute_matches(
        cls,
        team: TeamDTO,
        candidate_pool: Iterable[UserProfileModel],
        exclude_user_id: Optional[str] = None,
    ) -> List[SkillMatchDTO]:
        """
        Rank candidates by how many of the team's required skills they have.

        Args:
            team: Team with required_skills and members
            candidate_pool: Profiles to consider
            exclude_user_id: The requesting user, never suggested to themself

        Returns:
            Candidates with at least MATCH_THRESHOLD_PERCENTAGE match, best first.
            Equal percentages keep the pool order.

        Raises:
            NoRequiredSkillsException: If the team has no required skills
            NoSkillMatchesException: If no candidate reaches the threshold
        """
        if not team.required_skills:
            raise NoRequiredSkillsException()

        member_ids = {member.id for member in team.members}
        required_count = len(team.required_skills)
        matches = []

        for candidate in candidate_pool:
            if candidate.id in member_ids or candidate.id == exclude_user_id:
                continue
            if not candidate.technical_skills:
                continue

            candidate_skill_names = set(candidate.skill_names)
            matching_count = sum(1 for skill in team.required_skills if skill in candidate_skill_names)
            match_percentage = 100 * matching_count / required_count

            if match_percentage >= MATCH_THRESHOLD_PERCENTAGE:
                matches.append(
                    SkillMatchDTO(
                        id=candidate.id,
                        name=candidate.name or DEFAULT_MEMBER_NAME,
                        avatar=candidate.profile_picture,
                        title=candidate.title,
                        bio=candidate.bio,
                        skills=candidate.technical_skills,
                        match_percentage=match_percentage,
                    )
                )

        if not matches:
            raise NoSkillMatchesException()

        return sorted(matches, key=lambda match: match.match_percentage, reverse=True)

    @classmethod
    def find_matches(cls, team_id: str, requesting_user_id: Optional[str] = None) -> List[SkillMatchDTO]:
        team = TeamService.get_team_or_raise(team_id)
        if not team.required_skills:
            raise NoRequiredSkillsException()

        candidate_pool = UserProfileService.get_candidate_pool()
        matches = cls.compute_matches(team, candidate_pool, requesting_user_id)
        logger.info(f"Found {len(matches)} candidate(s) for team {team_id}")
        return matches

    @classmethod
    def start_session(cls, team_id: str, requesting_user_id: Optional[str] = None) -> SkillMatchSession:
        matches = cls.find_matches(team_id, requesting_user_id)

        def request_join(candidate: SkillMatchDTO) -> None:
            cls.match_candidate(team_id, candidate.id, requesting_user_id)

        return SkillMatchSession(team_id, matches, request_join)

    @classmethod
    def match_candidate(cls, team_id: str, candidate_id: str, requested_by: Optional[str] = None) -> None:
        """Record a join request on behalf of a suggested candidate."""
        TeamService.add_join_request(team_id, candidate_id, requested_by=requested_by)
        logger.info(f"Candidate {candidate_id} matched for team {team_id} by {requested_by}")
