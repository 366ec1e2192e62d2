from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.request import Request
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes

from teamup.constants.messages import AppMessages
from teamup.dto.responses.error_response import ApiErrorResponse
from teamup.dto.responses.get_teams_response import TeamActionResponse
from teamup.dto.responses.skill_match_response import SkillMatchResponse
from teamup.middlewares.jwt_auth import get_current_user_info
from teamup.services.skill_match_service import SkillMatchService
from teamup.views.team import TEAM_ID_PARAMETER


class SkillMatchListView(APIView):
    @extend_schema(
        operation_id="get_skill_matches",
        summary="Get ranked candidates for a team",
        description=(
            "Candidates whose technical skills cover at least 30% of the team's required skills, "
            "best match first. Team members and the requesting user are never suggested."
        ),
        tags=["skill-match"],
        parameters=[TEAM_ID_PARAMETER],
        responses={
            200: OpenApiResponse(response=SkillMatchResponse, description="Ranked candidates"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found or no candidate matches"),
            422: OpenApiResponse(response=ApiErrorResponse, description="Team has no required skills"),
        },
    )
    def get(self, request: Request, team_id: str):
        user = get_current_user_info(request)
        matches = SkillMatchService.find_matches(team_id, user["user_id"])
        response = SkillMatchResponse(team_id=team_id, matches=matches, total=len(matches))
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)


class SkillMatchCandidateView(APIView):
    @extend_schema(
        operation_id="match_candidate",
        summary="Match a suggested candidate",
        description="Record a join request for the candidate on behalf of the team.",
        tags=["skill-match"],
        parameters=[
            TEAM_ID_PARAMETER,
            OpenApiParameter(
                name="user_id",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.PATH,
                description="Id of the suggested candidate",
            ),
        ],
        request=None,
        responses={
            201: OpenApiResponse(response=TeamActionResponse, description="Join request recorded"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Not allowed to request on behalf of this user"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
            409: OpenApiResponse(response=ApiErrorResponse, description="Candidate is already a member"),
        },
    )
    def post(self, request: Request, team_id: str, user_id: str):
        user = get_current_user_info(request)
        SkillMatchService.match_candidate(team_id, user_id, requested_by=user["user_id"])
        response = TeamActionResponse(message=AppMessages.JOIN_REQUEST_SENT)
        return Response(data=response.model_dump(mode="json", exclude_none=True), status=status.HTTP_201_CREATED)
