from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.request import Request
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes

from teamup.constants.messages import AppMessages
from teamup.dto.responses.error_response import ApiErrorResponse
from teamup.dto.responses.get_teams_response import GetTeamsResponse, TeamActionResponse
from teamup.dto.responses.join_request_profiles_response import JoinRequestProfilesResponse
from teamup.middlewares.jwt_auth import get_current_user_info
from teamup.services.team_service import TeamService
from teamup.services.user_profile_service import UserProfileService
from teamup.views.team import TEAM_ID_PARAMETER

USER_ID_PARAMETER = OpenApiParameter(
    name="user_id",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.PATH,
    description="Id of the user who asked to join",
)


class TeamJoinRequestListView(APIView):
    @extend_schema(
        operation_id="get_join_request_profiles",
        summary="Get profiles of users waiting to join",
        tags=["join-requests"],
        parameters=[TEAM_ID_PARAMETER],
        responses={
            200: OpenApiResponse(response=JoinRequestProfilesResponse, description="Requester profiles"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
        },
    )
    def get(self, request: Request, team_id: str):
        profiles = TeamService.get_join_request_profiles(team_id)
        response = JoinRequestProfilesResponse(team_id=team_id, profiles=profiles, total=len(profiles))
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="request_to_join_team",
        summary="Ask to join a team",
        description="Record a join request from the authenticated user. Asking twice is harmless.",
        tags=["join-requests"],
        parameters=[TEAM_ID_PARAMETER],
        request=None,
        responses={
            201: OpenApiResponse(response=TeamActionResponse, description="Join request recorded"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
            409: OpenApiResponse(response=ApiErrorResponse, description="Already a member"),
        },
    )
    def post(self, request: Request, team_id: str):
        user = get_current_user_info(request)
        TeamService.add_join_request(team_id, user["user_id"], requested_by=user["user_id"])
        response = TeamActionResponse(message=AppMessages.JOIN_REQUEST_SENT)
        return Response(data=response.model_dump(mode="json", exclude_none=True), status=status.HTTP_201_CREATED)


class AcceptJoinRequestView(APIView):
    @extend_schema(
        operation_id="accept_join_request",
        summary="Accept a join request",
        tags=["join-requests"],
        parameters=[TEAM_ID_PARAMETER, USER_ID_PARAMETER],
        request=None,
        responses={
            200: OpenApiResponse(response=TeamActionResponse, description="Join request accepted"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Not allowed to accept this request"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team or join request not found"),
            409: OpenApiResponse(response=ApiErrorResponse, description="Already a member or team is full"),
        },
    )
    def post(self, request: Request, team_id: str, user_id: str):
        user = get_current_user_info(request)
        member = UserProfileService.build_team_member(user_id)
        team = TeamService.accept_join_request(team_id, member, requested_by=user["user_id"])
        response = TeamActionResponse(team=team, message=AppMessages.JOIN_REQUEST_ACCEPTED)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)


class TeamJoinRequestDetailView(APIView):
    @extend_schema(
        operation_id="reject_join_request",
        summary="Reject or withdraw a join request",
        tags=["join-requests"],
        parameters=[TEAM_ID_PARAMETER, USER_ID_PARAMETER],
        responses={
            204: OpenApiResponse(description="Join request removed"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Not allowed to remove this request"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
        },
    )
    def delete(self, request: Request, team_id: str, user_id: str):
        user = get_current_user_info(request)
        TeamService.reject_join_request(team_id, user_id, requested_by=user["user_id"])
        return Response(status=status.HTTP_204_NO_CONTENT)


class UserJoinRequestListView(APIView):
    @extend_schema(
        operation_id="get_user_join_requests",
        summary="Get teams the authenticated user asked to join",
        tags=["join-requests"],
        responses={200: OpenApiResponse(response=GetTeamsResponse, description="Teams returned successfully")},
    )
    def get(self, request: Request):
        user = get_current_user_info(request)
        teams = TeamService.get_teams_with_join_request_from_user(user["user_id"])
        response = GetTeamsResponse(teams=teams, total=len(teams))
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)
