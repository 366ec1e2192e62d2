from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.request import Request
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes

from teamup.constants.messages import ApiErrors, AppMessages
from teamup.constants.team import TeamMemberRole
from teamup.dto.responses.create_team_response import CreateTeamResponse
from teamup.dto.responses.error_response import ApiErrorResponse
from teamup.dto.responses.get_teams_response import GetTeamsResponse, TeamActionResponse
from teamup.dto.team_dto import CreateTeamDTO, TeamDTO, UpdateTeamDTO
from teamup.exceptions.team_exceptions import TeamNotFoundException
from teamup.middlewares.jwt_auth import get_current_user_info
from teamup.serializers.create_team_serializer import CreateTeamSerializer, JoinTeamByCodeSerializer
from teamup.serializers.skill_search_serializer import SkillSearchSerializer
from teamup.serializers.update_team_serializer import UpdateTeamSerializer
from teamup.services.team_service import TeamService
from teamup.services.user_profile_service import UserProfileService

TEAM_ID_PARAMETER = OpenApiParameter(
    name="team_id",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.PATH,
    description="Unique identifier of the team",
)


def build_member_for_current_user(request: Request, role: TeamMemberRole = TeamMemberRole.MEMBER):
    user = get_current_user_info(request)
    return UserProfileService.build_team_member(
        user["user_id"],
        role=role,
        fallback_name=user["name"],
        fallback_avatar=user["avatar"],
    )


def teams_response(teams) -> Response:
    response = GetTeamsResponse(teams=teams, total=len(teams))
    return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)


class TeamListView(APIView):
    @extend_schema(
        operation_id="get_user_teams",
        summary="Get the authenticated user's teams",
        description="List every team the authenticated user is a member of.",
        tags=["teams"],
        responses={
            200: OpenApiResponse(response=GetTeamsResponse, description="Teams returned successfully"),
            401: OpenApiResponse(response=ApiErrorResponse, description="Unauthorized"),
        },
    )
    def get(self, request: Request):
        user = get_current_user_info(request)
        return teams_response(TeamService.get_user_teams(user["user_id"]))

    @extend_schema(
        operation_id="create_team",
        summary="Create a new team",
        description="Create a team for a hackathon. The creator joins as Team Lead and a team code is generated.",
        tags=["teams"],
        request=CreateTeamSerializer,
        responses={
            201: OpenApiResponse(response=CreateTeamResponse, description="Team created successfully"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request - validation error"),
            500: OpenApiResponse(response=ApiErrorResponse, description="Internal server error"),
        },
    )
    def post(self, request: Request):
        serializer = CreateTeamSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = get_current_user_info(request)
        team_lead = build_member_for_current_user(request, TeamMemberRole.TEAM_LEAD)
        dto = CreateTeamDTO(**serializer.validated_data, created_by=user["user_id"], members=[team_lead])

        team_id = TeamService.create_team(dto)
        response = CreateTeamResponse(team=TeamService.get_team_or_raise(team_id), message=AppMessages.TEAM_CREATED)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_201_CREATED)


class AvailableTeamListView(APIView):
    @extend_schema(
        operation_id="get_available_teams",
        summary="Get teams with free seats",
        tags=["teams"],
        responses={200: OpenApiResponse(response=GetTeamsResponse, description="Teams returned successfully")},
    )
    def get(self, request: Request):
        return teams_response(TeamService.get_available_teams())


class TeamSearchView(APIView):
    @extend_schema(
        operation_id="search_teams_by_skills",
        summary="Search teams by required skills",
        description="Teams whose required skills contain any of the given skills.",
        tags=["teams"],
        parameters=[
            OpenApiParameter(
                name="skills",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Comma separated skill names, e.g. React,Python",
                required=True,
            ),
        ],
        responses={
            200: OpenApiResponse(response=GetTeamsResponse, description="Teams returned successfully"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request - validation error"),
        },
    )
    def get(self, request: Request):
        query = SkillSearchSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        return teams_response(TeamService.search_teams_by_skills(query.validated_data["skills"]))


class TeamByCodeView(APIView):
    @extend_schema(
        operation_id="get_team_by_code",
        summary="Get team by team code",
        description="Look a team up by its 6-character code. Case and surrounding whitespace are ignored.",
        tags=["teams"],
        parameters=[
            OpenApiParameter(
                name="team_code",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.PATH,
                description="Team code shared by the team lead",
            ),
        ],
        responses={
            200: OpenApiResponse(response=TeamDTO, description="Team returned successfully"),
            404: OpenApiResponse(response=ApiErrorResponse, description="No team with this code"),
        },
    )
    def get(self, request: Request, team_code: str):
        team = TeamService.get_team_by_code(team_code)
        if not team:
            raise TeamNotFoundException(team_code.strip().upper(), message_template=ApiErrors.TEAM_CODE_NOT_FOUND)
        return Response(data=team.model_dump(mode="json"), status=status.HTTP_200_OK)


class JoinTeamByCodeView(APIView):
    @extend_schema(
        operation_id="join_team_by_code",
        summary="Join a team with its team code",
        tags=["teams"],
        request=JoinTeamByCodeSerializer,
        responses={
            200: OpenApiResponse(response=TeamActionResponse, description="Joined team successfully"),
            404: OpenApiResponse(response=ApiErrorResponse, description="No team with this code"),
            409: OpenApiResponse(response=ApiErrorResponse, description="Already a member or team is full"),
        },
    )
    def post(self, request: Request):
        serializer = JoinTeamByCodeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        member = build_member_for_current_user(request)
        team = TeamService.join_team_by_code(serializer.validated_data["team_code"], member)
        response = TeamActionResponse(team=team, message=AppMessages.TEAM_JOINED)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)


class TeamDetailView(APIView):
    @extend_schema(
        operation_id="get_team_by_id",
        summary="Get team by ID",
        tags=["teams"],
        parameters=[TEAM_ID_PARAMETER],
        responses={
            200: OpenApiResponse(response=TeamDTO, description="Team returned successfully"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
        },
    )
    def get(self, request: Request, team_id: str):
        team = TeamService.get_team_or_raise(team_id)
        return Response(data=team.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_team",
        summary="Update team details",
        description="Partially update a team. Only the team creator may update it; omitted fields are left untouched.",
        tags=["teams"],
        parameters=[TEAM_ID_PARAMETER],
        request=UpdateTeamSerializer,
        responses={
            200: OpenApiResponse(response=TeamActionResponse, description="Team updated successfully"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request - validation error"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Only the team creator can update the team"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
        },
    )
    def patch(self, request: Request, team_id: str):
        serializer = UpdateTeamSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        user = get_current_user_info(request)
        dto = UpdateTeamDTO(**serializer.validated_data)
        team = TeamService.update_team(team_id, dto, requested_by=user["user_id"])
        response = TeamActionResponse(team=team, message=AppMessages.TEAM_UPDATED)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_team",
        summary="Delete a team",
        tags=["teams"],
        parameters=[TEAM_ID_PARAMETER],
        responses={
            204: OpenApiResponse(description="Team deleted successfully"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Only the team creator can delete the team"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
        },
    )
    def delete(self, request: Request, team_id: str):
        user = get_current_user_info(request)
        TeamService.delete_team(team_id, requested_by=user["user_id"])
        return Response(status=status.HTTP_204_NO_CONTENT)


class RefreshTeamMembersView(APIView):
    @extend_schema(
        operation_id="refresh_team_members",
        summary="Refresh member names and avatars",
        description="Replace placeholder member names with the names stored in the members' profiles.",
        tags=["teams"],
        parameters=[TEAM_ID_PARAMETER],
        request=None,
        responses={
            200: OpenApiResponse(response=TeamActionResponse, description="Member details refreshed"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
        },
    )
    def post(self, request: Request, team_id: str):
        user = get_current_user_info(request)
        team = TeamService.refresh_member_snapshots(team_id, requested_by=user["user_id"])
        response = TeamActionResponse(team=team, message=AppMessages.MEMBERS_REFRESHED)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)


class TeamMemberDetailView(APIView):
    @extend_schema(
        operation_id="remove_team_member",
        summary="Remove a member or leave a team",
        description="The team creator may remove any member; any member may remove themselves.",
        tags=["teams"],
        parameters=[
            TEAM_ID_PARAMETER,
            OpenApiParameter(
                name="user_id",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.PATH,
                description="Id of the member to remove",
            ),
        ],
        responses={
            204: OpenApiResponse(description="Member removed"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Not allowed to remove this member"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
        },
    )
    def delete(self, request: Request, team_id: str, user_id: str):
        user = get_current_user_info(request)
        TeamService.remove_team_member(team_id, user_id, requested_by=user["user_id"])
        return Response(status=status.HTTP_204_NO_CONTENT)
