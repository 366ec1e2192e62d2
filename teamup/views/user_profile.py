from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.request import Request
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes

from teamup.dto.responses.error_response import ApiErrorResponse
from teamup.dto.user_profile_dto import UserProfileDTO
from teamup.middlewares.jwt_auth import get_current_user_info
from teamup.serializers.user_profile_serializer import UserProfileSerializer
from teamup.services.user_profile_service import UserProfileService


class ProfileView(APIView):
    @extend_schema(
        operation_id="get_own_profile",
        summary="Get the authenticated user's profile",
        tags=["profiles"],
        responses={
            200: OpenApiResponse(response=UserProfileDTO, description="Profile returned successfully"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Profile not created yet"),
        },
    )
    def get(self, request: Request):
        user = get_current_user_info(request)
        profile = UserProfileService.get_profile_or_raise(user["user_id"])
        return Response(data=profile.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="save_own_profile",
        summary="Save the authenticated user's profile",
        description="Merge the supplied fields into the stored profile, creating it on first save.",
        tags=["profiles"],
        request=UserProfileSerializer,
        responses={
            200: OpenApiResponse(response=UserProfileDTO, description="Profile saved successfully"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request - validation error"),
        },
    )
    def put(self, request: Request):
        serializer = UserProfileSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        user = get_current_user_info(request)
        profile = UserProfileService.save_profile(user["user_id"], serializer.validated_data)
        return Response(data=profile.model_dump(mode="json"), status=status.HTTP_200_OK)


class UserProfileDetailView(APIView):
    @extend_schema(
        operation_id="get_user_profile",
        summary="Get another user's profile",
        tags=["profiles"],
        parameters=[
            OpenApiParameter(
                name="user_id",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.PATH,
                description="Id of the user",
            ),
        ],
        responses={
            200: OpenApiResponse(response=UserProfileDTO, description="Profile returned successfully"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Profile not found"),
        },
    )
    def get(self, request: Request, user_id: str):
        profile = UserProfileService.get_profile_or_raise(user_id)
        return Response(data=profile.model_dump(mode="json"), status=status.HTTP_200_OK)
