import logging
from typing import List
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework import status
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.utils.serializer_helpers import ReturnDict
from django.conf import settings

from teamup.dto.responses.error_response import ApiErrorDetail, ApiErrorResponse, ApiErrorSource
from teamup.constants.messages import ApiErrors, AuthErrorMessages
from teamup.exceptions.team_exceptions import (
    TeamNotFoundException,
    TeamValidationException,
    DuplicateTeamMemberException,
    TeamCapacityException,
    TeamMembershipConflictException,
    TeamActionForbiddenException,
    JoinRequestNotFoundException,
)
from teamup.exceptions.skill_match_exceptions import NoRequiredSkillsException, NoSkillMatchesException
from teamup.exceptions.user_profile_exceptions import UserProfileNotFoundException
from .auth_exceptions import TokenExpiredError, TokenMissingError, TokenInvalidError

logger = logging.getLogger(__name__)


def format_validation_errors(errors) -> List[ApiErrorDetail]:
    formatted_errors = []
    if isinstance(errors, ReturnDict | dict):
        for field, messages in errors.items():
            details = messages if isinstance(messages, list) else [messages]
            for message_detail in details:
                if isinstance(message_detail, dict):
                    nested_errors = format_validation_errors(message_detail)
                    formatted_errors.extend(nested_errors)
                else:
                    formatted_errors.append(
                        ApiErrorDetail(
                            detail=str(message_detail),
                            title=ApiErrors.VALIDATION_ERROR,
                            source={ApiErrorSource.PARAMETER: field},
                        )
                    )
    elif isinstance(errors, list):
        for message_detail in errors:
            formatted_errors.append(ApiErrorDetail(detail=str(message_detail), title=ApiErrors.VALIDATION_ERROR))
    return formatted_errors


def _path_source(context, key: str):
    if context.get("kwargs", {}).get(key):
        return {ApiErrorSource.PATH: key}
    return None


def handle_exception(exc, context):
    response = drf_exception_handler(exc, context)

    error_list = []
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if isinstance(exc, TokenExpiredError):
        status_code = status.HTTP_401_UNAUTHORIZED
        error_list.append(
            ApiErrorDetail(
                source={ApiErrorSource.HEADER: "Authorization"},
                title=AuthErrorMessages.TOKEN_EXPIRED_TITLE,
                detail=str(exc),
            )
        )
    elif isinstance(exc, TokenMissingError):
        status_code = status.HTTP_401_UNAUTHORIZED
        error_list.append(
            ApiErrorDetail(
                source={ApiErrorSource.HEADER: "Authorization"},
                title=AuthErrorMessages.AUTHENTICATION_REQUIRED,
                detail=str(exc),
            )
        )
    elif isinstance(exc, TokenInvalidError):
        status_code = status.HTTP_401_UNAUTHORIZED
        error_list.append(
            ApiErrorDetail(
                source={ApiErrorSource.HEADER: "Authorization"},
                title=AuthErrorMessages.INVALID_TOKEN_TITLE,
                detail=str(exc),
            )
        )
    elif isinstance(exc, TeamNotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
        error_list.append(
            ApiErrorDetail(
                source=_path_source(context, "team_id"),
                title=ApiErrors.RESOURCE_NOT_FOUND_TITLE,
                detail=str(exc),
            )
        )
    elif isinstance(exc, JoinRequestNotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
        error_list.append(
            ApiErrorDetail(
                source=_path_source(context, "team_id"),
                title=ApiErrors.RESOURCE_NOT_FOUND_TITLE,
                detail=str(exc),
            )
        )
    elif isinstance(exc, UserProfileNotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
        error_list.append(
            ApiErrorDetail(
                source=_path_source(context, "user_id"),
                title=ApiErrors.RESOURCE_NOT_FOUND_TITLE,
                detail=str(exc),
            )
        )
    elif isinstance(exc, TeamValidationException):
        status_code = status.HTTP_400_BAD_REQUEST
        if exc.fields:
            for field in exc.fields:
                error_list.append(
                    ApiErrorDetail(
                        source={ApiErrorSource.PARAMETER: field},
                        title=ApiErrors.VALIDATION_ERROR,
                        detail=str(exc),
                    )
                )
        else:
            error_list.append(ApiErrorDetail(title=ApiErrors.VALIDATION_ERROR, detail=str(exc)))
    elif isinstance(exc, (DuplicateTeamMemberException, TeamCapacityException, TeamMembershipConflictException)):
        status_code = status.HTTP_409_CONFLICT
        error_list.append(
            ApiErrorDetail(
                source=_path_source(context, "team_id"),
                title=ApiErrors.CONFLICT_TITLE,
                detail=str(exc),
            )
        )
    elif isinstance(exc, TeamActionForbiddenException):
        status_code = status.HTTP_403_FORBIDDEN
        error_list.append(ApiErrorDetail(title=ApiErrors.FORBIDDEN_TITLE, detail=str(exc)))
    elif isinstance(exc, NoRequiredSkillsException):
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        error_list.append(
            ApiErrorDetail(
                source=_path_source(context, "team_id"),
                title=ApiErrors.SKILL_MATCH_UNAVAILABLE,
                detail=str(exc),
            )
        )
    elif isinstance(exc, NoSkillMatchesException):
        status_code = status.HTTP_404_NOT_FOUND
        error_list.append(
            ApiErrorDetail(
                source=_path_source(context, "team_id"),
                title=ApiErrors.SKILL_MATCH_UNAVAILABLE,
                detail=str(exc),
            )
        )
    elif isinstance(exc, DRFValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
        error_list = format_validation_errors(exc.detail)
        if not error_list and exc.detail:
            error_list.append(ApiErrorDetail(detail=str(exc.detail), title=ApiErrors.VALIDATION_ERROR))

    else:
        if response is not None:
            status_code = response.status_code
            if isinstance(response.data, dict) and "detail" in response.data:
                detail_str = str(response.data["detail"])
                error_list.append(ApiErrorDetail(detail=detail_str, title=detail_str))
            elif isinstance(response.data, list):
                for item_error in response.data:
                    error_list.append(ApiErrorDetail(detail=str(item_error), title=str(exc)))
            else:
                error_list.append(
                    ApiErrorDetail(
                        detail=str(response.data) if settings.DEBUG else ApiErrors.INTERNAL_SERVER_ERROR,
                        title=str(exc),
                    )
                )
        else:
            logger.exception(f"Unhandled error while processing request: {exc}")
            error_list.append(
                ApiErrorDetail(
                    detail=str(exc) if settings.DEBUG else ApiErrors.INTERNAL_SERVER_ERROR,
                    title=ApiErrors.UNEXPECTED_ERROR_OCCURRED,
                )
            )

    final_response_data = ApiErrorResponse(
        statusCode=status_code,
        message=str(exc) if not error_list else error_list[0].detail,
        errors=error_list,
    )
    return Response(data=final_response_data.model_dump(mode="json", exclude_none=True), status=status_code)
