import logging
from django.conf import settings
from rest_framework import status
from django.http import JsonResponse
from teamup.utils.jwt_utils import (
    validate_access_token,
    validate_refresh_token,
    generate_access_token,
)
from teamup.exceptions.auth_exceptions import (
    TokenExpiredError,
    TokenInvalidError,
    RefreshTokenExpiredError,
    TokenMissingError,
)
from teamup.constants.messages import AuthErrorMessages, ApiErrors
from teamup.dto.responses.error_response import ApiErrorResponse, ApiErrorDetail

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class JWTAuthenticationMiddleware:
    def __init__(self, get_response) -> None:
        self.get_response = get_response

    def __call__(self, request):
        path = request.path

        if self._is_public_path(path):
            return self.get_response(request)

        try:
            auth_success = self._try_authentication(request)
            if auth_success:
                response = self.get_response(request)
                return self._process_response(request, response)
            return self._handle_auth_error(TokenMissingError(AuthErrorMessages.AUTHENTICATION_REQUIRED))

        except (TokenMissingError, TokenExpiredError, TokenInvalidError) as e:
            return self._handle_auth_error(e)

    def _try_authentication(self, request) -> bool:
        bearer_token = self._get_bearer_token(request)
        if bearer_token:
            payload = validate_access_token(bearer_token)
            self._set_user_data(request, payload)
            return True

        access_token = request.COOKIES.get(settings.COOKIE_SETTINGS.get("ACCESS_COOKIE_NAME"))
        if access_token:
            try:
                payload = validate_access_token(access_token)
                self._set_user_data(request, payload)
                return True
            except (TokenExpiredError, TokenInvalidError):
                pass

        return self._try_refresh(request)

    def _try_refresh(self, request) -> bool:
        """Try to refresh access token"""
        refresh_token = request.COOKIES.get(settings.COOKIE_SETTINGS.get("REFRESH_COOKIE_NAME"))
        if not refresh_token:
            return False

        try:
            payload = validate_refresh_token(refresh_token)
        except (RefreshTokenExpiredError, TokenInvalidError) as e:
            logger.info(f"Refresh token rejected: {e}")
            return False

        user_data = {
            "user_id": payload["user_id"],
            "name": payload.get("name"),
            "picture": payload.get("picture"),
        }
        new_access_token = generate_access_token(user_data)

        self._set_user_data(request, payload)

        request._new_access_token = new_access_token
        request._access_token_expires = settings.JWT_CONFIG["ACCESS_TOKEN_LIFETIME"]

        return True

    def _get_bearer_token(self, request) -> str | None:
        header = request.headers.get("Authorization", "")
        if header.startswith(BEARER_PREFIX):
            return header[len(BEARER_PREFIX) :].strip() or None
        return None

    def _set_user_data(self, request, payload):
        """Identity comes from the token claims; profiles are looked up lazily by the services."""
        request.user_id = payload["user_id"]
        request.user_name = payload.get("name")
        request.user_avatar = payload.get("picture")

    def _process_response(self, request, response):
        """Process response and set new cookies if token was refreshed"""
        if hasattr(request, "_new_access_token"):
            config = self._get_cookie_config()
            response.set_cookie(
                settings.COOKIE_SETTINGS.get("ACCESS_COOKIE_NAME"),
                request._new_access_token,
                max_age=request._access_token_expires,
                **config,
            )
        return response

    def _get_cookie_config(self):
        return {
            "path": settings.COOKIE_SETTINGS.get("COOKIE_PATH", "/"),
            "domain": settings.COOKIE_SETTINGS.get("COOKIE_DOMAIN"),
            "secure": settings.COOKIE_SETTINGS.get("COOKIE_SECURE"),
            "httponly": True,
            "samesite": settings.COOKIE_SETTINGS.get("COOKIE_SAMESITE"),
        }

    def _is_public_path(self, path: str) -> bool:
        return any(path.startswith(public_path) for public_path in settings.PUBLIC_PATHS)

    def _handle_auth_error(self, exception):
        error_response = ApiErrorResponse(
            statusCode=status.HTTP_401_UNAUTHORIZED,
            message=str(exception),
            errors=[ApiErrorDetail(title=ApiErrors.AUTHENTICATION_FAILED, detail=str(exception))],
        )
        return JsonResponse(
            data=error_response.model_dump(mode="json", exclude_none=True),
            status=status.HTTP_401_UNAUTHORIZED,
        )


def get_current_user_info(request) -> dict | None:
    if not hasattr(request, "user_id"):
        return None

    return {
        "user_id": request.user_id,
        "name": getattr(request, "user_name", None),
        "avatar": getattr(request, "user_avatar", None),
    }
