import jwt
from datetime import datetime, timedelta, timezone
from django.conf import settings

from teamup.exceptions.auth_exceptions import (
    TokenExpiredError,
    TokenInvalidError,
    RefreshTokenExpiredError,
)

from teamup.constants.messages import AuthErrorMessages

TOKEN_ISSUER = "teamup-auth"


def _build_payload(user_data: dict, token_type: str, lifetime: int) -> dict:
    now = datetime.now(timezone.utc)
    expiry = now + timedelta(seconds=lifetime)

    payload = {
        "iss": TOKEN_ISSUER,
        "exp": int(expiry.timestamp()),
        "iat": int(now.timestamp()),
        "sub": user_data["user_id"],
        "user_id": user_data["user_id"],
        "token_type": token_type,
    }
    if user_data.get("name"):
        payload["name"] = user_data["name"]
    if user_data.get("picture"):
        payload["picture"] = user_data["picture"]
    return payload


def generate_access_token(user_data: dict) -> str:
    try:
        payload = _build_payload(user_data, "access", settings.JWT_CONFIG.get("ACCESS_TOKEN_LIFETIME"))
        token = jwt.encode(
            payload=payload,
            key=settings.JWT_CONFIG.get("PRIVATE_KEY"),
            algorithm=settings.JWT_CONFIG.get("ALGORITHM"),
        )
        return token

    except Exception as e:
        raise TokenInvalidError(f"Token generation failed: {str(e)}")


def generate_refresh_token(user_data: dict) -> str:
    try:
        payload = _build_payload(user_data, "refresh", settings.JWT_CONFIG.get("REFRESH_TOKEN_LIFETIME"))
        token = jwt.encode(
            payload=payload,
            key=settings.JWT_CONFIG.get("PRIVATE_KEY"),
            algorithm=settings.JWT_CONFIG.get("ALGORITHM"),
        )
        return token

    except Exception as e:
        raise TokenInvalidError(f"Refresh token generation failed: {str(e)}")


def _decode(token: str) -> dict:
    return jwt.decode(
        jwt=token,
        key=settings.JWT_CONFIG.get("PUBLIC_KEY"),
        algorithms=[settings.JWT_CONFIG.get("ALGORITHM")],
    )


def validate_access_token(token: str) -> dict:
    try:
        payload = _decode(token)
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError()
    except jwt.InvalidTokenError as e:
        raise TokenInvalidError(f"Invalid token: {str(e)}")

    if payload.get("token_type") != "access" or not payload.get("user_id"):
        raise TokenInvalidError(AuthErrorMessages.TOKEN_INVALID)
    return payload


def validate_refresh_token(token: str) -> dict:
    try:
        payload = _decode(token)
    except jwt.ExpiredSignatureError:
        raise RefreshTokenExpiredError()
    except jwt.InvalidTokenError as e:
        raise TokenInvalidError(f"Invalid refresh token: {str(e)}")

    if payload.get("token_type") != "refresh" or not payload.get("user_id"):
        raise TokenInvalidError(AuthErrorMessages.TOKEN_INVALID)
    return payload
