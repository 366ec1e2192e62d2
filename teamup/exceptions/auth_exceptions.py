from teamup.constants.messages import AuthErrorMessages


class BaseAuthException(Exception):
    """Raised while resolving the caller from a JWT. Always answered with 401."""

    default_message = AuthErrorMessages.TOKEN_INVALID

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class TokenExpiredError(BaseAuthException):
    default_message = AuthErrorMessages.TOKEN_EXPIRED


class TokenMissingError(BaseAuthException):
    default_message = AuthErrorMessages.NO_ACCESS_TOKEN


class TokenInvalidError(BaseAuthException):
    pass


class RefreshTokenExpiredError(BaseAuthException):
    default_message = AuthErrorMessages.REFRESH_TOKEN_EXPIRED
