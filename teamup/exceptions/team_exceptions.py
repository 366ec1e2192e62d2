from teamup.constants.messages import ApiErrors


class BaseTeamException(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TeamNotFoundException(BaseTeamException):
    def __init__(self, team_id: str | None = None, message_template: str = ApiErrors.TEAM_NOT_FOUND):
        if team_id:
            message = message_template.format(team_id)
        else:
            message = ApiErrors.TEAM_NOT_FOUND_GENERIC
        super().__init__(message)


class TeamValidationException(BaseTeamException):
    def __init__(self, message: str, fields: list[str] | None = None):
        self.fields = fields or []
        super().__init__(message)


class DuplicateTeamMemberException(BaseTeamException):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(ApiErrors.MEMBER_ALREADY_EXISTS.format(user_id))


class TeamCapacityException(BaseTeamException):
    def __init__(self, max_members: int):
        self.max_members = max_members
        super().__init__(ApiErrors.TEAM_FULL.format(max_members))


class TeamMembershipConflictException(BaseTeamException):
    def __init__(self, team_id: str):
        super().__init__(ApiErrors.MEMBERSHIP_CONFLICT.format(team_id))


class TeamActionForbiddenException(BaseTeamException):
    def __init__(self, message: str = ApiErrors.ONLY_CREATOR_ALLOWED):
        super().__init__(message)


class TeamCodeGenerationException(BaseTeamException):
    pass


class JoinRequestNotFoundException(BaseTeamException):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(ApiErrors.JOIN_REQUEST_NOT_FOUND.format(user_id))
