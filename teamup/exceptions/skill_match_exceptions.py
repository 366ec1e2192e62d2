from teamup.constants.messages import ApiErrors


class BaseSkillMatchException(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class NoRequiredSkillsException(BaseSkillMatchException):
    def __init__(self, message: str = ApiErrors.NO_REQUIRED_SKILLS):
        super().__init__(message)


class NoSkillMatchesException(BaseSkillMatchException):
    def __init__(self, message: str = ApiErrors.NO_MATCHES):
        super().__init__(message)
