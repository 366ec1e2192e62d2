# Application Messages
class AppMessages:
    TEAM_CREATED = "Team created successfully"
    TEAM_UPDATED = "Team updated successfully"
    TEAM_JOINED = "Joined team successfully"
    JOIN_REQUEST_SENT = "Request to join sent"
    JOIN_REQUEST_ACCEPTED = "Join request accepted"
    MEMBERS_REFRESHED = "Team member details refreshed"


# Repository error messages
class RepositoryErrors:
    TEAM_CODE_GENERATION_FAILED = "Could not generate a unique team code after {0} attempts"


# API error messages
class ApiErrors:
    INTERNAL_SERVER_ERROR = "Internal server error"
    VALIDATION_ERROR = "Validation Error"
    UNEXPECTED_ERROR_OCCURRED = "An unexpected error occurred"
    RESOURCE_NOT_FOUND_TITLE = "Resource Not Found"
    CONFLICT_TITLE = "Conflict"
    FORBIDDEN_TITLE = "Forbidden"
    AUTHENTICATION_FAILED = "Authentication Failed"
    SKILL_MATCH_UNAVAILABLE = "Skill Match Unavailable"
    TEAM_NOT_FOUND = "Team with id {0} not found"
    TEAM_NOT_FOUND_GENERIC = "Team not found"
    TEAM_CODE_NOT_FOUND = "No team found for code {0}"
    USER_PROFILE_NOT_FOUND = "Profile for user {0} not found"
    USER_PROFILE_NOT_FOUND_GENERIC = "User profile not found"
    MEMBER_ALREADY_EXISTS = "User {0} is already a member of the team"
    JOIN_REQUEST_NOT_FOUND = "No pending join request from user {0}"
    TEAM_FULL = "Team is full, cannot add more than {0} members"
    MEMBERSHIP_CONFLICT = "Team {0} changed while updating its members, please try again"
    ONLY_CREATOR_ALLOWED = "Only the team creator can perform this action"
    CREATOR_OR_SELF_ALLOWED = "Only the team creator or the user themselves can perform this action"
    NO_REQUIRED_SKILLS = (
        "This team has no required skills set. Please add required skills to find matching members."
    )
    NO_MATCHES = "No matching members found. Try adjusting the required skills."


# Validation error messages
class ValidationErrors:
    MISSING_REQUIRED_FIELDS = "Missing required team fields: {0}"
    EMPTY_UPDATE = "At least one field must be provided to update a team"
    MAX_MEMBERS_BELOW_MEMBER_COUNT = "max_members cannot be lower than the current member count ({0})"
    TOO_MANY_INITIAL_MEMBERS = "A team cannot start with more than {0} members"
    DUPLICATE_INITIAL_MEMBERS = "Initial team members must be distinct"
    NO_SEARCH_SKILLS = "At least one skill is required"


# Authentication error messages
class AuthErrorMessages:
    TOKEN_EXPIRED = "Access token has expired"
    TOKEN_EXPIRED_TITLE = "Token Expired"
    TOKEN_INVALID = "Invalid access token"
    INVALID_TOKEN_TITLE = "Invalid Token"
    NO_ACCESS_TOKEN = "No access token provided"
    REFRESH_TOKEN_EXPIRED = "Refresh token has expired, please log in again"
    AUTHENTICATION_REQUIRED = "Authentication required"
