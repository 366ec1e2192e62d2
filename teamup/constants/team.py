from enum import Enum


class TeamMemberRole(Enum):
    TEAM_LEAD = "Team Lead"
    MEMBER = "Member"


class TeamAuditAction(Enum):
    TEAM_CREATED = "team_created"
    TEAM_UPDATED = "team_updated"
    TEAM_DELETED = "team_deleted"
    MEMBER_ADDED = "member_added_to_team"
    MEMBER_REMOVED = "member_removed_from_team"
    MEMBER_LEFT = "member_left_team"
    JOIN_REQUESTED = "join_requested"
    JOIN_REQUEST_ACCEPTED = "join_request_accepted"
    JOIN_REQUEST_REJECTED = "join_request_rejected"
    MEMBERS_REFRESHED = "member_snapshots_refreshed"


DEFAULT_MAX_MEMBERS = 4
MIN_MAX_MEMBERS = 2
MAX_MAX_MEMBERS = 10

TEAM_CODE_LENGTH = 6
TEAM_CODE_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

DEFAULT_MEMBER_NAME = "Anonymous"

# Team creation fields that must be non-empty
REQUIRED_TEAM_FIELDS = ["hackathon_id", "hackathon_name", "created_by"]
