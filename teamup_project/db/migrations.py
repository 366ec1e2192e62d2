import logging
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from teamup_project.db.config import DatabaseManager
from teamup.models.team import TeamModel
from teamup.models.audit_log import AuditLogModel

logger = logging.getLogger(__name__)


def create_team_indexes() -> bool:
    """
    Indexes backing the team registry queries.

    - team_code is unique so a generated code that collides is rejected by the store
      and regenerated by the caller.
    - members.id and join_requests are multikey indexes for the "array contains id"
      lookups.

    Returns:
        bool: True if all indexes exist afterwards, False otherwise
    """
    logger.info("Ensuring team indexes")
    try:
        teams_collection = DatabaseManager().get_collection(TeamModel.collection_name)
        teams_collection.create_index([("team_code", ASCENDING)], unique=True, name="team_code_unique")
        teams_collection.create_index([("members.id", ASCENDING)], name="members_id")
        teams_collection.create_index([("join_requests", ASCENDING)], name="join_requests")
        teams_collection.create_index([("required_skills", ASCENDING)], name="required_skills")
        return True
    except PyMongoError as e:
        logger.error(f"Failed to create team indexes: {e}")
        return False


def create_audit_log_indexes() -> bool:
    logger.info("Ensuring audit log indexes")
    try:
        audit_logs_collection = DatabaseManager().get_collection(AuditLogModel.collection_name)
        audit_logs_collection.create_index([("team_id", ASCENDING), ("timestamp", ASCENDING)], name="team_timeline")
        return True
    except PyMongoError as e:
        logger.error(f"Failed to create audit log indexes: {e}")
        return False


def run_all_migrations() -> bool:
    results = [create_team_indexes(), create_audit_log_indexes()]
    success = all(results)
    if success:
        logger.info("All database migrations completed")
    else:
        logger.warning(f"{results.count(False)} database migration(s) failed")
    return success
