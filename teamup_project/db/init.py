import logging
import time
from teamup_project.db.config import DatabaseManager
from teamup_project.db.migrations import run_all_migrations

logger = logging.getLogger(__name__)


def initialize_database(max_retries=5, retry_delay=2) -> bool:
    """
    Wait for MongoDB to answer a ping, then make sure the team registry indexes exist.
    The store may still be starting when the app boots under docker compose.
    """
    db_manager = DatabaseManager()

    for attempt in range(1, max_retries + 1):
        if db_manager.check_database_health():
            break
        if attempt == max_retries:
            logger.error(f"MongoDB unreachable after {max_retries} attempts")
            return False
        logger.warning(f"MongoDB not reachable (attempt {attempt}/{max_retries}), retrying in {retry_delay}s")
        time.sleep(retry_delay)

    if not run_all_migrations():
        logger.warning("Some index migrations failed, continuing start-up")

    logger.info("Database initialization completed")
    return True
