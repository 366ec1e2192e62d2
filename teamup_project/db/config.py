import logging
from django.conf import settings
from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Process-wide owner of the MongoDB client.

    The client is created lazily on first use and shared by every repository;
    pymongo pools connections internally.
    """

    _instance = None
    _database_client = None
    _database = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def _get_database_client(self) -> MongoClient:
        if DatabaseManager._database_client is None:
            DatabaseManager._database_client = MongoClient(
                settings.MONGODB_URI,
                serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
                tz_aware=True,
            )
        return DatabaseManager._database_client

    def get_database(self):
        if DatabaseManager._database is None:
            DatabaseManager._database = self._get_database_client()[settings.DB_NAME]
        return DatabaseManager._database

    def get_collection(self, collection_name: str):
        return self.get_database()[collection_name]

    def check_database_health(self) -> bool:
        try:
            self._get_database_client().admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"Database health check failed: {e}")
            return False

    @classmethod
    def reset(cls):
        """Drop the cached client so the next call reconnects with current settings."""
        if cls._database_client is not None:
            cls._database_client.close()
        cls._database_client = None
        cls._database = None
