from bson import ObjectId

from teamup_project.db.config import DatabaseManager


class MongoRepository:
    collection_name: str

    @classmethod
    def get_collection(cls):
        return DatabaseManager().get_collection(cls.collection_name)

    @classmethod
    def generate_id(cls) -> str:
        """Fresh opaque document id, assigned before insertion."""
        return str(ObjectId())
