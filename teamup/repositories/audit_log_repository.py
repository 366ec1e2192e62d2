from datetime import datetime, timezone

from teamup.models.audit_log import AuditLogModel
from teamup.repositories.common.mongo_repository import MongoRepository


class AuditLogRepository(MongoRepository):
    """Append-only: team mutations are recorded here and never updated."""

    collection_name = AuditLogModel.collection_name

    @classmethod
    def create(cls, audit_log: AuditLogModel) -> AuditLogModel:
        audit_log.id = cls.generate_id()
        audit_log.timestamp = datetime.now(timezone.utc)
        cls.get_collection().insert_one(audit_log.model_dump(by_alias=True, exclude_none=True))
        return audit_log
