from datetime import datetime, timezone
from typing import ClassVar
from pydantic import Field
from teamup.models.common.document import Document


class AuditLogModel(Document):
    collection_name: ClassVar[str] = "audit_logs"

    team_id: str | None = None
    action: str  # one of TeamAuditAction values
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    # Who performed the action
    performed_by: str | None = None
    # Whose membership or request the action was about
    target_user_id: str | None = None
