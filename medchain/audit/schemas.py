from pydantic import BaseModel
from .models import AuditAction

class AuditEntryResponse(BaseModel):
    """
    Audit Entry Response Schema
    
    Fields:
    - actor: Address that performed the action
    - record_id: Affected record id, 0 when not applicable
    - timestamp: Commit time (Unix seconds)
    - action: CREATE, VIEW, GRANT_ACCESS or REVOKE_ACCESS
    """
    actor: str
    record_id: int
    timestamp: int
    action: AuditAction

    class Config:
        from_attributes = True
