from sqlalchemy import Column, Integer, String, Enum
import enum

from ..database import Base

class AuditAction(str, enum.Enum):
    """Kinds of actions recorded in the audit trail."""
    CREATE = "CREATE"
    VIEW = "VIEW"
    GRANT_ACCESS = "GRANT_ACCESS"
    REVOKE_ACCESS = "REVOKE_ACCESS"

class AuditEntry(Base):
    """
    One immutable audit trail entry.
    
    The autoincrement id fixes append order within an actor's trail.
    record_id is 0 when the action does not concern a single record.
    """
    __tablename__ = "audit_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    actor = Column(String(42), nullable=False, index=True)
    record_id = Column(Integer, nullable=False, default=0)
    timestamp = Column(Integer, nullable=False)
    action = Column(Enum(AuditAction), nullable=False)

    def __repr__(self):
        return f"<AuditEntry(id={self.id}, actor={self.actor}, action='{self.action}', timestamp='{self.timestamp}')>"
