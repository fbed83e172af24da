from typing import List
import logging
from sqlalchemy import select

from ..core.ledger import LedgerContext
from ..core.pagination import PageParams, PageResponse, paginate
from .models import AuditEntry, AuditAction
from .schemas import AuditEntryResponse

logger = logging.getLogger(__name__)

NO_RECORD = 0

def record_action(ctx: LedgerContext, actor: str, record_id: int, action: AuditAction) -> AuditEntry:
    """
    Append an entry to the actor's trail.

    Args:
        ctx: Writable ledger context; the entry commits or rolls back with the command
        actor: Address that performed the action
        record_id: Affected record, or 0 when not applicable
        action: Action kind

    Returns:
        The appended AuditEntry.
    """
    if not ctx.writable:
        raise RuntimeError("Audit entries can only be appended inside a write transaction")

    entry = AuditEntry(actor=actor, record_id=record_id, timestamp=ctx.now, action=action)
    ctx.db.add(entry)
    ctx.db.flush()
    logger.debug(f"Audit {action.value} by {actor} on record {record_id}")
    return entry

def _trail_statement(actor: str):
    return select(AuditEntry).where(AuditEntry.actor == actor).order_by(AuditEntry.id.asc())

def get_audit_trail(ctx: LedgerContext, actor: str) -> List[AuditEntry]:
    """Return the actor's full trail, oldest first."""
    return list(ctx.db.scalars(_trail_statement(actor)).all())

def get_audit_trail_page(ctx: LedgerContext, actor: str, page_params: PageParams) -> PageResponse:
    """Return one page of the actor's trail, oldest first."""
    return paginate(ctx.db, _trail_statement(actor), page_params, AuditEntryResponse)
