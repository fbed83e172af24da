"""
Record Service - Business logic for creating and indexing medical records.

Reads that return record content go through the authorization engine.
"""
from typing import List
import logging

from ..core.ledger import LedgerContext
from ..core.events import RecordCreated
from ..core.permissions import Capability, require_capability
from ..core.state import get_system_state
from ..audit.models import AuditAction
from ..audit.service import record_action
from ..identity.service import get_user
from .models import MedicalRecord
from .exceptions import EmptyPayloadReferenceException, RecordNotFoundException

# Set up logging
logger = logging.getLogger(__name__)

def create_record(
    ctx: LedgerContext,
    owner: str,
    payload_reference: str,
    record_type: str,
    description: str
) -> int:
    """
    Create a record owned by the calling patient.
    
    Args:
        ctx: Writable ledger context
        owner: Normalized caller address
        payload_reference: Content reference of the payload
        record_type: Record category
        description: Free-form description
        
    Returns:
        int: The new record id
        
    Raises:
        NotRegisteredException: If the caller is not registered
        WrongRoleException: If the caller is not a patient
        EmptyPayloadReferenceException: If the payload reference is empty
    """
    require_capability(get_user(ctx, owner), Capability.CREATE_RECORD)
    if not payload_reference:
        raise EmptyPayloadReferenceException()

    state = get_system_state(ctx.db)
    record_id = state.record_counter + 1
    state.record_counter = record_id

    ctx.db.add(MedicalRecord(
        id=record_id,
        owner=owner,
        payload_reference=payload_reference,
        record_type=record_type,
        description=description,
        created_at=ctx.now,
    ))
    ctx.db.flush()
    record_action(ctx, owner, record_id, AuditAction.CREATE)
    ctx.emit(RecordCreated(record_id=record_id, patient=owner, record_type=record_type, timestamp=ctx.now))
    logger.info(f"Record {record_id} created by {owner}")
    return record_id

def find_record(ctx: LedgerContext, record_id: int) -> MedicalRecord:
    """
    Load a record without any authorization check.
    
    Raises:
        RecordNotFoundException: If the id was never assigned
    """
    record = ctx.db.get(MedicalRecord, record_id)
    if record is None:
        raise RecordNotFoundException(f"Record {record_id} not found")
    return record

def get_patient_record_ids(ctx: LedgerContext, owner: str) -> List[int]:
    """Return the owner's record ids in creation order."""
    rows = (
        ctx.db.query(MedicalRecord.id)
        .filter(MedicalRecord.owner == owner)
        .order_by(MedicalRecord.id.asc())
        .all()
    )
    return [row.id for row in rows]
