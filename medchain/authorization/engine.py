"""
Authorization Engine - The read-side decision function.

An actor may read a record when any of these holds:

- the actor owns the record
- the owner holds a valid grant to the actor
- emergency mode is on and the actor is a doctor
- the actor is the Admin

``get_doctor_accessible_records`` consults grants only: it does
not list records a doctor could read through emergency mode, and it does
not apply the Admin bypass.
"""
from typing import List
import logging

from ..core.ledger import LedgerContext
from ..core.permissions import Capability, has_capability, require_capability
from ..core.state import read_system_state
from ..access.models import AccessGrant
from ..access.service import check_access
from ..identity.exceptions import UnauthorizedException
from ..identity.service import get_user
from ..records.models import MedicalRecord
from ..records.service import find_record

# Set up logging
logger = logging.getLogger(__name__)

def is_authorized(ctx: LedgerContext, actor: str, record: MedicalRecord) -> bool:
    """
    Decide whether ``actor`` may read ``record`` at the context's time.
    
    Args:
        ctx: Ledger context
        actor: Normalized actor address
        record: Record being read
        
    Returns:
        bool: True if any authorization path applies
    """
    if actor == record.owner:
        return True

    if check_access(ctx, record.owner, actor).valid:
        return True

    user = get_user(ctx, actor)
    if read_system_state(ctx.db).emergency_mode and has_capability(user, Capability.EMERGENCY_READ):
        return True

    return has_capability(user, Capability.READ_ANY_RECORD)

def get_record(ctx: LedgerContext, actor: str, record_id: int) -> MedicalRecord:
    """
    Return a record if the actor is authorized to read it.
    
    Reads are not written to the audit trail.
    
    Raises:
        RecordNotFoundException: If the id was never assigned
        UnauthorizedException: If no authorization path applies
    """
    record = find_record(ctx, record_id)
    if not is_authorized(ctx, actor, record):
        logger.warning(f"Read of record {record_id} denied for {actor}")
        raise UnauthorizedException(f"Not authorized to read record {record_id}")
    return record

def get_doctor_accessible_records(ctx: LedgerContext, caller: str, doctor: str) -> List[int]:
    """
    List, in ascending order, the records a doctor can read through grants.
    
    Args:
        ctx: Ledger context
        caller: Normalized caller address
        doctor: Normalized doctor address; must equal the caller
        
    Returns:
        List[int]: Ids of records whose owner holds a valid grant to the doctor
        
    Raises:
        NotRegisteredException: If the caller is not registered
        WrongRoleException: If the caller is not a doctor
        UnauthorizedException: If the caller asks for another doctor's list
    """
    require_capability(get_user(ctx, caller), Capability.LIST_ACCESSIBLE_RECORDS)
    if caller != doctor:
        raise UnauthorizedException("Doctors can only list their own accessible records")

    grants = ctx.db.query(AccessGrant).filter(AccessGrant.doctor == doctor).all()
    patients = [grant.patient for grant in grants if grant.is_valid_at(ctx.now)]
    if not patients:
        return []

    rows = (
        ctx.db.query(MedicalRecord.id)
        .filter(MedicalRecord.owner.in_(patients))
        .order_by(MedicalRecord.id.asc())
        .all()
    )
    return [row.id for row in rows]
