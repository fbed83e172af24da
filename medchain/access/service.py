"""
Access Service - Business logic for granting, revoking and checking access.
"""
from typing import NamedTuple, Optional
import logging

from ..core.ledger import LedgerContext
from ..core.events import AccessGranted, AccessRevoked
from ..core.permissions import Capability, require_capability
from ..audit.models import AuditAction
from ..audit.service import record_action, NO_RECORD
from ..identity.models import UserRole
from ..identity.service import get_user
from .models import AccessGrant, NEVER_EXPIRES
from .exceptions import (
    GranteeNotRegisteredException,
    GranteeNotDoctorException,
    NoActivePermissionException,
)

# Set up logging
logger = logging.getLogger(__name__)

class AccessStatus(NamedTuple):
    """Result of an access check."""
    valid: bool
    granted_at: int
    expires_at: int
    purpose: str

NO_ACCESS = AccessStatus(valid=False, granted_at=0, expires_at=0, purpose="")

def compute_expiry(now: int, duration: int) -> int:
    """
    Expiry timestamp for a grant written at ``now``.
    
    Args:
        now: Grant time
        duration: Lifetime in seconds; 0 or less means no expiry
        
    Returns:
        int: now + duration, or NEVER_EXPIRES
    """
    return now + duration if duration > 0 else NEVER_EXPIRES

def find_grant(ctx: LedgerContext, patient: str, doctor: str) -> Optional[AccessGrant]:
    return ctx.db.get(AccessGrant, (patient, doctor))

def grant_access(ctx: LedgerContext, patient: str, doctor: str, duration: int, purpose: str) -> AccessGrant:
    """
    Grant a doctor access to all of the calling patient's records.
    
    Any previous grant for the pair is overwritten, terms included.
    
    Args:
        ctx: Writable ledger context
        patient: Normalized caller address
        doctor: Normalized grantee address
        duration: Lifetime in seconds, 0 for no expiry
        purpose: Free-form purpose
        
    Returns:
        AccessGrant: The stored grant
        
    Raises:
        NotRegisteredException: If the caller is not registered
        WrongRoleException: If the caller is not a patient
        GranteeNotRegisteredException: If the grantee is not registered
        GranteeNotDoctorException: If the grantee is not a doctor
    """
    require_capability(get_user(ctx, patient), Capability.GRANT_ACCESS)

    grantee = get_user(ctx, doctor)
    if not grantee.is_registered:
        raise GranteeNotRegisteredException(f"{doctor} is not registered")
    if grantee.role != UserRole.DOCTOR:
        raise GranteeNotDoctorException(f"{doctor} is registered as {grantee.role.value}")

    expires_at = compute_expiry(ctx.now, duration)
    grant = find_grant(ctx, patient, doctor)
    if grant is None:
        grant = AccessGrant(patient=patient, doctor=doctor)
        ctx.db.add(grant)
    grant.granted_at = ctx.now
    grant.expires_at = expires_at
    grant.is_active = True
    grant.purpose = purpose
    ctx.db.flush()

    record_action(ctx, patient, NO_RECORD, AuditAction.GRANT_ACCESS)
    ctx.emit(AccessGranted(patient=patient, doctor=doctor, expires_at=expires_at, timestamp=ctx.now))
    logger.info(f"{patient} granted {doctor} access until {expires_at or 'revocation'}")
    return grant

def revoke_access(ctx: LedgerContext, patient: str, doctor: str) -> AccessGrant:
    """
    Revoke the caller's grant to a doctor.
    
    Only the stored active flag is consulted, so a grant that has expired
    but was never revoked can still be revoked.
    
    Raises:
        NoActivePermissionException: If no grant exists or it is already revoked
    """
    grant = find_grant(ctx, patient, doctor)
    if grant is None or not grant.is_active:
        raise NoActivePermissionException()

    grant.is_active = False
    record_action(ctx, patient, NO_RECORD, AuditAction.REVOKE_ACCESS)
    ctx.emit(AccessRevoked(patient=patient, doctor=doctor, timestamp=ctx.now))
    logger.info(f"{patient} revoked access for {doctor}")
    return grant

def check_access(ctx: LedgerContext, patient: str, doctor: str) -> AccessStatus:
    """
    Evaluate the pair's grant against the context's current time.
    
    Pure query: no state changes and no audit entry.
    """
    grant = find_grant(ctx, patient, doctor)
    if grant is None:
        return NO_ACCESS
    return AccessStatus(
        valid=grant.is_valid_at(ctx.now),
        granted_at=grant.granted_at,
        expires_at=grant.expires_at,
        purpose=grant.purpose,
    )
