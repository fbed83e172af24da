"""
Access Router - API endpoints for the permission ledger.
"""
from fastapi import APIRouter, Depends, status

from ..core.ledger import Ledger
from ..deps import get_ledger, get_current_address, parse_address
from .schemas import GrantRequest, AccessCheckResponse
from .service import grant_access, revoke_access, check_access

router = APIRouter()

@router.post("/grants", response_model=AccessCheckResponse, status_code=status.HTTP_201_CREATED)
def create_grant(
    grant_request: GrantRequest,
    caller: str = Depends(get_current_address),
    ledger: Ledger = Depends(get_ledger)
):
    """
    Grant a doctor access to the calling patient's records.
    
    A new grant for the same doctor replaces the previous one.
    """
    doctor = parse_address(grant_request.doctor)
    with ledger.transaction() as ctx:
        grant = grant_access(ctx, caller, doctor, grant_request.duration_seconds, grant_request.purpose)
        return AccessCheckResponse(
            valid=grant.is_valid_at(ctx.now),
            granted_at=grant.granted_at,
            expires_at=grant.expires_at,
            purpose=grant.purpose,
        )

@router.delete("/grants/{doctor}", status_code=status.HTTP_204_NO_CONTENT)
def delete_grant(
    doctor: str,
    caller: str = Depends(get_current_address),
    ledger: Ledger = Depends(get_ledger)
):
    """
    Revoke the calling patient's grant to a doctor.
    """
    doctor = parse_address(doctor)
    with ledger.transaction() as ctx:
        revoke_access(ctx, caller, doctor)

@router.get("/{patient}/{doctor}", response_model=AccessCheckResponse)
def read_access(patient: str, doctor: str, ledger: Ledger = Depends(get_ledger)):
    """
    Check whether a patient's grant to a doctor is currently valid.
    """
    patient = parse_address(patient)
    doctor = parse_address(doctor)
    with ledger.snapshot() as ctx:
        return AccessCheckResponse(**check_access(ctx, patient, doctor)._asdict())
