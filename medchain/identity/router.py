"""
Identity Router - API endpoints for registration, user lookup and dev tokens.
"""
from fastapi import APIRouter, Depends, HTTPException, status
import logging

from ..config import settings
from ..core.ledger import Ledger
from ..core.security import create_access_token
from ..deps import get_ledger, get_current_address, parse_address
from .schemas import UserRegistration, UserResponse, TokenRequest, TokenResponse
from .service import register_user, get_user

# Set up logging
logger = logging.getLogger(__name__)

router = APIRouter()
auth_router = APIRouter()

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    registration: UserRegistration,
    caller: str = Depends(get_current_address),
    ledger: Ledger = Depends(get_ledger)
):
    """
    Register the calling address as a patient or doctor.
    
    Registration is not written to the audit trail.
    """
    with ledger.transaction() as ctx:
        user = register_user(ctx, caller, registration.name, registration.role)
        return UserResponse.model_validate(user)

@router.get("/{address}", response_model=UserResponse)
def get_user_info(address: str, ledger: Ledger = Depends(get_ledger)):
    """
    Get a participant snapshot. Never fails for a well-formed address.
    """
    address = parse_address(address)
    with ledger.snapshot() as ctx:
        return UserResponse.model_validate(get_user(ctx, address))

@auth_router.post("/token", response_model=TokenResponse)
def issue_dev_token(token_request: TokenRequest):
    """
    Issue a bearer token for an address.
    
    Only available when ALLOW_DEV_TOKENS is set; in production tokens come
    from the identity gateway.
    """
    if not settings.allow_dev_tokens:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    address = parse_address(token_request.address)
    logger.info(f"Issued development token for {address}")
    return TokenResponse(access_token=create_access_token(address))
