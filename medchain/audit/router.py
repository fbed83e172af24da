"""
Audit Router - API endpoints for reading audit trails.
"""
from typing import List
from fastapi import APIRouter, Depends

from ..core.ledger import Ledger
from ..core.pagination import PageParams, PageResponse
from ..deps import get_ledger, parse_address
from .schemas import AuditEntryResponse
from .service import get_audit_trail, get_audit_trail_page

router = APIRouter()

@router.get("/{actor}", response_model=List[AuditEntryResponse])
def read_audit_trail(actor: str, ledger: Ledger = Depends(get_ledger)):
    """
    Get an actor's complete audit trail, oldest first.
    
    The trail is unbounded; use the paged endpoint for large trails.
    """
    actor = parse_address(actor)
    with ledger.snapshot() as ctx:
        return [AuditEntryResponse.model_validate(entry) for entry in get_audit_trail(ctx, actor)]

@router.get("/{actor}/page", response_model=PageResponse[AuditEntryResponse])
def read_audit_trail_page(
    actor: str,
    page_params: PageParams = Depends(),
    ledger: Ledger = Depends(get_ledger)
):
    """
    Get one page of an actor's audit trail, oldest first.
    """
    actor = parse_address(actor)
    with ledger.snapshot() as ctx:
        return get_audit_trail_page(ctx, actor, page_params)
