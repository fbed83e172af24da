"""
Emergency Router - API endpoints for the emergency override and statistics.
"""
from fastapi import APIRouter, Depends

from ..core.ledger import Ledger
from ..deps import get_ledger, get_current_address
from .schemas import EmergencyStatus, StatsResponse
from .service import toggle_emergency_mode, get_stats

router = APIRouter()
stats_router = APIRouter()

@router.post("/toggle", response_model=EmergencyStatus)
def toggle(caller: str = Depends(get_current_address), ledger: Ledger = Depends(get_ledger)):
    """
    Toggle emergency mode. Admin only.
    """
    with ledger.transaction() as ctx:
        active = toggle_emergency_mode(ctx, caller)
    return EmergencyStatus(emergency_active=active)

@stats_router.get("", response_model=StatsResponse)
def read_stats(ledger: Ledger = Depends(get_ledger)):
    """
    Get the total record count and emergency status.
    """
    with ledger.snapshot() as ctx:
        return StatsResponse(**get_stats(ctx)._asdict())
