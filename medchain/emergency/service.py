"""
Emergency Service - The Admin-controlled override and ledger statistics.
"""
from typing import NamedTuple
import logging

from ..core.ledger import LedgerContext
from ..core.events import EmergencyModeToggled
from ..core.permissions import Capability, require_capability
from ..core.state import get_system_state, read_system_state
from ..identity.service import get_user

# Set up logging
logger = logging.getLogger(__name__)

class LedgerStats(NamedTuple):
    total_records: int
    emergency_active: bool

def toggle_emergency_mode(ctx: LedgerContext, caller: str) -> bool:
    """
    Flip emergency mode.
    
    While active, every registered doctor may read every record. The mode
    stays on until the Admin toggles it again.
    
    Args:
        ctx: Writable ledger context
        caller: Normalized caller address
        
    Returns:
        bool: The new emergency state
        
    Raises:
        AdminOnlyException: If the caller is not the Admin
    """
    require_capability(get_user(ctx, caller), Capability.TOGGLE_EMERGENCY)

    state = get_system_state(ctx.db)
    state.emergency_mode = not state.emergency_mode
    ctx.emit(EmergencyModeToggled(status=state.emergency_mode, timestamp=ctx.now))
    logger.warning(f"Emergency mode {'enabled' if state.emergency_mode else 'disabled'} by {caller}")
    return state.emergency_mode

def get_stats(ctx: LedgerContext) -> LedgerStats:
    state = read_system_state(ctx.db)
    return LedgerStats(total_records=state.record_counter, emergency_active=bool(state.emergency_mode))
