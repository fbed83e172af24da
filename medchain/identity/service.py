"""
Identity Service - Business logic for participant registration and lookup.
"""
from typing import Union
import logging

from ..core.ledger import Ledger, LedgerContext
from ..core.events import UserRegistered
from ..core.state import get_system_state, read_system_state
from .models import User, UserRole
from .exceptions import (
    AlreadyRegisteredException,
    InvalidRoleException,
    EmptyNameException,
)

# Set up logging
logger = logging.getLogger(__name__)

ADMIN_NAME = "System Admin"
REGISTRABLE_ROLES = (UserRole.PATIENT, UserRole.DOCTOR)

def get_user(ctx: LedgerContext, address: str) -> User:
    """
    Get a participant by address.
    
    Args:
        ctx: Ledger context
        address: Normalized address
        
    Returns:
        User: Stored user, or the unregistered zero value
    """
    user = ctx.db.get(User, address)
    if user is None:
        return User.unregistered(address)
    return user

def register_user(ctx: LedgerContext, caller: str, name: str, role: Union[UserRole, str]) -> User:
    """
    Register the caller with a name and role.
    
    Args:
        ctx: Writable ledger context
        caller: Normalized caller address
        name: Display name
        role: PATIENT or DOCTOR
        
    Returns:
        User: The stored user
        
    Raises:
        AlreadyRegisteredException: If the caller already registered
        InvalidRoleException: If the role is not PATIENT or DOCTOR
        EmptyNameException: If the name is empty
    """
    if get_user(ctx, caller).is_registered:
        logger.warning(f"Registration rejected: {caller} already registered")
        raise AlreadyRegisteredException()

    try:
        role = UserRole(role)
    except ValueError:
        raise InvalidRoleException(f"Unknown role: {role}")
    if role not in REGISTRABLE_ROLES:
        raise InvalidRoleException()

    if not name:
        raise EmptyNameException()

    user = User(address=caller, name=name, role=role, is_registered=True, registered_at=ctx.now)
    ctx.db.add(user)
    ctx.db.flush()
    ctx.emit(UserRegistered(address=caller, name=name, role=role.value, timestamp=ctx.now))
    logger.info(f"Registered {caller} as {role.value}")
    return user

def get_admin_address(ctx: LedgerContext):
    """Return the Admin address fixed at initialization, or None before bootstrap."""
    return read_system_state(ctx.db).admin_address

def bootstrap_admin_if_needed(ledger: Ledger, admin_address: str) -> str:
    """
    Fix the Admin on first startup.
    
    This function should be called during application startup. Once an Admin
    exists it is never replaced; a different configured address is only logged.
    
    Args:
        ledger: Application ledger
        admin_address: Normalized configured admin address
        
    Returns:
        str: The effective Admin address
    """
    with ledger.transaction() as ctx:
        state = get_system_state(ctx.db)
        if state.admin_address:
            if state.admin_address != admin_address:
                logger.warning(
                    f"Configured admin {admin_address} ignored; admin fixed at {state.admin_address}"
                )
            else:
                logger.info("Admin already initialized. Bootstrap not needed.")
            return state.admin_address

        existing = ctx.db.get(User, admin_address)
        if existing is not None:
            # Role is immutable, so a registered patient or doctor can never become Admin
            raise AlreadyRegisteredException(f"{admin_address} is already registered as {existing.role.value}")

        ctx.db.add(User(
            address=admin_address,
            name=ADMIN_NAME,
            role=UserRole.ADMIN,
            is_registered=True,
            registered_at=ctx.now,
        ))
        state.admin_address = admin_address
        logger.info(f"Bootstrap admin fixed at {admin_address}")
        return admin_address
