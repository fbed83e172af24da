"""
Core permissions utilities for role-based access control.

Every state-changing operation states the capability it needs and calls
``require_capability`` before touching state.
"""
from enum import Enum
from typing import Dict, Set, Type
from ..identity.models import User, UserRole
from ..identity.exceptions import (
    AdminOnlyException,
    NotRegisteredException,
    WrongRoleException,
)
from ..exceptions import AppException

class Capability(str, Enum):
    """
    Capability types for role-based access control.
    """
    # Patient capabilities
    CREATE_RECORD = "create_record"
    GRANT_ACCESS = "grant_access"
    
    # Doctor capabilities
    LIST_ACCESSIBLE_RECORDS = "list_accessible_records"
    EMERGENCY_READ = "emergency_read"
    
    # Admin capabilities
    READ_ANY_RECORD = "read_any_record"
    TOGGLE_EMERGENCY = "toggle_emergency"


# Role-based capability mapping
ROLE_CAPABILITIES: Dict[UserRole, Set[Capability]] = {
    UserRole.NONE: set(),
    UserRole.PATIENT: {
        Capability.CREATE_RECORD,
        Capability.GRANT_ACCESS,
    },
    UserRole.DOCTOR: {
        Capability.LIST_ACCESSIBLE_RECORDS,
        Capability.EMERGENCY_READ,
    },
    UserRole.ADMIN: {
        Capability.READ_ANY_RECORD,
        Capability.TOGGLE_EMERGENCY,
    },
}

# Capabilities whose denial is reported with a dedicated kind
CAPABILITY_DENIALS: Dict[Capability, Type[AppException]] = {
    Capability.TOGGLE_EMERGENCY: AdminOnlyException,
}


def get_capabilities_for_role(role: UserRole) -> Set[Capability]:
    """
    Get capabilities for a specific role.
    
    Args:
        role: User role
        
    Returns:
        Set[Capability]: Set of capabilities for the role
    """
    return set(ROLE_CAPABILITIES.get(role, set()))


def has_capability(user: User, capability: Capability) -> bool:
    """
    Check if a user holds a capability.
    
    Unregistered users hold none.
    """
    if not user.is_registered:
        return False
    return capability in get_capabilities_for_role(user.role)


def require_capability(user: User, capability: Capability) -> None:
    """
    Reject the operation unless the user holds the capability.
    
    Args:
        user: Caller (a zero-value user when unregistered)
        capability: Capability the operation needs
        
    Raises:
        AdminOnlyException: For admin-only capabilities
        NotRegisteredException: If the caller is not registered
        WrongRoleException: If the caller's role lacks the capability
    """
    if has_capability(user, capability):
        return

    denial = CAPABILITY_DENIALS.get(capability)
    if denial is not None:
        raise denial()
    if not user.is_registered:
        raise NotRegisteredException()
    raise WrongRoleException(f"Role {user.role.value} cannot {capability.value}")
