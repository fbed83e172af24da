"""
Identity Schemas - Pydantic models for registration and user lookups.
"""
from pydantic import BaseModel, Field
from .models import UserRole

class UserRegistration(BaseModel):
    """
    User Registration Schema - Used when an address registers itself
    
    Fields:
    - name: Display name (must not be empty)
    - role: PATIENT or DOCTOR; any other value is rejected as InvalidRole by the registry
    """
    name: str = Field(..., description="Display name")
    role: str = Field(..., description="PATIENT or DOCTOR")

class UserResponse(BaseModel):
    """
    User Response Schema - Snapshot of a participant
    
    Unregistered addresses are returned with role NONE and is_registered False.
    """
    address: str
    name: str
    role: UserRole
    is_registered: bool
    registered_at: int

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True

class TokenRequest(BaseModel):
    """Development token request for an address"""
    address: str

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
