"""
Access Schemas - Pydantic models for grants and access checks.
"""
from pydantic import BaseModel, Field

class GrantRequest(BaseModel):
    """
    Grant Request Schema - Used when a patient grants a doctor access
    
    Fields:
    - doctor: Grantee doctor address
    - duration_seconds: Lifetime of the grant; 0 means it never expires
    - purpose: Free-form purpose of access
    """
    doctor: str = Field(..., description="Grantee doctor address")
    duration_seconds: int = Field(0, ge=0, description="Grant lifetime in seconds, 0 for no expiry")
    purpose: str = Field("", description="Purpose of access")

class AccessCheckResponse(BaseModel):
    """
    Access Check Response Schema
    
    Fields:
    - valid: Whether the grant currently authorizes access
    - granted_at: When the grant terms were written, 0 if never granted
    - expires_at: Expiry time, 0 if permanent or never granted
    - purpose: Purpose recorded with the grant
    """
    valid: bool
    granted_at: int
    expires_at: int
    purpose: str
