from pydantic import BaseModel

class EmergencyStatus(BaseModel):
    emergency_active: bool

class StatsResponse(BaseModel):
    """
    Ledger Statistics Schema
    
    Fields:
    - total_records: Number of records ever created
    - emergency_active: Whether emergency mode is on
    """
    total_records: int
    emergency_active: bool
