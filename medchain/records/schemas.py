"""
Record Schemas - Pydantic models for record creation and retrieval.
"""
from typing import List
from pydantic import BaseModel, Field

class RecordCreate(BaseModel):
    """
    Record Creation Schema
    
    Fields:
    - payload_reference: Content reference of the off-ledger payload (must not be empty)
    - record_type: Record category
    - description: Free-form description
    """
    payload_reference: str = Field(..., description="Content reference of the payload")
    record_type: str = Field("", description="Record category")
    description: str = Field("", description="Free-form description")

class RecordCreateResponse(BaseModel):
    record_id: int

class RecordResponse(BaseModel):
    """Record metadata returned to authorized callers"""
    id: int
    owner: str
    payload_reference: str
    record_type: str
    description: str
    created_at: int

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True

class RecordIdList(BaseModel):
    """Ascending list of record ids"""
    record_ids: List[int]
