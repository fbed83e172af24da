"""
Medical Record Model - Stores record metadata owned by a patient.

The payload itself lives outside the ledger; only its reference is stored.
Records are never updated or deleted.
"""
from sqlalchemy import Column, Integer, String, Text
from ..database import Base

class MedicalRecord(Base):
    """
    Medical Record Model - Stores record metadata
    
    Fields:
    - id: Sequential id assigned from the system record counter (starts at 1)
    - owner: Address of the owning patient
    - payload_reference: Content reference of the off-ledger payload
    - record_type: Free-form record category
    - description: Free-form description
    - created_at: Creation timestamp (Unix seconds)
    """
    __tablename__ = "medical_records"

    id = Column(Integer, primary_key=True, autoincrement=False)
    owner = Column(String(42), nullable=False, index=True)
    payload_reference = Column(String, nullable=False)
    record_type = Column(String, nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    created_at = Column(Integer, nullable=False)

    def __repr__(self):
        """String representation of the MedicalRecord model"""
        return f"<MedicalRecord(id={self.id}, owner={self.owner}, record_type='{self.record_type}')>"
