"""
Access Grant Model - One grant per (patient, doctor) pair.

Re-granting overwrites the stored row. Expiry is never written back; it is
derived from expires_at whenever access is checked.
"""
from sqlalchemy import Column, Integer, String, Boolean
from ..database import Base

NEVER_EXPIRES = 0

class AccessGrant(Base):
    """
    Access Grant Model
    
    Fields:
    - patient: Granting patient address (key part)
    - doctor: Grantee doctor address (key part)
    - granted_at: When the current terms were written (Unix seconds)
    - expires_at: Expiry time, or NEVER_EXPIRES (0)
    - is_active: False once explicitly revoked
    - purpose: Free-form purpose of access
    """
    __tablename__ = "access_grants"

    patient = Column(String(42), primary_key=True)
    doctor = Column(String(42), primary_key=True, index=True)
    granted_at = Column(Integer, nullable=False)
    expires_at = Column(Integer, nullable=False, default=NEVER_EXPIRES)
    is_active = Column(Boolean, nullable=False, default=True)
    purpose = Column(String, nullable=False, default="")

    def is_valid_at(self, now: int) -> bool:
        """Active and either permanent or not yet expired at ``now``."""
        return bool(self.is_active) and (self.expires_at == NEVER_EXPIRES or self.expires_at > now)

    def __repr__(self):
        return f"<AccessGrant(patient={self.patient}, doctor={self.doctor}, active={self.is_active}, expires_at={self.expires_at})>"
