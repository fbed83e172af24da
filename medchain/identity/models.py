"""
User Model - Stores registered participants and their role.

A user's role is set once at registration and never changes.
"""
from sqlalchemy import Column, Integer, String, Boolean, Enum
import enum
from ..database import Base

class UserRole(str, enum.Enum):
    """
    Enumeration for participant roles.
    
    Roles:
    - NONE: Role of an unregistered address
    - PATIENT: Owns records and grants access to them
    - DOCTOR: Reads records under a grant or during an emergency
    - ADMIN: The single system administrator fixed at initialization
    """
    NONE = "NONE"
    PATIENT = "PATIENT"
    DOCTOR = "DOCTOR"
    ADMIN = "ADMIN"

class User(Base):
    """
    User Model - Stores participant information
    
    Fields:
    - address: Account address (lower case), primary key
    - name: Display name
    - role: Participant role
    - is_registered: Always True for stored rows
    - registered_at: Registration timestamp (Unix seconds)
    """
    __tablename__ = "users"

    address = Column(String(42), primary_key=True, index=True)
    name = Column(String, nullable=False)
    role = Column(Enum(UserRole), nullable=False)
    is_registered = Column(Boolean, nullable=False, default=True)
    registered_at = Column(Integer, nullable=False)

    @classmethod
    def unregistered(cls, address: str) -> "User":
        """Zero value returned for addresses that never registered."""
        return cls(address=address, name="", role=UserRole.NONE, is_registered=False, registered_at=0)

    def __repr__(self):
        return f"<User(address={self.address}, role={self.role})>"
