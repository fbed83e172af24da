"""
System State Model - The ledger-wide scalars.

A single row holds the fixed Admin address, the record id counter and the
emergency flag.
"""
from sqlalchemy import Column, Integer, String, Boolean
from sqlalchemy.orm import Session
from ..database import Base

SYSTEM_STATE_ID = 1

class SystemState(Base):
    """
    System State Model - Global ledger scalars
    
    Fields:
    - id: Always SYSTEM_STATE_ID
    - admin_address: Address fixed as Admin at initialization
    - record_counter: Last assigned record id (0 before the first record)
    - emergency_mode: Whether the emergency override is active
    """
    __tablename__ = "system_state"

    id = Column(Integer, primary_key=True)
    admin_address = Column(String(42), nullable=True)
    record_counter = Column(Integer, nullable=False, default=0)
    emergency_mode = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<SystemState(admin={self.admin_address}, records={self.record_counter}, emergency={self.emergency_mode})>"


def get_system_state(db: Session) -> SystemState:
    """
    Return the system state row, creating it on first use.
    
    Args:
        db: Database session
        
    Returns:
        SystemState: The single state row
    """
    state = db.get(SystemState, SYSTEM_STATE_ID)
    if state is None:
        state = SystemState(id=SYSTEM_STATE_ID, record_counter=0, emergency_mode=False)
        db.add(state)
        db.flush()
    return state


def read_system_state(db: Session) -> SystemState:
    """Return the state row for read paths, or an unsaved zero value when none exists."""
    state = db.get(SystemState, SYSTEM_STATE_ID)
    if state is None:
        return SystemState(id=SYSTEM_STATE_ID, admin_address=None, record_counter=0, emergency_mode=False)
    return state
