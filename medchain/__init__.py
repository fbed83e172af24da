"""
MedChain access ledger.

This package provides patient-controlled authorization for medical records:
- Participant registration with immutable roles
- Record metadata owned by patients
- Time-bounded grants from patients to doctors
- An Admin-controlled emergency override
- An append-only per-actor audit trail
"""

__version__ = "1.0.0"
