"""
Permission ledger: time-bounded grants from a patient to a doctor.
"""
