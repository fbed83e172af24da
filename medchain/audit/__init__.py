"""
Append-only, per-actor audit trail.
"""
