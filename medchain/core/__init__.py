"""
Core ledger substrate shared by every module: the single-writer transaction
boundary, the authoritative clock, notifications, security and pagination.
"""
