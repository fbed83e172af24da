"""
Authorization engine: decides whether an actor may read a record.
"""
