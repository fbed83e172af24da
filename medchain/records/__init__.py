"""
Record store: immutable record metadata with dense sequential ids.
"""
