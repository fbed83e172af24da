"""
Identity registry: registered participants, their immutable roles, and the
Admin fixed at initialization.
"""
