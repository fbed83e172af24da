"""
Emergency switch: the Admin-controlled read override and ledger statistics.
"""
