"""
utils/ - Shared helpers
=======================
Logging setup, input validation and the vault exception hierarchy.
"""
