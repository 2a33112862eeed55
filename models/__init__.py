"""
models/ - Domain Models
=======================
Plain dataclasses built from repository result rows.
"""
