"""
db/ - Database Layer
====================
Opens and closes the backend connection (SQLite file or PostgreSQL pool).
The schema is expected to exist already; this layer never creates tables.
"""
