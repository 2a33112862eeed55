"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for one vault table.
Repositories bind parameters, manage commit/rollback on the injected
connection and turn result rows into domain model objects.
"""
