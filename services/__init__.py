"""
services/ - Business Logic Layer
================================
Validates caller input and coordinates the repositories.
"""
