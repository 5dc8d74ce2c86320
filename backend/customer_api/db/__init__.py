"""Database Layer — declarative base and async session factory.

Invariants:
    - All sessions are async (AsyncSession)
    - Base.metadata holds every table (see models/__init__.py)
"""
