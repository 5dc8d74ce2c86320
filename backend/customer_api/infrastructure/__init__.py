"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Storage failures leave this layer only as core/errors.py types

Design Decisions:
    - Repository gateway implements core/repository_protocols.py (shell side)
"""
