"""Services Layer — customer lifecycle orchestration.

Invariants:
    - Services talk to storage only through core/repository_protocols.py
    - Only core/errors.py exception types leave a service method
"""
