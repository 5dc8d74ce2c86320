"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (decoded payloads, API responses)
    - One casing policy (camelCase) for every wire schema

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
