"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (404 bodies are empty)

Design Decisions:
    - Thin routes delegate to services/customer_service.py
"""
