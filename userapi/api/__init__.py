"""API Layer — FastAPI routes, request/response adapters, error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON: {data: ...} on success, {error: {code, message}} on failure

Design Decisions:
    - Thin routes delegate to dispatch-registered handlers in services/
"""
