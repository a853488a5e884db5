"""Pydantic Schemas — parameter validation and response shapes.

Invariants:
    - Schemas validate at system boundary (request params, API responses)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
