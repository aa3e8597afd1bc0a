"""Pydantic Schemas — payload shapes checked at the request boundary.

Invariants:
    - Schemas validate at system boundary (form or JSON bodies)
    - Bounds come from core/domain_types.py

Design Decisions:
    - Separate from models: schemas are request contracts, models are persistence (ADR: DDD boundary)
"""
