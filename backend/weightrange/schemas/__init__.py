"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate request SHAPE at the system boundary (types, enums)
    - Domain ranges (age > 0, inches in 0–11) are NOT schema errors: they
      reach the calculator, which answers with an explicit invalid outcome

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
