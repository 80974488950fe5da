"""Pydantic Schemas: request/response shapes for API endpoints.

Invariants:
    - Input schemas accept partial bodies; presence is checked by core/validate_input.py
    - Read schemas are what the store returns and what routes serialize

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
