"""API Schemas — Pydantic request/response DTOs for the forum API.

Invariants:
    - Request models validate and normalize input before it reaches a route
    - Response models are built from ORM entities (from_attributes)
"""
