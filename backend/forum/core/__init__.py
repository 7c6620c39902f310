"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/ at runtime
    - Ownership and consistency rules raise typed errors from core/errors.py
"""
