"""Infrastructure — database sessions, JWT tokens, and structured logging.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)
"""
