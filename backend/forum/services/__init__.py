"""Services Layer — SQLAlchemy manager implementations and entity/DTO mapping.

Invariants:
    - One manager per entity; every manager in a request shares the request's AsyncSession
    - Managers never raise HTTP errors; routes translate None/False into ForumError
"""
