"""ORM Models — SQLAlchemy declarative models for all forum entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Post is the aggregate root for replies; tags attach through post_tags

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from forum.models.user import User  # noqa: F401
from forum.models.tag import Tag, post_tags  # noqa: F401
from forum.models.post import Post  # noqa: F401
from forum.models.reply import Reply  # noqa: F401
