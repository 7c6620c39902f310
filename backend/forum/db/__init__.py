"""Database Layer — declarative Base shared by models and Alembic."""
