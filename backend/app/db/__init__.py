"""Database Metadata — SQLAlchemy declarative Base.

Invariants:
    - One metadata object per process, shared by create_all and alembic
"""
