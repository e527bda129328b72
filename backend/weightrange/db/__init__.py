"""Database Infrastructure — SQLAlchemy Base for the usage counter table.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)
"""
