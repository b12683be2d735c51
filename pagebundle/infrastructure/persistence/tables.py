"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import Column, Integer, MetaData, Table

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PAGES TABLE
# ============================================================================
pages_table = Table(
    "pages",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
)
