"""
Table definitions.

Tables are declared with SQLAlchemy Core so that create_all works on both
SQLite and PostgreSQL; all reads and writes go through text() queries.
"""

from sqlalchemy import Column, Integer, MetaData, String, Table, Text

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", String(32), primary_key=True),
    Column("first", String(100), nullable=False),
    Column("last", String(100), nullable=False),
    Column("username", String(100), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("created_at", String(40), nullable=False),
)

job_descriptions = Table(
    "job_descriptions",
    metadata,
    Column("id", String(32), primary_key=True),
    Column("owner_id", String(32), nullable=False, index=True),
    Column("title", String(200), nullable=False),
    Column("location", String(200), nullable=False, default=""),
    Column("content", Text, nullable=False),
    Column("answers", Text, nullable=False, default="{}"),
    Column("created_at", String(40), nullable=False),
    Column("updated_at", String(40), nullable=False),
)

jd_drafts = Table(
    "jd_drafts",
    metadata,
    Column("owner_id", String(32), primary_key=True),
    Column("step", Integer, nullable=False, default=0),
    Column("answers", Text, nullable=False, default="{}"),
    Column("updated_at", String(40), nullable=False),
)
