from __future__ import annotations

from sqlalchemy import Column, Integer, MetaData, Table, Text

metadata = MetaData()

# Only `text` is read; the id column exists so create_all produces a usable table.
messages = Table(
    "messages",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("text", Text, nullable=False),
)

visits = Table(
    "visits",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("count", Integer, nullable=False, default=0),
)
