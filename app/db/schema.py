# app/db/schema.py

from sqlalchemy import Column, Integer, MetaData, String, Table, table

from app.config import USERS_TABLE

# Column set is not known in advance; only the name is used for reads.
users = table(USERS_TABLE)

# Sample layout used by scripts/init_db.py for local databases.
metadata = MetaData()

sample_users = Table(
    USERS_TABLE,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
)
