# scripts/init_db.py
"""
Create and seed a sample users table for local runs.

    python -m scripts.init_db
"""

import logging

from app.config import database_url
from app.db.engine import get_engine
from app.db.schema import metadata, sample_users

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

SAMPLE_ROWS = [
    {"name": "Alice", "email": "alice@example.com"},
    {"name": "Bob", "email": "bob@example.com"},
]


def main(url=None):
    engine = get_engine(url if url is not None else database_url())
    metadata.drop_all(engine)
    metadata.create_all(engine)

    with engine.begin() as conn:
        conn.execute(sample_users.insert(), SAMPLE_ROWS)

    logger.info("Users table created with %s rows.", len(SAMPLE_ROWS))
    engine.dispose()


if __name__ == "__main__":
    main()
