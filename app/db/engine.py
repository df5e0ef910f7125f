# app/db/engine.py

import logging
from typing import Union

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


def get_engine(url: Union[str, URL]) -> Engine:
    # One pooled connection, shared by every request; waiting for it never times out
    return create_engine(url, pool_size=1, max_overflow=0, pool_timeout=None)


def connect(engine: Engine) -> None:
    """
    Open the pooled connection and make sure the server answers.

    There is no retry: a failure here is fatal for the process.
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Could not connect to database: %s", e)
        raise DatabaseConnectionError(
            f"Could not connect to database {engine.url.render_as_string()}"
        ) from e

    logger.info("Connected to database %s", engine.url.render_as_string())
