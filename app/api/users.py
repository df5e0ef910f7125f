# app/api/users.py

import base64
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from sqlalchemy import literal_column, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.db.schema import users
from app.dependencies import get_db_engine
from app.exceptions import DatabaseQueryError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


def _encode_bytes(value: bytes) -> str:
    # BLOB/BINARY columns need not be valid UTF-8
    return base64.b64encode(value).decode("ascii")


@router.get("/", response_model=None)
def list_users(engine: Engine = Depends(get_db_engine)) -> List[Dict[str, Any]]:
    """
    Return every row of the users table, one object per row.

    Any database error, including failing to get the connection, is fatal.
    """
    stmt = select(literal_column("*")).select_from(users)

    try:
        with engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
    except SQLAlchemyError as e:
        logger.exception("Query on table %r failed", users.name)
        raise DatabaseQueryError(f"Query on table {users.name!r} failed") from e

    return jsonable_encoder(
        [dict(row) for row in rows],
        custom_encoder={bytes: _encode_bytes},
    )
