# app/dependencies.py

from fastapi import Request
from sqlalchemy.engine import Engine


def get_db_engine(request: Request) -> Engine:
    """
    The engine owned by the running application; its single connection is
    checked out by the route itself.
    """
    return request.app.state.engine
