import logging
import os
from contextlib import asynccontextmanager
from typing import Callable, Optional, Union

from fastapi import FastAPI, Request
from sqlalchemy.engine import URL

from app.api.users import router as users_router
from app.config import database_url
from app.db.engine import connect, get_engine
from app.exceptions import DatabaseQueryError

logger = logging.getLogger(__name__)

EXIT_QUERY_FAILURE = 1


def exit_process(status: int) -> None:
    # Skips uvicorn's shutdown: open client connections are dropped
    logging.shutdown()
    os._exit(status)


def create_app(
    url: Optional[Union[str, URL]] = None,
    terminate: Callable[[int], None] = exit_process,
) -> FastAPI:
    """
    Build the API around its own engine.

    The engine is created and connected on startup, so a database that cannot
    be reached stops the server before it starts listening. A failed query
    ends the process through `terminate` with a non-zero status.
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = get_engine(url if url is not None else database_url())
        try:
            connect(engine)
            app.state.engine = engine
            yield
        finally:
            engine.dispose()

    app = FastAPI(
        title="Users backend",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.exception_handler(DatabaseQueryError)
    async def database_query_error_handler(request: Request, exc: DatabaseQueryError):
        logger.critical("%s, terminating process", exc)
        terminate(EXIT_QUERY_FAILURE)
        # Only reached when terminate returns
        raise exc

    app.include_router(users_router)

    return app


app = create_app()
