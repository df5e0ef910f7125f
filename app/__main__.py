# app/__main__.py

import logging

import uvicorn

from app.config import HOST, PORT

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    logger.info("Backend starting on port %s", PORT)
    uvicorn.run("app:app", host=HOST, port=PORT, log_config=None)


if __name__ == "__main__":
    main()
