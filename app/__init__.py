# app/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn app:app --port 5000
or, with logging configured and the port taken from app.config:
    python -m app
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
