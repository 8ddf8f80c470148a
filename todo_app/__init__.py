# todo_app/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn todo_app:app --reload --port 3000
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
