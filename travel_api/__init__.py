# travel_api/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn travel_api:app --reload
"""

from .main import app

__all__ = ["app"]
