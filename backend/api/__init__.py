"""
Task Tracker API package.

Provides the FastAPI application for the Task Tracker service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
