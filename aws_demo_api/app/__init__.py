"""
Application package.

``main`` builds the FastAPI app, ``api`` holds the routers, ``schemas``
the pydantic models, ``services`` the persistence and seeding logic and
``core`` configuration, logging, database access and error handling.
"""

from .main import app, create_app  # noqa: F401
