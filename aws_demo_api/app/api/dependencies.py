"""
Shared FastAPI dependencies.

The lifespan handler in ``main`` places the ``UserRepository`` on
``app.state``; ``get_user_repository`` hands it to route handlers via
``Depends``.
"""

from typing import Annotated

from fastapi import Depends, Request

from ..services.user_repository import UserRepository


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.user_repository


UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
