"""
Top‑level API router.

Aggregates the endpoint routers; ``main`` mounts the result under
``/api``.
"""

from fastapi import APIRouter

from .endpoints import hello, users

router = APIRouter()

router.include_router(hello.router, tags=["hello"])
router.include_router(users.router, prefix="/users", tags=["users"])
