"""
Endpoint modules.

Each module defines an ``APIRouter`` for one area (greetings and health,
users).  They are aggregated in ``api/router.py``.
"""
