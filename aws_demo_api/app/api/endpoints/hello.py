"""
Greeting and health endpoints.

The response shapes and wording are relied upon by existing clients
and load balancer probes, so they are kept stable.  Timestamps are the
local wall clock without a zone offset.
"""

from datetime import datetime
from typing import Any, Dict

from fastapi import APIRouter

router = APIRouter()

GREETING_SUFFIX = "from Spring Boot on AWS!"
# Health checks and existing clients match on this exact value.
SERVICE_NAME = "springboot-aws-demo"


def now_timestamp() -> str:
    """Current local time as ISO‑8601 with microseconds and no offset."""
    return datetime.now().isoformat(timespec="microseconds")


@router.get("/hello")
async def hello() -> Dict[str, Any]:
    return {
        "message": f"Hello {GREETING_SUFFIX}",
        "timestamp": now_timestamp(),
        "status": "success",
    }


@router.get("/hello/{name}")
async def hello_with_name(name: str) -> Dict[str, Any]:
    """Greet ``name``, which is any non‑empty path segment."""
    return {
        "message": f"Hello {name} {GREETING_SUFFIX}",
        "timestamp": now_timestamp(),
        "status": "success",
    }


@router.get("/health")
async def health() -> Dict[str, Any]:
    return {
        "status": "UP",
        "timestamp": now_timestamp(),
        "service": SERVICE_NAME,
    }
