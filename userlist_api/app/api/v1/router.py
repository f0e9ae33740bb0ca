"""
Top‑level router for version 1 of the API.

Aggregates the domain routers under a single router which ``main``
mounts under its API prefixes.
"""

from fastapi import APIRouter

from .endpoints import health, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(health.router, prefix="/health", tags=["health"])
