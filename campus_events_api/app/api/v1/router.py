"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified
prefix.  Paths follow the ones the web client already calls
(``/events``, ``/registrations``, ``/users``, ``/login``).
"""

from fastapi import APIRouter

from .endpoints import auth, events, health, registrations, users

router = APIRouter()

router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(registrations.router, prefix="/registrations", tags=["registrations"])
router.include_router(users.router, prefix="/users", tags=["users"])
# Login lives at the root of the API (``POST /login``), not under ``/users``.
router.include_router(auth.router, tags=["auth"])
router.include_router(health.router, tags=["health"])
