"""
Top‑level API router.

This router aggregates domain‑specific routers under their path
prefixes.  When new domains are introduced, include their routers
here.
"""

from fastapi import APIRouter

from .endpoints import cars, health

router = APIRouter()

router.include_router(cars.router, prefix="/carros", tags=["Carros"])
router.include_router(health.router, tags=["health"])
