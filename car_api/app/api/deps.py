"""
API dependencies.

Routes receive their ``CarService`` through FastAPI dependency
injection.  The service wraps the collection of the Mongo client that
``main.lifespan`` stored on ``app.state``.
"""

from fastapi import Request

from car_api.app.core.db import get_collection
from car_api.app.services.car_service import CarService


def get_car_service(request: Request) -> CarService:
    """Return a ``CarService`` bound to the application's client."""
    state = request.app.state
    return CarService(get_collection(state.mongo_client, state.settings))
