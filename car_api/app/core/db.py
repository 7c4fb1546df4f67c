"""
MongoDB integration.

This module builds the Motor client used by the application and
exposes helpers to reach the car collection.  The client is created
explicitly when the application starts (see ``main.lifespan``),
stored on ``app.state`` and closed on shutdown; nothing here keeps a
module-level connection.

Motor connects lazily, so opening the client does not block on the
server being reachable.  The first operation that needs the server
waits at most ``mongodb_timeout_ms`` before failing.
"""

import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from .config import Settings

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> AsyncIOMotorClient:
    """Create a new Motor client for ``settings.mongodb_url``."""
    client = AsyncIOMotorClient(
        settings.mongodb_url,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
    )
    logger.info("MongoDB client created for database '%s'", settings.mongodb_database)
    return client


def get_collection(client: Any, settings: Settings) -> AsyncIOMotorCollection:
    """Return the car collection from ``client``.

    ``client`` is typed loosely so that Motor-compatible clients (for
    example an in-memory client in tests) can be passed in.
    """
    return client[settings.mongodb_database][settings.mongodb_collection]


def close_client(client: Any) -> None:
    """Close ``client`` and release its connection pool."""
    client.close()
    logger.info("MongoDB client closed")
