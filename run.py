"""Entry point for the car API.

Starts the FastAPI application with Uvicorn on the host and port from
the settings (``HOST`` and ``PORT`` environment variables, ``0.0.0.0``
and ``3000`` by default).  Configuration such as ``MONGODB_URL`` is
read from the environment.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from car_api.app.core.config import settings
from car_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Servidor en ejecución en el puerto %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
