"""Serve the Pizza Lookup API with uvicorn.

Host, port and log level are read from the environment through
``Settings`` (``HOST``, ``PORT``, ``LOG_LEVEL``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from pizza_api.app.core.config import settings
from pizza_api.app.main import app


async def main() -> None:
    """Run the API server until it is stopped."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
