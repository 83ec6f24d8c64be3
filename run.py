"""Entry point for the User Store API.

Launches the FastAPI application with Uvicorn.  Host, port, snapshot
path and log level are read from environment variables (``HOST``,
``PORT``, ``DATA_FILE``, ``LOG_LEVEL``); see
``user_store_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from user_store_api.app.core.config import settings
from user_store_api.app.main import app


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
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
