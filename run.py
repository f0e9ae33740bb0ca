"""Entry point for serving the User List API.

Starts the FastAPI application under Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (see
``userlist_api.app.core.config``), defaulting to ``0.0.0.0:8000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from userlist_api.app.core.config import settings
from userlist_api.app.main import app


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
        logging.getLogger(__name__).info("Shutting down")
