"""Entry point for serving the Stable Store API.

Starts the FastAPI application with Uvicorn.  Host, port, log level
and the database location come from environment variables (see
``stable_store_api.app.core.config``), for example::

    DATABASE_URL=/var/lib/stable-store/store.db PORT=8080 python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from stable_store_api.app.core.config import settings
from stable_store_api.app.main import app


async def run_api() -> None:
    """Serve the API until the process is interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("API server stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
