"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration; in a deployment the
values should be overridden via environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Stable Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is attached by ``setup_logging``.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the SQLite file holding the resource tables.  Relative
    # paths are resolved against the project root by the ``db`` module.
    # The special value ``:memory:`` keeps everything in process memory,
    # which is convenient for experiments but loses data on restart.
    database_url: str = os.getenv("DATABASE_URL", "stable_store.db")

    # Prefix under which the resource routers are mounted.  Empty by
    # default so that resources live at ``/donations``, ``/products`` etc.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at import time, environment variables should be set
# before importing this module; tests pass their own ``Settings``
# instance to ``create_app`` instead.
settings = Settings()
