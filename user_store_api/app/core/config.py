"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables so the service can be configured without a
settings file.  Defaults are provided for all fields; the defaults
match a local single‑instance deployment listening on port 8080 and
keeping its snapshot in ``data.json`` in the working directory.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is installed.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the JSON snapshot holding every user record.  Relative
    # paths are resolved against the current working directory by the
    # ``storage`` module.
    data_file: str = os.getenv("DATA_FILE", "data.json")

    # Prefix under which the routes are mounted, e.g. ``/api/v1``.  The
    # default exposes ``/users`` at the root.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
