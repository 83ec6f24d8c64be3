"""
Application package initializer.

The service is organised into ``core`` (configuration, logging and
snapshot persistence), ``schemas`` (pydantic payloads), ``services``
(the user store) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
