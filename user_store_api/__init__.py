"""
Top‑level package for the User Store API.

The HTTP service lives in the ``app`` subpackage
(``user_store_api.app.main:app``) and a matching HTTP client in
``user_store_api.client``.
"""

__all__ = []
