"""User Store API client.

A thin wrapper around the ``/users`` endpoints built on the
``requests`` library.  Every method returns a ``(data, error)`` tuple:
``error`` is ``None`` on success, otherwise a dictionary with the
keys ``status_code`` and ``message``.  ``status_code`` is ``None``
when the request never reached the server.

Example::

    client = UserStoreClient(base_url="http://localhost:8080")
    user, error = client.create_user("Ann", "ann@example.com")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class UserStoreClient:
    """Client for the user store HTTP API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            prefix: Path prefix the routes are mounted under (``API_PREFIX``).
            session: Optional requests session.  Created when omitted.
            timeout: Per request timeout in seconds.
        """
        prefix = prefix.strip("/")
        self.base_url = base_url.rstrip("/") + (f"/{prefix}" if prefix else "")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the JSON response.

        Returns ``(data, None)`` on success, with ``data`` set to
        ``None`` for empty bodies, or ``(None, error)`` on failure.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    detail = err_json.get("detail") if isinstance(err_json, dict) else None
                    message = detail if isinstance(detail, str) else str(detail or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users.  The list is empty on failure."""
        data, error = self._request("GET", "/users")
        if error:
            return [], error
        return data or [], None

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single user by ID."""
        return self._request("GET", f"/users/{user_id}")

    def create_user(self, name: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user and return it with its assigned ID."""
        return self._request("POST", "/users", json_body={"name": name, "email": email})

    def update_user(
        self, user_id: Any, name: str, email: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the name and e‑mail of a user."""
        return self._request("PUT", f"/users/{user_id}", json_body={"name": name, "email": email})

    def delete_user(self, user_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a user.  Returns ``(True, None)`` on success."""
        _, error = self._request("DELETE", f"/users/{user_id}")
        if error:
            return False, error
        return True, None
