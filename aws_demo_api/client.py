"""AWS Demo API client.

A thin wrapper around ``requests`` for talking to a running instance of
the service, handy for smoke checks after a deployment:

* :meth:`DemoApiClient.hello` – greeting, optionally personalised.
* :meth:`DemoApiClient.health` – the health probe.
* :meth:`DemoApiClient.list_users` / :meth:`DemoApiClient.get_user` – read users.
* :meth:`DemoApiClient.create_user`, :meth:`DemoApiClient.update_user`,
  :meth:`DemoApiClient.delete_user` – modify users.

Lookups of a missing user return ``None`` (or ``False`` for deletes);
every other unsuccessful response raises :class:`ApiError`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised when the service answers with an unexpected status."""

    def __init__(self, status_code: Optional[int], message: str) -> None:
        super().__init__(f"{status_code}: {message}" if status_code else message)
        self.status_code = status_code
        self.message = message


class DemoApiClient:
    """Client for the ``/api`` endpoints of the service."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Server root, e.g. ``http://localhost:8080``.
            timeout: Per‑request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> requests.Response:
        url = f"{self.base_url}/api{path}"
        logger.debug("Sending %s request to %s", method, url)
        try:
            return self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            raise ApiError(None, str(exc)) from exc

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        if response.ok:
            return
        message = ""
        try:
            body = response.json()
            if isinstance(body, dict):
                message = body.get("detail") or body.get("message") or str(body)
        except ValueError:
            message = response.text
        message = message or response.reason or "request failed"
        logger.error("API request failed (%s): %s", response.status_code, message)
        raise ApiError(response.status_code, message)

    def _json(self, response: requests.Response) -> Any:
        self._raise_for_status(response)
        return response.json()

    # ------------------------------------------------------------------
    # Greeting and health
    # ------------------------------------------------------------------
    def hello(self, name: Optional[str] = None) -> Dict[str, Any]:
        path = "/hello" if name is None else f"/hello/{quote(name, safe='')}"
        return self._json(self._request("GET", path))

    def health(self) -> Dict[str, Any]:
        return self._json(self._request("GET", "/health"))

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> List[Dict[str, Any]]:
        return self._json(self._request("GET", "/users"))

    def get_user(self, user_id: int) -> Optional[Dict[str, Any]]:
        response = self._request("GET", f"/users/{user_id}")
        if response.status_code == 404:
            return None
        return self._json(response)

    def create_user(self, name: str, email: str) -> Dict[str, Any]:
        return self._json(self._request("POST", "/users", json_body={"name": name, "email": email}))

    def update_user(self, user_id: int, name: str, email: str) -> Optional[Dict[str, Any]]:
        response = self._request("PUT", f"/users/{user_id}", json_body={"name": name, "email": email})
        if response.status_code == 404:
            return None
        return self._json(response)

    def delete_user(self, user_id: int) -> bool:
        """Delete a user.  Returns ``False`` if it did not exist."""
        response = self._request("DELETE", f"/users/{user_id}")
        if response.status_code == 404:
            return False
        self._raise_for_status(response)
        return True
