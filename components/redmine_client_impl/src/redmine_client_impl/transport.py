"""
Transport
---------
The only component that talks HTTP. Every request carries the API key as the
``key`` query parameter (never as a header), bodies are JSON, and HTTP outcomes
are mapped onto the errors of ``redmine_interface.errors``.

Only GET follows redirects. A redirected POST, PUT or DELETE would be replayed
as a GET by requests, so its 3xx is returned to the caller as an ApiError.

"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import requests

from redmine_interface.client import Connection, Transport
from redmine_interface.errors import ApiError, NetworkError, ProtocolError, ResourceNotFoundError

logger = logging.getLogger(__name__)


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def raise_for_status(response: requests.Response) -> None:
    """Raise ApiError (ResourceNotFoundError for 404) unless the status is 2xx."""
    if is_success(response.status_code):
        return
    if response.status_code == 404:
        raise ResourceNotFoundError(404, response.text)
    raise ApiError(response.status_code, response.text)


class RedmineTransport(Transport):
    """
    Args:
        connection: Host and API key of the Redmine instance
        timeout:    Seconds passed to requests for every call; None blocks until the server answers
        session:    Optional preconfigured requests.Session (proxies, certificates...)
    """

    def __init__(
        self,
        connection: Connection,
        *,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._connection = connection
        self._timeout = timeout
        self._session = session if session is not None else requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    @property
    def connection(self) -> Connection:
        return self._connection

    # ------------------------------------------------------------------
    # Internal HTTP helpers
    # ------------------------------------------------------------------

    def url(self, path: str) -> str:
        return f"{self._connection.host}{path}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> requests.Response:
        query = dict(params or {})
        # the key always goes last so filter parameters keep their order
        query["key"] = self._connection.api_key
        try:
            response = self._session.request(
                method,
                self.url(path),
                params=query,
                json=body,
                timeout=self._timeout,
                allow_redirects=method == "GET",
            )
        except requests.exceptions.InvalidJSONError as exc:
            # raised before anything is sent: NaN, Decimal, sets...
            raise ValueError(f"{method} {path}: payload is not JSON serializable: {exc}") from exc
        except requests.RequestException as exc:
            message = self._redact(str(exc))
            logger.warning("%s %s failed: %s", method, path, message)
            raise NetworkError(f"{method} {path} failed: {message}") from exc
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return response

    def _redact(self, text: str) -> str:
        # requests puts the full URL, key included, into its error messages
        api_key = self._connection.api_key
        return text.replace(api_key, "***") if api_key else text

    # ------------------------------------------------------------------
    # Transport contract
    # ------------------------------------------------------------------

    def get(self, path: str, query_params: Mapping[str, str] | None = None) -> str:
        """Return the raw body whatever the status; Redmine error bodies are JSON too."""
        return self._request("GET", path, params=query_params).text

    def create(self, path: str, payload: Mapping[str, Any]) -> str:
        """POST a new resource and return its Location header."""
        response = self._request("POST", path, body=payload)
        raise_for_status(response)
        location = response.headers.get("Location")
        if not location:
            raise ProtocolError(f"POST {path} returned {response.status_code} without a Location header")
        return location

    def update(self, path: str, payload: Mapping[str, Any]) -> bool:
        # Redmine answers PUT with 204 No Content on success
        response = self._request("PUT", path, body=payload)
        raise_for_status(response)
        return True

    def delete(self, path: str) -> bool:
        response = self._request("DELETE", path)
        raise_for_status(response)
        return True

    def post_raw(self, path: str, payload: Mapping[str, Any]) -> requests.Response:
        return self._request("POST", path, body=payload)
