"""Core transport contract and the connection settings it is built from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = ["Connection", "Transport"]


@dataclass(frozen=True)
class Connection:
    """Immutable host + API key pair shared by every resource API.

    Args:
        host:    Root URL of the Redmine instance (e.g. 'https://redmine.example.org')
        api_key: API access key, sent as the ``key`` query parameter on every request
    """

    host: str
    api_key: str

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "host", self.host.rstrip("/"))

    def __repr__(self) -> str:
        return f"<Connection host={self.host!r}>"


class Transport(ABC):
    """Performs the HTTP round trips for every resource API.

    Implementations are the only place aware of the wire format: they attach the
    API key, encode JSON bodies and translate HTTP outcomes into the errors of
    ``redmine_interface.errors``.
    """

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------
    @abstractmethod
    def get(self, path: str, query_params: Mapping[str, str] | None = None) -> str:
        """Fetch ``path`` and return the raw response body.

        Args:
            path:         Path relative to the host (e.g. '/issues.json')
            query_params: Extra query parameters; the API key is always appended

        Notes on usage:
            Any HTTP status is accepted, Redmine answers "not found" with a JSON
            error body that the caller is expected to parse.

        Raises:
            NetworkError: If no HTTP response could be obtained

        """
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------
    @abstractmethod
    def create(self, path: str, payload: Mapping[str, Any]) -> str:
        """POST ``payload`` as JSON and return the Location of the new resource.

        Raises:
            NetworkError:  If no HTTP response could be obtained
            ApiError:      If the status is not 2xx
            ProtocolError: If a 2xx response has no Location header

        """
        raise NotImplementedError

    @abstractmethod
    def update(self, path: str, payload: Mapping[str, Any]) -> bool:
        """PUT ``payload`` as JSON; returns True on any 2xx status.

        Raises:
            NetworkError: If no HTTP response could be obtained
            ApiError:     If the status is not 2xx

        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, path: str) -> bool:
        """DELETE ``path``; returns True on any 2xx status.

        Raises:
            NetworkError: If no HTTP response could be obtained
            ApiError:     If the status is not 2xx

        """
        raise NotImplementedError

    @abstractmethod
    def post_raw(self, path: str, payload: Mapping[str, Any]) -> Any:
        """POST ``payload`` as JSON and hand back the untouched response.

        Used by sub-resource actions (watchers) that inspect the status code
        themselves instead of relying on the create contract.
        """
        raise NotImplementedError
