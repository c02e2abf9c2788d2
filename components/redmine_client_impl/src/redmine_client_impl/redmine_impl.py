"""
Authentication
--------------
Redmine authenticates REST calls with a per-user API key, found under
"My account > API access key". The client supports two credential modes:

1. When get_client(interactive = True)
    User is prompted at runtime for any value missing from the environment.
2. When get_client(interactive = False) - Default
        REDMINE_HOST     https://redmine.example.org
        REDMINE_API_KEY  <40 character key>

"""
from __future__ import annotations

import logging
import os
from getpass import getpass

from redmine_client_impl.issues import IssuesApi
from redmine_client_impl.projects import ProjectsApi
from redmine_client_impl.time_entries import TimeEntriesApi
from redmine_client_impl.transport import RedmineTransport
from redmine_client_impl.users import UsersApi
from redmine_interface.client import Connection, Transport

logger = logging.getLogger(__name__)

__all__ = ["RedmineApi", "get_client"]


class RedmineApi:
    """Single entry point: one accessor per resource kind, all sharing one Connection.

    Args:
        host:      Redmine root URL (e.g. 'https://redmine.example.org')
        api_key:   API access key of the calling user
        timeout:   Optional per-request timeout in seconds
        transport: Transport to use instead of the default requests-backed one

    Raises:
        ValueError: If ``timeout`` is combined with ``transport``, or the given
            RedmineTransport is bound to another Connection
    """

    def __init__(
        self,
        host: str,
        api_key: str,
        *,
        timeout: float | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._connection = Connection(host, api_key)
        if transport is None:
            transport = RedmineTransport(self._connection, timeout=timeout)
        elif timeout is not None:
            raise ValueError("timeout only applies to the default transport; configure it on the transport given")
        elif isinstance(transport, RedmineTransport) and transport.connection != self._connection:
            raise ValueError("transport is bound to a different host or API key")
        self._transport = transport
        self._issues = IssuesApi(transport)
        self._projects = ProjectsApi(transport)
        self._time_entries = TimeEntriesApi(transport)
        self._users = UsersApi(transport)

    @property
    def connection(self) -> Connection:
        return self._connection

    @property
    def issues(self) -> IssuesApi:
        return self._issues

    @property
    def projects(self) -> ProjectsApi:
        return self._projects

    @property
    def time_entries(self) -> TimeEntriesApi:
        return self._time_entries

    @property
    def users(self) -> UsersApi:
        return self._users

    def __repr__(self) -> str:
        return f"<RedmineApi host={self._connection.host!r}>"


# ---------------------------------------------------------------------------
# Get client
# ---------------------------------------------------------------------------

def get_client(*, interactive: bool = False, timeout: float | None = None) -> RedmineApi:
    """Return a configured RedmineApi.

    Reads credentials from environment variables. If "interactive = True" and
    any variable is missing, the user will be prompted.

    Environment variables:
        REDMINE_HOST:     Root URL of the Redmine instance.
        REDMINE_API_KEY:  API access key of the calling user.

    Raises:
        EnvironmentError: If a variable is missing and interactive is False

    """
    host = os.environ.get("REDMINE_HOST", "")
    api_key = os.environ.get("REDMINE_API_KEY", "")

    if interactive:
        if not host:
            host = input("Redmine host (e.g. https://redmine.example.org): ").strip()
        if not api_key:
            api_key = getpass("Redmine API key: ").strip()
    else:
        missing = [name for name, val in [
            ("REDMINE_HOST", host),
            ("REDMINE_API_KEY", api_key),
        ] if not val]
        if missing:
            raise EnvironmentError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Set them or call get_client(interactive=True)."
            )

    logger.debug("Using Redmine at %s", host)
    return RedmineApi(host, api_key, timeout=timeout)
