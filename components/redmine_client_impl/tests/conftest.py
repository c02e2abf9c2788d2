"""Shared fixtures for the Redmine client tests.

No test talks to a real server: the transport gets a MagicMock in place of its
requests.Session, and the resource API tests use a MagicMock Transport.
"""

from __future__ import annotations

import copy
from unittest.mock import MagicMock

import pytest

from redmine_client_impl.transport import RedmineTransport
from redmine_interface.client import Connection, Transport

HOST = "https://redmine.test"
API_KEY = "0123456789abcdef"

ISSUE_RAW = {
    "id": 2,
    "project": {"id": 1, "name": "Redmine"},
    "tracker": {"id": 1, "name": "Bug"},
    "status": {"id": 1, "name": "New"},
    "priority": {"id": 2, "name": "Normal"},
    "author": {"id": 5, "name": "John Smith"},
    "assigned_to": {"id": 7, "name": "Jane Doe"},
    "subject": "Crash on login",
    "description": "Stack trace attached",
    "start_date": "2024-03-01",
    "due_date": None,
    "done_ratio": 30,
    "is_private": False,
    "estimated_hours": 3.5,
    "created_on": "2024-03-01T10:00:00Z",
    "updated_on": "2024-03-02T08:30:00Z",
}


def _make_response(status_code: int = 200, text: str = "", headers: dict | None = None) -> MagicMock:
    """Return a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.headers = headers or {}
    return response


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def issue_raw():
    return copy.deepcopy(ISSUE_RAW)


@pytest.fixture
def session():
    """A requests.Session replacement; set session.request.return_value per test."""
    return MagicMock()


@pytest.fixture
def redmine_transport(session):
    return RedmineTransport(Connection(HOST + "/", API_KEY), session=session)


@pytest.fixture
def transport():
    """A Transport double for the resource API tests."""
    return MagicMock(spec=Transport)
