"""Redmine issues API: http://www.redmine.org/projects/redmine/wiki/Rest_Issues."""

from __future__ import annotations

import logging

from redmine_client_impl.base import (
    BuilderKind,
    DeleteExecutor,
    ResourceFilter,
    ShowExecutor,
    WriteBuilder,
)
from redmine_client_impl.transport import raise_for_status
from redmine_interface.client import Transport
from redmine_interface.issue import Issue, IssueFields, build_issue

logger = logging.getLogger(__name__)

__all__ = [
    "IssuesApi",
    "IssueFilter",
    "IssueBuilder",
    "IssueAddWatcher",
    "IssueRemoveWatcher",
]


class IssuesApi:
    """Exposes every operation of the issues API.

    Each method only builds the object that will perform the request; nothing
    is sent until its ``execute()`` is called.

    Example:
        api.issues.create(1, 1, 1, 1, "my subject").is_private(True).estimated_hours(3.4).execute()

    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(self) -> IssueFilter:
        """Return a filter which ultimately leads to an issue list."""
        return IssueFilter(self._transport)

    def show(self, issue_id: int) -> ShowExecutor[Issue]:
        return ShowExecutor(self._transport, f"/issues/{issue_id}.json", "issue", build_issue)

    def create(
        self,
        project_id: int,
        tracker_id: int,
        status_id: int,
        priority_id: int,
        subject: str,
    ) -> IssueBuilder:
        """Return a builder for a new issue, pre-filled with the mandatory fields."""
        return IssueBuilder.for_create(
            self._transport,
            project_id,
            tracker_id,
            status_id,
            priority_id,
            subject,
        )

    def update(self, issue_id: int) -> IssueBuilder:
        """Return a builder that changes only the fields set on it."""
        return IssueBuilder.for_update(self._transport, issue_id)

    def delete(self, issue_id: int) -> DeleteExecutor:
        return DeleteExecutor(self._transport, f"/issues/{issue_id}.json")

    def add_watcher(self, issue_id: int, user_id: int) -> IssueAddWatcher:
        return IssueAddWatcher(self._transport, issue_id, user_id)

    def remove_watcher(self, issue_id: int, user_id: int) -> IssueRemoveWatcher:
        return IssueRemoveWatcher(self._transport, issue_id, user_id)


# ---------------------------------------------------------------------------
# List
# ---------------------------------------------------------------------------

class IssueFilter(ResourceFilter[Issue]):
    """Parameters the issue list should be filtered by."""

    path = "/issues"
    list_key = "issues"
    _build_item = staticmethod(build_issue)

    def assigned_to_id(self, user_id: int) -> IssueFilter:
        self._set("assigned_to_id", user_id)
        return self

    def issue_id(self, issue_id: int) -> IssueFilter:
        """Add one issue id to the ids requested so far."""
        self._extend("issue_id", [issue_id])
        return self

    def issue_ids(self, issue_ids: list[int]) -> IssueFilter:
        """Add several issue ids to the ids requested so far."""
        self._extend("issue_id", issue_ids)
        return self

    def parent_id(self, issue_id: int) -> IssueFilter:
        self._set("parent_id", issue_id)
        return self

    def project_id(self, project_id: int) -> IssueFilter:
        self._set("project_id", project_id)
        return self

    def status_id(self, status_id: int) -> IssueFilter:
        self._set("status_id", status_id)
        return self

    def subproject_id(self, project_id: int) -> IssueFilter:
        self._set("subproject_id", project_id)
        return self

    def tracker_id(self, tracker_id: int) -> IssueFilter:
        self._set("tracker_id", tracker_id)
        return self


# ---------------------------------------------------------------------------
# Create / update
# ---------------------------------------------------------------------------

class IssueBuilder(WriteBuilder):
    """Builds the payload of an issue creation or update."""

    path = "/issues"
    envelope = "issue"
    fields_class = IssueFields

    @classmethod
    def for_create(
        cls,
        transport: Transport,
        project_id: int,
        tracker_id: int,
        status_id: int,
        priority_id: int,
        subject: str,
    ) -> IssueBuilder:
        # Redmine needs both flags on creation
        fields = IssueFields(
            project_id=project_id,
            tracker_id=tracker_id,
            status_id=status_id,
            priority_id=priority_id,
            subject=subject,
            is_private=False,
            private_notes=False,
        )
        return cls(transport, BuilderKind.CREATE, fields)

    def project_id(self, project_id: int) -> IssueBuilder:
        return self._set("project_id", project_id)

    def tracker_id(self, tracker_id: int) -> IssueBuilder:
        return self._set("tracker_id", tracker_id)

    def status_id(self, status_id: int) -> IssueBuilder:
        return self._set("status_id", status_id)

    def priority_id(self, priority_id: int) -> IssueBuilder:
        return self._set("priority_id", priority_id)

    def subject(self, subject: str) -> IssueBuilder:
        return self._set("subject", subject)

    def description(self, description: str) -> IssueBuilder:
        return self._set("description", description)

    def category_id(self, category_id: int) -> IssueBuilder:
        return self._set("category_id", category_id)

    def fixed_version_id(self, version_id: int) -> IssueBuilder:
        return self._set("fixed_version_id", version_id)

    def assigned_to_id(self, user_id: int) -> IssueBuilder:
        return self._set("assigned_to_id", user_id)

    def parent_issue_id(self, issue_id: int) -> IssueBuilder:
        return self._set("parent_issue_id", issue_id)

    def watcher_user_ids(self, user_ids: list[int]) -> IssueBuilder:
        """Add several users as watchers, keeping the ones added before."""
        return self._extend("watcher_user_ids", user_ids)

    def add_watcher_user_id(self, user_id: int) -> IssueBuilder:
        return self._extend("watcher_user_ids", [user_id])

    def is_private(self, private: bool) -> IssueBuilder:
        return self._set("is_private", private)

    def estimated_hours(self, hours: float) -> IssueBuilder:
        return self._set("estimated_hours", hours)

    def start_date(self, date: str) -> IssueBuilder:
        """Set the start date, formatted YYYY-MM-DD."""
        return self._set("start_date", date)

    def due_date(self, date: str) -> IssueBuilder:
        """Set the due date, formatted YYYY-MM-DD."""
        return self._set("due_date", date)

    def done_ratio(self, percent: int) -> IssueBuilder:
        return self._set("done_ratio", percent)

    def notes(self, notes: str) -> IssueBuilder:
        """Add a journal note; only meaningful for an update."""
        return self._set("notes", notes)

    def private_notes(self, private: bool) -> IssueBuilder:
        return self._set("private_notes", private)


# ---------------------------------------------------------------------------
# Watchers
# ---------------------------------------------------------------------------

class IssueAddWatcher:
    """Adds a user as watcher of an issue."""

    def __init__(self, transport: Transport, issue_id: int, user_id: int) -> None:
        self._transport = transport
        self._issue_id = issue_id
        self._user_id = user_id

    def execute(self) -> bool:
        # Redmine answers with 204 and no Location, so the create contract does not apply
        response = self._transport.post_raw(
            f"/issues/{self._issue_id}/watchers.json",
            {"user_id": self._user_id},
        )
        raise_for_status(response)
        logger.debug("User %s now watches issue %s", self._user_id, self._issue_id)
        return True


class IssueRemoveWatcher:
    """Removes a user from the watchers of an issue."""

    def __init__(self, transport: Transport, issue_id: int, user_id: int) -> None:
        self._transport = transport
        self._issue_id = issue_id
        self._user_id = user_id

    def execute(self) -> bool:
        return self._transport.delete(f"/issues/{self._issue_id}/watchers/{self._user_id}.json")
