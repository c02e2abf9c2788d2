"""Redmine time entries API: http://www.redmine.org/projects/redmine/wiki/Rest_TimeEntries."""

from __future__ import annotations

from redmine_client_impl.base import (
    BuilderKind,
    DeleteExecutor,
    ResourceFilter,
    ShowExecutor,
    WriteBuilder,
)
from redmine_interface.client import Transport
from redmine_interface.time_entry import TimeEntry, TimeEntryFields, build_time_entry

__all__ = ["TimeEntriesApi", "TimeEntryFilter", "TimeEntryBuilder"]


class TimeEntriesApi:
    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(self) -> TimeEntryFilter:
        return TimeEntryFilter(self._transport)

    def show(self, entry_id: int) -> ShowExecutor[TimeEntry]:
        return ShowExecutor(self._transport, f"/time_entries/{entry_id}.json", "time_entry", build_time_entry)

    def create(self, issue_id: int, hours: float, activity_id: int) -> TimeEntryBuilder:
        """Return a builder logging ``hours`` of ``activity_id`` against an issue."""
        return TimeEntryBuilder.for_create(self._transport, issue_id, hours, activity_id)

    def update(self, entry_id: int) -> TimeEntryBuilder:
        return TimeEntryBuilder.for_update(self._transport, entry_id)

    def delete(self, entry_id: int) -> DeleteExecutor:
        return DeleteExecutor(self._transport, f"/time_entries/{entry_id}.json")


class TimeEntryFilter(ResourceFilter[TimeEntry]):
    path = "/time_entries"
    list_key = "time_entries"
    _build_item = staticmethod(build_time_entry)

    def user_id(self, user_id: int) -> TimeEntryFilter:
        self._set("user_id", user_id)
        return self

    def project_id(self, project_id: int) -> TimeEntryFilter:
        self._set("project_id", project_id)
        return self

    def issue_id(self, issue_id: int) -> TimeEntryFilter:
        self._set("issue_id", issue_id)
        return self

    def spent_from(self, date: str) -> TimeEntryFilter:
        """Only entries spent on or after ``date`` (YYYY-MM-DD)."""
        self._set("from", date)
        return self

    def spent_to(self, date: str) -> TimeEntryFilter:
        """Only entries spent on or before ``date`` (YYYY-MM-DD)."""
        self._set("to", date)
        return self


class TimeEntryBuilder(WriteBuilder):
    path = "/time_entries"
    envelope = "time_entry"
    fields_class = TimeEntryFields

    @classmethod
    def for_create(
        cls,
        transport: Transport,
        issue_id: int,
        hours: float,
        activity_id: int,
    ) -> TimeEntryBuilder:
        fields = TimeEntryFields(issue_id=issue_id, hours=hours, activity_id=activity_id)
        return cls(transport, BuilderKind.CREATE, fields)

    def issue_id(self, issue_id: int) -> TimeEntryBuilder:
        return self._set("issue_id", issue_id)

    def project_id(self, project_id: int) -> TimeEntryBuilder:
        return self._set("project_id", project_id)

    def hours(self, hours: float) -> TimeEntryBuilder:
        return self._set("hours", hours)

    def activity_id(self, activity_id: int) -> TimeEntryBuilder:
        return self._set("activity_id", activity_id)

    def spent_on(self, date: str) -> TimeEntryBuilder:
        """Set the day the time was spent (YYYY-MM-DD); Redmine defaults to today."""
        return self._set("spent_on", date)

    def comments(self, comments: str) -> TimeEntryBuilder:
        return self._set("comments", comments)

    def user_id(self, user_id: int) -> TimeEntryBuilder:
        """Log the time on behalf of another user (needs the matching permission)."""
        return self._set("user_id", user_id)
