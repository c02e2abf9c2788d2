"""Time entry contract."""

from __future__ import annotations

from dataclasses import dataclass

from redmine_interface.objects import (
    NamedObject,
    Object,
    WriteFields,
    as_float,
    as_int,
    as_str,
    build_named_object,
    build_object,
    optional,
)

__all__ = ["TimeEntry", "TimeEntryFields", "build_time_entry"]


@dataclass(frozen=True)
class TimeEntry:
    """Hours logged by a user, optionally against an issue."""

    id: int
    project: NamedObject
    user: NamedObject
    activity: NamedObject
    hours: float
    spent_on: str
    created_on: str
    updated_on: str
    issue: Object | None = None
    comments: str = ""


@dataclass
class TimeEntryFields(WriteFields):
    """Fields accepted by time entry create and update requests.

    Redmine needs either ``issue_id`` or ``project_id`` on creation.
    """

    issue_id: int | None = None
    project_id: int | None = None
    hours: float | None = None
    activity_id: int | None = None
    spent_on: str | None = None
    comments: str | None = None
    user_id: int | None = None


def build_time_entry(raw: dict) -> TimeEntry:
    """Return a TimeEntry from the JSON object Redmine sends for one time entry."""
    return TimeEntry(
        id=as_int(raw["id"]),
        project=build_named_object(raw["project"]),
        user=build_named_object(raw["user"]),
        activity=build_named_object(raw["activity"]),
        hours=as_float(raw["hours"]),
        spent_on=as_str(raw["spent_on"]),
        created_on=as_str(raw["created_on"]),
        updated_on=as_str(raw["updated_on"]),
        issue=optional(build_object, raw.get("issue")),
        comments=optional(as_str, raw.get("comments")) or "",
    )
