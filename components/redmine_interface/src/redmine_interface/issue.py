"""Issue contract - read model and write fields for Redmine issues."""

from __future__ import annotations

from dataclasses import dataclass

from redmine_interface.objects import (
    NamedObject,
    Object,
    WriteFields,
    as_bool,
    as_float,
    as_int,
    as_str,
    build_named_object,
    build_object,
    optional,
)

__all__ = ["Issue", "IssueFields", "build_issue"]


@dataclass(frozen=True)
class Issue:
    """An issue as returned by ``/issues.json`` and ``/issues/{id}.json``."""

    id: int
    project: NamedObject
    tracker: NamedObject
    status: NamedObject
    priority: NamedObject
    author: NamedObject
    subject: str
    created_on: str
    updated_on: str
    done_ratio: int = 0
    assigned_to: NamedObject | None = None
    category: NamedObject | None = None
    fixed_version: NamedObject | None = None
    parent: Object | None = None
    description: str | None = None
    start_date: str | None = None
    due_date: str | None = None
    estimated_hours: float | None = None
    is_private: bool | None = None

    def __repr__(self) -> str:
        return f"<Issue id={self.id!r} subject={self.subject!r} status={self.status.name!r}>"


@dataclass
class IssueFields(WriteFields):
    """Fields accepted by issue create and update requests.

    All fields default to None. Only fields explicitly set are serialized.
    """

    project_id: int | None = None
    tracker_id: int | None = None
    status_id: int | None = None
    priority_id: int | None = None
    subject: str | None = None
    description: str | None = None
    category_id: int | None = None
    fixed_version_id: int | None = None
    assigned_to_id: int | None = None
    parent_issue_id: int | None = None
    watcher_user_ids: list[int] | None = None
    is_private: bool | None = None
    estimated_hours: float | None = None
    start_date: str | None = None
    due_date: str | None = None
    done_ratio: int | None = None
    # update only
    notes: str | None = None
    private_notes: bool | None = None


def build_issue(raw: dict) -> Issue:
    """Return an Issue from the JSON object Redmine sends for one issue.

    Raises:
        KeyError:  If a mandatory field is missing
        TypeError: If a field has an unexpected shape

    """
    return Issue(
        id=as_int(raw["id"]),
        project=build_named_object(raw["project"]),
        tracker=build_named_object(raw["tracker"]),
        status=build_named_object(raw["status"]),
        priority=build_named_object(raw["priority"]),
        author=build_named_object(raw["author"]),
        subject=as_str(raw["subject"]),
        created_on=as_str(raw["created_on"]),
        updated_on=as_str(raw["updated_on"]),
        done_ratio=optional(as_int, raw.get("done_ratio")) or 0,
        assigned_to=optional(build_named_object, raw.get("assigned_to")),
        category=optional(build_named_object, raw.get("category")),
        fixed_version=optional(build_named_object, raw.get("fixed_version")),
        parent=optional(build_object, raw.get("parent")),
        description=optional(as_str, raw.get("description")),
        start_date=optional(as_str, raw.get("start_date")),
        due_date=optional(as_str, raw.get("due_date")),
        estimated_hours=optional(as_float, raw.get("estimated_hours")),
        is_private=optional(as_bool, raw.get("is_private")),
    )
