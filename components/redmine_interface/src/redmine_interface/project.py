"""Project contract - read model and write fields for Redmine projects."""

from __future__ import annotations

from dataclasses import dataclass

from redmine_interface.objects import (
    NamedObject,
    WriteFields,
    as_bool,
    as_int,
    as_str,
    build_named_object,
    optional,
)

__all__ = ["Project", "ProjectFields", "build_project"]


@dataclass(frozen=True)
class Project:
    """A project as returned by ``/projects.json`` and ``/projects/{id}.json``."""

    id: int
    name: str
    identifier: str
    status: int
    created_on: str
    updated_on: str
    description: str | None = None
    homepage: str | None = None
    is_public: bool | None = None
    parent: NamedObject | None = None


@dataclass
class ProjectFields(WriteFields):
    """Fields accepted by project create and update requests."""

    name: str | None = None
    identifier: str | None = None
    description: str | None = None
    homepage: str | None = None
    is_public: bool | None = None
    parent_id: int | None = None
    inherit_members: bool | None = None


def build_project(raw: dict) -> Project:
    """Return a Project from the JSON object Redmine sends for one project."""
    return Project(
        id=as_int(raw["id"]),
        name=as_str(raw["name"]),
        identifier=as_str(raw["identifier"]),
        status=as_int(raw["status"]),
        created_on=as_str(raw["created_on"]),
        updated_on=as_str(raw["updated_on"]),
        description=optional(as_str, raw.get("description")),
        homepage=optional(as_str, raw.get("homepage")),
        is_public=optional(as_bool, raw.get("is_public")),
        parent=optional(build_named_object, raw.get("parent")),
    )
