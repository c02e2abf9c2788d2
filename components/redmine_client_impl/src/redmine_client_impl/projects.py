"""Redmine projects API: http://www.redmine.org/projects/redmine/wiki/Rest_Projects."""

from __future__ import annotations

from redmine_client_impl.base import (
    BuilderKind,
    DeleteExecutor,
    ResourceFilter,
    ShowExecutor,
    WriteBuilder,
)
from redmine_interface.client import Transport
from redmine_interface.project import Project, ProjectFields, build_project

__all__ = ["ProjectsApi", "ProjectFilter", "ProjectBuilder"]


class ProjectsApi:
    """Exposes every operation of the projects API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(self) -> ProjectFilter:
        return ProjectFilter(self._transport)

    def show(self, project_id: int) -> ShowExecutor[Project]:
        return ShowExecutor(self._transport, f"/projects/{project_id}.json", "project", build_project)

    def create(self, name: str, identifier: str) -> ProjectBuilder:
        """Return a builder for a new project.

        Args:
            name:       Display name
            identifier: Unique, url-safe identifier (lowercase letters, digits, dashes)
        """
        return ProjectBuilder.for_create(self._transport, name, identifier)

    def update(self, project_id: int) -> ProjectBuilder:
        return ProjectBuilder.for_update(self._transport, project_id)

    def delete(self, project_id: int) -> DeleteExecutor:
        return DeleteExecutor(self._transport, f"/projects/{project_id}.json")


class ProjectFilter(ResourceFilter[Project]):
    """Project list; Redmine only supports paging on this endpoint."""

    path = "/projects"
    list_key = "projects"
    _build_item = staticmethod(build_project)


class ProjectBuilder(WriteBuilder):
    path = "/projects"
    envelope = "project"
    fields_class = ProjectFields

    @classmethod
    def for_create(cls, transport: Transport, name: str, identifier: str) -> ProjectBuilder:
        fields = ProjectFields(
            name=name,
            identifier=identifier,
            is_public=False,
            inherit_members=False,
        )
        return cls(transport, BuilderKind.CREATE, fields)

    def name(self, name: str) -> ProjectBuilder:
        return self._set("name", name)

    def identifier(self, identifier: str) -> ProjectBuilder:
        return self._set("identifier", identifier)

    def description(self, description: str) -> ProjectBuilder:
        return self._set("description", description)

    def homepage(self, homepage: str) -> ProjectBuilder:
        return self._set("homepage", homepage)

    def is_public(self, public: bool) -> ProjectBuilder:
        return self._set("is_public", public)

    def parent_id(self, project_id: int) -> ProjectBuilder:
        return self._set("parent_id", project_id)

    def inherit_members(self, inherit: bool) -> ProjectBuilder:
        """Let a subproject inherit the members of its parent."""
        return self._set("inherit_members", inherit)
