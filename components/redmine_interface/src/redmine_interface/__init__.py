"""Contracts shared by Redmine client implementations: transport, errors and resource models."""

from redmine_interface.client import Connection, Transport
from redmine_interface.errors import (
    ApiError,
    NetworkError,
    ParseError,
    ProtocolError,
    RedmineError,
    ResourceNotFoundError,
)
from redmine_interface.issue import Issue, IssueFields, build_issue
from redmine_interface.objects import NamedObject, Object, ResourceList
from redmine_interface.project import Project, ProjectFields, build_project
from redmine_interface.time_entry import TimeEntry, TimeEntryFields, build_time_entry
from redmine_interface.user import User, UserFields, build_user

__all__ = [
    "ApiError",
    "Connection",
    "Issue",
    "IssueFields",
    "NamedObject",
    "NetworkError",
    "Object",
    "ParseError",
    "Project",
    "ProjectFields",
    "ProtocolError",
    "RedmineError",
    "ResourceList",
    "ResourceNotFoundError",
    "TimeEntry",
    "TimeEntryFields",
    "Transport",
    "User",
    "UserFields",
    "build_issue",
    "build_project",
    "build_time_entry",
    "build_user",
]
