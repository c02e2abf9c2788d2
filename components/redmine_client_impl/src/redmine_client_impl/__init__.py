"""requests-backed Redmine REST client."""

from redmine_client_impl.base import BuilderKind
from redmine_client_impl.issues import IssueBuilder, IssueFilter, IssuesApi
from redmine_client_impl.projects import ProjectBuilder, ProjectFilter, ProjectsApi
from redmine_client_impl.redmine_impl import RedmineApi, get_client
from redmine_client_impl.time_entries import TimeEntriesApi, TimeEntryBuilder, TimeEntryFilter
from redmine_client_impl.transport import RedmineTransport
from redmine_client_impl.users import UserBuilder, UserFilter, UsersApi, UserStatus

__all__ = [
    "BuilderKind",
    "IssueBuilder",
    "IssueFilter",
    "IssuesApi",
    "ProjectBuilder",
    "ProjectFilter",
    "ProjectsApi",
    "RedmineApi",
    "RedmineTransport",
    "TimeEntriesApi",
    "TimeEntryBuilder",
    "TimeEntryFilter",
    "UserBuilder",
    "UserFilter",
    "UserStatus",
    "UsersApi",
    "get_client",
]
