"""Redmine users API: http://www.redmine.org/projects/redmine/wiki/Rest_Users.

Most of these calls require an administrator API key.
"""

from __future__ import annotations

from enum import IntEnum

from redmine_client_impl.base import (
    BuilderKind,
    DeleteExecutor,
    ResourceFilter,
    ShowExecutor,
    WriteBuilder,
)
from redmine_interface.client import Transport
from redmine_interface.user import User, UserFields, build_user

__all__ = ["UsersApi", "UserFilter", "UserBuilder", "UserStatus"]


class UserStatus(IntEnum):
    """Values accepted by the ``status`` filter."""

    ACTIVE = 1
    REGISTERED = 2
    LOCKED = 3


class UsersApi:
    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(self) -> UserFilter:
        return UserFilter(self._transport)

    def show(self, user_id: int) -> ShowExecutor[User]:
        return ShowExecutor(self._transport, f"/users/{user_id}.json", "user", build_user)

    def current(self) -> ShowExecutor[User]:
        """Return the user the API key belongs to."""
        return ShowExecutor(self._transport, "/users/current.json", "user", build_user)

    def create(self, login: str, firstname: str, lastname: str, mail: str) -> UserBuilder:
        return UserBuilder.for_create(self._transport, login, firstname, lastname, mail)

    def update(self, user_id: int) -> UserBuilder:
        return UserBuilder.for_update(self._transport, user_id)

    def delete(self, user_id: int) -> DeleteExecutor:
        return DeleteExecutor(self._transport, f"/users/{user_id}.json")


class UserFilter(ResourceFilter[User]):
    path = "/users"
    list_key = "users"
    _build_item = staticmethod(build_user)

    def status(self, status: UserStatus | int) -> UserFilter:
        """Filter on a UserStatus value; Redmine lists only active users otherwise."""
        self._set("status", int(status))
        return self

    def name(self, name: str) -> UserFilter:
        """Match ``name`` against login, firstname, lastname and mail."""
        self._set("name", name)
        return self

    def group_id(self, group_id: int) -> UserFilter:
        self._set("group_id", group_id)
        return self


class UserBuilder(WriteBuilder):
    path = "/users"
    envelope = "user"
    fields_class = UserFields

    @classmethod
    def for_create(
        cls,
        transport: Transport,
        login: str,
        firstname: str,
        lastname: str,
        mail: str,
    ) -> UserBuilder:
        fields = UserFields(
            login=login,
            firstname=firstname,
            lastname=lastname,
            mail=mail,
            must_change_passwd=False,
            generate_password=False,
        )
        return cls(transport, BuilderKind.CREATE, fields)

    def login(self, login: str) -> UserBuilder:
        return self._set("login", login)

    def firstname(self, firstname: str) -> UserBuilder:
        return self._set("firstname", firstname)

    def lastname(self, lastname: str) -> UserBuilder:
        return self._set("lastname", lastname)

    def mail(self, mail: str) -> UserBuilder:
        return self._set("mail", mail)

    def password(self, password: str) -> UserBuilder:
        return self._set("password", password)

    def auth_source_id(self, auth_source_id: int) -> UserBuilder:
        """Authenticate the user against an LDAP source instead of a local password."""
        return self._set("auth_source_id", auth_source_id)

    def must_change_passwd(self, must_change: bool) -> UserBuilder:
        return self._set("must_change_passwd", must_change)

    def generate_password(self, generate: bool) -> UserBuilder:
        return self._set("generate_password", generate)

    def admin(self, admin: bool) -> UserBuilder:
        return self._set("admin", admin)
