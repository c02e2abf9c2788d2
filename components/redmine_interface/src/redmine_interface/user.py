"""User contract."""

from __future__ import annotations

from dataclasses import dataclass

from redmine_interface.objects import WriteFields, as_int, as_str, optional

__all__ = ["User", "UserFields", "build_user"]


@dataclass(frozen=True)
class User:
    id: int
    login: str
    firstname: str
    lastname: str
    mail: str
    created_on: str
    last_login_on: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}".strip()


@dataclass
class UserFields(WriteFields):
    login: str | None = None
    firstname: str | None = None
    lastname: str | None = None
    mail: str | None = None
    password: str | None = None
    auth_source_id: int | None = None
    must_change_passwd: bool | None = None
    generate_password: bool | None = None
    admin: bool | None = None

    def __repr__(self) -> str:
        # keep the password out of logs and tracebacks
        shown = {k: ("***" if k == "password" else v) for k, v in self.set_fields().items()}
        return f"UserFields({shown})"


def build_user(raw: dict) -> User:
    """Return a User from the JSON object Redmine sends for one user."""
    return User(
        id=as_int(raw["id"]),
        login=as_str(raw["login"]),
        firstname=as_str(raw["firstname"]),
        lastname=as_str(raw["lastname"]),
        mail=as_str(raw["mail"]),
        created_on=as_str(raw["created_on"]),
        last_login_on=optional(as_str, raw.get("last_login_on")),
    )
