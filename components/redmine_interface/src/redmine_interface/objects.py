"""Reference objects and the list wrapper shared by every read model."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from typing import Any, Generic, TypeVar

__all__ = [
    "Object",
    "NamedObject",
    "ResourceList",
    "WriteFields",
    "as_bool",
    "as_float",
    "as_int",
    "as_str",
    "build_object",
    "build_named_object",
    "build_resource_list",
    "optional",
]

T = TypeVar("T")


@dataclass(frozen=True)
class Object:
    """Reference to a linked entity that Redmine only exposes by id (e.g. a parent issue)."""

    id: int


@dataclass(frozen=True)
class NamedObject:
    """Reference to a linked entity carrying its display name (status, tracker, assignee...)."""

    id: int
    name: str


@dataclass(frozen=True)
class ResourceList(Generic[T]):
    """Items of one list response plus the paging values Redmine reports alongside them."""

    items: tuple[T, ...]
    total_count: int | None = None
    offset: int | None = None
    limit: int | None = None

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]


class WriteFields:
    """Mixin for the write-side dataclasses: every field defaults to None, meaning "absent".

    Only fields explicitly set to a non-None value are sent to Redmine, so an update
    never overwrites remote data with a placeholder. An explicit 0, "" or False is sent as-is.
    """

    def set_fields(self) -> dict[str, Any]:
        """Return a dict containing only the fields explicitly set to non-None values."""
        out: dict[str, Any] = {}
        for f in dataclass_fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[f.name] = list(value) if isinstance(value, list) else value
        return out


# ---------------------------------------------------------------------------
# Builders - raise KeyError / TypeError on malformed input, callers wrap them
# ---------------------------------------------------------------------------

def as_int(value: Any) -> int:
    """Return ``value`` if it is a JSON integer; bool is rejected even though it subclasses int."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def as_float(value: Any) -> float:
    """Return ``value`` as a float if it is a JSON number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return float(value)


def as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def as_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {type(value).__name__}")
    return value


def build_object(raw: dict) -> Object:
    """Return an Object from ``{"id": ...}``."""
    return Object(id=as_int(raw["id"]))


def build_named_object(raw: dict) -> NamedObject:
    """Return a NamedObject from ``{"id": ..., "name": ...}``."""
    return NamedObject(id=as_int(raw["id"]), name=as_str(raw["name"]))


def optional(build: Callable[[Any], T], value: Any) -> T | None:
    """Apply ``build`` unless the field is missing or null."""
    if value is None:
        return None
    return build(value)


def build_resource_list(raw: dict, key: str, build: Callable[[dict], T]) -> ResourceList[T]:
    """Build a ResourceList from a list response body.

    Args:
        raw:   The decoded JSON body (e.g. ``{"issues": [...], "total_count": 3}``)
        key:   Plural key holding the items (e.g. 'issues')
        build: Factory turning one raw item into its read model

    """
    items = raw[key]
    if not isinstance(items, list):
        raise TypeError(f"expected a list under {key!r}, got {type(items).__name__}")
    return ResourceList(
        items=tuple(build(item) for item in items),
        total_count=optional(as_int, raw.get("total_count")),
        offset=optional(as_int, raw.get("offset")),
        limit=optional(as_int, raw.get("limit")),
    )
