"""Builder plumbing shared by every resource API.

Each resource module only declares paths, envelopes and setters; the request
building, JSON decoding and dispatch to the transport live here.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from redmine_interface.client import Transport
from redmine_interface.errors import ParseError
from redmine_interface.objects import ResourceList, WriteFields, build_resource_list

logger = logging.getLogger(__name__)

T = TypeVar("T")
F = TypeVar("F", bound="ResourceFilter")
B = TypeVar("B", bound="WriteBuilder")


def parse_json(body: str, build: Callable[[Any], T]) -> T:
    """Decode ``body`` and hand it to ``build``; any mismatch becomes a ParseError.

    No partial result is ever returned.
    """
    try:
        return build(json.loads(body))
    except (ValueError, KeyError, TypeError, RecursionError) as exc:
        logger.debug("Response did not match the expected schema: %r", body[:200])
        raise ParseError(f"Can't parse json: {exc!r}") from exc


# ---------------------------------------------------------------------------
# List queries
# ---------------------------------------------------------------------------

class ResourceFilter(Generic[T]):
    """Accumulates optional query constraints before a single list request.

    Scalar constraints keep the last value set; id-list constraints append on
    every call and are sent comma-joined under one parameter name.
    """

    path: ClassVar[str]
    list_key: ClassVar[str]

    def __init__(self, transport: Transport) -> None:
        self._transport = transport
        self._scalars: dict[str, int | str] = {}
        self._id_lists: dict[str, list[int]] = {}

    @staticmethod
    def _build_item(raw: dict) -> T:
        raise NotImplementedError

    def _set(self, name: str, value: int | str) -> None:
        self._scalars[name] = value

    def _extend(self, name: str, ids: list[int]) -> None:
        self._id_lists.setdefault(name, []).extend(ids)

    def offset(self: F, offset: int) -> F:
        """Skip the first ``offset`` matching records."""
        self._set("offset", offset)
        return self

    def limit(self: F, limit: int) -> F:
        """Return at most ``limit`` records (Redmine caps this at 100 by default)."""
        self._set("limit", limit)
        return self

    def query_params(self) -> dict[str, str]:
        """Serialize every constraint that was set into string query parameters."""
        params = {name: str(value) for name, value in self._scalars.items()}
        for name, ids in self._id_lists.items():
            if ids:
                params[name] = ",".join(str(i) for i in ids)
        return params

    def execute(self) -> ResourceList[T]:
        """Perform the request and return the records matching the filter."""
        body = self._transport.get(f"{self.path}.json", self.query_params())
        return parse_json(body, lambda raw: build_resource_list(raw, self.list_key, self._build_item))


# ---------------------------------------------------------------------------
# Single-shot executors
# ---------------------------------------------------------------------------

class ShowExecutor(Generic[T]):
    """Fetches one resource and unwraps its envelope (``{"issue": {...}}``)."""

    def __init__(self, transport: Transport, path: str, envelope: str, build: Callable[[dict], T]) -> None:
        self._transport = transport
        self._path = path
        self._envelope = envelope
        self._build = build

    def execute(self) -> T:
        body = self._transport.get(self._path)
        return parse_json(body, lambda raw: self._build(raw[self._envelope]))


class DeleteExecutor:
    def __init__(self, transport: Transport, path: str) -> None:
        self._transport = transport
        self._path = path

    def execute(self) -> bool:
        return self._transport.delete(self._path)


# ---------------------------------------------------------------------------
# Create / update
# ---------------------------------------------------------------------------

class BuilderKind(str, Enum):
    CREATE = "create"
    UPDATE = "update"


class WriteBuilder:
    """Accumulates the fields of one create or update request.

    Subclasses declare the collection ``path`` (e.g. '/issues'), the JSON
    ``envelope`` (e.g. 'issue') and the ``fields_class`` holding the payload,
    and provide a ``for_create`` factory taking the mandatory fields.
    """

    path: ClassVar[str]
    envelope: ClassVar[str]
    fields_class: ClassVar[type[WriteFields]]

    def __init__(
        self,
        transport: Transport,
        kind: BuilderKind,
        fields: WriteFields,
        update_id: int | None = None,
    ) -> None:
        if kind is BuilderKind.UPDATE and update_id is None:
            raise ValueError("an update builder needs the id of the resource to update")
        self._transport = transport
        self._kind = kind
        self._fields = fields
        self._update_id = update_id

    @classmethod
    def for_update(cls: type[B], transport: Transport, resource_id: int) -> B:
        """Start an update of ``resource_id``; every field begins absent ("leave unchanged")."""
        return cls(transport, BuilderKind.UPDATE, cls.fields_class(), resource_id)

    @property
    def kind(self) -> BuilderKind:
        return self._kind

    @property
    def update_id(self) -> int | None:
        return self._update_id

    def _set(self: B, name: str, value: Any) -> B:
        setattr(self._fields, name, value)
        return self

    def _extend(self: B, name: str, ids: list[int]) -> B:
        current = getattr(self._fields, name) or []
        setattr(self._fields, name, [*current, *ids])
        return self

    def payload(self) -> dict[str, dict[str, Any]]:
        """Return the enveloped JSON body, omitting every field left absent."""
        return {self.envelope: self._fields.set_fields()}

    def target_path(self) -> str:
        if self._kind is BuilderKind.CREATE:
            return f"{self.path}.json"
        return f"{self.path}/{self._update_id}.json"

    def execute(self) -> str | bool:
        """Create or update the resource.

        Returns:
            The Location of the new resource for a create, True for an update

        """
        if self._kind is BuilderKind.CREATE:
            return self._transport.create(self.target_path(), self.payload())
        return self._transport.update(self.target_path(), self.payload())
