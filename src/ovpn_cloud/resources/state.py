"""
The record handed to resource lifecycle handlers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..errors import SchemaValidationError
from .schema import ResourceSchema


class ResourceData:
    """
    Desired values, prior state and identity of a single resource.

    ``prior`` is the last state the engine recorded; ``values`` start as the
    desired configuration and are overwritten by handlers with what the
    remote reports. An empty id means the resource does not exist.
    """

    def __init__(
        self,
        schema: ResourceSchema,
        values: Mapping[str, Any] | None = None,
        *,
        prior: Mapping[str, Any] | None = None,
        id: str = "",
    ) -> None:
        self.schema = schema
        self._values: dict[str, Any] = dict(values or {})
        self._prior: dict[str, Any] = dict(prior or {})
        self._id = id

    @classmethod
    def from_config(
        cls,
        schema: ResourceSchema,
        config: Mapping[str, Any],
        *,
        prior: Mapping[str, Any] | None = None,
        id: str = "",
    ) -> ResourceData:
        """Validate ``config`` against ``schema`` and wrap it."""
        return cls(schema, schema.validate(config), prior=prior, id=id)

    @classmethod
    def from_state(cls, schema: ResourceSchema, state: Mapping[str, Any]) -> ResourceData:
        """Rebuild a record from a snapshot produced by ``state()``."""
        values = {k: v for k, v in state.items() if k != "id"}
        return cls(schema, values, prior=values, id=str(state.get("id") or ""))

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> None:
        """Set the identity. An empty string marks the resource as gone."""
        self._id = value or ""

    @property
    def is_new(self) -> bool:
        return not self._id and not self._prior

    def _check_key(self, key: str) -> None:
        if key not in self.schema.fields:
            raise SchemaValidationError(f"{self.schema.name}: unknown field '{key}'", field_name=key)

    def get(self, key: str) -> Any:
        self._check_key(key)
        if key in self._values:
            return self._values[key]
        return self.schema.default_for(key)

    def set(self, key: str, value: Any) -> None:
        self._check_key(key)
        self._values[key] = value

    def get_change(self, key: str) -> tuple[Any, Any]:
        """Return ``(prior, current)`` for a field."""
        self._check_key(key)
        return self._prior.get(key), self.get(key)

    def has_change(self, key: str) -> bool:
        old, new = self.get_change(key)
        return old != new

    def has_changes(self, *keys: str) -> bool:
        return any(self.has_change(k) for k in keys)

    def values(self) -> dict[str, Any]:
        return {k: self.get(k) for k in self.schema.fields}

    def state(self) -> dict[str, Any] | None:
        """Snapshot for the engine to persist, or None if the resource is absent."""
        if not self._id:
            return None
        return {"id": self._id, **self.values()}

    def __repr__(self) -> str:
        return f"ResourceData({self.schema.name!r}, id={self._id!r}, values={self.values()!r})"


__all__ = ["ResourceData"]
