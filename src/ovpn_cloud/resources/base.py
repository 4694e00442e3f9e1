"""
Resource protocol and base class.

A resource translates lifecycle calls from the host engine into remote API
calls for one resource type. Handlers return diagnostics instead of raising
for remote failures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..diagnostics import Diagnostic, Diagnostics, Severity
from .schema import ResourceSchema
from .state import ResourceData


class Resource(ABC):
    """
    Base class for resource lifecycle adapters.

    Subclasses declare ``schema`` and implement the four handlers. The engine
    decides which handler to call; each handler only maps one call.
    """

    schema: ResourceSchema

    @property
    def type_name(self) -> str:
        return self.schema.name

    def new_data(self, config, *, prior=None, id: str = "") -> ResourceData:
        """Validate ``config`` and build a record for this resource type."""
        return ResourceData.from_config(self.schema, config, prior=prior, id=id)

    @abstractmethod
    async def create(self, data: ResourceData) -> Diagnostics:
        """Create the remote object and adopt its id."""

    @abstractmethod
    async def read(self, data: ResourceData) -> Diagnostics:
        """Refresh ``data`` from the remote object, clearing the id if it is gone."""

    @abstractmethod
    async def update(self, data: ResourceData) -> Diagnostics:
        """Apply in-place changes."""

    @abstractmethod
    async def delete(self, data: ResourceData) -> Diagnostics:
        """Destroy the remote object."""

    async def import_state(self, data: ResourceData) -> tuple[list[ResourceData], Diagnostics]:
        """
        Import by identifier.

        The supplied id is taken as-is; the engine hydrates the remaining
        fields with a subsequent ``read``.
        """
        if not data.id:
            return [], [Diagnostic(Severity.ERROR, f"{self.type_name}: import requires an id")]
        return [data], []

    def import_data(self, resource_id: str) -> ResourceData:
        """Empty record carrying only an externally supplied id."""
        return ResourceData(self.schema, id=resource_id)


__all__ = ["Resource"]
