"""
Resource schema declarations.

A ``ResourceSchema`` describes the configuration fields of a resource type
and their constraints. It exports itself as JSON Schema so configurations
can be validated with ``jsonschema`` before any lifecycle handler runs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import jsonschema

from ..errors import SchemaValidationError


class FieldType(str, Enum):
    """Primitive types a resource field can hold."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class FieldSchema:
    """
    Declaration of one configuration field.

    Attributes:
        type: Primitive type of the value
        required: Field must be present in configuration
        force_new: Changing the value requires destroy + recreate
        default: Value used when an optional field is omitted
        allowed_values: Closed set of accepted values, if any
        description: Documentation shown to operators
    """

    type: FieldType = FieldType.STRING
    required: bool = False
    force_new: bool = False
    default: Any = None
    allowed_values: tuple[Any, ...] | None = None
    description: str = ""

    def __post_init__(self):
        if self.required and self.default is not None:
            raise ValueError("required fields cannot declare a default")

    def to_json_schema(self) -> dict[str, Any]:
        prop: dict[str, Any] = {"type": self.type.value}
        if self.allowed_values is not None:
            prop["enum"] = list(self.allowed_values)
        if self.default is not None:
            prop["default"] = self.default
        if self.description:
            prop["description"] = self.description
        return prop


@dataclass(frozen=True)
class ResourceSchema:
    """Schema for a resource type: its name, documentation and fields."""

    name: str
    fields: Mapping[str, FieldSchema] = field(default_factory=dict)
    description: str = ""

    @property
    def required_fields(self) -> list[str]:
        return [name for name, f in self.fields.items() if f.required]

    @property
    def force_new_fields(self) -> list[str]:
        return [name for name, f in self.fields.items() if f.force_new]

    def default_for(self, key: str) -> Any:
        spec = self.fields.get(key)
        return spec.default if spec is not None else None

    def to_json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {name: f.to_json_schema() for name, f in self.fields.items()},
            "required": self.required_fields,
            "additionalProperties": False,
        }
        if self.description:
            schema["description"] = self.description
        return schema

    def validate(self, config: Mapping[str, Any]) -> dict[str, Any]:
        """
        Validate a configuration record and return it with defaults applied.

        Raises:
            SchemaValidationError: If the record does not satisfy the schema
        """
        validator = jsonschema.Draft202012Validator(self.to_json_schema())
        errors = sorted(validator.iter_errors(dict(config)), key=lambda e: list(e.path))
        if errors:
            first = errors[0]
            field_name = str(first.path[0]) if first.path else None
            if field_name is None and first.validator == "required":
                field_name = first.message.split("'")[1]
            raise SchemaValidationError(
                f"{self.name}: {first.message}",
                field_name=field_name,
            )

        values = dict(config)
        for name, f in self.fields.items():
            if name not in values and f.default is not None:
                values[name] = f.default
        return values

    def force_new_changes(self, old: Mapping[str, Any], new: Mapping[str, Any]) -> list[str]:
        """Names of force-new fields whose value differs between two records."""
        return [name for name in self.force_new_fields if old.get(name) != new.get(name)]


__all__ = ["FieldType", "FieldSchema", "ResourceSchema"]
