"""
Diagnostics returned by resource lifecycle handlers.

Handlers never raise for remote failures. They return a list of
``Diagnostic`` objects which the host engine surfaces to the operator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import OvpnCloudError


class Severity(str, Enum):
    """Diagnostic severity levels."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A structured error or warning for the host engine."""

    severity: Severity
    summary: str
    detail: str = ""
    attribute: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "severity": self.severity.value,
            "summary": self.summary,
            "detail": self.detail,
        }
        if self.attribute is not None:
            d["attribute"] = self.attribute
        return d


Diagnostics = list[Diagnostic]


def from_error(error: Exception, *, attribute: str | None = None) -> Diagnostics:
    """
    Wrap an exception into a single-element diagnostics list.

    The summary is the error message verbatim so the engine can show it to
    the operator unchanged.
    """
    if isinstance(error, OvpnCloudError):
        summary = error.message
        detail = f"{error.code.value} {error.__class__.__name__}"
        status = getattr(error, "http_status", None)
        if status is not None:
            detail += f" (HTTP {status})"
    else:
        summary = str(error) or error.__class__.__name__
        detail = error.__class__.__name__
    return [Diagnostic(Severity.ERROR, summary, detail, attribute)]


def warning(summary: str, detail: str = "", *, attribute: str | None = None) -> Diagnostic:
    return Diagnostic(Severity.WARNING, summary, detail, attribute)


def has_errors(diags: Diagnostics) -> bool:
    """True if any diagnostic has error severity."""
    return any(d.is_error for d in diags)


__all__ = [
    "Severity",
    "Diagnostic",
    "Diagnostics",
    "from_error",
    "warning",
    "has_errors",
]
