"""
Tests for diagnostics.
"""

from ovpn_cloud.diagnostics import Diagnostic, Severity, from_error, has_errors, warning
from ovpn_cloud.errors import AuthenticationError, NotFoundError


class TestFromError:
    def test_keeps_message_verbatim(self):
        (diag,) = from_error(AuthenticationError("unauthorized"))

        assert diag.severity is Severity.ERROR
        assert diag.summary == "unauthorized"
        assert "ERR_1002" in diag.detail
        assert "HTTP 401" in diag.detail

    def test_plain_exception(self):
        (diag,) = from_error(RuntimeError("boom"), attribute="value")

        assert diag.summary == "boom"
        assert diag.detail == "RuntimeError"
        assert diag.attribute == "value"

    def test_empty_message_falls_back_to_type(self):
        (diag,) = from_error(KeyError())

        assert diag.summary == "KeyError"


class TestDiagnostic:
    def test_has_errors(self):
        assert not has_errors([])
        assert not has_errors([warning("careful")])
        assert has_errors([warning("careful"), *from_error(NotFoundError())])

    def test_to_dict(self):
        d = Diagnostic(Severity.WARNING, "summary", "detail", "type").to_dict()

        assert d == {"severity": "warning", "summary": "summary", "detail": "detail", "attribute": "type"}
