"""
Unit tests for the error model.
"""

import pytest

from xero_client.runtime.errors import (
    BadRequestError, ErrorCode, InvalidMethodError, NotAvailableError, RateLimitExceededError,
    ResponseError, TransportError, XeroError, error_from_status,
)


class TestXeroError:
    """Tests for the base error."""

    def test_str_includes_code(self):
        err = XeroError("Something broke", ErrorCode.INTERNAL)
        assert str(err) == "[INTERNAL] Something broke"

    def test_str_includes_details_and_cause(self):
        cause = ValueError("root cause")
        err = TransportError("Request failed", details={"url": "https://x"}, cause=cause)
        text = str(err)
        assert "Details: {'url': 'https://x'}" in text
        assert "Caused by: root cause" in text

    def test_to_dict(self):
        err = BadRequestError("Invalid", details={"validation_errors": ["a"]})
        assert err.to_dict() == {
            "code": ErrorCode.BAD_REQUEST.value,
            "message": "Invalid",
            "details": {"validation_errors": ["a"]},
        }

    def test_invalid_method_message(self):
        err = InvalidMethodError("PATCH")
        assert err.message == "Invalid request method [PATCH]"
        assert err.method == "PATCH"

    def test_hierarchy(self):
        assert issubclass(BadRequestError, ResponseError)
        assert issubclass(ResponseError, XeroError)


class TestErrorFromStatus:
    """Tests for status mapping."""

    @pytest.mark.parametrize("status", [200, 204, 299, 304])
    def test_non_errors(self, status):
        assert error_from_status(status) is None

    def test_message_kept(self):
        err = error_from_status(400, "A validation exception occurred")
        assert isinstance(err, BadRequestError)
        assert err.message == "A validation exception occurred"

    def test_default_message(self):
        assert error_from_status(503).message == "API not available"

    def test_rate_limited_overrides_status(self):
        err = error_from_status(503, rate_limited=True)
        assert isinstance(err, RateLimitExceededError)
        assert not isinstance(err, NotAvailableError)
        assert err.status == 503

    def test_unexpected_status(self):
        err = error_from_status(302)
        assert type(err) is ResponseError
        assert "302" in err.message


def test_details_are_copied():
    """Test later changes to the caller's dict do not leak into the error."""
    details = {"url": "https://x"}
    err = TransportError("failed", details=details)
    details["url"] = "changed"
    assert err.details == {"url": "https://x"}
    assert "cause" not in err.to_dict()
