import pytest

from prepr.exceptions import (
    ApiError,
    ParseError,
    PreprError,
    RequestClosedError,
    TimeoutError,
    TransportError,
)


class TestTransportErrors:
    def test_hierarchy(self):
        assert issubclass(TransportError, PreprError)
        assert issubclass(TimeoutError, TransportError)
        assert issubclass(RequestClosedError, TransportError)

    def test_default_messages(self):
        assert str(TimeoutError()) == "request timeout"
        assert str(RequestClosedError()) == "request closed"

    def test_cause_kept(self):
        cause = OSError("boom")
        error = TransportError("request failed: boom", cause=cause)

        assert error.cause is cause
        assert error.message == "request failed: boom"

    def test_can_be_caught_as_base(self):
        with pytest.raises(PreprError):
            raise TimeoutError()


class TestParseError:
    def test_status_code(self):
        error = ParseError(status_code=200)

        assert str(error) == "response failed"
        assert error.status_code == 200
        assert error.details == {"status_code": 200}


class TestApiError:
    def test_attributes(self):
        errors = [{"description": "Invalid token", "code": "AUTH_001"}]
        error = ApiError("api error(s): Invalid token (code: AUTH_001)", 401, errors)

        assert error.status_code == 401
        assert error.errors is errors
        assert error.entries == []
        assert error.details["errors"] is errors
