"""
Tests for pure response-classification functions.
"""

from unittest.mock import patch

from prepr.core.response import (
    classify_response,
    format_api_errors,
    is_attachment,
    join_chunks,
    parse_json_body,
)
from prepr.exceptions import ApiError, ParseError
from prepr.models import EMPTY_RESULT


class TestJoinChunks:
    def test_order_preserved(self):
        assert join_chunks([b"ab", b"", b"cd"]) == b"abcd"


class TestIsAttachment:
    def test_attachment(self):
        assert is_attachment({"content-disposition": "attachment; filename=x"})

    def test_inline(self):
        assert not is_attachment({"content-disposition": "inline"})

    def test_missing(self):
        assert not is_attachment({})


class TestFormatApiErrors:
    def test_single(self):
        errors = [{"description": "Invalid token", "code": "AUTH_001"}]
        assert format_api_errors(errors) == "api error(s): Invalid token (code: AUTH_001)"

    def test_parameter_and_join(self):
        errors = [
            {"description": "Missing", "code": "E1", "parameter": "name"},
            {"description": "Too long", "code": "E2"},
        ]
        assert format_api_errors(errors) == (
            "api error(s): Missing (code: E1, parameter: name), Too long (code: E2)"
        )


class TestParseJsonBody:
    def test_valid(self):
        assert parse_json_body(b'  {"a": 1}\n', 200) == (None, {"a": 1})

    def test_list(self):
        assert parse_json_body(b"[1, 2]", 200) == (None, [1, 2])

    def test_invalid(self):
        error, result = parse_json_body(b"<html>", 502)

        assert isinstance(error, ParseError)
        assert error.status_code == 502
        assert str(error) == "response failed"
        assert error.cause is not None
        assert result is None

    def test_empty_body(self):
        error, result = parse_json_body(b"", 200)
        assert isinstance(error, ParseError)
        assert result is None

    def test_null_body(self):
        error, result = parse_json_body(b"null", 200)
        assert isinstance(error, ParseError)
        assert result is None

    def test_non_list_errors(self):
        error, result = parse_json_body(b'{"errors": {"description": "bad"}}', 401)

        assert isinstance(error, ParseError)
        assert error.status_code == 401
        assert result is None

    def test_string_errors(self):
        error, result = parse_json_body(b'{"errors": "x"}', 400)

        assert isinstance(error, ParseError)
        assert result is None

    def test_falsy_errors_ignored(self):
        assert parse_json_body(b'{"errors": null, "a": 1}', 200) == (
            None,
            {"errors": None, "a": 1},
        )

    def test_invalid_utf8(self):
        error, _ = parse_json_body(b"\xff\xfe", 200)
        assert isinstance(error, ParseError)

    def test_api_errors(self):
        body = b'{"errors":[{"description":"Invalid token","code":"AUTH_001"}]}'
        error, result = parse_json_body(body, 401)

        assert isinstance(error, ApiError)
        assert error.status_code == 401
        assert error.errors == [{"description": "Invalid token", "code": "AUTH_001"}]
        assert error.entries[0].code == "AUTH_001"
        assert error.entries[0].parameter is None
        assert result is None


class TestClassifyResponse:
    def test_no_content_never_parsed(self):
        with patch("prepr.core.response.parse_json_body") as parse:
            assert classify_response(204, {}, b"garbage") == (None, EMPTY_RESULT)
        parse.assert_not_called()

    def test_attachment_passthrough(self):
        headers = {"content-disposition": "attachment; filename=x"}
        assert classify_response(200, headers, b"{not json") == (None, b"{not json")

    def test_json(self):
        assert classify_response(200, {}, b'{"a": 1}') == (None, {"a": 1})
