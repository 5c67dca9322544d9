"""
Pure functions for classifying API responses.

Turns a finished response (status, headers, body chunks) into the
``(error, result)`` pair handed to the completion callback.
"""

import json
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from ..exceptions import ApiError, ParseError, PreprError
from ..models import EMPTY_RESULT, parse_error_entries

Outcome = Tuple[Optional[PreprError], Any]


def join_chunks(chunks: Iterable[bytes]) -> bytes:
    return b"".join(chunks)


def is_attachment(headers: Mapping[str, str]) -> bool:
    """Check whether the response is marked as a download."""
    disposition = headers.get("content-disposition")
    return bool(disposition) and "attachment" in disposition.lower()


def format_api_errors(errors: List[Any]) -> str:
    entries = parse_error_entries(errors)
    return "api error(s): " + ", ".join(entry.format() for entry in entries)


def build_api_error(errors: List[Any], status_code: int) -> ApiError:
    """Build an ApiError from the ``errors`` list of a response body."""
    return ApiError(
        format_api_errors(errors),
        status_code=status_code,
        errors=errors,
        entries=parse_error_entries(errors),
    )


def parse_json_body(body: bytes, status_code: int) -> Outcome:
    """Decode a JSON body, surfacing API errors and parse failures."""
    try:
        data = json.loads(body.decode("utf-8").strip())
    except ValueError as e:
        return ParseError(status_code=status_code, cause=e), None

    if data is None:
        return ParseError(status_code=status_code), None

    if isinstance(data, dict):
        errors = data.get("errors")
        if isinstance(errors, list):
            return build_api_error(errors, status_code), None
        if isinstance(errors, dict) or errors:
            # errors present but not a list of entries
            return ParseError(status_code=status_code), None

    return None, data


def classify_response(
    status_code: int, headers: Mapping[str, str], body: bytes
) -> Outcome:
    """
    Classify a completed response.

    Order of checks:
        1. 204 returns EMPTY_RESULT without looking at the body
        2. Attachments return the raw body bytes unparsed
        3. Everything else is parsed as JSON
    """
    if status_code == 204:
        return None, EMPTY_RESULT

    if is_attachment(headers):
        return None, body

    return parse_json_body(body, status_code)
