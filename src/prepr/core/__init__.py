"""
Core pure functions for the SDK.

This package contains I/O-free functions for building requests,
classifying responses and mapping transport failures.
"""

from .request import (
    AB_TESTING_HEADER,
    resolve_hostname,
    build_user_agent,
    build_base_headers,
    merge_headers,
    encode_query,
    append_query,
    encode_json_body,
    build_request,
)

from .response import (
    join_chunks,
    is_attachment,
    format_api_errors,
    build_api_error,
    parse_json_body,
    classify_response,
)

from .transport import (
    TRANSPORT_EXCEPTIONS,
    is_connection_reset,
    classify_transport_exception,
)

__all__ = [
    # Request construction
    "AB_TESTING_HEADER",
    "resolve_hostname",
    "build_user_agent",
    "build_base_headers",
    "merge_headers",
    "encode_query",
    "append_query",
    "encode_json_body",
    "build_request",
    # Response classification
    "join_chunks",
    "is_attachment",
    "format_api_errors",
    "build_api_error",
    "parse_json_body",
    "classify_response",
    # Transport failures
    "TRANSPORT_EXCEPTIONS",
    "is_connection_reset",
    "classify_transport_exception",
]
