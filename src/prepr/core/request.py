"""
Pure functions for building outbound requests.

Functions for resolving the target host, building and merging headers,
and encoding query strings and JSON bodies without I/O dependencies.
"""

import json
import platform
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import quote, urlencode

from ..models import ClientConfig, RequestDescriptor

AB_TESTING_HEADER = "Prepr-ABTesting"


def resolve_hostname(hostname: Optional[str], default: str) -> str:
    """Use the per-call hostname when given, otherwise the default."""
    return hostname if hostname else default


def build_user_agent(sdk_version: str) -> str:
    return f"Prepr/{sdk_version}-python/{platform.python_version()}"


def build_base_headers(config: ClientConfig, sdk_version: str) -> Dict[str, str]:
    """Build the headers every request carries."""
    headers = {
        "Authorization": f"Bearer {config.access_token}",
        "User-Agent": build_user_agent(sdk_version),
    }
    if config.bucket_value is not None:
        headers[AB_TESTING_HEADER] = str(config.bucket_value)
    return headers


def merge_headers(*layers: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """
    Merge header mappings in order, later layers winning.

    Header names compare case-insensitively; the spelling from the layer
    that supplied the winning value is kept.
    """
    merged: Dict[str, str] = {}
    names: Dict[str, str] = {}

    for layer in layers:
        if not layer:
            continue
        for name, value in layer.items():
            key = name.lower()
            if key in names:
                del merged[names[key]]
            names[key] = name
            merged[name] = str(value)

    return merged


def _query_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(params: Optional[Mapping[str, Any]]) -> str:
    """URL-encode params; list and tuple values repeat the key."""
    if not params:
        return ""

    pairs = []
    for key, value in params.items():
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _query_value(item)) for item in value)
        else:
            pairs.append((key, _query_value(value)))
    return urlencode(pairs, quote_via=quote)


def append_query(path: str, query: str) -> str:
    if not query:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{query}"


def encode_json_body(params: Optional[Mapping[str, Any]]) -> bytes:
    """Serialize params as compact UTF-8 JSON."""
    return json.dumps(
        params if params is not None else {}, separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")


def build_request(
    descriptor: RequestDescriptor, config: ClientConfig, sdk_version: str
) -> Tuple[str, Dict[str, str], Optional[bytes]]:
    """
    Build the URL, headers and body for a descriptor.

    Returns:
        Tuple of (url, headers, body). Body is None for GET requests.
    """
    host = resolve_hostname(descriptor.hostname, config.default_hostname)
    generated = build_base_headers(config, sdk_version)
    path = descriptor.path
    body = None

    if descriptor.method in ("POST", "PUT"):
        body = encode_json_body(descriptor.params)
        generated["Content-Type"] = "application/json"
        generated["Content-Length"] = str(len(body))
    else:
        path = append_query(path, encode_query(descriptor.params))

    headers = merge_headers(generated, descriptor.headers)
    return f"https://{host}{path}", headers, body
