"""
Data models for client configuration, request descriptors and API errors.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

SDK_VERSION = "1.0.0"

DEFAULT_HOSTNAME = "api.eu1.prepr.io"
DEFAULT_TIMEOUT_MS = 5000

# Result delivered for HTTP 204 responses.
EMPTY_RESULT = True

METHODS = ("GET", "POST", "PUT")


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable per-client configuration.

    Created once when a PreprClient is constructed and shared read-only by
    every call made through that client.

    Attributes:
        access_token: Bearer token sent with every request
        timeout_ms: Idle timeout for a request in milliseconds
        bucket_value: A/B testing bucket in [0, 10000), None when unavailable
        user_id: Identifier the bucket value was derived from
        default_hostname: Host used when a call does not override it

    Example:
        >>> config = ClientConfig(access_token="token", timeout_ms=2000)
        >>> config.default_hostname
        'api.eu1.prepr.io'
    """

    access_token: str
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    bucket_value: Optional[int] = None
    user_id: Optional[str] = None
    default_hostname: str = DEFAULT_HOSTNAME

    def __post_init__(self) -> None:
        if self.timeout_ms < 0:
            raise ValueError("timeout_ms must be >= 0")
        if self.bucket_value is not None and not 0 <= self.bucket_value < 10000:
            raise ValueError("bucket_value must be in [0, 10000)")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    def __repr__(self) -> str:
        return (
            f"ClientConfig(access_token='***', timeout_ms={self.timeout_ms}, "
            f"bucket_value={self.bucket_value}, user_id={self.user_id!r}, "
            f"default_hostname={self.default_hostname!r})"
        )


@dataclass(frozen=True)
class RequestDescriptor:
    """A single outbound call: method, path and optional params/overrides."""

    method: str
    path: str
    params: Optional[Mapping[str, Any]] = None
    hostname: Optional[str] = None
    headers: Optional[Mapping[str, str]] = None

    def __post_init__(self) -> None:
        if self.method not in METHODS:
            raise ValueError(f"method must be one of {', '.join(METHODS)}")


@dataclass
class ApiErrorEntry:
    """One entry of an API ``errors`` list."""

    description: Any
    code: Any
    parameter: Optional[Any] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "ApiErrorEntry":
        if not isinstance(data, dict):
            return cls(description=data, code=None, raw={})
        return cls(
            description=data.get("description"),
            code=data.get("code"),
            parameter=data.get("parameter"),
            raw=data,
        )

    def format(self) -> str:
        """Render as ``<description> (code: <code>[, parameter: <parameter>])``."""
        text = f"{self.description} (code: {self.code}"
        if self.parameter:
            text += f", parameter: {self.parameter}"
        return text + ")"


def parse_error_entries(errors: List[Any]) -> List[ApiErrorEntry]:
    return [ApiErrorEntry.from_dict(item) for item in errors]
