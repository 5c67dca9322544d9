"""
Prepr SDK

Python client for the Prepr content API.
"""

from .client import PreprClient
from .models import (
    SDK_VERSION,
    EMPTY_RESULT,
    ClientConfig,
    RequestDescriptor,
    ApiErrorEntry,
)
from .bucketing import assign_bucket
from .config import Settings, setup_logging
from .exceptions import (
    PreprError,
    TransportError,
    TimeoutError,
    RequestClosedError,
    ParseError,
    ApiError,
)

__version__ = SDK_VERSION

__all__ = [
    "PreprClient",
    "ClientConfig",
    "RequestDescriptor",
    "ApiErrorEntry",
    "EMPTY_RESULT",
    "assign_bucket",
    "Settings",
    "setup_logging",
    "PreprError",
    "TransportError",
    "TimeoutError",
    "RequestClosedError",
    "ParseError",
    "ApiError",
]
