"""
Async client for the Prepr API.

PreprClient builds one outbound request per call, streams the response
and resolves the call exactly once through a ``callback(error, result)``
pair. The ``get``/``post``/``put`` helpers can also be awaited directly,
in which case errors are raised instead of passed to a callback.
"""

import time
from typing import Any, Dict, Mapping, Optional

import httpx

from .bucketing import assign_bucket
from .completion import Callback, Completion
from .config import Settings, get_logger, get_settings
from .core.request import build_request
from .core.response import classify_response, join_chunks
from .core.transport import TRANSPORT_EXCEPTIONS, classify_transport_exception
from .exceptions import RequestClosedError
from .models import (
    DEFAULT_HOSTNAME,
    DEFAULT_TIMEOUT_MS,
    SDK_VERSION,
    ClientConfig,
    RequestDescriptor,
)

logger = get_logger("client")


class PreprClient:
    """
    Client for the Prepr REST API.

    Args:
        access_token: Bearer token used for every request
        timeout: Idle timeout in milliseconds (0 or None uses the 5000 ms default)
        user_id: Optional user identifier for A/B testing bucketing
        hostname: Default API host for calls that do not override it
        transport: Optional httpx transport, mainly for testing

    Example:
        >>> client = PreprClient("my-token", user_id="user-42")
        >>> publications = await client.get("/publications", {"limit": 10})
    """

    def __init__(
        self,
        access_token: str,
        timeout: Optional[int] = DEFAULT_TIMEOUT_MS,
        user_id: Optional[str] = None,
        *,
        hostname: str = DEFAULT_HOSTNAME,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not access_token:
            raise ValueError("access_token is required")

        bucket_value = None
        if user_id:
            bucket_value = assign_bucket(user_id)
            if bucket_value is None:
                logger.warning(
                    "Could not assign an A/B testing bucket; "
                    "requests will be sent without the Prepr-ABTesting header"
                )

        self.config = ClientConfig(
            access_token=access_token,
            timeout_ms=int(timeout) if timeout else DEFAULT_TIMEOUT_MS,
            bucket_value=bucket_value,
            user_id=user_id,
            default_hostname=hostname or DEFAULT_HOSTNAME,
        )
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "PreprClient":
        """Create a client from PREPR_* environment settings."""
        settings = settings or get_settings()
        if not settings.access_token:
            raise ValueError("PREPR_ACCESS_TOKEN is not set")
        return cls(
            settings.access_token,
            timeout=settings.timeout_ms,
            user_id=settings.user_id,
            hostname=settings.hostname,
            transport=transport,
        )

    @property
    def bucket_value(self) -> Optional[int]:
        return self.config.bucket_value

    async def execute(self, descriptor: RequestDescriptor, callback: Callback) -> None:
        """Perform one call and invoke ``callback(error, result)`` exactly once."""
        completion = Completion(callback)
        await self._perform(descriptor, completion)
        completion.settle()

    async def request(self, descriptor: RequestDescriptor) -> Any:
        """Perform one call and return its result, raising its error."""
        outcome: Dict[str, Any] = {}

        def _capture(error, result):
            outcome["error"] = error
            outcome["result"] = result

        await self.execute(descriptor, _capture)

        if outcome["error"] is not None:
            raise outcome["error"]
        return outcome["result"]

    async def get(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        callback: Optional[Callback] = None,
        hostname: str = "",
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return await self._dispatch("GET", path, params, callback, hostname, headers)

    async def post(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        callback: Optional[Callback] = None,
        hostname: str = "",
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return await self._dispatch("POST", path, params, callback, hostname, headers)

    async def put(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        callback: Optional[Callback] = None,
        hostname: str = "",
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return await self._dispatch("PUT", path, params, callback, hostname, headers)

    async def _dispatch(self, method, path, params, callback, hostname, headers) -> Any:
        descriptor = RequestDescriptor(
            method=method,
            path=path,
            params=params,
            hostname=hostname,
            headers=headers,
        )
        if callback is None:
            return await self.request(descriptor)
        await self.execute(descriptor, callback)
        return None

    async def _perform(self, descriptor: RequestDescriptor, completion: Completion) -> None:
        url, headers, body = build_request(descriptor, self.config, SDK_VERSION)
        timeout = httpx.Timeout(self.config.timeout_seconds)
        response_started = False
        start_time = time.monotonic()

        logger.debug("%s %s", descriptor.method, url)

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=timeout
            ) as client:
                async with client.stream(
                    descriptor.method, url, headers=headers, content=body
                ) as response:
                    response_started = True
                    chunks = []
                    async for chunk in response.aiter_bytes():
                        chunks.append(chunk)

                    error, result = classify_response(
                        response.status_code, response.headers, join_chunks(chunks)
                    )
                    completion.finish(error, result)
        except TRANSPORT_EXCEPTIONS as e:
            error = classify_transport_exception(e, response_started)
            logger.warning(
                "%s %s failed after %.3fs: %s",
                descriptor.method,
                url,
                time.monotonic() - start_time,
                error,
            )
            if isinstance(error, RequestClosedError):
                completion.close(error)
            else:
                completion.fail(error)
            return

        logger.debug(
            "%s %s -> %d in %.3fs",
            descriptor.method,
            url,
            response.status_code,
            time.monotonic() - start_time,
        )
