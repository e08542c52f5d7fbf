"""Transport: one JSON request in, a parsed value or ``RequestFailed`` out.

Every call opens its own ``httpx.AsyncClient``, so concurrent invocations
share nothing mutable. Bodies are read as text first and parsed leniently:
an empty or non-JSON body is ``None``, never an exception.

Error messages follow a fixed priority::

    body["detail"] -> body["message"] -> status reason phrase -> "HTTP {code}"

Network failures (DNS, refused connections, timeouts) are raised by httpx
and reach the caller unconverted.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from perch.config import ClientConfig
from perch.errors import RequestFailed
from perch.http.outcome import Failure, Outcome, Success
from perch.http.request import Request

logger = logging.getLogger("perch.http")

DEFAULT_HEADERS: tuple[tuple[str, str], ...] = (("Content-Type", "application/json"),)

# Error body fields consulted for a message, in priority order
MESSAGE_FIELDS: tuple[str, ...] = ("detail", "message")


def parse_body(text: str) -> Any:
    """Parse a response body as JSON.

    Empty text and text that is not valid JSON both yield ``None``.
    """
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return None


def error_message(data: Any, status_code: int, reason: str = "") -> str:
    """Pick the human-readable message for a failed response.

    ``detail`` and ``message`` are only looked up when the parsed body is an
    object. Missing, ``null``, and empty-string values fall through to the
    next source. Non-string values (FastAPI's validation error lists, for
    one) are rendered as JSON.
    """
    if isinstance(data, dict):
        for field in MESSAGE_FIELDS:
            value = data.get(field)
            if value is None or value == "":
                continue
            return value if isinstance(value, str) else json.dumps(value)
    return reason or f"HTTP {status_code}"


def _pairs(headers: Mapping[str, str] | None) -> tuple[tuple[str, str], ...]:
    return tuple((headers or {}).items())


class Transport:
    """JSON-over-HTTP client with a single outcome contract.

    Usage::

        transport = Transport(ClientConfig(base_url="http://localhost:8000"))
        users = await transport.get("/py/users")

        # Raises RequestFailed on non-2xx
        user = await transport.send(Request.json("/py/users", {"name": "Ada"}))

        # Or get a Success / Failure value instead
        outcome = await transport.attempt(Request("/py/users/7"))

    Pass ``transport=`` (any ``httpx.AsyncBaseTransport``) to route calls
    somewhere other than the network, e.g. ``httpx.MockTransport`` in tests.
    """

    __slots__ = ("_config", "_transport")

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._transport = transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    def headers_for(self, request: Request) -> httpx.Headers:
        """Merge default, configured, and per-request headers.

        Shallow and case-insensitive; later sources win on collision.
        """
        headers = httpx.Headers(DEFAULT_HEADERS)
        headers.update(self._config.headers)
        headers.update(request.headers)
        return headers

    async def send(self, request: Request) -> Any:
        """Perform *request* and return the parsed body.

        Raises ``RequestFailed`` for any non-2xx status. The returned value
        is whatever the server sent, unchecked against the caller's
        declared type.
        """
        response = await self._perform(request)
        text = response.text
        data = parse_body(text)

        if not response.is_success:
            raise RequestFailed(
                error_message(data, response.status_code, response.reason_phrase),
                response.status_code,
                data,
            )

        if data is None and text.strip() not in ("", "null"):
            logger.warning(
                "%s %s returned %d with a body that is not JSON; treating it as empty",
                request.method,
                request.path,
                response.status_code,
            )
        return data

    async def attempt[T](self, request: Request) -> Outcome[T]:
        """Like :meth:`send`, but fold ``RequestFailed`` into ``Failure``.

        Network errors still raise.
        """
        try:
            value = await self.send(request)
        except RequestFailed as exc:
            return Failure(message=exc.message, status_code=exc.status_code)
        return Success(value)

    # -- Shorthands (optional ``headers`` override the defaults, as in Request) --

    async def get(self, path: str, *, headers: Mapping[str, str] | None = None) -> Any:
        return await self.send(Request(path, headers=_pairs(headers)))

    async def post(self, path: str, payload: Any, *, headers: Mapping[str, str] | None = None) -> Any:
        return await self.send(Request.json(path, payload, method="POST", headers=headers))

    async def put(self, path: str, payload: Any, *, headers: Mapping[str, str] | None = None) -> Any:
        return await self.send(Request.json(path, payload, method="PUT", headers=headers))

    async def delete(self, path: str, *, headers: Mapping[str, str] | None = None) -> Any:
        return await self.send(Request(path, method="DELETE", headers=_pairs(headers)))

    async def _perform(self, request: Request) -> httpx.Response:
        url = self._config.url(request.path)
        logger.debug("%s %s", request.method, url)
        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self._config.timeout,
            follow_redirects=True,
        ) as client:
            response = await client.request(
                request.method,
                url,
                content=request.body,
                headers=self.headers_for(request),
            )
        logger.debug("%s %s -> %d", request.method, url, response.status_code)
        return response
