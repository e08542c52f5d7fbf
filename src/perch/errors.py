"""Perch exception hierarchy.

Shared across the transport, resource clients, and router so every module
raises and catches the same types.

Network failures are not part of this hierarchy: httpx transport errors
(``httpx.ConnectError``, ``httpx.ReadTimeout``, ...) reach the caller as-is.
"""

from typing import Any


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when a route table or route pattern is invalid.

    Always raised while building a ``Router``, never during resolution.
    """


class RequestFailed(PerchError):  # noqa: N818 (mirrors the wire-level outcome name)
    """The server answered, but with a non-success status.

    ``message`` is always a non-empty, human-readable string. ``body`` is
    the parsed error payload, or ``None`` when it was empty or not JSON.
    """

    def __init__(self, message: str, status_code: int, body: Any = None) -> None:
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    def __repr__(self) -> str:
        return f"RequestFailed({self.message!r}, status_code={self.status_code})"
