"""Transport client: JSON over HTTP with a single success/failure contract.

Requests are immutable descriptors; every invocation gets its own
``httpx.AsyncClient`` and its own outcome.
"""

from perch.http.outcome import Failure, Outcome, Success
from perch.http.request import Request
from perch.http.transport import Transport, error_message, parse_body

__all__ = [
    "Failure",
    "Outcome",
    "Request",
    "Success",
    "Transport",
    "error_message",
    "parse_body",
]
