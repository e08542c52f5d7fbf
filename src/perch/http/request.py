"""Request descriptor: what to send, built once per invocation."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable description of one HTTP call.

    ``body`` is already-serialized JSON text (or ``None`` for no body).
    ``headers`` are caller overrides, merged over the transport defaults.

    Build one with a payload via :meth:`json`::

        Request.json("/py/users", {"name": "Ada"}, method="POST")
    """

    path: str
    method: str = "GET"
    body: str | None = None
    headers: tuple[tuple[str, str], ...] = ()

    @classmethod
    def json(
        cls,
        path: str,
        payload: Any,
        *,
        method: str = "POST",
        headers: Mapping[str, str] | None = None,
    ) -> Request:
        """Serialize *payload* with ``json.dumps`` into a new descriptor."""
        return cls(
            path=path,
            method=method.upper(),
            body=json.dumps(payload),
            headers=tuple((headers or {}).items()),
        )
