"""Test utilities for perch clients.

``FakeAPI`` serves one resource collection from memory through
``httpx.MockTransport``. No network, no server process::

    api = FakeAPI("users", records=[{"name": "Ada", "email": "ada@example.com"}])
    users = UserClient(api.client())
    assert (await users.read(1))["name"] == "Ada"
    assert api.requests[-1].method == "GET"
"""

import json
from collections.abc import Iterable, Mapping
from typing import Any

import httpx

from perch.config import ClientConfig
from perch.http.transport import Transport


class FakeAPI:
    """An in-memory JSON collection speaking the resource wire protocol.

    Ids are assigned by the fake on create, starting at 1. Unknown ids and
    unknown paths answer ``404`` with a ``{"detail": ...}`` body. Every
    ``httpx.Request`` received is appended to ``requests``.
    """

    def __init__(
        self,
        resource: str = "users",
        *,
        api_base: str = "/py",
        records: Iterable[Mapping[str, Any]] = (),
    ) -> None:
        self.resource = resource
        self.config = ClientConfig(api_base=api_base)
        self.collection = self.config.resource_path(resource)
        self.records: dict[int, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self._next_id = 1
        for fields in records:
            self.seed(fields)
        self.transport = httpx.MockTransport(self.handle)

    def client(self) -> Transport:
        """A ``Transport`` wired to this fake."""
        return Transport(self.config, transport=self.transport)

    def seed(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        record = {**fields, "id": self._next_id}
        self.records[self._next_id] = record
        self._next_id += 1
        return record

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == self.collection:
            if request.method == "GET":
                return httpx.Response(200, json=list(self.records.values()))
            if request.method == "POST":
                payload = _payload(request)
                if payload is None:
                    return _error(422, "Request body must be a JSON object")
                return httpx.Response(201, json=self.seed(payload))
            return _error(405, "Method Not Allowed")

        record_id = self._record_id(path)
        if record_id is None:
            return _error(404, "Not Found")
        record = self.records.get(record_id)
        if record is None:
            return _error(404, f"{self.resource} {record_id} not found")

        if request.method == "GET":
            return httpx.Response(200, json=record)
        if request.method == "PUT":
            payload = _payload(request)
            if payload is None:
                return _error(422, "Request body must be a JSON object")
            record.update({k: v for k, v in payload.items() if k != "id"})
            return httpx.Response(200, json=record)
        if request.method == "DELETE":
            del self.records[record_id]
            return httpx.Response(204)
        return _error(405, "Method Not Allowed")

    def _record_id(self, path: str) -> int | None:
        prefix = self.collection + "/"
        if not path.startswith(prefix):
            return None
        tail = path[len(prefix) :]
        return int(tail) if tail.isdigit() else None


def _payload(request: httpx.Request) -> dict[str, Any] | None:
    try:
        data = json.loads(request.content or b"null")
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


def _error(status: int, detail: str) -> httpx.Response:
    return httpx.Response(status, json={"detail": detail})
