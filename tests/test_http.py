"""Tests for perch.http.request and perch.http.outcome."""

import json

import pytest

from perch.http.outcome import Failure, Success
from perch.http.request import Request


class TestRequest:
    def test_defaults(self) -> None:
        request = Request("/py/users")
        assert request.method == "GET"
        assert request.body is None
        assert request.headers == ()

    def test_json_serializes_payload(self) -> None:
        request = Request.json("/py/users", {"name": "Ada", "email": "ada@example.com"})
        assert request.method == "POST"
        assert json.loads(request.body or "") == {"name": "Ada", "email": "ada@example.com"}

    def test_json_keeps_only_given_keys(self) -> None:
        request = Request.json("/py/users/1", {"name": "X"}, method="put")
        assert request.method == "PUT"
        assert request.body == '{"name": "X"}'

    def test_json_headers(self) -> None:
        request = Request.json("/py/users", {}, headers={"X-Trace": "abc"})
        assert request.headers == (("X-Trace", "abc"),)

    def test_frozen(self) -> None:
        request = Request("/py/users")
        with pytest.raises(AttributeError):
            request.method = "POST"  # type: ignore[misc]


class TestOutcome:
    def test_success_truthy(self) -> None:
        assert Success([])
        assert Success(None).value is None

    def test_failure_falsy(self) -> None:
        failure = Failure(message="Not Found", status_code=404)
        assert not failure
        assert failure.message == "Not Found"
        assert failure.status_code == 404

    def test_match(self) -> None:
        outcome = Failure(message="HTTP 599", status_code=599)
        match outcome:
            case Success(value=value):
                result = f"ok {value}"
            case Failure(message=message, status_code=code):
                result = f"{code} {message}"
        assert result == "599 HTTP 599"
