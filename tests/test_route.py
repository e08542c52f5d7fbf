"""Tests for perch.routing.route: Route, PathSegment, Navigation."""

import pytest

from perch.routing.route import Navigation, PathSegment, Route


class TestPathSegment:
    def test_static(self) -> None:
        seg = PathSegment(value="user")
        assert seg.value == "user"
        assert seg.is_param is False
        assert seg.param_name is None
        assert seg.param_type == "str"
        assert seg.is_wildcard is False

    def test_param(self) -> None:
        seg = PathSegment(value="{id:int}", is_param=True, param_name="id", param_type="int")
        assert seg.is_param is True
        assert seg.param_name == "id"
        assert seg.is_wildcard is False

    def test_wildcard(self) -> None:
        seg = PathSegment(value="{rest:path}", is_param=True, param_name="rest", param_type="path")
        assert seg.is_wildcard is True

    def test_frozen(self) -> None:
        seg = PathSegment(value="user")
        with pytest.raises(AttributeError):
            seg.value = "other"  # type: ignore[misc]


class TestRoute:
    def test_view_route(self) -> None:
        route = Route("/", view="users")
        assert route.path == "/"
        assert route.view == "users"
        assert route.redirect is None

    def test_redirect_route(self) -> None:
        route = Route("/{rest:path}", redirect="/")
        assert route.view is None
        assert route.redirect == "/"

    def test_frozen(self) -> None:
        route = Route("/", view="users")
        with pytest.raises(AttributeError):
            route.view = "other"  # type: ignore[misc]


class TestNavigation:
    def test_equality(self) -> None:
        a = Navigation(view="user-detail", params={"id": "1"}, path="/user/1")
        b = Navigation(view="user-detail", params={"id": "1"}, path="/user/1")
        assert a == b

    def test_not_redirected_by_default(self) -> None:
        nav = Navigation(view="users", params={}, path="/")
        assert nav.redirected_from is None
