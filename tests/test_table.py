"""Tests for perch.routing.table: the application's route table."""

from perch.routing.route import Navigation, Route
from perch.routing.table import USER_DETAIL, USERS, default_router, default_routes


class TestDefaultRoutes:
    def test_order(self) -> None:
        assert [r.path for r in default_routes()] == ["/", "/user/{id}", "/{rest:path}"]

    def test_fallback_redirects_home(self) -> None:
        assert default_routes()[-1] == Route("/{rest:path}", redirect="/")

    def test_fresh_router_each_call(self) -> None:
        assert default_router() is not default_router()


class TestResolve:
    def test_root_lists_users(self) -> None:
        nav = default_router().resolve("/")
        assert nav.view == USERS == "users"
        assert nav.params == {}

    def test_user_detail(self) -> None:
        nav = default_router().resolve("/user/42")
        assert nav == Navigation(view=USER_DETAIL, params={"id": "42"}, path="/user/42")

    def test_unknown_path_redirects_to_users(self) -> None:
        nav = default_router().resolve("/nonexistent/path")
        assert nav.view == "users"
        assert nav.params == {"rest": "nonexistent/path"}
        assert nav.redirected_from == "/nonexistent/path"

    def test_double_slash_still_reaches_detail(self) -> None:
        nav = default_router().resolve("//user/42")
        assert nav.view == USER_DETAIL
        assert nav.params == {"id": "42"}
        assert nav.redirected_from is None

    def test_detail_id_decoded(self) -> None:
        assert default_router().resolve("/user/j%C3%B6rg").params == {"id": "jörg"}

    def test_user_without_id_falls_back(self) -> None:
        assert default_router().resolve("/user").view == "users"
        assert default_router().resolve("/user/").view == "users"

    def test_idempotent(self) -> None:
        router = default_router()
        for path in ("/", "/user/42", "/nonexistent/path"):
            assert router.resolve(path) == router.resolve(path)

    def test_url_for_detail(self) -> None:
        assert default_router().url_for(USER_DETAIL, id=7) == "/user/7"
