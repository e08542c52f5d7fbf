"""Ordered route table with three-pass resolution.

Routes are validated and indexed once, when the ``Router`` is built.
Resolution then tries, in priority order:

1. static patterns (exact match),
2. dynamic patterns, in declaration order,
3. the wildcard route, which matches anything.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import quote, unquote

from perch.errors import ConfigurationError
from perch.routing.params import CONVERTERS, accepts
from perch.routing.route import Navigation, PathSegment, Route

logger = logging.getLogger("perch.routing")


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route pattern into segments.

    Examples::

        "/"              -> []
        "/user"          -> [PathSegment("user")]
        "/user/{id}"     -> [PathSegment("user"), PathSegment("{id}", is_param=True, ...)]
        "/user/{id:int}" -> [..., PathSegment("{id:int}", is_param=True, param_type="int")]
        "/{rest:path}"   -> [PathSegment("{rest:path}", is_param=True, param_type="path")]
    """
    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("<") and part.endswith(">"):
            msg = (
                f"Route pattern {path!r} uses <param> syntax. "
                f"Use {{param}} instead, e.g. {{{part[1:-1]}}}."
            )
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name = inner
                param_type = "str"
            if not param_name:
                msg = f"Route pattern {path!r} has an unnamed parameter."
                raise ConfigurationError(msg)
            if param_type not in CONVERTERS:
                known = ", ".join(sorted(CONVERTERS))
                msg = f"Unknown parameter type {param_type!r} in {path!r}. Known: {known}"
                raise ConfigurationError(msg)
            if param_name in seen:
                msg = f"Route pattern {path!r} repeats parameter {param_name!r}."
                raise ConfigurationError(msg)
            seen.add(param_name)
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return segments


def split_path(path: str) -> list[str]:
    """Split a requested path into its non-empty segments.

    Query string and fragment are dropped; repeated and trailing slashes
    are ignored.
    """
    raw = path.partition("?")[0].partition("#")[0]
    return [p for p in raw.split("/") if p]


def _join(parts: Iterable[str]) -> str:
    return "/" + "/".join(parts)


@dataclass(frozen=True, slots=True)
class _CompiledRoute:
    """A route with its parsed pattern."""

    route: Route
    segments: tuple[PathSegment, ...]

    @property
    def is_static(self) -> bool:
        return not any(seg.is_param for seg in self.segments)

    @property
    def is_wildcard(self) -> bool:
        return len(self.segments) == 1 and self.segments[0].is_wildcard

    def bind(self, parts: list[str]) -> dict[str, str] | None:
        """Bind *parts* against this pattern, or return None on mismatch.

        Parameter values are percent-decoded before the converter check.
        """
        if len(parts) != len(self.segments):
            return None
        params: dict[str, str] = {}
        for seg, part in zip(self.segments, parts, strict=True):
            if not seg.is_param:
                if seg.value != part:
                    return None
            else:
                value = unquote(part)
                if not accepts(seg.param_type, value):
                    return None
                params[seg.param_name or ""] = value
        return params


class Router:
    """Resolves paths to views against an immutable route table.

    Usage::

        router = Router([
            Route("/", view="users"),
            Route("/user/{id}", view="user-detail"),
            Route("/{rest:path}", redirect="/"),
        ])
        router.resolve("/user/42")
        # Navigation(view="user-detail", params={"id": "42"}, path="/user/42")

    The table must end with exactly one wildcard route (``/{name:path}``).
    Every inconsistency raises ``ConfigurationError`` here, at construction,
    so ``resolve()`` itself never fails.
    """

    __slots__ = ("_dynamic", "_fallback", "_routes", "_static")

    def __init__(self, routes: Iterable[Route]) -> None:
        self._routes = tuple(routes)
        compiled = [_CompiledRoute(route, tuple(parse_path(route.path))) for route in self._routes]

        for entry in compiled:
            _check_target(entry.route)
            if not entry.is_wildcard and any(seg.is_wildcard for seg in entry.segments):
                msg = (
                    f"Route {entry.route.path!r}: 'path' parameters are only allowed "
                    "as the whole pattern of the wildcard route, e.g. '/{rest:path}'."
                )
                raise ConfigurationError(msg)

        wildcards = [entry for entry in compiled if entry.is_wildcard]
        if len(wildcards) != 1:
            msg = (
                f"Route table needs exactly one wildcard route, found {len(wildcards)}. "
                "Add a fallback such as Route('/{rest:path}', redirect='/')."
            )
            raise ConfigurationError(msg)
        if compiled[-1] is not wildcards[0]:
            msg = f"Wildcard route {wildcards[0].route.path!r} must be the last route."
            raise ConfigurationError(msg)
        self._fallback = wildcards[0]

        self._static: dict[str, Route] = {}
        dynamic: list[_CompiledRoute] = []
        for entry in compiled[:-1]:
            if entry.is_static:
                key = _join(seg.value for seg in entry.segments)
                if key in self._static:
                    msg = f"Duplicate static route {key!r}."
                    raise ConfigurationError(msg)
                self._static[key] = entry.route
            else:
                dynamic.append(entry)
        self._dynamic = tuple(dynamic)

        for route in self._routes:
            if route.redirect is not None:
                self._check_redirect(route)

    @property
    def routes(self) -> tuple[Route, ...]:
        """The route table, in declaration order."""
        return self._routes

    def resolve(self, path: str) -> Navigation:
        """Resolve *path* to a view and its parameters.

        Total: unmatched paths land on the wildcard route. Redirect routes
        are followed once; the wildcard's binding is kept in ``params``.
        """
        parts = split_path(path)
        requested = _join(parts)
        route, params = self._match(parts)

        if route.redirect is None:
            return Navigation(view=route.view or "", params=params, path=requested)

        target_parts = split_path(route.redirect)
        target, target_params = self._match(target_parts)
        logger.debug("Redirecting %r to %r (view %r)", requested, route.redirect, target.view)
        return Navigation(
            view=target.view or "",
            params={**target_params, **params},
            path=_join(target_parts),
            redirected_from=requested,
        )

    def url_for(self, view: str, /, **params: str | int) -> str:
        """Build the path for the first route that renders *view*.

        Raises ``LookupError`` for an unknown view and ``ValueError`` for
        missing or non-matching parameters.
        """
        for route in self._routes:
            if route.view != view:
                continue
            parts: list[str] = []
            for seg in parse_path(route.path):
                if not seg.is_param:
                    parts.append(seg.value)
                    continue
                name = seg.param_name or ""
                if name not in params:
                    msg = f"url_for({view!r}) is missing parameter {name!r}."
                    raise ValueError(msg)
                value = str(params[name])
                if not accepts(seg.param_type, value):
                    msg = f"url_for({view!r}): {value!r} is not a valid {seg.param_type} for {name!r}."
                    raise ValueError(msg)
                parts.append(quote(value, safe=""))
            return _join(parts)
        msg = f"No route renders view {view!r}."
        raise LookupError(msg)

    def _match(self, parts: list[str]) -> tuple[Route, dict[str, str]]:
        # 1. Static (exact match)
        route = self._static.get(_join(parts))
        if route is not None:
            return route, {}

        # 2. Dynamic, in declaration order
        for entry in self._dynamic:
            params = entry.bind(parts)
            if params is not None:
                return entry.route, params

        # 3. Wildcard
        name = self._fallback.segments[0].param_name or "rest"
        logger.debug("No route for %r; falling back to %r", _join(parts), self._fallback.route.path)
        return self._fallback.route, {name: "/".join(unquote(p) for p in parts)}

    def _check_redirect(self, route: Route) -> None:
        """A redirect must land on a view route, never on another redirect."""
        target, _ = self._match(split_path(route.redirect or ""))
        if target.redirect is not None:
            msg = (
                f"Redirect {route.path!r} -> {route.redirect!r} lands on "
                f"redirect route {target.path!r}; redirect to a view route instead."
            )
            raise ConfigurationError(msg)


def _check_target(route: Route) -> None:
    if (route.view is None) == (route.redirect is None):
        msg = f"Route {route.path!r} must set exactly one of view= or redirect=."
        raise ConfigurationError(msg)
