"""Route, PathSegment and Navigation frozen dataclasses."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Static:   ``/user``       (is_param=False)
    Param:    ``/{id}``       (is_param=True, param_name="id")
    Typed:    ``/{id:int}``   (is_param=True, param_name="id", param_type="int")
    Wildcard: ``/{rest:path}`` (is_param=True, param_name="rest", param_type="path")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"

    @property
    def is_wildcard(self) -> bool:
        return self.is_param and self.param_type == "path"


@dataclass(frozen=True, slots=True)
class Route:
    """A route definition: a path pattern and where it leads.

    Exactly one of ``view`` and ``redirect`` is set. A redirect route
    resolves to whatever view its target path resolves to::

        Route("/", view="users")
        Route("/user/{id}", view="user-detail")
        Route("/{rest:path}", redirect="/")
    """

    path: str
    view: str | None = None
    redirect: str | None = None


@dataclass(frozen=True, slots=True)
class Navigation:
    """The result of resolving a path: a view and its bound parameters.

    ``path`` is the normalized path the view was resolved for. When a
    redirect was followed, it is the redirect target and ``redirected_from``
    holds the path that was originally requested.
    """

    view: str
    params: dict[str, str]
    path: str
    redirected_from: str | None = None
