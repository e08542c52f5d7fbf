"""Routing: an ordered, immutable route table resolved to views.

The table is validated once when the ``Router`` is built. Resolution is a
pure function of the requested path and always returns a ``Navigation``;
the mandatory wildcard route leaves no "not found" outcome.
"""

from perch.routing.route import Navigation, PathSegment, Route
from perch.routing.router import Router, parse_path, split_path
from perch.routing.table import default_router, default_routes

__all__ = [
    "Navigation",
    "PathSegment",
    "Route",
    "Router",
    "default_router",
    "default_routes",
    "parse_path",
    "split_path",
]
