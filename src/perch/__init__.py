"""Perch: a typed JSON API client and a declarative view router.

Two independent halves:

API access::

    from perch import ClientConfig, Transport, UserClient

    transport = Transport(ClientConfig(base_url="http://localhost:8000"))
    users = UserClient(transport)
    ada = await users.create_user("Ada", "ada@example.com")
    await users.update_user(ada["id"], name="Ada L.")

Navigation::

    from perch import default_router

    router = default_router()
    router.resolve("/user/42")   # Navigation(view="user-detail", params={"id": "42"}, ...)
    router.resolve("/missing")   # redirected to "/" -> view "users"

Non-2xx responses raise ``RequestFailed``; network failures raise httpx's
own transport errors.
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "Failure",
    "Navigation",
    "PerchError",
    "Request",
    "RequestFailed",
    "ResourceClient",
    "Route",
    "Router",
    "Success",
    "Transport",
    "User",
    "UserClient",
    "default_router",
]


# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "ClientConfig": "perch.config",
    "ConfigurationError": "perch.errors",
    "Failure": "perch.http.outcome",
    "Navigation": "perch.routing.route",
    "PerchError": "perch.errors",
    "Request": "perch.http.request",
    "RequestFailed": "perch.errors",
    "ResourceClient": "perch.resources.client",
    "Route": "perch.routing.route",
    "Router": "perch.routing.router",
    "Success": "perch.http.outcome",
    "Transport": "perch.http.transport",
    "User": "perch.resources.users",
    "UserClient": "perch.resources.users",
    "default_router": "perch.routing.table",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` cheap: submodules (and httpx) load on first use.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
