"""The application's route table.

``/`` lists users, ``/user/{id}`` shows one, and anything else redirects
back to the list.
"""

from perch.routing.route import Route
from perch.routing.router import Router

USERS = "users"
USER_DETAIL = "user-detail"


def default_routes() -> tuple[Route, ...]:
    return (
        Route("/", view=USERS),
        Route("/user/{id}", view=USER_DETAIL),
        Route("/{rest:path}", redirect="/"),
    )


def default_router() -> Router:
    """Build a fresh router over :func:`default_routes`.

    Construct it once at startup and pass it to whatever renders views.
    """
    return Router(default_routes())
