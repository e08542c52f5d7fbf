"""The ``users`` resource: record shape and client."""

from typing import NotRequired, TypedDict, cast

from perch.config import ClientConfig
from perch.http.transport import Transport
from perch.resources.client import ResourceClient


class User(TypedDict):
    """A user record as the server returns it."""

    id: int
    name: str
    email: str
    source: NotRequired[str | None]
    hostname: NotRequired[str | None]


class UserFields(TypedDict):
    """Fields accepted when creating a user."""

    name: str
    email: str


class UserUpdate(TypedDict, total=False):
    """Fields accepted by a partial update. Omitted keys are not sent."""

    name: str
    email: str


class UserClient(ResourceClient[User]):
    """Client for ``{api_base}/users``."""

    __slots__ = ()

    RESOURCE = "users"

    def __init__(self, transport: Transport, *, config: ClientConfig | None = None) -> None:
        super().__init__(transport, self.RESOURCE, config=config)

    async def create_user(self, name: str, email: str) -> User:
        return await self.create(UserFields(name=name, email=email))

    async def update_user(
        self,
        user_id: int,
        *,
        name: str | None = None,
        email: str | None = None,
    ) -> User:
        """Update only the fields that were passed.

        ``update_user(7, name="X")`` sends ``{"name": "X"}`` and nothing else.
        """
        changes: dict[str, str] = {}
        if name is not None:
            changes["name"] = name
        if email is not None:
            changes["email"] = email
        return await self.update(user_id, cast("UserUpdate", changes))
