"""Generic resource client over a single collection endpoint."""

import builtins
from collections.abc import Mapping
from typing import Any, cast

from perch.config import ClientConfig
from perch.http.request import Request
from perch.http.transport import Transport


class ResourceClient[T]:
    """CRUD operations for one resource collection.

    ``T`` is the record shape the caller expects back. It is a declared
    contract only: records are returned exactly as the server sent them.

    Usage::

        users = ResourceClient[User](transport, "users")
        everyone = await users.list()
        ada = await users.create({"name": "Ada", "email": "ada@example.com"})
        await users.update(ada["id"], {"name": "Ada L."})
        await users.delete(ada["id"])

    Wire mapping (``{collection}`` is ``api_base + "/" + resource``)::

        list()            GET    {collection}
        create(fields)    POST   {collection}
        read(id)          GET    {collection}/{id}
        update(id, part)  PUT    {collection}/{id}
        delete(id)        DELETE {collection}/{id}
    """

    __slots__ = ("_collection", "_transport")

    def __init__(
        self,
        transport: Transport,
        resource: str,
        *,
        config: ClientConfig | None = None,
    ) -> None:
        self._transport = transport
        self._collection = (config or transport.config).resource_path(resource)

    @property
    def collection(self) -> str:
        """The collection path, e.g. ``/py/users``."""
        return self._collection

    def item_path(self, record_id: int) -> str:
        return f"{self._collection}/{record_id}"

    async def list(self) -> builtins.list[T]:
        return cast("list[T]", await self._transport.send(Request(self._collection)))

    async def create(self, fields: Mapping[str, Any]) -> T:
        """Create a record. The server assigns the id and returns the record."""
        request = Request.json(self._collection, dict(fields), method="POST")
        return cast("T", await self._transport.send(request))

    async def read(self, record_id: int) -> T:
        return cast("T", await self._transport.send(Request(self.item_path(record_id))))

    async def update(self, record_id: int, fields: Mapping[str, Any]) -> T:
        """Partially update a record.

        Only the keys present in *fields* go on the wire; anything omitted
        is left untouched server-side rather than cleared.
        """
        request = Request.json(self.item_path(record_id), dict(fields), method="PUT")
        return cast("T", await self._transport.send(request))

    async def delete(self, record_id: int) -> None:
        """Delete a record. Any response body is discarded."""
        await self._transport.send(Request(self.item_path(record_id), method="DELETE"))
