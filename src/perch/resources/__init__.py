"""Resource clients: list/create/read/update/delete for one collection.

Each client is a thin shaping of transport calls over a collection path
such as ``/py/users``. Errors propagate from the transport unchanged.
"""

from perch.resources.client import ResourceClient
from perch.resources.users import User, UserClient, UserFields, UserUpdate

__all__ = ["ResourceClient", "User", "UserClient", "UserFields", "UserUpdate"]
