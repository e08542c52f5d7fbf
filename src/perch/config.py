"""Client configuration.

ClientConfig is a frozen dataclass: immutable after creation, no
environment lookups, no string-key dict access.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Transport configuration. Immutable after creation.

    All fields have defaults. Override what you need::

        config = ClientConfig(base_url="https://api.example.com", api_base="/v1")
    """

    # Scheme and host prepended to every request path
    base_url: str = "http://localhost"

    # Fixed prefix in front of every resource segment ("/py/users")
    api_base: str = "/py"

    # Extra default headers, applied after Content-Type and before per-request overrides
    headers: tuple[tuple[str, str], ...] = ()

    # None disables httpx's timeout; in-flight requests run to completion or failure
    timeout: float | None = None

    def resource_path(self, resource: str) -> str:
        """Join ``api_base`` and a resource segment with a single slash."""
        base = self.api_base.rstrip("/")
        return f"{base}/{resource.strip('/')}"

    def url(self, path: str) -> str:
        """Absolute URL for a request path."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
