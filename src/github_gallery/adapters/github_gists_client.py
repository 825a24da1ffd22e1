"""GitHub public gists API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

_GITHUB_ACCEPT = "application/vnd.github+json"


class GistsClient(Protocol):
    """Interface for the public gists listing."""

    async def list_public_gists(self) -> object:
        """Return the raw JSON body of the public gists listing."""


@dataclass
class HttpxGistsClient(GistsClient):
    """HTTPX-backed gists client."""

    url: str
    http_client: httpx.AsyncClient
    timeout: float = 15

    @classmethod
    def create(cls, url: str, timeout: float = 15) -> "HttpxGistsClient":
        """Create a gists client with a managed httpx session."""
        return cls(url=url, http_client=httpx.AsyncClient(), timeout=timeout)

    async def list_public_gists(self) -> object:
        """Fetch the first page of public gists."""
        response = await self.http_client.get(
            self.url,
            headers={"Accept": _GITHUB_ACCEPT},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
