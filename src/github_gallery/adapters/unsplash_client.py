"""Unsplash photos API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class UnsplashClient(Protocol):
    """Interface for the Unsplash photo listing."""

    async def list_photos(self, per_page: int = 30) -> object:
        """Return the raw JSON body of one page of photos."""


@dataclass
class HttpxUnsplashClient(UnsplashClient):
    """HTTPX-backed Unsplash client."""

    access_key: str
    url: str
    http_client: httpx.AsyncClient
    timeout: float = 15

    @classmethod
    def create(
        cls, access_key: str, url: str, timeout: float = 15
    ) -> "HttpxUnsplashClient":
        """Create an Unsplash client with a managed httpx session."""
        return cls(
            access_key=access_key,
            url=url,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def list_photos(self, per_page: int = 30) -> object:
        """Fetch one page of editorial photos."""
        response = await self.http_client.get(
            self.url,
            params={"client_id": self.access_key, "per_page": per_page},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
