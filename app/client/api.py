"""Async HTTP client for the pets API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class PetDeletionError(Exception):
    """A pet could not be deleted on the server."""

    def __init__(self, pet_id: Any, message: str) -> None:
        super().__init__(message)
        self.pet_id = pet_id
        self.message = message


class PetsClient:
    """HTTP client for the pets API.

    One `httpx.AsyncClient` per instance; pass `transport` to swap the
    network layer (tests use `httpx.MockTransport`).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "PetsClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def list_pets(self, **filters: Any) -> list[dict]:
        params = {k: v for k, v in filters.items() if v is not None}
        response = await self._client.get("/pets", params=params)
        response.raise_for_status()
        return response.json()

    async def delete_pet(self, pet_id: Any) -> None:
        """Send one DELETE for `pet_id`; non-2xx raises `httpx.HTTPStatusError`."""
        response = await self._client.delete(f"/pets/{pet_id}")
        response.raise_for_status()
        logger.debug("DELETE /pets/%s -> %s", pet_id, response.status_code)
