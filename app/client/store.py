"""Client-side pet list state.

`original_pets` is the unfiltered list as last known from the server,
`pet_list` is what gets displayed. Both live on one event loop and are
only ever replaced by single assignments, so no locking is needed.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

import httpx

from .api import PetsClient

logger = logging.getLogger(__name__)

PetFilter = Callable[[dict], bool]


class PetListState:
    def __init__(self, client: PetsClient, pets: list[dict] | None = None) -> None:
        self.client = client
        self.original_pets: list[dict] = list(pets or [])
        self.pet_list: list[dict] = list(self.original_pets)
        self.error: str | None = None
        self._filter: PetFilter | None = None

    @property
    def active_filter(self) -> PetFilter | None:
        return self._filter

    async def load(self, **filters: Any) -> None:
        pets = await self.client.list_pets(**filters)
        self.original_pets = list(pets)
        self._reproject()

    def apply_filter(self, predicate: PetFilter) -> None:
        self._filter = predicate
        self._reproject()

    def filter_by(self, **attrs: Any) -> None:
        """Show only pets whose attributes equal all of `attrs`."""
        self.apply_filter(lambda pet: all(pet.get(k) == v for k, v in attrs.items()))

    def clear_filter(self) -> None:
        self._filter = None
        self._reproject()

    def _reproject(self) -> None:
        if self._filter is None:
            self.pet_list = list(self.original_pets)
        else:
            self.pet_list = [p for p in self.original_pets if self._filter(p)]

    async def delete_pet(self, pet_id: Any) -> None:
        """Delete a pet on the server, then drop it from local state.

        Local state is untouched until the server confirms. On success both
        lists become the same sequence and any active filter is dropped. On
        failure only `error` is set; the exception is not re-raised.
        """
        try:
            await self.client.delete_pet(pet_id)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Deleting pet %s failed: %s", pet_id, exc)
            self.error = str(exc)
            return

        # read at resolution time, not at call time
        remaining = [pet for pet in self.original_pets if pet.get("id") != pet_id]
        self._filter = None
        self.pet_list = remaining
        self.original_pets = remaining
        logger.info("Deleted pet %s, %d left", pet_id, len(remaining))

    def request_delete(self, pet_id: Any) -> asyncio.Task:
        """Schedule `delete_pet` on the running loop without waiting for it."""
        return asyncio.get_running_loop().create_task(self.delete_pet(pet_id))
