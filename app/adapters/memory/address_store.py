"""In-memory address store: implements AddressRepository."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from app.adapters.json_loader.loader import load_addresses
from app.application.ports.address_repo import AddressRepository
from app.domain.entities.address import Address
from app.domain.exceptions import AddressLoadError

logger = logging.getLogger(__name__)


class InMemoryAddressStore(AddressRepository):
    """guid -> Address map, built once and read-only afterwards.

    Reads need no locking since nothing mutates the map after __init__.
    """

    def __init__(self, addresses: Iterable[Address]):
        self._by_guid: dict[str, Address] = {}
        for address in addresses:
            if address.guid in self._by_guid:
                raise AddressLoadError(f"Duplicate guid in dataset: {address.guid}")
            self._by_guid[address.guid] = address

    @classmethod
    def from_file(cls, file_path: Path) -> "InMemoryAddressStore":
        store = cls(load_addresses(file_path))
        logger.info("Address store ready with %d records", len(store))
        return store

    def get(self, guid: str) -> Address | None:
        return self._by_guid.get(guid)

    def filter_by_tag_and_status(self, tag: str, is_active: bool) -> list[Address]:
        return [a for a in self._by_guid.values() if a.matches(tag, is_active)]

    def __iter__(self) -> Iterator[Address]:
        return iter(self._by_guid.values())

    def __len__(self) -> int:
        return len(self._by_guid)
