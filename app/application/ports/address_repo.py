"""Port interface for read-only address lookup."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from app.domain.entities.address import Address
from app.domain.exceptions import AddressNotFoundError


class AddressRepository(ABC):
    @abstractmethod
    def get(self, guid: str) -> Address | None:
        ...

    @abstractmethod
    def filter_by_tag_and_status(self, tag: str, is_active: bool) -> list[Address]:
        """Return every address carrying *tag* whose active flag equals *is_active*."""
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[Address]:
        """Iterate all addresses in a deterministic order."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    def require(self, guid: str) -> Address:
        address = self.get(guid)
        if address is None:
            raise AddressNotFoundError(guid)
        return address
