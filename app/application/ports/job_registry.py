"""Port interface for tracking asynchronous area-search jobs."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from app.domain.entities.address import Address
from app.domain.entities.area_job import AreaJobView


class JobRegistry(ABC):
    @abstractmethod
    def create(self) -> str:
        """Register a new PENDING job and return its unique handle."""
        ...

    @abstractmethod
    def complete(self, handle: str, result: Sequence[Address]) -> None:
        """Move a PENDING job to COMPLETED.

        Raises JobStateError for an unknown handle or a finished job.
        """
        ...

    @abstractmethod
    def fail(self, handle: str, error: str) -> None:
        """Move a PENDING job to FAILED. Same contract as complete()."""
        ...

    @abstractmethod
    def get(self, handle: str) -> AreaJobView | None:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...
