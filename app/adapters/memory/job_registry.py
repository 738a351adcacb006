"""In-memory job registry: implements JobRegistry.

Two levels of locking:

* ``_lock`` guards the handle -> entry map (insert and lookup only).
* each entry carries its own lock guarding its transition and snapshot.

Neither lock is held while an area search computes, so jobs never wait on
each other's progress.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from threading import Lock

from app.application.ports.job_registry import JobRegistry
from app.domain.entities.address import Address
from app.domain.entities.area_job import AreaJob, AreaJobView
from app.domain.exceptions import JobStateError

logger = logging.getLogger(__name__)

MAX_HANDLE_ATTEMPTS = 10


def _new_handle() -> str:
    return str(uuid.uuid4())


@dataclass
class _Entry:
    job: AreaJob
    lock: Lock = field(default_factory=Lock)


class InMemoryJobRegistry(JobRegistry):
    """Thread-safe in-memory job registry."""

    def __init__(self, handle_factory: Callable[[], str] = _new_handle) -> None:
        self._lock = Lock()
        self._entries: dict[str, _Entry] = {}
        self._handle_factory = handle_factory

    def create(self) -> str:
        with self._lock:
            for _ in range(MAX_HANDLE_ATTEMPTS):
                handle = self._handle_factory()
                if handle not in self._entries:
                    break
                logger.warning("Handle collision on %s, drawing a new one", handle)
            else:
                raise JobStateError(
                    f"No unique handle after {MAX_HANDLE_ATTEMPTS} attempts"
                )
            self._entries[handle] = _Entry(job=AreaJob(handle=handle))
        logger.debug("Created job %s", handle)
        return handle

    def complete(self, handle: str, result: Sequence[Address]) -> None:
        entry = self._require(handle)
        with entry.lock:
            entry.job.complete(tuple(result))

    def fail(self, handle: str, error: str) -> None:
        entry = self._require(handle)
        with entry.lock:
            entry.job.fail(error)

    def get(self, handle: str) -> AreaJobView | None:
        with self._lock:
            entry = self._entries.get(handle)
        if entry is None:
            return None
        with entry.lock:
            return entry.job.snapshot()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _require(self, handle: str) -> _Entry:
        with self._lock:
            entry = self._entries.get(handle)
        if entry is None:
            raise JobStateError(f"Unknown job handle: {handle}")
        return entry
