"""AreaJob entity: one asynchronous radius search and its outcome."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from app.domain.entities.address import Address
from app.domain.exceptions import JobStateError
from app.domain.value_objects.enums import JobStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AreaJobView:
    """Read-only snapshot of a job handed out to pollers."""

    handle: str
    status: JobStatus
    result: tuple[Address, ...] | None
    error: str | None
    created_at: datetime
    finished_at: datetime | None

    @property
    def is_pending(self) -> bool:
        return self.status == JobStatus.PENDING


@dataclass
class AreaJob:
    """Mutable job entry. Only the registry that owns it may change it.

    Transitions: PENDING -> COMPLETED or PENDING -> FAILED, exactly once.
    """

    handle: str
    status: JobStatus = JobStatus.PENDING
    result: tuple[Address, ...] | None = None
    error: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    finished_at: datetime | None = None

    def complete(self, result: tuple[Address, ...]) -> None:
        self._ensure_pending()
        self.result = result
        self.status = JobStatus.COMPLETED
        self.finished_at = _utcnow()

    def fail(self, error: str) -> None:
        self._ensure_pending()
        self.error = error
        self.status = JobStatus.FAILED
        self.finished_at = _utcnow()

    def snapshot(self) -> AreaJobView:
        return AreaJobView(
            handle=self.handle,
            status=self.status,
            result=self.result,
            error=self.error,
            created_at=self.created_at,
            finished_at=self.finished_at,
        )

    def _ensure_pending(self) -> None:
        if self.status != JobStatus.PENDING:
            raise JobStateError(
                f"Job {self.handle} already finished with status {self.status.value}"
            )
