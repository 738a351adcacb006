"""Domain enums: pure Python, no external dependencies."""

from enum import Enum


class JobStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
