import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import uuid4

_TICK = timedelta(microseconds=1)

_clock_lock = threading.Lock()
_last_timestamp: datetime | None = None


def generate_task_id() -> str:
    return uuid4().hex


def _next_timestamp(previous: datetime | None = None) -> datetime:
    """Current UTC time, strictly after every timestamp issued before it and after ``previous``."""
    global _last_timestamp  # noqa: PLW0603
    with _clock_lock:
        now = datetime.now(UTC)
        floor = max(filter(None, (previous, _last_timestamp)), default=None)
        if floor is not None and now <= floor:
            now = floor + _TICK
        _last_timestamp = now
        return now


@dataclass
class Task:
    id: str
    title: str
    description: str = ""
    completed: bool = False
    created_at: datetime = field(default_factory=_next_timestamp)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

    @classmethod
    def create(cls, title: str, description: str = "") -> "Task":
        """
        Builds a fresh, not yet completed task.
        Does NOT validate the title; that is the caller's job.
        """
        now = _next_timestamp()
        return cls(
            id=generate_task_id(),
            title=title,
            description=description,
            completed=False,
            created_at=now,
            updated_at=now,
        )

    def edit(self, title: str, description: str) -> None:
        self.title = title
        self.description = description
        self._touch()

    def toggle_completed(self) -> None:
        self.completed = not self.completed
        self._touch()

    def _touch(self) -> None:
        self.updated_at = _next_timestamp(self.updated_at)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }
