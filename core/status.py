from enum import Enum
from typing import Final


class StatusPhase(Enum):
    """Closed grouping of todo statuses used by every style decision."""

    NOT_STARTED = "not_started"
    ACTIVE = "active"
    DONE = "done"
    FAILED = "failed"


class TodoStatus(Enum):
    BACKLOG = ("BACKLOG", StatusPhase.NOT_STARTED, "◷")
    PENDING = ("PENDING", StatusPhase.NOT_STARTED, "◷")
    THREADING = ("THREADING", StatusPhase.ACTIVE, "▶")
    IN_PROGRESS = ("IN_PROGRESS", StatusPhase.ACTIVE, "▶")
    WOVEN = ("WOVEN", StatusPhase.DONE, "✓")
    COMPLETED = ("COMPLETED", StatusPhase.DONE, "✓")
    TANGLED = ("TANGLED", StatusPhase.FAILED, "!")
    ARCHIVED = ("ARCHIVED", StatusPhase.NOT_STARTED, "□")
    SKIPPED = ("SKIPPED", StatusPhase.NOT_STARTED, "□")
    UNKNOWN = ("?", StatusPhase.NOT_STARTED, "?")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def phase(self) -> StatusPhase:
        return self.value[1]

    @property
    def icon(self) -> str:
        return self.value[2]

    @classmethod
    def from_string(cls, value: str) -> "TodoStatus":
        val = normalize_todo_status(value, allow_unknown=True)
        for status in cls:
            if status.code == val:
                return status
        return cls.UNKNOWN


_CANONICAL_CODES: Final[frozenset[str]] = frozenset(
    status.value[0] for status in TodoStatus if status.value[0] != "?"
)


def normalize_todo_status(value: str, *, allow_unknown: bool = False) -> str:
    """Normalize todo status input to the server's status code.

    Accepts any casing and spaces or dashes instead of underscores
    ("in progress" -> IN_PROGRESS). When allow_unknown=True the normalized
    token is returned even if it is not a known status.
    """
    token = (value or "").strip().upper().replace(" ", "_").replace("-", "_")
    if not token:
        return token
    if token in _CANONICAL_CODES:
        return token
    if allow_unknown:
        return token
    raise ValueError(f"Invalid todo status: {value!r}")


def coerce_status(value) -> TodoStatus:
    """Accept a TodoStatus or any string; never raises."""
    if isinstance(value, TodoStatus):
        return value
    if not isinstance(value, str):
        return TodoStatus.UNKNOWN
    return TodoStatus.from_string(value)


__all__ = ["StatusPhase", "TodoStatus", "normalize_todo_status", "coerce_status"]
