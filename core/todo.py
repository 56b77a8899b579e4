"""Read-only todo snapshot consumed by the dependency graph.

The graph never owns todo data: whatever the server (or a snapshot file)
returns is converted into immutable TodoSnapshot values and the whole graph is
derived from them again on every refresh.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from .status import TodoStatus, coerce_status

logger = logging.getLogger("todo_graph.snapshot")

DEFAULT_STEPS_TOTAL = 6


@dataclass(frozen=True)
class TodoSnapshot:
    id: str
    title: str = ""
    status: TodoStatus = TodoStatus.PENDING
    dependencies: Tuple[str, ...] = ()
    blocked: bool = False
    ready_to_start: bool = False
    complexity: str = ""
    estimated_time: Optional[int] = None
    steps_completed: int = 0
    steps_total: Optional[int] = None
    mission_id: str = ""
    order_index: Optional[int] = None

    @property
    def short_label(self) -> str:
        return f"TODO-{self.id[-4:]}"

    @property
    def step_progress(self) -> int:
        """Percent of completed steps; a todo without step data counts 6 steps."""
        total = self.steps_total or DEFAULT_STEPS_TOTAL
        return int(round((self.steps_completed / total) * 100))


def normalize_ref(ref: Any) -> Optional[str]:
    """Reduce a dependency reference (bare id or {"id": ...}) to a bare id."""
    if isinstance(ref, Mapping):
        ref = ref.get("id")
    if ref is None or isinstance(ref, bool):
        return None
    if isinstance(ref, (str, int)):
        text = str(ref).strip()
        return text or None
    return None


def normalize_refs(refs: Any) -> Tuple[str, ...]:
    """Dependency ids in order; a scalar that is not an id means no dependencies."""
    if isinstance(refs, (str, Mapping)):
        refs = [refs]
    elif not isinstance(refs, Iterable) or isinstance(refs, bytes):
        refs = []
    ids: List[str] = []
    for ref in refs:
        dep_id = normalize_ref(ref)
        if dep_id is not None:
            ids.append(dep_id)
    return tuple(ids)


def _first(record: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return default


def _as_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def todo_from_dict(record: Mapping[str, Any]) -> Optional[TodoSnapshot]:
    """Build a snapshot from an API record (camelCase) or a file record (snake_case)."""
    todo_id = normalize_ref(record.get("id"))
    if todo_id is None:
        return None
    steps = record.get("steps")
    steps_completed = _as_int(_first(record, "steps_completed", "stepsCompleted"))
    steps_total = _as_int(_first(record, "steps_total", "stepsTotal"))
    if isinstance(steps, list):
        if steps_completed is None:
            steps_completed = sum(
                1 for step in steps if isinstance(step, Mapping) and str(step.get("status", "")).upper() == "COMPLETED"
            )
        if steps_total is None and steps:
            steps_total = len(steps)
    return TodoSnapshot(
        id=todo_id,
        title=str(record.get("title") or ""),
        status=coerce_status(record.get("status", "PENDING")),
        dependencies=normalize_refs(record.get("dependencies")),
        blocked=bool(_first(record, "blocked", "isBlocked", default=False)),
        ready_to_start=bool(_first(record, "ready_to_start", "isReadyToStart", default=False)),
        complexity=str(record.get("complexity") or ""),
        estimated_time=_as_int(_first(record, "estimated_time", "estimatedTime")),
        steps_completed=steps_completed or 0,
        steps_total=steps_total,
        mission_id=str(_first(record, "mission_id", "missionId", default="") or ""),
        order_index=_as_int(_first(record, "order_index", "orderIndex")),
    )


def parse_snapshot(records: Iterable[Any]) -> List[TodoSnapshot]:
    """Convert raw records into snapshots, skipping anything without an id."""
    todos: List[TodoSnapshot] = []
    for position, record in enumerate(records or []):
        if isinstance(record, TodoSnapshot):
            todos.append(record)
            continue
        todo = todo_from_dict(record) if isinstance(record, Mapping) else None
        if todo is None:
            logger.warning("Skipping todo record #%s without a usable id", position)
            continue
        todos.append(todo)
    return todos


__all__ = [
    "DEFAULT_STEPS_TOTAL",
    "TodoSnapshot",
    "normalize_ref",
    "normalize_refs",
    "todo_from_dict",
    "parse_snapshot",
]
