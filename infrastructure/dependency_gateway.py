"""Persist dependency intents by rewriting the target todo's dependency list."""

import logging
from typing import List

from application.ports import TodoStore
from core.todo import normalize_refs

logger = logging.getLogger("todo_graph.api")


class DependencyGateway:
    def __init__(self, store: TodoStore) -> None:
        self.store = store

    def add_dependency(self, source_id: str, target_id: str) -> None:
        current = self._dependencies_of(target_id)
        if source_id in current:
            logger.info("%s already depends on %s", target_id, source_id)
            return
        self.store.update_dependencies(target_id, current + [source_id])

    def remove_dependency(self, source_id: str, target_id: str) -> None:
        current = self._dependencies_of(target_id)
        remaining = [dep for dep in current if dep != source_id]
        if len(remaining) == len(current):
            logger.info("%s does not depend on %s", target_id, source_id)
            return
        self.store.update_dependencies(target_id, remaining)

    def _dependencies_of(self, todo_id: str) -> List[str]:
        record = self.store.get_todo(todo_id) or {}
        return list(normalize_refs(record.get("dependencies")))


__all__ = ["DependencyGateway"]
