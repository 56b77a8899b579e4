from typing import Any, Dict, List, Protocol


class AddDependency(Protocol):
    def __call__(self, source_id: str, target_id: str) -> None:
        ...


class RemoveDependency(Protocol):
    def __call__(self, source_id: str, target_id: str) -> None:
        ...


class ConfirmPrompt(Protocol):
    def __call__(self, message: str) -> bool:
        ...


class TodoSource(Protocol):
    """Anything able to hand out the current todo records of a mission."""

    def list_todos(self, mission_id: str) -> List[Dict[str, Any]]:
        ...


class TodoStore(TodoSource, Protocol):
    def get_todo(self, todo_id: str) -> Dict[str, Any]:
        ...

    def update_dependencies(self, todo_id: str, dependencies: List[str]) -> Dict[str, Any]:
        ...
