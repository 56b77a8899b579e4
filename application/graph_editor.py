"""Interactive editing of the todo dependency graph.

The editor keeps the latest view derived from a todo snapshot and turns user
gestures into dependency intents for an external collaborator:

* connecting two todos proposes `add_dependency(source, target)` (target will
  depend on source);
* clicking an edge asks for confirmation and then proposes
  `remove_dependency(source, target)`.

Intents are fire-and-forget. The editor never waits for the collaborator,
never rolls back a local change and never catches its exceptions; the next
snapshot passed to `load()` is the only reconciliation point. A failed
intent therefore stays visible locally until that refresh.
"""

import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional

from core.edge_style import NEUTRAL_EDGE
from core.graph_model import GraphEdge, TodoGraph, build_graph, closes_cycle
from core.layout import GraphView, LayoutSettings, RenderedEdge, layout_graph

from .ports import AddDependency, ConfirmPrompt, RemoveDependency

logger = logging.getLogger("todo_graph.editor")

REMOVE_CONFIRM_MESSAGE = "Remove this dependency?"


class EditorState(Enum):
    IDLE = "idle"
    AWAITING_CONFIRMATION = "awaiting_confirmation"


class GraphEditor:
    def __init__(
        self,
        todos: Iterable = (),
        *,
        add_dependency: AddDependency,
        remove_dependency: RemoveDependency,
        confirm: ConfirmPrompt,
        settings: Optional[LayoutSettings] = None,
        on_todo_click: Optional[Callable[[str], None]] = None,
        confirm_message: str = REMOVE_CONFIRM_MESSAGE,
    ) -> None:
        self._add_dependency = add_dependency
        self._remove_dependency = remove_dependency
        self._confirm = confirm
        self._on_todo_click = on_todo_click
        self.settings = settings or LayoutSettings()
        self.confirm_message = confirm_message
        self.state = EditorState.IDLE
        self._graph = TodoGraph(nodes=(), edges=())
        self._base = GraphView(nodes=(), edges=(), settings=self.settings)
        self._edges: List[RenderedEdge] = []
        self.load(todos)

    def load(self, todos: Iterable) -> GraphView:
        """Rebuild everything from a fresh snapshot, dropping local edits."""
        self._graph = build_graph(todos)
        self._base = layout_graph(self._graph, self.settings)
        self._edges = list(self._base.edges)
        return self.view

    @property
    def view(self) -> GraphView:
        return GraphView(nodes=self._base.nodes, edges=tuple(self._edges), settings=self.settings)

    def propose_dependency(self, source_id: str, target_id: str) -> bool:
        """Connect gesture: source_id -> target_id (target depends on source).

        Returns False when the gesture was rejected locally (self-loop or an
        empty endpoint); in that case no intent is emitted.
        """
        if not source_id or not target_id or source_id == target_id:
            logger.debug("Rejected dependency gesture %r -> %r", source_id, target_id)
            return False
        if self._base.node(source_id) and self._base.node(target_id):
            if closes_cycle(self._current_graph(), source_id, target_id):
                logger.warning("Dependency %s -> %s closes a cycle", source_id, target_id)
            if not self._find_edge(source_id, target_id):
                self._edges.append(RenderedEdge(source_id, target_id, NEUTRAL_EDGE, optimistic=True))
        self._add_dependency(source_id, target_id)
        return True

    def request_removal(self, source_id: str, target_id: str) -> bool:
        """Edge click gesture. Returns True when removal was confirmed and sent."""
        if self.state is EditorState.AWAITING_CONFIRMATION:
            return False
        edge = self._find_edge(source_id, target_id)
        if edge is None:
            return False
        self.state = EditorState.AWAITING_CONFIRMATION
        try:
            confirmed = bool(self._confirm(self.confirm_message))
        finally:
            self.state = EditorState.IDLE
        if not confirmed:
            return False
        self._edges = [e for e in self._edges if e is not edge]
        self._remove_dependency(source_id, target_id)
        return True

    def select(self, todo_id: str) -> bool:
        if self._on_todo_click is None or self._base.node(todo_id) is None:
            return False
        self._on_todo_click(todo_id)
        return True

    def _find_edge(self, source_id: str, target_id: str) -> Optional[RenderedEdge]:
        for edge in self._edges:
            if edge.source == source_id and edge.target == target_id:
                return edge
        return None

    def _current_graph(self) -> TodoGraph:
        edges = tuple(GraphEdge(source=e.source, target=e.target) for e in self._edges)
        return TodoGraph(nodes=self._graph.nodes, edges=edges)


__all__ = ["EditorState", "GraphEditor", "REMOVE_CONFIRM_MESSAGE"]
