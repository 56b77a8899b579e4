"""Todo dependency graph model.

Pure domain logic: receives a todo snapshot, returns nodes and edges.
An edge source -> target means "target depends on source".
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .status import TodoStatus
from .todo import TodoSnapshot, parse_snapshot


@dataclass(frozen=True)
class GraphNode:
    id: str
    status_snapshot: TodoStatus
    index: int
    todo: TodoSnapshot


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str

    @property
    def id(self) -> str:
        return f"{self.source}-{self.target}"


@dataclass(frozen=True)
class TodoGraph:
    nodes: Tuple[GraphNode, ...]
    edges: Tuple[GraphEdge, ...]

    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]

    def node(self, todo_id: str) -> Optional[GraphNode]:
        for node in self.nodes:
            if node.id == todo_id:
                return node
        return None

    def dependency_map(self) -> Dict[str, List[str]]:
        """{target: [sources]} over materialized edges, in node order."""
        deps: Dict[str, List[str]] = {node.id: [] for node in self.nodes}
        for edge in self.edges:
            deps[edge.target].append(edge.source)
        return deps

    def has_edge(self, source: str, target: str) -> bool:
        return any(e.source == source and e.target == target for e in self.edges)


def build_graph(todos: Iterable) -> TodoGraph:
    """Build nodes/edges from a todo snapshot.

    Dangling dependency ids, duplicate todo ids (first occurrence wins) and
    self-references are ignored for edge construction. Never raises and never
    mutates the input.
    """
    snapshot = parse_snapshot(todos)
    nodes: List[GraphNode] = []
    by_id: Dict[str, TodoSnapshot] = {}
    for todo in snapshot:
        if todo.id in by_id:
            continue
        by_id[todo.id] = todo
        nodes.append(GraphNode(id=todo.id, status_snapshot=todo.status, index=len(nodes), todo=todo))

    edges: List[GraphEdge] = []
    seen: Set[Tuple[str, str]] = set()
    for node in nodes:
        for dep_id in node.todo.dependencies:
            if dep_id == node.id or dep_id not in by_id:
                continue
            key = (dep_id, node.id)
            if key in seen:
                continue
            seen.add(key)
            edges.append(GraphEdge(source=dep_id, target=node.id))
    return TodoGraph(nodes=tuple(nodes), edges=tuple(edges))


def closes_cycle(graph: TodoGraph, source: str, target: str) -> bool:
    """Would adding source -> target let target reach itself again?

    Walks the existing dependencies of `source`: if `target` is already among
    them (directly or transitively), the new edge closes a cycle.
    """
    if source == target:
        return True
    deps = graph.dependency_map()
    stack = [source]
    visited: Set[str] = set()
    while stack:
        current = stack.pop()
        if current == target:
            return True
        if current in visited:
            continue
        visited.add(current)
        stack.extend(deps.get(current, []))
    return False


__all__ = ["GraphNode", "GraphEdge", "TodoGraph", "build_graph", "closes_cycle"]
