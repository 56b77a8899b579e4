"""Left-to-right layered layout of the todo dependency graph."""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from .edge_style import EdgeStyle, edge_style_for, minimap_color
from .graph_model import GraphEdge, GraphNode, TodoGraph, build_graph
from .levels import assign_levels, cyclic_todo_ids
from .status import TodoStatus
from .todo import TodoSnapshot


@dataclass(frozen=True)
class LayoutSettings:
    node_width: float = 200
    node_height: float = 100
    horizontal_gap: float = 80
    vertical_gap: float = 30
    margin: float = 50

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "LayoutSettings":
        """Build settings from user config, ignoring unknown or invalid values."""
        values: Dict[str, float] = {}
        for name in cls.__dataclass_fields__:
            raw = (data or {}).get(name)
            if raw is None or isinstance(raw, bool):
                continue
            try:
                number = float(raw)
            except (TypeError, ValueError):
                continue
            if not math.isfinite(number):
                continue
            if name == "margin" and number < 0:
                continue
            if name != "margin" and number <= 0:
                continue
            values[name] = number
        return cls(**values)

    def to_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in self.__dataclass_fields__}

    def x_for(self, level: int) -> float:
        return level * (self.node_width + self.horizontal_gap) + self.margin

    def y_for(self, index_in_level: int) -> float:
        return index_in_level * (self.node_height + self.vertical_gap) + self.margin


@dataclass(frozen=True)
class PositionedNode:
    id: str
    x: float
    y: float
    level: int
    status_snapshot: TodoStatus
    todo: TodoSnapshot
    in_cycle: bool = False

    @property
    def position(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    def to_dict(self) -> Dict[str, Any]:
        todo = self.todo
        return {
            "id": self.id,
            "label": todo.short_label,
            "title": todo.title,
            "position": self.position,
            "level": self.level,
            "status_snapshot": self.status_snapshot.code,
            "color": minimap_color(self.status_snapshot),
            "blocked": todo.blocked,
            "ready_to_start": todo.ready_to_start,
            "step_progress": todo.step_progress,
            "in_cycle": self.in_cycle,
        }


@dataclass(frozen=True)
class RenderedEdge:
    source: str
    target: str
    style: EdgeStyle
    optimistic: bool = False

    @property
    def id(self) -> str:
        return f"{self.source}-{self.target}"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "style": self.style.to_dict(),
        }
        if self.optimistic:
            data["optimistic"] = True
        return data


@dataclass(frozen=True)
class GraphView:
    nodes: Tuple[PositionedNode, ...]
    edges: Tuple[RenderedEdge, ...]
    settings: LayoutSettings = LayoutSettings()

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def node(self, todo_id: str) -> Optional[PositionedNode]:
        for node in self.nodes:
            if node.id == todo_id:
                return node
        return None

    def edge(self, source: str, target: str) -> Optional[RenderedEdge]:
        for edge in self.edges:
            if edge.source == source and edge.target == target:
                return edge
        return None

    def levels(self) -> Dict[str, int]:
        return {node.id: node.level for node in self.nodes}

    def columns(self) -> List[List[PositionedNode]]:
        """Nodes grouped by level, left to right, top to bottom."""
        if not self.nodes:
            return []
        width = max(node.level for node in self.nodes) + 1
        cols: List[List[PositionedNode]] = [[] for _ in range(width)]
        for node in sorted(self.nodes, key=lambda n: (n.level, n.y)):
            cols[node.level].append(node)
        return cols

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
            "empty": self.is_empty,
        }


def group_by_level(graph: TodoGraph, levels: Mapping[str, int]) -> Dict[int, List[GraphNode]]:
    """Group nodes by level keeping input order inside each level."""
    groups: Dict[int, List[GraphNode]] = {}
    for node in graph.nodes:
        groups.setdefault(levels.get(node.id, 0), []).append(node)
    return groups


def style_edges(graph: TodoGraph, edges: Optional[Iterable[GraphEdge]] = None) -> List[RenderedEdge]:
    statuses = {node.id: node.status_snapshot for node in graph.nodes}
    return [
        RenderedEdge(source=edge.source, target=edge.target, style=edge_style_for(statuses.get(edge.source)))
        for edge in (graph.edges if edges is None else edges)
    ]


def layout_graph(graph: TodoGraph, settings: Optional[LayoutSettings] = None) -> GraphView:
    settings = settings or LayoutSettings()
    levels = assign_levels(graph)
    cyclic: Set[str] = cyclic_todo_ids(graph, levels)
    positioned: Dict[str, PositionedNode] = {}
    for level, members in group_by_level(graph, levels).items():
        x = settings.x_for(level)
        for index, node in enumerate(members):
            positioned[node.id] = PositionedNode(
                id=node.id,
                x=x,
                y=settings.y_for(index),
                level=level,
                status_snapshot=node.status_snapshot,
                todo=node.todo,
                in_cycle=node.id in cyclic,
            )
    nodes = tuple(positioned[node.id] for node in graph.nodes)
    return GraphView(nodes=nodes, edges=tuple(style_edges(graph)), settings=settings)


def compute_layout(todos: Iterable, settings: Optional[LayoutSettings] = None) -> GraphView:
    """Snapshot -> graph model -> levels -> positioned, styled view."""
    return layout_graph(build_graph(todos), settings)


__all__ = [
    "LayoutSettings",
    "PositionedNode",
    "RenderedEdge",
    "GraphView",
    "group_by_level",
    "style_edges",
    "layout_graph",
    "compute_layout",
]
