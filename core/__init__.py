from .status import StatusPhase, TodoStatus, coerce_status, normalize_todo_status
from .todo import TodoSnapshot, normalize_ref, normalize_refs, parse_snapshot, todo_from_dict
from .graph_model import GraphEdge, GraphNode, TodoGraph, build_graph, closes_cycle
from .levels import assign_levels, cyclic_todo_ids
from .edge_style import (
    EdgeStyle,
    LineKind,
    Tone,
    LEGEND,
    NEUTRAL_EDGE,
    PENDING_EDGE,
    SATISFIED_EDGE,
    edge_style_for,
    minimap_color,
    node_tone,
)
from .layout import (
    GraphView,
    LayoutSettings,
    PositionedNode,
    RenderedEdge,
    compute_layout,
    group_by_level,
    layout_graph,
    style_edges,
)

__all__ = [
    "StatusPhase",
    "TodoStatus",
    "coerce_status",
    "normalize_todo_status",
    # Snapshot
    "TodoSnapshot",
    "normalize_ref",
    "normalize_refs",
    "parse_snapshot",
    "todo_from_dict",
    # Graph model
    "GraphEdge",
    "GraphNode",
    "TodoGraph",
    "build_graph",
    "closes_cycle",
    "assign_levels",
    "cyclic_todo_ids",
    # Styling
    "EdgeStyle",
    "LineKind",
    "Tone",
    "LEGEND",
    "NEUTRAL_EDGE",
    "PENDING_EDGE",
    "SATISFIED_EDGE",
    "edge_style_for",
    "minimap_color",
    "node_tone",
    # Layout
    "GraphView",
    "LayoutSettings",
    "PositionedNode",
    "RenderedEdge",
    "compute_layout",
    "group_by_level",
    "layout_graph",
    "style_edges",
]
