"""Terminal rendering of a laid-out todo graph.

Columns follow the layout levels (left to right), rows follow the order
inside each level. Output is a list of prompt_toolkit style fragments so the
same data can be printed in colour or flattened to plain text.
"""

from typing import List, Optional, Tuple

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from core.edge_style import LEGEND, LineKind, node_tone
from core.layout import GraphView, PositionedNode, RenderedEdge
from util.text_width import fit

from .themes import build_style

Fragments = List[Tuple[str, str]]

COLUMN_WIDTH = 30
COLUMN_GAP = "   "
EMPTY_MESSAGE = "No todos"


def _tone_class(node: PositionedNode) -> str:
    return f"class:tone.{node_tone(node.status_snapshot).value}"


def _node_flag(node: PositionedNode) -> Tuple[str, str]:
    if node.in_cycle:
        return "class:flag.cycle", "↻"
    if node.todo.blocked:
        return "class:flag.blocked", "⊘"
    if node.todo.ready_to_start:
        return "class:flag.ready", "↦"
    return "", " "


def node_cell(node: PositionedNode, width: int = COLUMN_WIDTH) -> Fragments:
    """One fixed-width cell: icon, flag, label and title."""
    flag_style, flag = _node_flag(node)
    head = f"{node.status_snapshot.icon} "
    label = f" {node.todo.short_label} "
    rest = fit(node.todo.title, max(width - len(head) - 1 - len(label), 0))
    return [
        (_tone_class(node), head),
        (flag_style, flag),
        (_tone_class(node), label),
        ("class:text", rest),
    ]


def edge_line(edge: RenderedEdge, view: GraphView) -> Fragments:
    source = view.node(edge.source)
    target = view.node(edge.target)
    source_label = source.todo.short_label if source else edge.source
    target_label = target.todo.short_label if target else edge.target
    arrow = " ──▶ " if edge.style.line is LineKind.SOLID else " ╌╌▶ "
    frags: Fragments = [
        ("class:text", f"  {source_label}"),
        (f"class:tone.{edge.style.tone.value}", arrow),
        ("class:text", target_label),
    ]
    if edge.optimistic:
        frags.append(("class:text.dimmer", "  (pending)"))
    return frags


def legend_fragments() -> Fragments:
    frags: Fragments = [("class:text.dim", "Legend:")]
    for status, tone in LEGEND:
        frags.append((f"class:tone.{tone.value}", f"  {status.icon} {status.code.capitalize()}"))
    frags.append(("", "\n"))
    return frags


def render_fragments(view: GraphView, width: int = COLUMN_WIDTH) -> Fragments:
    if view.is_empty:
        return [("class:text.dim", EMPTY_MESSAGE), ("", "\n")]
    frags: Fragments = [
        ("class:header", f"Todo graph ({len(view.nodes)} todos, {len(view.edges)} dependencies)"),
        ("", "\n"),
    ]
    columns = view.columns()
    header = COLUMN_GAP.join(fit(f"Level {level}", width) for level in range(len(columns)))
    frags.extend([("class:text.dim", header.rstrip()), ("", "\n")])
    for row in range(max(len(col) for col in columns)):
        for index, col in enumerate(columns):
            if index:
                frags.append(("", COLUMN_GAP))
            if row < len(col):
                frags.extend(node_cell(col[row], width))
            else:
                frags.append(("", " " * width))
        frags.append(("", "\n"))
    if view.edges:
        frags.extend([("", "\n"), ("class:header", "Dependencies"), ("", "\n")])
        for edge in view.edges:
            frags.extend(edge_line(edge, view))
            frags.append(("", "\n"))
    frags.append(("", "\n"))
    frags.extend(legend_fragments())
    return frags


def render_plain(view: GraphView, width: int = COLUMN_WIDTH) -> str:
    text = "".join(fragment for _, fragment in render_fragments(view, width))
    return "\n".join(line.rstrip() for line in text.split("\n"))


def print_view(view: GraphView, theme: Optional[str] = None, width: int = COLUMN_WIDTH) -> None:
    print_formatted_text(FormattedText(render_fragments(view, width)), style=build_style(theme or ""), end="")


__all__ = [
    "COLUMN_WIDTH",
    "EMPTY_MESSAGE",
    "node_cell",
    "edge_line",
    "legend_fragments",
    "render_fragments",
    "render_plain",
    "print_view",
]
