"""Status driven styling for graph edges and nodes.

Edges are styled by their *source* todo: the source finishing is what
unblocks the target.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .status import StatusPhase, TodoStatus


class LineKind(Enum):
    SOLID = "solid"
    DASHED = "dashed"


class Tone(Enum):
    SUCCESS = "success"
    IN_PROGRESS = "in_progress"
    NEUTRAL = "neutral"
    DANGER = "danger"


TONE_COLORS: Dict[Tone, str] = {
    Tone.SUCCESS: "#22c55e",
    Tone.IN_PROGRESS: "#f59e0b",
    Tone.NEUTRAL: "#94a3b8",
    Tone.DANGER: "#ef4444",
}


@dataclass(frozen=True)
class EdgeStyle:
    line: LineKind
    tone: Tone
    width: float
    dash: Optional[str] = None
    animated: bool = False

    @property
    def color(self) -> str:
        return TONE_COLORS[self.tone]

    @property
    def marker_color(self) -> str:
        return self.color

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {
            "line": self.line.value,
            "tone": self.tone.value,
            "stroke": self.color,
            "stroke_width": self.width,
            "animated": self.animated,
            "marker_color": self.marker_color,
        }
        if self.dash:
            data["dash"] = self.dash
        return data


SATISFIED_EDGE = EdgeStyle(line=LineKind.SOLID, tone=Tone.SUCCESS, width=2)
PENDING_EDGE = EdgeStyle(line=LineKind.DASHED, tone=Tone.IN_PROGRESS, width=2, dash="5,5", animated=True)
NEUTRAL_EDGE = EdgeStyle(line=LineKind.SOLID, tone=Tone.NEUTRAL, width=1.5)


def edge_style_for(source_status: Optional[TodoStatus]) -> EdgeStyle:
    phase = source_status.phase if isinstance(source_status, TodoStatus) else None
    if phase is StatusPhase.DONE:
        return SATISFIED_EDGE
    if phase is StatusPhase.ACTIVE:
        return PENDING_EDGE
    return NEUTRAL_EDGE


def node_tone(status: Optional[TodoStatus]) -> Tone:
    phase = status.phase if isinstance(status, TodoStatus) else None
    if phase is StatusPhase.DONE:
        return Tone.SUCCESS
    if phase is StatusPhase.ACTIVE:
        return Tone.IN_PROGRESS
    if phase is StatusPhase.FAILED:
        return Tone.DANGER
    return Tone.NEUTRAL


def minimap_color(status: Optional[TodoStatus]) -> str:
    return TONE_COLORS[node_tone(status)]


# Legend entries in display order: (status shown, tone it is drawn with).
LEGEND = (
    (TodoStatus.PENDING, Tone.NEUTRAL),
    (TodoStatus.THREADING, Tone.IN_PROGRESS),
    (TodoStatus.WOVEN, Tone.SUCCESS),
    (TodoStatus.TANGLED, Tone.DANGER),
)


__all__ = [
    "LineKind",
    "Tone",
    "TONE_COLORS",
    "EdgeStyle",
    "SATISFIED_EDGE",
    "PENDING_EDGE",
    "NEUTRAL_EDGE",
    "edge_style_for",
    "node_tone",
    "minimap_color",
    "LEGEND",
]
