import json
from datetime import datetime, timezone
from typing import Dict, Optional

from core.layout import GraphView


def iso_timestamp() -> str:
    """UTC timestamp for structured CLI output."""
    return datetime.now(timezone.utc).isoformat()


def structured_response(
    command: str,
    *,
    status: str = "OK",
    message: str = "",
    payload: Optional[Dict] = None,
    summary: Optional[str] = None,
    exit_code: int = 0,
) -> int:
    """Unified JSON response for non-interactive commands."""
    body: Dict[str, object] = {
        "command": command,
        "status": status,
        "message": message,
        "timestamp": iso_timestamp(),
        "payload": payload or {},
    }
    if summary:
        body["summary"] = summary
    print(json.dumps(body, ensure_ascii=False, indent=2))
    return exit_code


def structured_error(command: str, message: str, *, payload: Optional[Dict] = None, status: str = "ERROR") -> int:
    """Short-hand for structured error responses."""
    return structured_response(command, status=status, message=message, payload=payload, exit_code=1)


def graph_summary(view: GraphView) -> str:
    return f"{len(view.nodes)} todos, {len(view.edges)} dependencies"


def view_response(command: str, view: GraphView, message: str = "") -> int:
    """JSON envelope carrying a laid-out graph view."""
    return structured_response(command, message=message, payload=view.to_dict(), summary=graph_summary(view))


__all__ = ["iso_timestamp", "structured_response", "structured_error", "graph_summary", "view_response"]
