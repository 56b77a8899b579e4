import json
from pathlib import Path
from typing import Any, Dict, List

import yaml


class SnapshotFileError(RuntimeError):
    pass


def read_snapshot_file(path: Path) -> List[Dict[str, Any]]:
    """Load raw todo records from a JSON or YAML file.

    Accepted shapes: a list of records, {"todos": [...]}, or an ApiResponse
    envelope {"data": [...]} as saved from the server.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotFileError(f"Cannot read snapshot {path}: {exc}") from exc
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise SnapshotFileError(f"Invalid snapshot {path}: {exc}") from exc
    if data is None:
        return []
    if isinstance(data, dict):
        for key in ("todos", "data"):
            if key in data:
                data = data[key]
                break
    if not isinstance(data, list):
        raise SnapshotFileError(f"Snapshot {path} must contain a list of todos")
    return [record for record in data if isinstance(record, dict)]


__all__ = ["SnapshotFileError", "read_snapshot_file"]
