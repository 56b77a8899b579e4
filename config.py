from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from core.layout import LayoutSettings

USER_CONFIG_PATH = Path.home() / ".todo_graph_config.yaml"
DEFAULT_API_URL = "http://localhost:21000/api"
DEFAULT_THEME = "light"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        logging.getLogger("todo_graph.config").warning("Ignoring unreadable config %s: %s", USER_CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def _set_value(key: str, value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data[key] = value
    else:
        data.pop(key, None)
    _save_config(data)


def get_api_url() -> str:
    return str(_load_config().get("api_url") or DEFAULT_API_URL).strip()


def set_api_url(value: str) -> None:
    _set_value("api_url", value)


def get_user_token() -> str:
    return str(_load_config().get("token", "") or "")


def set_user_token(value: str) -> None:
    _set_value("token", value)


def get_theme() -> str:
    return str(_load_config().get("theme") or DEFAULT_THEME).strip()


def set_theme(value: str) -> None:
    _set_value("theme", value)


def get_layout_settings() -> LayoutSettings:
    layout = _load_config().get("layout")
    return LayoutSettings.from_mapping(layout if isinstance(layout, dict) else None)
