"""Terminal palettes for the graph renderer."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "light": {
        "": "#334155",
        "header": "#4f46e5 bold",
        "text": "#334155",
        "text.dim": "#64748b",
        "text.dimmer": "#94a3b8",
        "tone.success": "#16a34a bold",
        "tone.in_progress": "#d97706 bold",
        "tone.neutral": "#64748b",
        "tone.danger": "#dc2626 bold",
        "flag.blocked": "#f87171",
        "flag.ready": "#22c55e",
        "flag.cycle": "#dc2626 bold",
    },
    "dark": {
        "": "#d7dfe6",
        "header": "#ffb347 bold",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "text.dimmer": "#6d717a",
        "tone.success": "#9ad974 bold",
        "tone.in_progress": "#e5c07b bold",
        "tone.neutral": "#97a0a9",
        "tone.danger": "#e06c75 bold",
        "flag.blocked": "#ff6b6b",
        "flag.ready": "#9ad974",
        "flag.cycle": "#ff5156 bold",
    },
}

DEFAULT_THEME = "light"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    return Style.from_dict(get_theme_palette(theme))


__all__ = ["THEMES", "DEFAULT_THEME", "get_theme_palette", "build_style"]
