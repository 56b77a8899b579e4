"""CLI parser construction for the todo graph tool."""

import argparse
from typing import Any, Iterable


def build_parser(commands: Any, themes: Iterable[str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="todo-graph — layered view and editing of todo dependencies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    theme_names = list(themes)

    def add_output_args(sp):
        sp.add_argument("--format", choices=["text", "json"], default="text", help="output format")
        sp.add_argument("--theme", choices=theme_names, help="palette for text output")
        return sp

    def add_mission_arg(sp):
        sp.add_argument("--mission", "-m", required=True, help="mission id whose todos are shown")
        return sp

    sub = parser.add_subparsers(dest="command", help="Commands")

    lp = sub.add_parser("layout", help="Lay out todos from a JSON/YAML snapshot file")
    lp.add_argument("file", help="snapshot file: a list of todos or {todos: [...]}")
    add_output_args(lp)
    lp.set_defaults(func=commands.cmd_layout)

    sp = sub.add_parser("show", help="Fetch a mission's todos from the server and lay them out")
    add_mission_arg(sp)
    add_output_args(sp)
    sp.set_defaults(func=commands.cmd_show)

    link = sub.add_parser("link", help="Make TARGET depend on SOURCE")
    link.add_argument("source", help="todo that must finish first")
    link.add_argument("target", help="todo that waits for SOURCE")
    add_mission_arg(link)
    add_output_args(link)
    link.set_defaults(func=commands.cmd_link)

    unlink = sub.add_parser("unlink", help="Remove the dependency SOURCE -> TARGET")
    unlink.add_argument("source")
    unlink.add_argument("target")
    unlink.add_argument("--yes", "-y", action="store_true", help="skip the confirmation prompt")
    add_mission_arg(unlink)
    add_output_args(unlink)
    unlink.set_defaults(func=commands.cmd_unlink)

    cfg = sub.add_parser("config", help="Show or update user settings")
    cfg.add_argument("--api-url", help="ThreadCast API base URL (empty string resets)")
    cfg.add_argument("--token", help="API access token (empty string removes)")
    cfg.add_argument("--theme", choices=theme_names)
    cfg.set_defaults(func=commands.cmd_config)

    return parser


__all__ = ["build_parser"]
