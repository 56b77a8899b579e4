#!/usr/bin/env python3
"""
todo_graph.py — layered dependency view for ThreadCast todos.

Commands read a snapshot (file or server), derive the graph and either print
it or hand one edit gesture to GraphEditor. Edits go to the server in the
background; the command then re-reads the mission and prints what the server
reports, which is the only reconciliation step.
"""

import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from pathlib import Path
from typing import Callable, Optional

from application.dispatch import BackgroundDispatcher
from application.graph_editor import GraphEditor
from config import (
    get_api_url,
    get_layout_settings,
    get_theme,
    get_user_token,
    set_api_url,
    set_theme,
    set_user_token,
)
from core.layout import GraphView, compute_layout
from infrastructure.dependency_gateway import DependencyGateway
from infrastructure.snapshot_file import SnapshotFileError, read_snapshot_file
from infrastructure.threadcast_client import ThreadcastClient, ThreadcastClientError

from .cli_interactive import confirm_removal
from .cli_io import structured_error, structured_response, view_response
from .cli_parser import build_parser as build_cli_parser
from .graph_render import print_view
from .themes import THEMES

DRAIN_TIMEOUT_SECONDS = 60.0


def make_client() -> ThreadcastClient:
    return ThreadcastClient(get_api_url(), token_provider=get_user_token)


def _emit(command: str, view: GraphView, args, message: str = "") -> int:
    if getattr(args, "format", "text") == "json":
        return view_response(command, view, message=message)
    if message:
        print(message)
    print_view(view, getattr(args, "theme", None) or get_theme())
    return 0


def cmd_layout(args) -> int:
    try:
        records = read_snapshot_file(Path(args.file))
    except SnapshotFileError as exc:
        return structured_error("layout", str(exc))
    return _emit("layout", compute_layout(records, get_layout_settings()), args)


def cmd_show(args) -> int:
    try:
        records = make_client().list_todos(args.mission)
    except ThreadcastClientError as exc:
        return structured_error("show", str(exc))
    return _emit("show", compute_layout(records, get_layout_settings()), args)


def _run_edit(args, command: str, gesture: Callable[[GraphEditor], Optional[str]]) -> int:
    """Load the mission, apply one gesture, wait for the intent, then re-read.

    `gesture` returns an error message when the edit was refused locally.
    """
    dispatcher = BackgroundDispatcher()
    try:
        client = make_client()
        gateway = DependencyGateway(client)
        confirm = (lambda _message: True) if getattr(args, "yes", False) else confirm_removal
        editor = GraphEditor(
            client.list_todos(args.mission),
            add_dependency=dispatcher.wrap(gateway.add_dependency),
            remove_dependency=dispatcher.wrap(gateway.remove_dependency),
            confirm=confirm,
            settings=get_layout_settings(),
        )
        refused = gesture(editor)
        if refused:
            return structured_error(command, refused, payload={"source": args.source, "target": args.target})
        failures = dispatcher.drain(DRAIN_TIMEOUT_SECONDS)
        view = editor.load(client.list_todos(args.mission))
    except ThreadcastClientError as exc:
        return structured_error(command, str(exc))
    finally:
        dispatcher.shutdown()
    if failures:
        return structured_error(command, "Dependency update failed; showing the server state", payload=view.to_dict())
    return _emit(command, view, args, message=f"{command}: {args.source} -> {args.target}")


def cmd_link(args) -> int:
    def gesture(editor: GraphEditor) -> Optional[str]:
        if not args.source.strip() or not args.target.strip():
            return "Both todo ids are required"
        if not editor.propose_dependency(args.source, args.target):
            return "A todo cannot depend on itself"
        return None

    return _run_edit(args, "link", gesture)


def cmd_unlink(args) -> int:
    def gesture(editor: GraphEditor) -> Optional[str]:
        if editor.view.edge(args.source, args.target) is None:
            return f"No dependency {args.source} -> {args.target}"
        if not editor.request_removal(args.source, args.target):
            return "Removal cancelled"
        return None

    return _run_edit(args, "unlink", gesture)


def cmd_config(args) -> int:
    if args.api_url is not None:
        set_api_url(args.api_url)
    if args.token is not None:
        set_user_token(args.token)
    if args.theme is not None:
        set_theme(args.theme)
    payload = {
        "api_url": get_api_url(),
        "token_set": bool(get_user_token()),
        "theme": get_theme(),
        "layout": get_layout_settings().to_dict(),
    }
    return structured_response("config", payload=payload)


def build_parser():
    """Build CLI argument parser."""
    parser = build_cli_parser(commands=sys.modules[__name__], themes=THEMES.keys())
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("todo-graph"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    if not getattr(args, "command", None):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
