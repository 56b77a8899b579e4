"""Interactive prompts used by graph edit commands."""

import sys


def is_interactive() -> bool:
    """Check that both stdin and stdout are TTYs."""
    return sys.stdin.isatty() and sys.stdout.isatty()


def confirm(question: str, default: bool = False) -> bool:
    """Yes/No confirmation helper."""
    suffix = " [Y/n]" if default else " [y/N]"
    try:
        response = input(f"{question}{suffix}: ").strip().lower()
        if not response:
            return default
        return response in ("y", "yes")
    except (EOFError, KeyboardInterrupt):
        print("\nAborted")
        return False


def confirm_removal(message: str) -> bool:
    """Blocking confirmation for dependency removal; non-TTY sessions decline."""
    if not is_interactive():
        return False
    return confirm(message, default=False)


__all__ = ["is_interactive", "confirm", "confirm_removal"]
