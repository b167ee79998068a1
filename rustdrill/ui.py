"""Coloured status lines for the terminal."""

from __future__ import annotations

import os
import sys

from rich.console import Console
from rich.text import Text


def _console() -> Console:
    return Console(file=sys.stdout, highlight=False, soft_wrap=True, emoji=False)


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _styled_line(mark: str, message: str, colour: str) -> None:
    _console().print(Text.assemble((mark, colour), " ", (message, colour)))


def warn(message: str) -> None:
    """Print a red warning line."""
    _styled_line("!" if no_emoji() else "⚠️ ", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _styled_line("✓" if no_emoji() else "✅", message, "green")