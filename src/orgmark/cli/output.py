"""Terminal output helpers for the orgmark CLI."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/orgmark/cli/output.py
from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from orgmark.exceptions import DependencyError
from orgmark.renderers.profile import RenderingProfile

# Opening or closing BBCode tag, with an optional bound value
BBCODE_TAG_PATTERN = r"\[/?[a-z*]+(?:=[^\]\n]*)?\]"


def check_rich_available() -> bool:
    """Check if the Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(
    args: argparse.Namespace, raise_on_missing: bool = False, stream: TextIO | None = None
) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Rich output is used when ``--rich`` is set, Rich is installed, and
    either ``--force-rich`` is set or the stream is a terminal.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    raise_on_missing : bool, default False
        Raise DependencyError if rich is not installed
    stream : TextIO, optional
        Stream to check; ``sys.stdout`` unless given

    Raises
    ------
    DependencyError
        If ``raise_on_missing`` is set and Rich is not installed

    """
    if not getattr(args, "rich", False):
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                "rich-output",
                [("rich", ">=13.0")],
                message="Rich output requires the optional 'rich' dependency. Install with: pip install orgmark[rich]",
            )
        return False

    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def print_rendered(text: str, profile: RenderingProfile, use_rich: bool) -> None:
    """Write a rendered document to stdout, highlighted when ``use_rich`` is set."""
    if not use_rich:
        sys.stdout.write(text)
        return

    from rich.console import Console
    from rich.syntax import Syntax
    from rich.text import Text

    console = Console(soft_wrap=True)
    if profile.name == "html":
        console.print(Syntax(text.rstrip("\n"), "html", word_wrap=False))
        return

    highlighted = Text(text.rstrip("\n"))
    highlighted.highlight_regex(BBCODE_TAG_PATTERN, "bold cyan")
    console.print(highlighted)


def print_profiles(profiles: Sequence[RenderingProfile], use_rich: bool) -> None:
    """List the registered profiles, as a table when ``use_rich`` is set."""
    if not use_rich:
        for profile in profiles:
            print(profile.name)
        return

    from rich.console import Console
    from rich.table import Table

    table = Table(title="Rendering Profiles")
    table.add_column("Profile", style="cyan")
    table.add_column("Extension", style="yellow")
    table.add_column("List kinds", style="magenta")
    for profile in profiles:
        table.add_row(profile.name, profile.file_extension, ", ".join(profile.list_tags))
    Console().print(table)
