#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/cli/__init__.py
"""Command-line interface for orgmark.

The command reads a document tree in JSON form (as written by an external
parser), transcodes it with the chosen profile and writes the markup to
stdout or a file.

Examples
--------
Render to HTML on stdout::

    $ orgmark tree.json

Render to BBCode into a file::

    $ orgmark tree.json --profile bbcode --out post.bbcode

Read the tree from a pipe and skip invisible content::

    $ my-parser notes.org | orgmark - --visible-only

Highlight the result in the terminal::

    $ orgmark tree.json --rich

Use a configuration file::

    $ export ORGMARK_CONFIG=~/.orgmark.toml
    $ orgmark tree.json

"""

import argparse
import logging
import os
import sys
from pathlib import Path

from orgmark.ast.nodes import Node
from orgmark.ast.serialization import json_to_ast
from orgmark.cli.builder import (
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    build_export_options,
    create_parser,
    get_exit_code_for_exception,
)
from orgmark.cli.config import load_config_file, load_config_with_priority
from orgmark.cli.output import print_profiles, print_rendered, should_use_rich_output
from orgmark.constants import CONFIG_ENV_VAR
from orgmark.exceptions import OrgmarkError
from orgmark.logging_utils import configure_logging
from orgmark.renderers import RenderingProfile, get_profile, list_profiles, transcode

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging from --trace, --verbose and --log-level, in that precedence."""
    if parsed_args.trace or parsed_args.verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_config(parsed_args: argparse.Namespace) -> dict:
    """Load configuration honoring --config, --no-config and ORGMARK_CONFIG."""
    if parsed_args.no_config:
        return load_config_file(parsed_args.config) if parsed_args.config else {}
    return load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))


def _read_tree(source: str) -> Node:
    """Read and deserialize a JSON tree from a path or '-' (stdin)."""
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    return json_to_ast(text)


def _write_output(text: str, out: str | None, profile: RenderingProfile, use_rich: bool) -> None:
    if out:
        Path(out).write_text(text, encoding="utf-8")
        logger.info("Wrote %s", out)
    else:
        print_rendered(text, profile, use_rich)


def main(args: list[str] | None = None) -> int:
    """Execute the orgmark command line and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    try:
        use_rich = should_use_rich_output(parsed_args, raise_on_missing=True)
    except OrgmarkError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    if parsed_args.list_profiles:
        print_profiles([get_profile(name) for name in list_profiles()], use_rich)
        return EXIT_SUCCESS

    if not parsed_args.input:
        print("Error: Input file is required", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed_args)

    try:
        config = _load_config(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        profile_name, options = build_export_options(parsed_args, config)
        tree = _read_tree(parsed_args.input)
        profile = get_profile(profile_name)
        result = transcode(tree, options, profile=profile)
        _write_output(result, parsed_args.out, profile, use_rich)
    except (OrgmarkError, OSError) as e:
        logger.debug("Export failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
