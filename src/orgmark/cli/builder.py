#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/cli/builder.py
"""Argument parser construction for the orgmark CLI.

Export option flags are generated from the ``ExportOptions`` dataclass field
metadata, so a new option only needs a field with a ``help`` entry.
"""

from __future__ import annotations

import argparse
from dataclasses import MISSING, fields
from typing import Any, Dict, Optional

from orgmark.constants import CONFIG_ENV_VAR
from orgmark.exceptions import (
    DependencyError,
    InvalidOptionsError,
    TranscodeError,
    TreeLoadError,
    ValidationError,
)
from orgmark.options import ExportOptions
from orgmark.renderers import list_profiles

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_TRANSCODE_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, DependencyError):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (FileNotFoundError, PermissionError, IsADirectoryError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, TreeLoadError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, TranscodeError):
        return EXIT_TRANSCODE_ERROR

    return EXIT_ERROR


def _cli_name(field_name: str) -> str:
    return "--" + field_name.replace("_", "-")


def _add_export_option_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("Export options", "Options passed to the transcoding engine")
    for field in fields(ExportOptions):
        metadata: Dict[str, Any] = dict(field.metadata) if field.metadata else {}
        help_text = metadata.get("help", f"Configure {field.name}")
        # None means "not given" so config file values can fill in
        if field.default is not MISSING and isinstance(field.default, bool):
            group.add_argument(
                _cli_name(field.name),
                dest=field.name,
                action="store_true",
                default=None,
                help=help_text,
            )
        else:
            group.add_argument(_cli_name(field.name), dest=field.name, default=None, metavar="VALUE", help=help_text)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``orgmark`` command."""
    parser = argparse.ArgumentParser(
        prog="orgmark",
        description="Transcode a JSON document tree into HTML or BBCode markup.",
    )
    parser.add_argument("input", nargs="?", help="Path to a JSON document tree, or '-' for stdin")
    parser.add_argument("--out", "-o", help="Write output to this file instead of stdout")
    parser.add_argument(
        "--profile",
        "-p",
        choices=list_profiles(),
        default=None,
        help="Target dialect (default: html)",
    )
    parser.add_argument("--list-profiles", action="store_true", help="List available profiles and exit")
    parser.add_argument(
        "--rich",
        action="store_true",
        help="Syntax-highlight output on a terminal (automatically disabled when output is piped)",
    )
    parser.add_argument(
        "--force-rich",
        action="store_true",
        help="Use rich output even when stdout is piped or redirected",
    )

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument(
        "--config",
        help=f"Path to a configuration file (.toml, .yaml, .json); also read from {CONFIG_ENV_VAR}",
    )
    config_group.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    _add_export_option_arguments(parser)

    logging_group = parser.add_argument_group("Logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log messages to this file")
    logging_group.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    return parser


def build_export_options(
    parsed_args: argparse.Namespace, config: Optional[Dict[str, Any]] = None
) -> tuple[str, ExportOptions]:
    """Merge configuration and command-line values into export options.

    Command-line values win over configuration values, which win over the
    dataclass defaults.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments
    config : dict, optional
        Loaded configuration (``profile`` plus ``ExportOptions`` field names)

    Returns
    -------
    tuple of (str, ExportOptions)
        Profile name and options

    Raises
    ------
    InvalidOptionsError
        If the configuration names unknown options or holds invalid values

    """
    config = dict(config or {})
    profile = parsed_args.profile or config.pop("profile", None) or "html"
    config.pop("profile", None)

    known = set(ExportOptions.field_names())
    unknown = sorted(set(config) - known)
    if unknown:
        raise InvalidOptionsError(f"Unknown configuration option(s): {', '.join(unknown)}", parameter_value=unknown)

    values: Dict[str, Any] = dict(config)
    for name in known:
        cli_value = getattr(parsed_args, name, None)
        if cli_value is not None:
            values[name] = cli_value

    try:
        return profile, ExportOptions(**values)
    except (TypeError, ValueError) as e:
        raise InvalidOptionsError(f"Invalid export options: {e}", parameter_value=values, original_error=e) from e
