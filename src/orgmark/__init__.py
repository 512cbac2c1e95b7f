#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/__init__.py
"""orgmark - transcode parsed Org-style document trees into HTML or BBCode.

The package takes an already parsed, immutable document tree and renders it
into a target markup dialect through a rendering profile. Footnotes are
numbered in order of first reference and collected into a trailing
footnote section.

Examples
--------
    >>> from orgmark import transcode
    >>> from orgmark.ast import builder as b
    >>> tree = b.document(b.section(b.paragraph("foo ", b.bold("BAR"), " baz")))
    >>> transcode(tree, profile="html")
    '<p>foo <strong>BAR</strong> baz</p>\\n'
    >>> transcode(tree, profile="bbcode")
    'foo [b]BAR[/b] baz\\n\\n'

"""

from orgmark.ast import Node, NodeKind, json_to_ast
from orgmark.exceptions import (
    DependencyError,
    FatalTranscodeError,
    InvalidOptionsError,
    OrgmarkError,
    TranscodeError,
    TreeLoadError,
    UnsupportedNodeKindError,
    ValidationError,
)
from orgmark.options import ExportOptions
from orgmark.renderers import BBCODE_PROFILE, HTML_PROFILE, RenderingProfile, get_profile, list_profiles, transcode

__version__ = "0.1.0"

__all__ = [
    "BBCODE_PROFILE",
    "DependencyError",
    "ExportOptions",
    "FatalTranscodeError",
    "HTML_PROFILE",
    "InvalidOptionsError",
    "Node",
    "NodeKind",
    "OrgmarkError",
    "RenderingProfile",
    "TranscodeError",
    "TreeLoadError",
    "UnsupportedNodeKindError",
    "ValidationError",
    "get_profile",
    "json_to_ast",
    "list_profiles",
    "transcode",
]
