#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for orgmark.

This module centralizes the literal types, markup tables and default values
shared by the rendering profiles, the engine and the command line.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Export Defaults - Default values for ExportOptions
3. Markup Tables - Headline markers, language aliases, link conventions
4. Footnotes - Marker and section formats
5. Configuration - Config file discovery
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

ListKind = Literal["unordered", "ordered", "descriptive"]
FootnoteType = Literal["standard", "inline"]
TableRowType = Literal["standard", "rule"]
ProfileName = Literal["html", "bbcode"]

# =============================================================================
# Export Defaults
# =============================================================================

DEFAULT_PROFILE: ProfileName = "html"
DEFAULT_BODY_ONLY = False
DEFAULT_VISIBLE_ONLY = False
DEFAULT_ASYNC_EXPORT = False

# =============================================================================
# Markup Tables
# =============================================================================

# Source block language ids
DEFAULT_SOURCE_LANGUAGE = "plaintext"
SOURCE_LANGUAGE_ALIASES: dict[str, str] = {
    "elisp": "lisp",
    "sh": "bash",
    "shell": "bash",
}

# HTML headline rules: levels 0-2 become structural comments
HTML_HEADLINE_LEVELS: dict[int, str] = {
    0: "comment",
    1: "comment",
    2: "comment",
    3: "h3",
    4: "h4",
    5: "h5",
}

# BBCode headline prefixes indexed by level
BBCODE_HEADLINE_MARKERS: dict[int, str] = {
    0: "",
    1: "# ",
    2: "== ",
    3: "+++ ",
    4: ":::: ",
    5: "----- ",
}

# Links
WEB_LINK_TYPES: tuple[str, ...] = ("http", "https")
PLACEHOLDER_LINK_TYPE = "todo"
PLACEHOLDER_LINK_TOOLTIP = "Article forthcoming"
INTERNAL_LINK_TYPE = "fuzzy"
INTERNAL_LINK_PREFIX = "*"
INTERNAL_LINK_SCHEME = "#"

# =============================================================================
# Footnotes
# =============================================================================

FOOTNOTE_MARKER_FORMAT = "^{id} "
FOOTNOTE_LINE_FORMAT = "^{id}: {text}"
FOOTNOTE_SECTION_TITLE = "Footnotes"
FOOTNOTE_SECTION_LEVEL = 1

# =============================================================================
# Configuration
# =============================================================================

CONFIG_ENV_VAR = "ORGMARK_CONFIG"
CONFIG_FILENAMES: tuple[str, ...] = (".orgmark.toml", ".orgmark.yaml", ".orgmark.yml", ".orgmark.json")
PYPROJECT_TOOL_SECTION = "orgmark"
