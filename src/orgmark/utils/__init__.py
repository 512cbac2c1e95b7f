#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/utils/__init__.py
"""Utility modules for the orgmark package.

This package contains escaping, URL encoding and footnote bookkeeping
helpers shared by the rendering profiles.
"""

from orgmark.utils.escape import escape_html_attribute, escape_html_entities
from orgmark.utils.footnotes import FootnoteRegistry
from orgmark.utils.urls import encode_url

__all__ = [
    "FootnoteRegistry",
    "encode_url",
    "escape_html_attribute",
    "escape_html_entities",
]
