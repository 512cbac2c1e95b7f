#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/utils/escape.py
"""Escaping helpers for markup output."""

from __future__ import annotations

import html


def escape_html_entities(text: str) -> str:
    """Escape HTML special characters in text content.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Text with ``&``, ``<`` and ``>`` replaced by entities

    Examples
    --------
        >>> escape_html_entities("a < b & c")
        'a &lt; b &amp; c'

    Notes
    -----
    Quotes are left alone; text content never needs them escaped. Use
    :func:`escape_html_attribute` for attribute values.

    """
    if not text:
        return text

    return html.escape(text, quote=False)


def escape_html_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted HTML attribute.

    Examples
    --------
        >>> escape_html_attribute('say "hi"')
        'say &quot;hi&quot;'

    """
    if not value:
        return value

    return html.escape(value, quote=True)
