#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/renderers/tags.py
"""Tag formatting for markup dialects.

Both target dialects wrap content in named tags; they differ only in the
delimiters (``<b>`` versus ``[b]``) and in how a tag carries a value.
Two attribute styles are supported:

- markup attributes: ``<a href="x">content</a>`` via :func:`wrap`
- a value bound to the tag name: ``[url=x]content[/url]`` via :func:`wrap_value`

When no attributes are given the opening tag carries no attribute syntax at
all.

Examples
--------
    >>> wrap("p", "x")
    '<p>x</p>'
    >>> wrap("abbr", "text", [("title", "soon")])
    '<abbr title="soon">text</abbr>'
    >>> wrap_value("url", "https://example.org", "site")
    '[url=https://example.org]site[/url]'

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Tuple, Union

Attributes = Union[Iterable[Tuple[str, str]], Mapping[str, str]]


@dataclass(frozen=True)
class TagSyntax:
    """Delimiters used to open and close a tag."""

    open: str
    close: str


ANGLE = TagSyntax("<", ">")
BRACKET = TagSyntax("[", "]")


def _format_attributes(attributes: Optional[Attributes]) -> str:
    if not attributes:
        return ""
    pairs = attributes.items() if isinstance(attributes, Mapping) else attributes
    return "".join(f' {key}="{value}"' for key, value in pairs)


def open_tag(tag: str, attributes: Optional[Attributes] = None, syntax: TagSyntax = ANGLE) -> str:
    """Render an opening tag with optional markup attributes."""
    return f"{syntax.open}{tag}{_format_attributes(attributes)}{syntax.close}"


def close_tag(tag: str, syntax: TagSyntax = ANGLE) -> str:
    """Render a closing tag."""
    return f"{syntax.open}/{tag}{syntax.close}"


def wrap(tag: str, content: str, attributes: Optional[Attributes] = None, syntax: TagSyntax = ANGLE) -> str:
    """Wrap ``content`` in ``tag`` with markup-style attributes.

    Parameters
    ----------
    tag : str
        Tag name
    content : str
        Already rendered content
    attributes : sequence of (key, value) pairs or mapping, optional
        Attributes in output order; values are inserted as given
    syntax : TagSyntax, default ANGLE
        Tag delimiters

    """
    return f"{open_tag(tag, attributes, syntax)}{content}{close_tag(tag, syntax)}"


def wrap_value(tag: str, value: str, content: str, syntax: TagSyntax = BRACKET) -> str:
    """Wrap ``content`` in ``tag`` with ``value`` bound to the tag name."""
    return f"{syntax.open}{tag}={value}{syntax.close}{content}{close_tag(tag, syntax)}"
