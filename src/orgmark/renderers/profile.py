#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/renderers/profile.py
"""Rendering profiles.

A :class:`RenderingProfile` is the static description of one target dialect:
its tag delimiters, headline level table, source language aliases, list
support matrix, link conventions, footnote formats and, for every node kind,
whether the kind is rendered by a handler, silently skipped or rejected.

New dialects are added by building another profile instance; the engine
itself has no dialect-specific branches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping, Optional, Union

from orgmark.ast.nodes import Node, NodeKind
from orgmark.constants import (
    DEFAULT_SOURCE_LANGUAGE,
    FOOTNOTE_LINE_FORMAT,
    FOOTNOTE_MARKER_FORMAT,
    FOOTNOTE_SECTION_TITLE,
    INTERNAL_LINK_PREFIX,
    INTERNAL_LINK_SCHEME,
    INTERNAL_LINK_TYPE,
    PLACEHOLDER_LINK_TOOLTIP,
    SOURCE_LANGUAGE_ALIASES,
    WEB_LINK_TYPES,
)
from orgmark.exceptions import TranscodeError
from orgmark.renderers.tags import ANGLE, TagSyntax

if TYPE_CHECKING:
    from orgmark.renderers.engine import RunContext

HandlerFn = Callable[[Node, str, "RunContext"], str]
TextHandler = Callable[[str, "RunContext"], str]
Template = Callable[[str, "RunContext"], str]
HeadingRenderer = Callable[[str, int, "RenderingProfile"], str]


class NodePolicy(Enum):
    """What to do with a node kind that has no handler."""

    FAIL = "fail"
    SKIP = "skip"


@dataclass(frozen=True)
class Handler:
    """Profile entry that renders a node kind with ``fn(node, contents, context)``."""

    fn: HandlerFn

    def __call__(self, node: Node, contents: str, context: RunContext) -> str:
        return self.fn(node, contents, context)


Entry = Union[Handler, NodePolicy]


@dataclass(frozen=True)
class LinkPolicy:
    """Link types a profile understands.

    Parameters
    ----------
    web_types : tuple of str
        Link types rendered as plain URL links (``type:path``)
    placeholder_type : str or None
        Link type meaning "article forthcoming"; None disables it
    placeholder_tooltip : str
        Tooltip shown on placeholder links
    internal_type : str or None
        Link type used for internal references; None disables it
    internal_prefix : str
        The only accepted prefix of an internal reference's raw target
    internal_scheme : str
        Prefix of the generated internal URL

    """

    web_types: tuple[str, ...] = WEB_LINK_TYPES
    placeholder_type: Optional[str] = None
    placeholder_tooltip: str = PLACEHOLDER_LINK_TOOLTIP
    internal_type: Optional[str] = INTERNAL_LINK_TYPE
    internal_prefix: str = INTERNAL_LINK_PREFIX
    internal_scheme: str = INTERNAL_LINK_SCHEME


def passthrough_template(body: str, context: RunContext) -> str:
    """Outer template that leaves the body untouched."""
    return body


@dataclass(frozen=True)
class RenderingProfile:
    """Static configuration of one target dialect.

    Parameters
    ----------
    name : str
        Registry name of the profile
    file_extension : str
        Conventional extension of exported files
    entries : Mapping[NodeKind, Handler | NodePolicy]
        Per-kind rendering entries
    text_handler : callable
        Renders ``plain-text`` values
    render_heading : callable
        Renders an already rendered title at a level, used for headlines
        and the synthetic footnote section heading
    inner_template : callable
        Post-processes the rendered root (appends the footnote section)
    template : callable, default passthrough_template
        Outer document template
    headline_levels : Mapping[int, str]
        Rule per supported headline level
    syntax : TagSyntax, default ANGLE
        Tag delimiters of the dialect
    inline_tags : Mapping[NodeKind, str]
        Tag names for simple inline markup kinds
    language_aliases : Mapping[str, str]
        Source language renames for code blocks
    default_language : str
        Language id used when a code block declares none
    list_tags : Mapping[str, tuple of (str, str or None)]
        Supported list kinds with their tag name and optional tag value
    link_policy : LinkPolicy
        Link types the dialect understands
    footnote_marker, footnote_line, footnote_title : str
        Footnote formats
    unhandled : NodePolicy, default NodePolicy.FAIL
        Policy for kinds missing from ``entries``

    """

    name: str
    file_extension: str
    entries: Mapping[NodeKind, Entry]
    text_handler: TextHandler
    render_heading: HeadingRenderer
    inner_template: Template
    template: Template = passthrough_template
    headline_levels: Mapping[int, str] = field(default_factory=dict)
    syntax: TagSyntax = ANGLE
    inline_tags: Mapping[NodeKind, str] = field(default_factory=dict)
    language_aliases: Mapping[str, str] = field(default_factory=lambda: dict(SOURCE_LANGUAGE_ALIASES))
    default_language: str = DEFAULT_SOURCE_LANGUAGE
    list_tags: Mapping[str, tuple[str, Optional[str]]] = field(default_factory=dict)
    link_policy: LinkPolicy = field(default_factory=LinkPolicy)
    footnote_marker: str = FOOTNOTE_MARKER_FORMAT
    footnote_line: str = FOOTNOTE_LINE_FORMAT
    footnote_title: str = FOOTNOTE_SECTION_TITLE
    unhandled: NodePolicy = NodePolicy.FAIL
    resolved: Mapping[NodeKind, Entry] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Resolve the complete per-kind dispatch table once."""
        table = {kind: self.entries.get(kind, self.unhandled) for kind in NodeKind}
        object.__setattr__(self, "resolved", MappingProxyType(table))

    def entry_for(self, kind: NodeKind) -> Entry:
        """Return the handler or policy for ``kind``."""
        return self.resolved[kind]

    def headline_rule(self, level: int) -> str:
        """Return the rule for a headline level.

        Raises
        ------
        TranscodeError
            If the level is outside the profile's table

        """
        try:
            return self.headline_levels[level]
        except KeyError:
            raise TranscodeError(
                f"Headline level {level} is not supported by profile '{self.name}'",
                node_kind=NodeKind.HEADLINE.value,
            ) from None
