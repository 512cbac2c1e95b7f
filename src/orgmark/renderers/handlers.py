#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/renderers/handlers.py
"""Node handlers shared by the rendering profiles.

Every handler has the signature ``(node, contents, context) -> str`` where
``contents`` is the concatenation of the node's rendered children. Handlers
read dialect specifics (tag names, level tables, alias maps) from
``context.profile`` so that one rule serves every dialect; the dialect
modules only add the pieces whose shape really differs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from orgmark.ast.nodes import Node, NodeKind
from orgmark.constants import FOOTNOTE_SECTION_LEVEL
from orgmark.exceptions import TranscodeError
from orgmark.renderers.profile import Handler, RenderingProfile
from orgmark.renderers.tags import wrap, wrap_value
from orgmark.utils.urls import encode_url

if TYPE_CHECKING:
    from orgmark.renderers.engine import RunContext

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Structure
# ----------------------------------------------------------------------


def document(node: Node, contents: str, context: RunContext) -> str:
    """Render the root node as its contents."""
    return contents


def headline(node: Node, contents: str, context: RunContext) -> str:
    """Render a headline title line followed by its contents."""
    try:
        level = int(node.get("level", 1))
    except (TypeError, ValueError) as e:
        raise TranscodeError(
            f"Invalid headline level: {node.get('level')!r}", node_kind=NodeKind.HEADLINE.value, original_error=e
        ) from e
    title = context.node_properties.get("title", "").strip()
    return context.profile.render_heading(title, level, context.profile) + contents


def paragraph(node: Node, contents: str, context: RunContext) -> str:
    """Render a paragraph as its trimmed contents followed by a blank line."""
    return contents.strip() + "\n\n"


def inline_tag(node: Node, contents: str, context: RunContext) -> str:
    """Wrap contents in the profile's tag for this inline kind."""
    profile = context.profile
    return wrap(profile.inline_tags[node.kind], contents, syntax=profile.syntax)


def constant(fragment: str) -> Handler:
    """Build a handler that always renders ``fragment``."""

    def render_constant(node: Node, contents: str, context: RunContext) -> str:
        return fragment

    return Handler(render_constant)


# ----------------------------------------------------------------------
# Source blocks
# ----------------------------------------------------------------------


def map_language(language: Optional[str], profile: RenderingProfile) -> str:
    """Translate a declared source language into the dialect's language id.

    Examples
    --------
        >>> from orgmark.renderers.html import HTML_PROFILE
        >>> [map_language(x, HTML_PROFILE) for x in (None, "", "sh", "elisp", "python")]
        ['plaintext', 'plaintext', 'bash', 'lisp', 'python']

    """
    if not language:
        return profile.default_language
    return profile.language_aliases.get(language, language)


# ----------------------------------------------------------------------
# Links
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class LinkTarget:
    """Classified link: ``category`` is ``web``, ``placeholder`` or ``internal``."""

    category: str
    url: str


def _encode_target(target: str) -> str:
    try:
        return encode_url(target)
    except ValueError as e:
        raise TranscodeError(
            f"Malformed link target: {target!r}", node_kind=NodeKind.LINK.value, original_error=e
        ) from e


def resolve_link(node: Node, context: RunContext) -> LinkTarget:
    """Classify a link node and compute its encoded URL.

    Raises
    ------
    TranscodeError
        For an internal reference whose raw target lacks the accepted
        prefix, for any link type the profile does not know, or for a target
        that cannot be parsed as a URL

    """
    policy = context.profile.link_policy
    link_type = str(node.get("link_type") or "")
    path = str(node.get("path") or "")

    if link_type in policy.web_types:
        return LinkTarget("web", _encode_target(f"{link_type}:{path}"))

    if policy.placeholder_type is not None and link_type == policy.placeholder_type:
        return LinkTarget("placeholder", "")

    if policy.internal_type is not None and link_type == policy.internal_type:
        raw_target = str(node.get("raw_target") or path)
        if not raw_target.startswith(policy.internal_prefix):
            raise TranscodeError(
                f"Unsupported internal link target: {raw_target!r}", node_kind=NodeKind.LINK.value
            )
        anchor = raw_target[len(policy.internal_prefix) :]
        return LinkTarget("internal", _encode_target(policy.internal_scheme + anchor))

    raise TranscodeError(f"Unsupported link type: {link_type!r}", node_kind=NodeKind.LINK.value)


# ----------------------------------------------------------------------
# Lists
# ----------------------------------------------------------------------


def list_kind(node: Node) -> str:
    """Return the kind of a ``plain-list`` node."""
    return str(node.get("list_kind") or "unordered")


def parent_list_kind(context: RunContext) -> str:
    """Return the kind of the list enclosing the item being rendered."""
    parent = context.parent
    if parent is not None and parent.kind is NodeKind.PLAIN_LIST:
        return list_kind(parent)
    return "unordered"


def plain_list(node: Node, contents: str, context: RunContext) -> str:
    """Wrap list items in the profile's tag for the list kind.

    Raises
    ------
    TranscodeError
        If the profile does not support the list kind

    """
    profile = context.profile
    kind = list_kind(node)
    if kind not in profile.list_tags:
        raise TranscodeError(
            f"List kind '{kind}' is not supported by profile '{profile.name}'",
            node_kind=NodeKind.PLAIN_LIST.value,
        )
    tag, value = profile.list_tags[kind]
    body = "\n" + contents
    if value is None:
        return wrap(tag, body, syntax=profile.syntax) + "\n"
    return wrap_value(tag, value, body, syntax=profile.syntax) + "\n"


def item_term(context: RunContext) -> str:
    """Return the trimmed, rendered term of the descriptive list item being rendered."""
    return context.node_properties.get("tag", "").strip()


# ----------------------------------------------------------------------
# Tables
# ----------------------------------------------------------------------


def table(node: Node, contents: str, context: RunContext) -> str:
    """Wrap table rows in a table tag."""
    return wrap("table", "\n" + contents, syntax=context.profile.syntax) + "\n"


def table_row(node: Node, contents: str, context: RunContext) -> str:
    """Wrap table cells in a row tag; rows without cells render as nothing."""
    if node.get("row_type") == "rule" or not contents:
        return ""
    return wrap("tr", contents, syntax=context.profile.syntax) + "\n"


def table_cell(node: Node, contents: str, context: RunContext) -> str:
    """Wrap trimmed cell contents in a cell tag."""
    return wrap("td", contents.strip(), syntax=context.profile.syntax)


# ----------------------------------------------------------------------
# Footnotes
# ----------------------------------------------------------------------


def footnote_reference(node: Node, contents: str, context: RunContext) -> str:
    """Render a numeric marker for a reference to a separately defined footnote.

    Raises
    ------
    TranscodeError
        For inline footnotes, which carry their definition at the point of
        reference, and for references without a label

    """
    if node.get("footnote_type") == "inline" or node.children:
        raise TranscodeError(
            "Inline footnote definitions are not supported; define the footnote separately",
            node_kind=NodeKind.FOOTNOTE_REFERENCE.value,
        )
    label = node.get("label")
    if not label:
        raise TranscodeError("Footnote reference without a label", node_kind=NodeKind.FOOTNOTE_REFERENCE.value)
    footnote_id = context.footnotes.reference(str(label), context.render)
    return context.profile.footnote_marker.format(id=footnote_id)


def footnote_section(body: str, context: RunContext) -> str:
    """Append the footnote section to the rendered document body.

    Nothing is appended when no footnote was referenced. Otherwise a
    synthetic "Footnotes" heading is followed by one ``^id: text`` line per
    footnote in ascending id order.
    """
    entries = context.footnotes.entries()
    if not entries:
        return body
    profile = context.profile
    heading = profile.render_heading(profile.footnote_title, FOOTNOTE_SECTION_LEVEL, profile)
    lines = "".join(
        profile.footnote_line.format(id=footnote_id, text=text.strip()) + "\n" for footnote_id, text in entries
    )
    logger.debug("Appending %d footnote definition(s)", len(entries))
    return body + "\n" + heading + lines
