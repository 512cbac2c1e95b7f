#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/renderers/bbcode.py
"""BBCode rendering profile.

This profile targets bulletin boards and forums. BBCode has no headings,
so headlines become bold, underlined lines prefixed with a marker per level.
All three list kinds are supported; line breaks, superscript and subscript
have no BBCode form and are rejected.

Examples
--------
    >>> from orgmark.ast import builder as b
    >>> from orgmark.renderers.engine import transcode
    >>> transcode(b.document(b.headline(2, "TOPIC")), profile=BBCODE_PROFILE)
    '[b][u]== TOPIC[/u][/b]\\n\\n'

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from orgmark.ast.nodes import Node, NodeKind
from orgmark.constants import BBCODE_HEADLINE_MARKERS
from orgmark.renderers import handlers
from orgmark.renderers.profile import Handler, LinkPolicy, NodePolicy, RenderingProfile
from orgmark.renderers.tags import BRACKET, wrap, wrap_value

if TYPE_CHECKING:
    from orgmark.renderers.engine import RunContext


def render_heading(title: str, level: int, profile: RenderingProfile) -> str:
    """Render a title line for a headline level."""
    marker = profile.headline_rule(level)
    return wrap("b", wrap("u", marker + title, syntax=BRACKET), syntax=BRACKET) + "\n\n"


def plain_text(text: str, context: RunContext) -> str:
    return text


def section(node: Node, contents: str, context: RunContext) -> str:
    text = contents.strip()
    if not text:
        return ""
    return text + "\n\n"


def code(node: Node, contents: str, context: RunContext) -> str:
    """Render inline code in a monospace font tag."""
    return wrap_value("font", "monospace", node.value)


def src_block(node: Node, contents: str, context: RunContext) -> str:
    language = handlers.map_language(node.get("language"), context.profile)
    return wrap_value("code", language, "\n" + node.value) + "\n"


def example_block(node: Node, contents: str, context: RunContext) -> str:
    return wrap("code", node.value, syntax=BRACKET) + "\n"


def quote_block(node: Node, contents: str, context: RunContext) -> str:
    return wrap("quote", contents.strip(), syntax=BRACKET) + "\n"


def entity(node: Node, contents: str, context: RunContext) -> str:
    return str(node.get("utf8") or "")


def link(node: Node, contents: str, context: RunContext) -> str:
    target = handlers.resolve_link(node, context)
    return wrap_value("url", target.url, contents or target.url)


def item(node: Node, contents: str, context: RunContext) -> str:
    """Render a list item; descriptive items lead with their italic term."""
    body = contents.strip()
    if handlers.parent_list_kind(context) == "descriptive":
        term = wrap("i", handlers.item_term(context) + ":", syntax=BRACKET)
        return f"[*]{term} {body}\n"
    return f"[*]{body}\n"


BBCODE_PROFILE = RenderingProfile(
    name="bbcode",
    file_extension="bbcode",
    syntax=BRACKET,
    text_handler=plain_text,
    render_heading=render_heading,
    inner_template=handlers.footnote_section,
    headline_levels=BBCODE_HEADLINE_MARKERS,
    inline_tags={
        NodeKind.BOLD: "b",
        NodeKind.ITALIC: "i",
        NodeKind.UNDERLINE: "u",
        NodeKind.STRIKE_THROUGH: "s",
    },
    list_tags={
        "unordered": ("list", None),
        "ordered": ("list", "1"),
        "descriptive": ("list", None),
    },
    link_policy=LinkPolicy(),
    entries={
        NodeKind.DOCUMENT: Handler(handlers.document),
        NodeKind.HEADLINE: Handler(handlers.headline),
        NodeKind.SECTION: Handler(section),
        NodeKind.PARAGRAPH: Handler(handlers.paragraph),
        NodeKind.BOLD: Handler(handlers.inline_tag),
        NodeKind.ITALIC: Handler(handlers.inline_tag),
        NodeKind.UNDERLINE: Handler(handlers.inline_tag),
        NodeKind.STRIKE_THROUGH: Handler(handlers.inline_tag),
        NodeKind.CODE: Handler(code),
        NodeKind.VERBATIM: Handler(code),
        NodeKind.ENTITY: Handler(entity),
        NodeKind.LINE_BREAK: NodePolicy.FAIL,
        NodeKind.LINK: Handler(link),
        NodeKind.PLAIN_LIST: Handler(handlers.plain_list),
        NodeKind.ITEM: Handler(item),
        NodeKind.SRC_BLOCK: Handler(src_block),
        NodeKind.EXAMPLE_BLOCK: Handler(example_block),
        NodeKind.FIXED_WIDTH: Handler(example_block),
        NodeKind.QUOTE_BLOCK: Handler(quote_block),
        NodeKind.HORIZONTAL_RULE: handlers.constant("[hr][/hr]\n"),
        NodeKind.TABLE: Handler(handlers.table),
        NodeKind.TABLE_ROW: Handler(handlers.table_row),
        NodeKind.TABLE_CELL: Handler(handlers.table_cell),
        NodeKind.FOOTNOTE_REFERENCE: Handler(handlers.footnote_reference),
        NodeKind.FOOTNOTE_DEFINITION: NodePolicy.SKIP,
        NodeKind.KEYWORD: NodePolicy.SKIP,
        NodeKind.COMMENT: NodePolicy.SKIP,
        NodeKind.COMMENT_BLOCK: NodePolicy.SKIP,
        NodeKind.PLANNING: NodePolicy.SKIP,
        NodeKind.PROPERTY_DRAWER: NodePolicy.SKIP,
    },
)
