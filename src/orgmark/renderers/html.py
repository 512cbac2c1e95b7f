#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/renderers/html.py
"""HTML rendering profile.

This profile targets blog editors that accept HTML mixed with plugin
shortcodes and apply their own paragraph handling. Top-level headlines
become structural comments, deeper ones ``<h3>`` to ``<h5>``; source
blocks use the ``[sourcecode language="..."]`` plugin tag.

Examples
--------
    >>> from orgmark.ast import builder as b
    >>> from orgmark.renderers.engine import transcode
    >>> transcode(b.document(b.headline(3, "TOPIC")), profile=HTML_PROFILE)
    '<h3>TOPIC</h3>\\n'

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from orgmark.ast.nodes import Node, NodeKind
from orgmark.constants import HTML_HEADLINE_LEVELS, PLACEHOLDER_LINK_TYPE
from orgmark.renderers import handlers
from orgmark.renderers.profile import Handler, LinkPolicy, NodePolicy, RenderingProfile
from orgmark.renderers.tags import ANGLE, BRACKET, wrap
from orgmark.utils.escape import escape_html_attribute, escape_html_entities

if TYPE_CHECKING:
    from orgmark.renderers.engine import RunContext


def render_heading(title: str, level: int, profile: RenderingProfile) -> str:
    """Render a title line for a headline level."""
    rule = profile.headline_rule(level)
    if rule == "comment":
        return f"<!--  {title}  -->\n"
    return wrap(rule, title) + "\n"


def plain_text(text: str, context: RunContext) -> str:
    return escape_html_entities(text)


def section(node: Node, contents: str, context: RunContext) -> str:
    """Wrap the trimmed section text in a single paragraph tag."""
    text = contents.strip()
    if not text:
        return ""
    return wrap("p", text) + "\n"


def code(node: Node, contents: str, context: RunContext) -> str:
    return wrap("code", escape_html_entities(node.value))


def src_block(node: Node, contents: str, context: RunContext) -> str:
    """Render a source block inside the ``sourcecode`` plugin tag."""
    language = handlers.map_language(node.get("language"), context.profile)
    source = node.value
    if source.endswith("\n"):
        source = source[:-1]
    return wrap("sourcecode", f"\n{source}\n", [("language", language)], syntax=BRACKET) + "\n"


def example_block(node: Node, contents: str, context: RunContext) -> str:
    return wrap("pre", escape_html_entities(node.value)) + "\n"


def quote_block(node: Node, contents: str, context: RunContext) -> str:
    return wrap("blockquote", contents.strip()) + "\n"


def entity(node: Node, contents: str, context: RunContext) -> str:
    return str(node.get("html") or "")


def link(node: Node, contents: str, context: RunContext) -> str:
    """Render web and internal links as anchors, placeholders as abbreviations."""
    target = handlers.resolve_link(node, context)
    if target.category == "placeholder":
        tooltip = escape_html_attribute(context.profile.link_policy.placeholder_tooltip)
        return wrap("abbr", contents, [("title", tooltip)])
    return wrap("a", contents or escape_html_entities(target.url), [("href", escape_html_attribute(target.url))])


def item(node: Node, contents: str, context: RunContext) -> str:
    return wrap("li", contents.strip()) + "\n"


HTML_PROFILE = RenderingProfile(
    name="html",
    file_extension="html",
    syntax=ANGLE,
    text_handler=plain_text,
    render_heading=render_heading,
    inner_template=handlers.footnote_section,
    headline_levels=HTML_HEADLINE_LEVELS,
    inline_tags={
        NodeKind.BOLD: "strong",
        NodeKind.ITALIC: "em",
        NodeKind.UNDERLINE: "u",
        NodeKind.STRIKE_THROUGH: "del",
        NodeKind.SUPERSCRIPT: "sup",
        NodeKind.SUBSCRIPT: "sub",
    },
    list_tags={"unordered": ("ul", None)},
    link_policy=LinkPolicy(placeholder_type=PLACEHOLDER_LINK_TYPE),
    entries={
        NodeKind.DOCUMENT: Handler(handlers.document),
        NodeKind.HEADLINE: Handler(handlers.headline),
        NodeKind.SECTION: Handler(section),
        NodeKind.PARAGRAPH: Handler(handlers.paragraph),
        NodeKind.BOLD: Handler(handlers.inline_tag),
        NodeKind.ITALIC: Handler(handlers.inline_tag),
        NodeKind.UNDERLINE: Handler(handlers.inline_tag),
        NodeKind.STRIKE_THROUGH: Handler(handlers.inline_tag),
        NodeKind.SUPERSCRIPT: Handler(handlers.inline_tag),
        NodeKind.SUBSCRIPT: Handler(handlers.inline_tag),
        NodeKind.CODE: Handler(code),
        NodeKind.VERBATIM: Handler(code),
        NodeKind.ENTITY: Handler(entity),
        NodeKind.LINE_BREAK: handlers.constant("<br />\n"),
        NodeKind.LINK: Handler(link),
        NodeKind.PLAIN_LIST: Handler(handlers.plain_list),
        NodeKind.ITEM: Handler(item),
        NodeKind.SRC_BLOCK: Handler(src_block),
        NodeKind.EXAMPLE_BLOCK: Handler(example_block),
        NodeKind.FIXED_WIDTH: Handler(example_block),
        NodeKind.QUOTE_BLOCK: Handler(quote_block),
        NodeKind.HORIZONTAL_RULE: handlers.constant("<hr />\n"),
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
