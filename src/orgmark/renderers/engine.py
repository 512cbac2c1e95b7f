#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/renderers/engine.py
"""Transcoding engine.

The engine walks a document tree post-order. For each node it renders the
children first, concatenates their fragments into ``contents`` and hands
``(node, contents, context)`` to the handler the active profile registered
for the node's kind. The root fragment then passes through the profile's
inner template (footnote section) and outer template.

All mutable state of a run lives in a :class:`RunContext` created per call,
so concurrent exports on different trees never share footnote numbering.

Examples
--------
    >>> from orgmark.ast import builder as b
    >>> from orgmark.renderers.engine import transcode
    >>> transcode(b.document(b.section(b.paragraph("hi"))), profile="bbcode")
    'hi\\n\\n'

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from orgmark.ast.nodes import Node, NodeKind
from orgmark.ast.utils import collect_footnote_definitions, is_visible
from orgmark.constants import DEFAULT_PROFILE
from orgmark.exceptions import InvalidOptionsError, UnsupportedNodeKindError
from orgmark.options import ExportOptions
from orgmark.renderers.profile import NodePolicy, RenderingProfile
from orgmark.renderers.registry import get_profile
from orgmark.utils.footnotes import FootnoteRegistry

logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    """State of one transcoding run, passed to every handler.

    Parameters
    ----------
    engine : TranscodingEngine
        Engine driving the run
    options : ExportOptions
        Read-only export options
    footnotes : FootnoteRegistry
        Footnote ids and rendered definitions of this run
    lineage : list of Node
        Ancestors of the node currently being rendered, root first
    node_properties : dict of str to str
        Rendered node-valued properties (headline title, item tag) of the
        node whose handler is running

    """

    engine: TranscodingEngine
    options: ExportOptions
    footnotes: FootnoteRegistry
    lineage: list[Node] = field(default_factory=list, repr=False)
    node_properties: dict[str, str] = field(default_factory=dict, repr=False)

    @property
    def profile(self) -> RenderingProfile:
        """Active rendering profile."""
        return self.engine.profile

    @property
    def parent(self) -> Optional[Node]:
        """Parent of the node whose handler is running, if any."""
        return self.lineage[-1] if self.lineage else None

    def render(self, nodes: Union[Node, Sequence[Node], None]) -> str:
        """Render a secondary sub-tree (a title, an item tag, a footnote body)."""
        if nodes is None:
            return ""
        if isinstance(nodes, Node):
            return self.engine.render_node(nodes, self)
        return "".join(self.engine.render_node(node, self) for node in nodes)


class TranscodingEngine:
    """Render document trees with one rendering profile.

    Parameters
    ----------
    profile : RenderingProfile
        Target dialect

    """

    def __init__(self, profile: RenderingProfile):
        """Initialize the engine with its profile."""
        self.profile = profile

    def transcode(self, tree: Node, options: ExportOptions | None = None) -> str:
        """Transcode a whole document.

        Parameters
        ----------
        tree : Node
            Root of the document tree
        options : ExportOptions or None, default = None
            Export options; defaults are used when None

        Returns
        -------
        str
            The rendered document

        Raises
        ------
        TranscodeError
            If any node cannot be rendered. No partial output is produced.
        InvalidOptionsError
            If ``options`` is not an ``ExportOptions`` instance

        """
        if options is not None and not isinstance(options, ExportOptions):
            raise InvalidOptionsError(
                f"Expected options of type 'ExportOptions' but received '{type(options).__name__}'",
                parameter_value=type(options),
            )
        options = options or ExportOptions()

        context = RunContext(
            engine=self,
            options=options,
            footnotes=FootnoteRegistry(collect_footnote_definitions(tree, options)),
        )
        logger.debug("Transcoding '%s' tree with profile '%s'", tree.kind, self.profile.name)

        body = self.render_node(tree, context)
        body = self.profile.inner_template(body, context)
        result = self.profile.template(body, context)

        logger.debug("Rendered %d character(s), %d footnote(s)", len(result), len(context.footnotes))
        return result

    def render_node(self, node: Node, context: RunContext) -> str:
        """Render one node and its descendants to a fragment."""
        if not is_visible(node, context.options):
            return ""

        if node.kind is NodeKind.PLAIN_TEXT:
            return self.profile.text_handler(node.value, context)

        entry = self.profile.entry_for(node.kind)
        if entry is NodePolicy.SKIP:
            logger.debug("Skipping '%s' node", node.kind)
            return ""
        if entry is NodePolicy.FAIL:
            raise UnsupportedNodeKindError(node.kind.value, self.profile.name)

        # The footnote section placeholder is replaced by the inner template, unvisited
        if node.kind is NodeKind.HEADLINE and node.get("footnote_section", False):
            logger.debug("Skipping footnote section placeholder")
            return ""

        # Node-valued properties precede the children in document order
        context.lineage.append(node)
        try:
            properties = self._render_properties(node, context)
            contents = "".join(self.render_node(child, context) for child in node.children)
        finally:
            context.lineage.pop()

        saved_properties = context.node_properties
        context.node_properties = properties
        try:
            return entry(node, contents, context)
        finally:
            context.node_properties = saved_properties

    def _render_properties(self, node: Node, context: RunContext) -> dict[str, str]:
        rendered: dict[str, str] = {}
        for name, value in node.properties.items():
            if isinstance(value, Node):
                rendered[name] = self.render_node(value, context)
            elif isinstance(value, tuple) and value and all(isinstance(v, Node) for v in value):
                rendered[name] = "".join(self.render_node(v, context) for v in value)
        return rendered


def transcode(
    tree: Node,
    options: ExportOptions | None = None,
    profile: Union[RenderingProfile, str] = DEFAULT_PROFILE,
) -> str:
    """Transcode a document tree into a target dialect.

    Parameters
    ----------
    tree : Node
        Root of the document tree
    options : ExportOptions or None, default = None
        Export options
    profile : RenderingProfile or str, default "html"
        Profile instance or registered profile name

    Returns
    -------
    str
        The rendered document

    Raises
    ------
    TranscodeError
        If the tree cannot be rendered with the profile
    ValidationError
        If ``profile`` names an unknown profile

    """
    if isinstance(profile, str):
        profile = get_profile(profile)
    return TranscodingEngine(profile).transcode(tree, options)
