#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the BBCode rendering profile."""

import pytest

from orgmark.ast import NodeKind
from orgmark.ast import builder as b
from orgmark.exceptions import TranscodeError, UnsupportedNodeKindError
from orgmark.renderers import BBCODE_PROFILE, transcode


def render(*children) -> str:
    return transcode(b.document(*children), profile=BBCODE_PROFILE)


def render_inline(*inline) -> str:
    return render(b.section(b.paragraph(*inline)))


@pytest.mark.unit
class TestBbcodeHeadlines:
    """Test headline markers per level."""

    @pytest.mark.parametrize(
        "level,marker",
        [(0, ""), (1, "# "), (2, "== "), (3, "+++ "), (4, ":::: "), (5, "----- ")],
    )
    def test_level_markers(self, level: int, marker: str) -> None:
        """Test bold underlined titles with a marker per level."""
        assert render(b.headline(level, "TOPIC")) == f"[b][u]{marker}TOPIC[/u][/b]\n\n"

    def test_level_six_is_fatal(self) -> None:
        """Test that levels outside the table abort the export."""
        with pytest.raises(TranscodeError, match="not supported by profile 'bbcode'"):
            render(b.headline(6, "TOPIC"))

    def test_missing_level_is_fatal(self) -> None:
        """Test that a headline without a usable level aborts the export."""
        with pytest.raises(TranscodeError, match="Invalid headline level: None"):
            render(b.headline(None, "TOPIC"))

    def test_headline_with_body(self) -> None:
        """Test a headline followed by its section."""
        tree = b.headline(2, "TOPIC", b.section(b.paragraph("body")))
        assert render(tree) == "[b][u]== TOPIC[/u][/b]\n\nbody\n\n"


@pytest.mark.unit
class TestBbcodeText:
    """Test text and inline markup."""

    def test_text_is_not_escaped(self) -> None:
        """Test that text passes through unchanged."""
        assert render_inline("a < b & c") == "a < b & c\n\n"

    @pytest.mark.parametrize(
        "builder,tag",
        [(b.bold, "b"), (b.italic, "i"), (b.underline, "u"), (b.strike_through, "s")],
    )
    def test_inline_tags(self, builder, tag: str) -> None:
        """Test inline markup tags."""
        assert render_inline(builder("x")) == f"[{tag}]x[/{tag}]\n\n"

    def test_code(self) -> None:
        """Test inline code in a monospace font."""
        assert render_inline("run ", b.code("ls -l")) == "run [font=monospace]ls -l[/font]\n\n"

    def test_entity(self) -> None:
        """Test that entities use their UTF-8 form."""
        assert render_inline(b.node(NodeKind.ENTITY, html="&alpha;", utf8="α")) == "α\n\n"

    @pytest.mark.parametrize("kind", [NodeKind.LINE_BREAK, NodeKind.SUPERSCRIPT, NodeKind.SUBSCRIPT])
    def test_kinds_without_bbcode_form_are_fatal(self, kind: NodeKind) -> None:
        """Test that kinds BBCode cannot express abort the export."""
        with pytest.raises(UnsupportedNodeKindError):
            render_inline("x", b.node(kind, "y"))

    def test_paragraphs_separated_by_blank_line(self) -> None:
        """Test that each paragraph ends with a blank line."""
        assert render(b.section(b.paragraph("one "), b.paragraph("two"))) == "one\n\ntwo\n\n"


@pytest.mark.unit
class TestBbcodeBlocks:
    """Test block-level constructs."""

    def test_source_block(self) -> None:
        """Test code blocks with a mapped language."""
        assert render(b.src_block("echo hi\n", "sh")) == "[code=bash]\necho hi\n[/code]\n"

    def test_source_block_default_language(self) -> None:
        """Test code blocks with no declared language."""
        assert render(b.src_block("x\n")) == "[code=plaintext]\nx\n[/code]\n"

    def test_quote_block(self) -> None:
        """Test quotes."""
        assert render(b.node(NodeKind.QUOTE_BLOCK, b.paragraph("said"))) == "[quote]said[/quote]\n"

    def test_example_block(self) -> None:
        """Test example blocks render as plain code."""
        assert render(b.node(NodeKind.FIXED_WIDTH, value="a < b")) == "[code]a < b[/code]\n"

    def test_horizontal_rule(self) -> None:
        """Test horizontal rules."""
        assert render(b.node(NodeKind.HORIZONTAL_RULE)) == "[hr][/hr]\n"

    def test_table(self) -> None:
        """Test tables use bracket tags."""
        tree = b.table(b.table_row(b.table_cell("a")), b.table_row(row_type="rule"))
        assert render(tree) == "[table]\n[tr][td]a[/td][/tr]\n[/table]\n"

    def test_standard_row_without_cells(self) -> None:
        """Test that an empty standard row is dropped like a rule row."""
        assert render(b.table(b.table_row())) == "[table]\n[/table]\n"


@pytest.mark.unit
class TestBbcodeLists:
    """Test the three list kinds."""

    def test_unordered(self) -> None:
        """Test bulleted lists."""
        tree = b.plain_list("unordered", b.item(b.paragraph("one")), b.item("two"))
        assert render(tree) == "[list]\n[*]one\n[*]two\n[/list]\n"

    def test_ordered(self) -> None:
        """Test numbered lists."""
        tree = b.plain_list("ordered", b.item("one"), b.item("two"))
        assert render(tree) == "[list=1]\n[*]one\n[*]two\n[/list]\n"

    def test_descriptive(self) -> None:
        """Test that descriptive items lead with their italic term."""
        tree = b.plain_list("descriptive", b.item(b.paragraph("the body"), tag=[" Term ", b.bold("X")]))
        assert render(tree) == "[list]\n[*][i]Term [b]X[/b]:[/i] the body\n[/list]\n"

    def test_nested_list_items_use_own_parent(self) -> None:
        """Test that a nested list's items follow the nested list's kind."""
        inner = b.plain_list("unordered", b.item("leaf"))
        tree = b.plain_list("descriptive", b.item("body ", inner, tag="T"))
        assert render(tree) == "[list]\n[*][i]T:[/i] body [list]\n[*]leaf\n[/list]\n[/list]\n"


@pytest.mark.unit
class TestBbcodeLinks:
    """Test link rendering."""

    def test_web_link(self) -> None:
        """Test URL tags with a description."""
        assert render_inline(b.link("https", "//example.org/x y", "site")) == (
            "[url=https://example.org/x%20y]site[/url]\n\n"
        )

    def test_web_link_without_description(self) -> None:
        """Test that the URL is used as text."""
        assert render_inline(b.link("http", "//example.org")) == "[url=http://example.org]http://example.org[/url]\n\n"

    def test_internal_link(self) -> None:
        """Test internal heading references."""
        result = render_inline(b.link("fuzzy", "Intro", "see intro", raw_target="*Intro"))
        assert result == "[url=#Intro]see intro[/url]\n\n"

    def test_placeholder_links_unsupported(self) -> None:
        """Test that the placeholder link type is HTML-only."""
        with pytest.raises(TranscodeError, match="Unsupported link type: 'todo'"):
            render_inline(b.link("todo", "soon", "Upcoming"))

    def test_malformed_web_target_is_fatal(self) -> None:
        """Test that an unbalanced host bracket aborts the export."""
        with pytest.raises(TranscodeError, match=r"Malformed link target: 'https://\[bad'"):
            render_inline(b.link("https", "//[bad", "site"))
