#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for rich terminal output of the CLI."""

import argparse
import io
from unittest.mock import patch

import pytest

from orgmark.cli import main
from orgmark.cli.output import print_profiles, print_rendered, should_use_rich_output
from orgmark.exceptions import DependencyError
from orgmark.renderers import BBCODE_PROFILE, HTML_PROFILE


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.mark.unit
@pytest.mark.cli
class TestShouldUseRichOutput:
    """Test the decision to use rich output."""

    def test_disabled_without_flag(self) -> None:
        """Test that rich output is opt-in."""
        assert not should_use_rich_output(argparse.Namespace(rich=False, force_rich=False))

    def test_piped_output_stays_plain(self) -> None:
        """Test that a non-terminal stream disables rich output."""
        args = argparse.Namespace(rich=True, force_rich=False)
        assert not should_use_rich_output(args, stream=io.StringIO())

    def test_terminal_stream(self) -> None:
        """Test that a terminal enables rich output."""
        args = argparse.Namespace(rich=True, force_rich=False)
        assert should_use_rich_output(args, stream=_TtyStream())

    def test_force_rich(self) -> None:
        """Test that --force-rich ignores the stream type."""
        args = argparse.Namespace(rich=True, force_rich=True)
        assert should_use_rich_output(args, stream=io.StringIO())

    def test_missing_rich(self) -> None:
        """Test the dependency error when Rich is not installed."""
        args = argparse.Namespace(rich=True, force_rich=True)
        with patch("orgmark.cli.output.check_rich_available", return_value=False):
            assert not should_use_rich_output(args)
            with pytest.raises(DependencyError, match="pip install orgmark\\[rich\\]"):
                should_use_rich_output(args, raise_on_missing=True)

    def test_missing_rich_exit_code(self, capsys) -> None:
        """Test that main reports a missing optional dependency."""
        with patch("orgmark.cli.output.check_rich_available", return_value=False):
            assert main(["--list-profiles", "--rich"]) == 2
        assert "rich" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestPrinting:
    """Test plain and rich printing."""

    def test_plain_rendered_output_is_verbatim(self, capsys) -> None:
        """Test that plain output is written unchanged."""
        print_rendered("<p>x</p>\n", HTML_PROFILE, use_rich=False)
        assert capsys.readouterr().out == "<p>x</p>\n"

    @pytest.mark.parametrize("profile", [HTML_PROFILE, BBCODE_PROFILE])
    def test_rich_rendered_output_keeps_text(self, profile, capsys) -> None:
        """Test that highlighted output still contains the document."""
        print_rendered("[b]bold[/b] <em>x</em>\n", profile, use_rich=True)
        out = capsys.readouterr().out
        assert "bold" in out
        assert "x" in out

    def test_profile_table(self, capsys) -> None:
        """Test the rich profile listing."""
        print_profiles([BBCODE_PROFILE, HTML_PROFILE], use_rich=True)
        out = capsys.readouterr().out
        assert "bbcode" in out
        assert "html" in out
        assert "ordered" in out

    def test_profile_names_plain(self, capsys) -> None:
        """Test the plain profile listing."""
        print_profiles([BBCODE_PROFILE, HTML_PROFILE], use_rich=False)
        assert capsys.readouterr().out == "bbcode\nhtml\n"
