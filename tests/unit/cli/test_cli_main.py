#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the orgmark command line."""

import io
import json

import pytest

from orgmark.ast import builder as b
from orgmark.ast.serialization import ast_to_json
from orgmark.cli import main
from orgmark.cli.builder import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    build_export_options,
    create_parser,
    get_exit_code_for_exception,
)
from orgmark.exceptions import InvalidOptionsError, TranscodeError, TreeLoadError, ValidationError
from orgmark.options import ExportOptions


@pytest.fixture
def isolated(monkeypatch, tmp_path, clean_package_logger):
    """Run the CLI in an empty directory with no configuration around."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("ORGMARK_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def tree_file(isolated):
    """Write a small tree to disk and return its path."""
    tree = b.document(
        b.headline(3, "TOPIC", b.section(b.paragraph("foo ", b.bold("BAR")))),
        b.section(b.node("paragraph", "hidden", invisible=True)),
    )
    path = isolated / "tree.json"
    path.write_text(ast_to_json(tree), encoding="utf-8")
    return path


@pytest.mark.unit
@pytest.mark.cli
class TestParser:
    """Test argument parser construction."""

    def test_export_flags_generated_from_options(self) -> None:
        """Test that every ExportOptions field has a flag."""
        args = create_parser().parse_args(["x.json", "--visible-only", "--extension", "txt"])
        assert args.visible_only is True
        assert args.extension == "txt"
        assert args.body_only is None
        assert args.async_export is None

    def test_profile_choices(self) -> None:
        """Test that only registered profiles are accepted."""
        assert create_parser().parse_args(["x.json", "-p", "bbcode"]).profile == "bbcode"
        with pytest.raises(SystemExit):
            create_parser().parse_args(["x.json", "--profile", "latex"])


@pytest.mark.unit
@pytest.mark.cli
class TestBuildExportOptions:
    """Test merging of config and command-line values."""

    def test_defaults(self) -> None:
        """Test defaults without config or flags."""
        profile, options = build_export_options(create_parser().parse_args(["x.json"]), {})
        assert profile == "html"
        assert options == ExportOptions()

    def test_config_values_used(self) -> None:
        """Test that configuration fills in values."""
        args = create_parser().parse_args(["x.json"])
        profile, options = build_export_options(args, {"profile": "bbcode", "visible_only": True})
        assert profile == "bbcode"
        assert options.visible_only is True

    def test_cli_overrides_config(self) -> None:
        """Test command-line precedence."""
        args = create_parser().parse_args(["x.json", "--profile", "html", "--extension", "htm"])
        profile, options = build_export_options(args, {"profile": "bbcode", "extension": "txt"})
        assert profile == "html"
        assert options.extension == "htm"

    def test_unknown_config_key(self) -> None:
        """Test that misspelled options are reported."""
        args = create_parser().parse_args(["x.json"])
        with pytest.raises(InvalidOptionsError, match="Unknown configuration option"):
            build_export_options(args, {"visible-only": True})

    def test_invalid_value(self) -> None:
        """Test that invalid values become option errors."""
        args = create_parser().parse_args(["x.json", "--extension", "a/b"])
        with pytest.raises(InvalidOptionsError, match="Invalid export options"):
            build_export_options(args, {})


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Test exception to exit code mapping."""

    @pytest.mark.parametrize(
        "exception,code",
        [
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (InvalidOptionsError("bad"), EXIT_VALIDATION_ERROR),
            (FileNotFoundError("x"), EXIT_FILE_ERROR),
            (TreeLoadError("bad"), EXIT_PARSING_ERROR),
            (TranscodeError("bad"), EXIT_ERROR),
            (RuntimeError("bad"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, exception: Exception, code: int) -> None:
        """Test each exception family."""
        assert get_exit_code_for_exception(exception) == code


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Test the main entry point end to end."""

    def test_render_to_stdout(self, tree_file, capsys) -> None:
        """Test HTML output on stdout."""
        assert main([str(tree_file)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<h3>TOPIC</h3>\n<p>foo <strong>BAR</strong></p>\n<p>hidden</p>\n"

    def test_bbcode_visible_only(self, tree_file, capsys) -> None:
        """Test profile and visibility flags."""
        assert main([str(tree_file), "--profile", "bbcode", "--visible-only"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "[b][u]+++ TOPIC[/u][/b]\n\nfoo [b]BAR[/b]\n\n"

    def test_render_to_file(self, tree_file, isolated, capsys) -> None:
        """Test writing the result to a file."""
        out = isolated / "post.bbcode"
        assert main([str(tree_file), "-p", "bbcode", "-o", str(out)]) == EXIT_SUCCESS
        assert out.read_text(encoding="utf-8").startswith("[b][u]+++ TOPIC")
        assert capsys.readouterr().out == ""

    def test_stdin(self, isolated, monkeypatch, capsys) -> None:
        """Test reading the tree from stdin."""
        data = json.dumps({"kind": "document", "children": [{"kind": "paragraph", "children": ["hi"]}]})
        monkeypatch.setattr("sys.stdin", io.StringIO(data))
        assert main(["-", "--profile", "bbcode"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "hi\n\n"

    def test_list_profiles(self, capsys) -> None:
        """Test listing the registered profiles."""
        assert main(["--list-profiles"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.split() == ["bbcode", "html"]

    def test_missing_input(self, capsys) -> None:
        """Test that an input path is required."""
        assert main([]) == EXIT_VALIDATION_ERROR
        assert "Input file is required" in capsys.readouterr().err

    def test_nonexistent_file(self, isolated, capsys) -> None:
        """Test the file error exit code."""
        assert main([str(isolated / "missing.json")]) == EXIT_FILE_ERROR
        assert capsys.readouterr().err.startswith("Error:")

    def test_malformed_tree(self, isolated, capsys) -> None:
        """Test the parsing error exit code."""
        path = isolated / "bad.json"
        path.write_text('{"kind": "nonsense"}', encoding="utf-8")
        assert main([str(path)]) == EXIT_PARSING_ERROR
        assert "Unknown node kind" in capsys.readouterr().err

    def test_transcode_failure(self, isolated, capsys) -> None:
        """Test that a fatal transcoding error produces no output."""
        path = isolated / "list.json"
        path.write_text(ast_to_json(b.document(b.plain_list("ordered", b.item("x")))), encoding="utf-8")
        assert main([str(path)]) == EXIT_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "List kind 'ordered'" in captured.err

    @pytest.mark.parametrize(
        "tree,message",
        [
            (b.document(b.paragraph(b.link("https", "//[bad", "site"))), "Malformed link target"),
            (b.document(b.headline("three", "TOPIC")), "Invalid headline level: 'three'"),
        ],
    )
    def test_bad_node_values_exit_with_error(self, isolated, capsys, tree, message: str) -> None:
        """Test that unusable link targets and levels map to the transcoding exit code."""
        path = isolated / "bad.json"
        path.write_text(ast_to_json(tree), encoding="utf-8")
        assert main([str(path)]) == EXIT_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert message in captured.err

    def test_invalid_extension(self, tree_file, capsys) -> None:
        """Test the validation exit code for bad option values."""
        assert main([str(tree_file), "--extension", "a/b"]) == EXIT_VALIDATION_ERROR
        assert "extension" in capsys.readouterr().err
