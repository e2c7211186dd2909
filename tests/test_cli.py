"""Tests for the command line interface."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import yaml  # type: ignore[import-untyped]
from click.testing import CliRunner

from htmlrender import cli, render
from htmlrender.samples import sample_page

JSONDict = Dict[str, Any]


def _write_definition(path: Path, data: JSONDict) -> Path:
    """Store ``data`` as a YAML page definition at ``path``."""

    path.write_text(
        yaml.safe_dump(data, allow_unicode=True, sort_keys=False),
        encoding="utf-8",
    )
    return path


def test_render_outputs_html(
    tmp_path: Path, page_definition: JSONDict, small_page_html: str
) -> None:
    """Ensure rendering a definition prints the HTML page."""

    source = _write_definition(tmp_path / "page.yaml", page_definition)

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["render", str(source)])

    assert result.exit_code == 0
    assert result.output == small_page_html


def test_render_writes_html_to_file(
    tmp_path: Path, page_definition: JSONDict, small_page_html: str
) -> None:
    """Ensure HTML output is written to a file."""

    source = _write_definition(tmp_path / "page.yaml", page_definition)
    out_file = tmp_path / "out.html"

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["render", str(source), "--output", str(out_file)]
    )

    assert result.exit_code == 0
    assert out_file.read_text(encoding="utf-8") == small_page_html


def test_render_writes_to_directory(
    tmp_path: Path, page_definition: JSONDict, small_page_html: str
) -> None:
    """Ensure the file name is derived from the source in a directory."""

    source = _write_definition(tmp_path / "page.yaml", page_definition)
    out_dir = tmp_path / "site"
    out_dir.mkdir()

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["render", str(source), "--output", str(out_dir)]
    )

    assert result.exit_code == 0
    assert (out_dir / "page.html").read_text(encoding="utf-8") == (
        small_page_html
    )


def test_render_outputs_json(tmp_path: Path, page_definition: JSONDict) -> None:
    """Ensure definitions can be re-exported as JSON."""

    source = _write_definition(tmp_path / "page.yaml", page_definition)

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["render", str(source), "--format", "json"]
    )

    assert result.exit_code == 0
    assert json.loads(result.output) == page_definition


def test_render_writes_yaml_to_directory(
    tmp_path: Path, page_definition: JSONDict
) -> None:
    """Ensure YAML output gets a ``.yaml`` file name in a directory."""

    source = tmp_path / "page.json"
    source.write_text(json.dumps(page_definition), encoding="utf-8")
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        ["render", str(source), "--format", "yaml", "--output", str(out_dir)],
    )

    assert result.exit_code == 0
    written = (out_dir / "page.yaml").read_text(encoding="utf-8")
    assert yaml.safe_load(written) == page_definition


def test_render_reports_invalid_heading(tmp_path: Path) -> None:
    """Ensure invalid heading levels abort with a clear message."""

    source = _write_definition(
        tmp_path / "page.yaml", {"title": "T", "children": [{"h7": "x"}]}
    )

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["render", str(source)])

    assert result.exit_code == 1
    assert "Invalid level 7 for heading" in result.output
    assert "between 1 and 6" in result.output


def test_render_reports_bad_definition(tmp_path: Path) -> None:
    """Ensure malformed definitions abort with the file name."""

    source = _write_definition(
        tmp_path / "broken.yaml",
        {"title": "T", "children": [{"ol": [{"p": "x"}]}]},
    )

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["render", str(source)])

    assert result.exit_code == 1
    assert "broken.yaml" in result.output
    assert "'li'" in result.output


def test_render_requires_existing_source(tmp_path: Path) -> None:
    """Ensure a missing source file is a usage error."""

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["render", str(tmp_path / "none.yaml")])

    assert result.exit_code == 2


def test_demo_writes_default_file() -> None:
    """Ensure the demo writes ``out.html`` in the working directory."""

    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(cli.cli, ["demo"])

        assert result.exit_code == 0
        assert Path("out.html").read_text(encoding="utf-8") == render(
            sample_page()
        )


def test_demo_outputs_to_console() -> None:
    """Ensure ``-`` prints the sample page."""

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["demo", "--output", "-"])

    assert result.exit_code == 0
    assert "<title>My Page</title>" in result.output
    assert "<h1>Welcome to the Kotlin course</h1>" in result.output


def test_demo_outputs_yaml(tmp_path: Path) -> None:
    """Ensure the sample page can be exported as a definition."""

    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        ["demo", "--format", "yaml", "--output", str(tmp_path)],
    )

    assert result.exit_code == 0
    data = yaml.safe_load((tmp_path / "sample.yaml").read_text("utf-8"))
    assert data["title"] == "My Page"
    assert data["children"][0] == {"h1": "Welcome to the Kotlin course"}


def test_version_option() -> None:
    """Ensure the version option reports the program name."""

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["--version"])

    assert result.exit_code == 0
    assert "htmlrender" in result.output


def test_debug_flag_is_accepted(tmp_path: Path) -> None:
    """Ensure global logging options run before subcommands."""

    out_file = tmp_path / "page.html"

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["--debug", "demo", "--output", str(out_file)]
    )

    assert result.exit_code == 0
    assert out_file.exists()


def test_render_reports_malformed_yaml(tmp_path: Path) -> None:
    """Ensure syntax errors abort cleanly instead of with a traceback."""

    source = tmp_path / "page.yaml"
    source.write_text("title: [unclosed", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["render", str(source)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Cannot read 'page.yaml'" in result.output


def test_render_reports_non_integer_heading_level(tmp_path: Path) -> None:
    """Ensure boolean heading levels are rejected."""

    source = _write_definition(
        tmp_path / "page.yaml",
        {"title": "T", "children": [{"heading": {"text": "x", "level": True}}]},
    )

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["render", str(source)])

    assert result.exit_code == 1
    assert "<hTrue>" not in result.output
    assert "integer level" in result.output


def test_log_level_selection() -> None:
    """Trace wins over debug, which wins over the default."""

    assert cli._log_level(debug=False, trace=False) == logging.INFO
    assert cli._log_level(debug=True, trace=False) == logging.DEBUG
    assert cli._log_level(debug=True, trace=True) == 1
