"""Tests for the command line interface."""

import json

from typer.testing import CliRunner

from site_search.cli import commands
from site_search.cli.commands import app
from site_search.search.providers import StaticSearchProvider

runner = CliRunner()


def test_render_result_file(tmp_path, sample_post_data):
    """Test a saved result file is rendered into a page."""
    result_file = tmp_path / "cats.json"
    result_file.write_text(json.dumps({"queryString": "cats", "posts": [sample_post_data]}))
    output_dir = tmp_path / "out"

    result = runner.invoke(app, ["render", str(result_file), "--output", str(output_dir)])

    assert result.exit_code == 0
    pages = list(output_dir.glob("cats_*.html"))
    assert len(pages) == 1
    assert "09 March 2021" in pages[0].read_text(encoding="utf-8")


def test_render_empty_result_file(tmp_path):
    """Test an empty result is rendered with the empty banner."""
    result_file = tmp_path / "zzz.json"
    result_file.write_text(json.dumps({"queryString": "zzz", "posts": []}))
    output_dir = tmp_path / "out"

    result = runner.invoke(app, ["render", str(result_file), "--output", str(output_dir)])

    assert result.exit_code == 0
    html = next(output_dir.glob("zzz_*.html")).read_text(encoding="utf-8")
    assert '<span id="queryString">&quot;zzz&quot;</span>' in html


def test_render_missing_file(tmp_path):
    """Test a missing result file is reported."""
    result = runner.invoke(app, ["render", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "no such file" in result.output


def test_render_invalid_file(tmp_path):
    """Test an unreadable result produces no page."""
    result_file = tmp_path / "broken.json"
    result_file.write_text("{not json")
    output_dir = tmp_path / "out"

    result = runner.invoke(app, ["render", str(result_file), "--output", str(output_dir)])

    assert result.exit_code == 1
    assert list(output_dir.glob("*.html")) == []


def test_search_command(tmp_path, monkeypatch, sample_search_result):
    """Test the search command renders what the service returns."""
    created = []

    def fake_provider(client, service_url, query):
        created.append((service_url, query))
        return StaticSearchProvider(sample_search_result)

    monkeypatch.setattr(commands, "HttpSearchProvider", fake_provider)
    output_dir = tmp_path / "out"

    result = runner.invoke(
        app,
        ["search", "cats", "--service-url", "https://search.example.com", "--output", str(output_dir)],
    )

    assert result.exit_code == 0
    assert created == [("https://search.example.com", "cats")]
    assert len(list(output_dir.glob("cats_*.html"))) == 1


def test_version():
    """Test the version command."""
    from site_search import __version__

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
