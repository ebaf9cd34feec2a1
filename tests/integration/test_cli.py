"""
Integration tests for the build_site.py command line.
"""

import pytest
from typer.testing import CliRunner

from scripts.build_site import app

runner = CliRunner()


@pytest.mark.integration
def test_preview_exits_cleanly_on_missing_config(tmp_path, monkeypatch):
    monkeypatch.setattr("folio.contexts.content.loader.CONTENT_PATH", tmp_path / "missing.yaml")

    result = runner.invoke(app, ["preview"])

    assert result.exit_code == 1
    assert "Site config not found" in result.output
    assert not isinstance(result.exception, FileNotFoundError)


@pytest.mark.integration
def test_preview_exits_cleanly_on_invalid_config(tmp_path, monkeypatch):
    broken = tmp_path / "site.yaml"
    broken.write_text("personal: {name: ''}\n", encoding="utf-8")
    monkeypatch.setattr("folio.contexts.content.loader.CONTENT_PATH", broken)

    result = runner.invoke(app, ["preview"])

    assert result.exit_code == 1
    assert "personal.name" in result.output


@pytest.mark.integration
def test_preview_explicit_text_skips_config(tmp_path, monkeypatch):
    monkeypatch.setattr("folio.contexts.content.loader.CONTENT_PATH", tmp_path / "missing.yaml")

    result = runner.invoke(app, ["preview", "AB", "--delay", "2", "--interval", "1"])

    assert result.exit_code == 0
    assert result.output.rstrip().endswith("AB")


@pytest.mark.integration
def test_check_reports_missing_config(tmp_path):
    result = runner.invoke(app, ["check", "--content", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "Site config not found" in result.output
