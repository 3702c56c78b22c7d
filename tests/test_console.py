"""Tests for the console report and entry point."""

from __future__ import annotations

from rich.console import Console

from wiredriver.__main__ import main
from wiredriver.models import Status
from wiredriver.reporting.console import build_status_table


def _render(table) -> str:
    console = Console(record=True, width=120)
    console.print(table)
    return console.export_text()


def test_status_table_rows():
    status = Status(build_version="2.53.1", os_name="Linux", os_arch="amd64", ready=True)
    text = _render(build_status_table(status))
    assert "2.53.1" in text
    assert "Linux amd64" in text
    assert "yes" in text


def test_status_table_placeholders():
    text = _render(build_status_table(Status()))
    assert "Build version" in text
    assert "Ready" not in text


def test_main_rejects_bad_settings_file(tmp_path):
    p = tmp_path / "wiredriver.yaml"
    p.write_text("executor: [unclosed\n")
    assert main([str(p)]) == 2
