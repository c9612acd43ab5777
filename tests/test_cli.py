"""Tests for the command-line entry point."""

import logging
from unittest.mock import patch

import pytest

from traffic_cams import cli
from traffic_cams.client import HttpClient
from traffic_cams.errors import HttpError
from traffic_cams.models import IframeFailure, ScrapeReport

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01" + b"\x00" * 64


@pytest.fixture(autouse=True)
def restore_root_logging():
    """cli.main reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@patch("traffic_cams.cli.run")
def test_prints_completion_message(mock_run, tmp_path, capsys):
    mock_run.return_value = ScrapeReport(
        failures=[IframeFailure("../a.html", "boom")],
    )

    cli.main(["--output", str(tmp_path)])

    assert capsys.readouterr().out == "Download completed.\n"
    config = mock_run.call_args.args[1]
    assert config.output_root == tmp_path.resolve()


@patch("traffic_cams.cli.run")
def test_defaults_to_current_directory(mock_run, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    mock_run.return_value = ScrapeReport()

    cli.main([])

    client, config = mock_run.call_args.args
    assert config.output_root == tmp_path.resolve()
    assert client.timeout is None


def test_default_run_only_reports_failed_iframes(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    page = '<iframe src="../bad.html"></iframe><iframe src="../good.html"></iframe>'

    def fetch_text(self, url):
        if url.endswith("bad.html"):
            raise HttpError(url, "404 Client Error: Not Found", status_code=404)
        if url.endswith("good.html"):
            return 'var imgsrc = "https://x/cam1.jpg";'
        return page

    with patch.object(HttpClient, "fetch_text", fetch_text), patch.object(
        HttpClient, "fetch_bytes", return_value=JPEG_BYTES
    ):
        cli.main([])

    captured = capsys.readouterr()
    assert captured.out == "Download completed.\n"
    err_lines = captured.err.splitlines()
    assert len(err_lines) == 1
    assert err_lines[0].endswith(
        "Error processing iframe source ../bad.html: 404 Client Error: Not Found"
    )
    assert (tmp_path / "cam1.jpg").read_bytes() == JPEG_BYTES


@patch("traffic_cams.cli.run")
def test_verbose_logs_progress(mock_run, capsys):
    mock_run.return_value = ScrapeReport()

    cli.main(["--verbose"])

    assert "Finished in" in capsys.readouterr().err


@patch("traffic_cams.cli.run")
def test_page_fetch_failure_exits_non_zero(mock_run, capsys):
    mock_run.side_effect = HttpError("https://example.test/", "503 Server Error")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--timeout", "2.5"])

    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert "Download completed." not in captured.out
    assert "Failed to fetch camera page https://example.test/" in captured.err
