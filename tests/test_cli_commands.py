from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import pytest

from windowed_iterator import cli, logging_utils


@pytest.fixture(autouse=True)
def _reset_json_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging_utils, "_json_logs", None)


def test_cli_slide_prints_windows_and_writes_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    text_path = tmp_path / "words.txt"
    text_path.write_text("These are a bunch of words\n", encoding="utf-8")
    output_path = tmp_path / "windows.json"

    cli.main(["slide", str(text_path), "--size", "3", "--output", str(output_path)])

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["These are a", "are a bunch", "a bunch of", "bunch of words"]
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["window_size"] == 3
    assert payload["count"] == 4
    assert payload["windows"][0] == ["These", "are", "a"]


def test_cli_slide_reads_stdin_as_json(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 3"))

    cli.main(["slide", "--size", "1", "--json"])

    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(line) for line in lines] == [["1"], ["2"], ["3"]]


def test_cli_slide_uses_config_and_lines(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "window.yml"
    config_path.write_text("window_size: 2\nsplit: lines\n", encoding="utf-8")
    text_path = tmp_path / "lines.txt"
    text_path.write_text("first line\nsecond line\nthird line\n", encoding="utf-8")

    cli.main(["slide", str(text_path), "--config", str(config_path), "--json"])

    lines = capsys.readouterr().out.splitlines()
    assert json.loads(lines[0]) == ["first line", "second line"]
    assert len(lines) == 2


def test_cli_slide_oversized_window_prints_nothing(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    text_path = tmp_path / "primes.txt"
    text_path.write_text("2 3 5 7", encoding="utf-8")

    cli.main(["slide", str(text_path), "--size", "10"])

    assert capsys.readouterr().out == ""


def test_cli_validate_emits_normalized_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "window.json"
    config_path.write_text('{"window_size": 5, "copy": "shallow"}', encoding="utf-8")

    cli.main(["validate", str(config_path), "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload == {"window_size": 5, "copy": "shallow", "split": "whitespace"}


def test_cli_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["slide", str(tmp_path / "missing.txt"), "--size", "2"])
    assert excinfo.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_json_logs_flag_emits_json_records(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="windowed_iterator.cli")
    text_path = tmp_path / "words.txt"
    text_path.write_text("a b c", encoding="utf-8")

    cli.main(["--json-logs", "--log-level", "INFO", "slide", str(text_path), "--size", "2"])

    records = [r for r in caplog.records if getattr(r, "event", None) == "slide.complete"]
    payload = json.loads(records[-1].getMessage())
    assert payload["event"] == "slide.complete"
    assert payload["tokens"] == 3
    assert payload["windows"] == 2
