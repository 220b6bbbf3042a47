"""Tests for logging utilities."""

import json
import logging
from datetime import datetime

import bunnyhop.logging_utils as logging_utils
from bunnyhop.logging_utils import (
    StructuredTextFormatter,
    build_run_log_path,
    log_event,
    setup_logging,
    summarize_text,
)


def _record(msg, name="root"):
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_structured_formatter_renders_event_block_in_key_order():
    formatter = StructuredTextFormatter()
    message = json.dumps(
        {
            "event": "command_resolve",
            "url": "https://github.com",
            "command": "gh",
            "route": "command",
            "canonical_name": None,
        }
    )

    result = formatter.format(_record(message))
    lines = result.splitlines()

    assert lines[0] == "=== command_resolve ==="
    keys = [line.split(":", 1)[0] for line in lines[1:]]
    assert keys.index("command") < keys.index("route") < keys.index("url")
    assert "canonical_name" not in keys


def test_structured_formatter_uses_logger_name_for_plain_messages():
    formatter = StructuredTextFormatter()

    result = formatter.format(_record("Arbitrary message", name="bunnyhop.test"))

    assert "=== bunnyhop.test ===" in result
    assert "message: Arbitrary message" in result


def test_structured_formatter_separates_entries_with_blank_line():
    formatter = StructuredTextFormatter()

    first = formatter.format(_record("one"))
    second = formatter.format(_record("two"))

    assert not first.startswith("\n")
    assert second.startswith("\n===")


def test_structured_formatter_escapes_newlines():
    formatter = StructuredTextFormatter()

    result = formatter.format(_record(json.dumps({"event": "x", "error": "a\nb"})))

    assert "error: a\\nb" in result


def test_log_event_emits_json_payload(caplog):
    with caplog.at_level(logging.INFO):
        log_event("command_resolve", command="gh", aliases=("gh",), extra=None)

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["event"] == "command_resolve"
    assert payload["command"] == "gh"
    assert payload["aliases"] == ["gh"]
    assert payload["extra"] is None
    assert "ts" in payload


def test_summarize_text_collapses_whitespace():
    assert summarize_text("  gh\n facebook\t/react ") == "gh facebook /react"
    assert summarize_text(None) == ""


def test_build_run_log_path_is_unique(tmp_path, monkeypatch):
    class FixedDatetime(datetime):
        @classmethod
        def now(cls, tz=None):
            return cls(2026, 2, 1, 10, 30, 0, tzinfo=tz)

    monkeypatch.setattr(logging_utils, "datetime", FixedDatetime)

    first = build_run_log_path(str(tmp_path / "logs"))
    open(first, "w").close()
    second = build_run_log_path(str(tmp_path / "logs"))

    assert first.endswith("bunnyhop_2026-02-01_10-30-00.log")
    assert second.endswith("bunnyhop_2026-02-01_10-30-00_1.log")


def test_setup_logging_without_file_disables_logging():
    setup_logging(None)

    assert logging.root.manager.disable == logging.CRITICAL
