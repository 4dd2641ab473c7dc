"""Tests for outcome reporting (cli/output.py) and the console helpers."""

from __future__ import annotations

import json
import sys

import pytest

from ibc_xfer.cli import exit_codes
from ibc_xfer.cli.console import strip_markup
from ibc_xfer.cli.output import Output, Status
from ibc_xfer.core.models import Height, LedgerEvent
from ibc_xfer.exceptions import ChannelNotOpenError, ConfigError

_EVENTS = (
    LedgerEvent(kind="send_packet", attributes={"packet_sequence": "1"}, height=Height(1, 10)),
    LedgerEvent(kind="send_packet", attributes={"packet_sequence": "2"}, height=Height(1, 10)),
)


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


class TestConstruction:
    def test_success(self) -> None:
        out = Output.success(list(_EVENTS))
        assert out.status is Status.SUCCESS
        assert out.result == _EVENTS
        assert out.exit_code == exit_codes.SUCCESS

    def test_error_from_string(self) -> None:
        out = Output.error("boom")
        assert out.status is Status.ERROR
        assert out.result == "boom"
        assert out.hint is None
        assert out.exit_code == exit_codes.GENERAL_ERROR

    def test_error_from_exception_keeps_hint(self) -> None:
        out = Output.error(ConfigError("bad", hint="fix it"))
        assert out.result == "bad"
        assert out.hint == "fix it"


class TestJsonRendering:
    def test_success_document(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = Output.success(_EVENTS).render(json_mode=True)
        doc = json.loads(capsys.readouterr().out)
        assert code == exit_codes.SUCCESS
        assert doc == {
            "status": "success",
            "result": [
                {"type": "send_packet", "attributes": {"packet_sequence": "1"}, "height": "1-10"},
                {"type": "send_packet", "attributes": {"packet_sequence": "2"}, "height": "1-10"},
            ],
        }

    def test_error_document(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = Output.error(ChannelNotOpenError("channel closed")).render(json_mode=True)
        captured = capsys.readouterr()
        assert code == exit_codes.GENERAL_ERROR
        assert json.loads(captured.out) == {"status": "error", "result": "channel closed"}
        assert captured.err == ""

    def test_exactly_one_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        Output.success(_EVENTS).render(json_mode=True)
        assert len(capsys.readouterr().out.strip().splitlines()) == 1


class TestTextRendering:
    def test_success_lists_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        Output.success(_EVENTS).render()
        out = capsys.readouterr().out
        assert "SUCCESS" in out
        assert "2 event(s)" in out
        assert "send_packet packet_sequence=1" in out
        assert "send_packet packet_sequence=2" in out

    def test_success_without_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        Output.success([]).render()
        assert "(no events)" in capsys.readouterr().out

    def test_error_with_hint(self, capsys: pytest.CaptureFixture[str]) -> None:
        Output.error(ConfigError("bad config", hint="use --config")).render()
        out = capsys.readouterr().out
        assert "ERROR" in out
        assert "bad config" in out
        assert "use --config" in out

    def test_brackets_are_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        Output.error("denom [ibc/ABC] rejected").render()
        assert "denom [ibc/ABC] rejected" in capsys.readouterr().out

    def test_plain_fallback_without_rich(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        code = Output.error("boom").render()
        out = capsys.readouterr().out
        assert code == exit_codes.GENERAL_ERROR
        assert out == "ERROR boom\n"


class TestStripMarkup:
    def test_removes_known_tags(self) -> None:
        assert strip_markup("[bold green]SUCCESS[/bold green] done") == "SUCCESS done"

    def test_keeps_other_brackets(self) -> None:
        assert strip_markup("[ibc/ABC]") == "[ibc/ABC]"
