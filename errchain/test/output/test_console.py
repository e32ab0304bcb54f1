"""Tests for errchain.output.console module."""

from __future__ import annotations

import pytest

from errchain.output.console import ConsoleProtocol, MockConsole, RichConsole


class TestMockConsole:
    """Test MockConsole capture."""

    def test_error(self) -> None:
        console = MockConsole()
        console.error("upload failed: permission denied")
        assert console.messages == ["error: upload failed: permission denied"]

    def test_text(self) -> None:
        console = MockConsole()
        console.error("a")
        console.error("b")
        assert console.text == "error: a\nerror: b"


class TestRichConsole:
    """Test RichConsole output."""

    def test_satisfies_protocol(self) -> None:
        def accept_console(_c: ConsoleProtocol) -> bool:
            return True

        assert accept_console(RichConsole())
        assert accept_console(MockConsole())

    def test_error_prints_brackets_literally(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.error("lookup failed: ['id'] [bold]")
        out = capsys.readouterr().out
        assert "error: lookup failed: ['id'] [bold]" in out

    def test_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole(stderr=True)
        console.error("to stderr")
        captured = capsys.readouterr()
        assert "error: to stderr" in captured.err
        assert captured.out == ""
