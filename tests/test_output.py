"""Tests for the status-line reporter."""

from __future__ import annotations

import pytest

from stackseed.cli._output import OutputStyle, Reporter


class TestReporter:
    def test_default_style_is_colored(self) -> None:
        assert Reporter().style == OutputStyle(color=True)

    def test_no_color_console(self) -> None:
        reporter = Reporter(OutputStyle(color=False))
        assert reporter.console.no_color
        assert reporter.err_console.no_color

    @pytest.mark.parametrize(
        ("method", "marker"),
        [("step", "➜"), ("success", "✓"), ("warning", "⚠")],
    )
    def test_stdout_markers(
        self, capsys: pytest.CaptureFixture[str], method: str, marker: str
    ) -> None:
        reporter = Reporter(OutputStyle(color=False))
        getattr(reporter, method)("hello")
        assert capsys.readouterr().out == f"{marker} hello\n"

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        Reporter(OutputStyle(color=False)).error("boom")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "✗ boom\n"

    def test_header(self, capsys: pytest.CaptureFixture[str]) -> None:
        Reporter(OutputStyle(color=False)).header("Setup")
        assert capsys.readouterr().out == "\nSetup\n" + "=" * 50 + "\n"
