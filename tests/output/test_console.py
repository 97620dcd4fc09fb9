"""Tests for Rich Console factory and theme."""

from io import StringIO

from patternctl.output.console import PATTERN_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_buffer_gets_no_ansi(self) -> None:
        console = create_console()
        console.print("[pat.ok]OK[/pat.ok]")
        output = get_output(console)
        assert "\x1b" not in output
        assert output == "OK\n"

    def test_width(self) -> None:
        assert create_console().width == 120


class TestGetOutput:
    def test_empty_console(self) -> None:
        assert get_output(create_console()) == ""


def test_theme_has_expected_styles() -> None:
    for name in ["pat.ok", "pat.error", "pat.op", "pat.id", "pat.pattern"]:
        assert name in PATTERN_THEME.styles, f"Missing theme style: {name}"
