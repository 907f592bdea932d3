"""Tests for the Rich console factory."""

from ugraph.output.console import UGRAPH_THEME, create_console, get_output


class TestCreateConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_width_override(self) -> None:
        assert create_console(width=40).width == 40

    def test_theme_styles(self) -> None:
        assert "ug.node" in UGRAPH_THEME.styles
        assert "ug.error" in UGRAPH_THEME.styles
