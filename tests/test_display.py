"""Functional tests for terminal display helpers."""

from rich.console import Console
from rich.theme import Theme

from speak_cli import display
from speak_cli.libraries import DEFAULT_LIBRARIES, DEFAULT_MOODS, library_registry, mood_registry


def _recording_console(theme: str = "light") -> Console:
    return Console(theme=Theme(display._THEMES[theme]), record=True, force_terminal=False, color_system=None, width=120)


def test_display_statement_keeps_brackets_literal(monkeypatch):
    recording_console = _recording_console()
    monkeypatch.setattr(display, "console", recording_console)

    display.display_statement("[bold]not markup[/bold] >:[")
    assert recording_console.export_text() == "▸ [bold]not markup[/bold] >:[\n"


def test_display_error_includes_hint(monkeypatch):
    recording_console = _recording_console()
    monkeypatch.setattr(display, "console", recording_console)

    display.display_error("boom", hint="try again")
    text = recording_console.export_text()
    assert "✖ boom" in text
    assert "try again" in text


def test_moods_table_lists_every_mood():
    recording_console = _recording_console()
    recording_console.print(display.render_moods_table(mood_registry(DEFAULT_MOODS)))
    text = recording_console.export_text()
    for mood in DEFAULT_MOODS:
        assert mood.name in text
    assert "uppercase" in text


def test_libraries_table_marks_mood_sourced_libraries():
    recording_console = _recording_console()
    recording_console.print(display.render_libraries_table(library_registry(DEFAULT_LIBRARIES)))
    text = recording_console.export_text()
    assert "%punc" in text
    assert "mood" in text


def test_tables_render_with_dark_theme():
    dark_console = _recording_console("dark")
    dark_console.print(display.render_moods_table(mood_registry(DEFAULT_MOODS)))
    dark_console.print(display.render_libraries_table(library_registry(DEFAULT_LIBRARIES)))
    text = dark_console.export_text()
    assert "Moods" in text
    assert "Libraries" in text
