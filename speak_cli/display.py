"""Themed terminal display: console, styles, and display helpers."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from speak_cli.libraries import Mood, Registry, WordLibrary

# -- Theme palettes (keyed by theme name) ------------------------------------

_THEMES: dict[str, dict[str, str]] = {
    "dark":  {"statement": "bold white", "accent": "bold cyan", "error": "bold red", "hint": "dim", "mood": "magenta"},
    "light": {"statement": "bold black", "accent": "bold blue", "error": "bold red", "hint": "dim", "mood": "dark_magenta"},
}

# -- Console (single instance, themed) --------------------------------------

console = Console(theme=Theme(_THEMES["light"]))

# -- Indicators ------------------------------------------------------------

BULLET = "▸"
ERROR  = "✖"

# -- Theme switching -------------------------------------------------------


def set_theme(name: str) -> None:
    """Switch the console theme at runtime (e.g. from --theme flag)."""
    console.push_theme(Theme(_THEMES.get(name, _THEMES["light"])))


# -- Display helpers -------------------------------------------------------


def display_statement(statement: str) -> None:
    # Text, not markup: statements contain brackets and emoticons like ">:["
    console.print(Text(f"{BULLET} ", style="accent") + Text(statement, style="statement"))


def display_error(message: str, hint: str | None = None) -> None:
    """Red-bordered panel with optional recovery hint."""
    body = Text(f"{ERROR} {message}", style="bold red")
    if hint:
        body.append(f"\n{hint}", style="dim")
    console.print(Panel(body, border_style="red", title="Error", title_align="left"))


def _preview(items: tuple[str, ...], limit: int = 6) -> str:
    shown = ", ".join(items[:limit])
    if len(items) > limit:
        shown += f", … (+{len(items) - limit})"
    return shown


def render_moods_table(moods: Registry[Mood]) -> Table:
    table = Table(title="Moods", border_style="accent", expand=False)
    table.add_column("Mood", style="mood")
    table.add_column("Influencers")
    table.add_column("Punctuation")
    table.add_column("Emoticons")
    table.add_column("Filter", style="hint")
    for mood in moods:
        table.add_row(
            mood.name,
            Text(_preview(mood.influencers)),
            Text(" ".join(mood.punctuations)),
            Text(" ".join(mood.emoticons)),
            mood.filter.value,
        )
    return table


def render_libraries_table(libraries: Registry[WordLibrary]) -> Table:
    table = Table(title="Libraries", border_style="accent", expand=False)
    table.add_column("Token", style="accent")
    table.add_column("Name")
    table.add_column("Description")
    table.add_column("Rule", style="hint")
    table.add_column("Words", justify="right")
    for library in libraries:
        table.add_row(
            f"%{library.token}",
            library.name,
            library.description,
            library.rule.value,
            str(len(library.words)) if library.words else "mood",
        )
    return table
