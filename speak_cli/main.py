import logging
import random

import typer
from rich.logging import RichHandler

from speak_cli.config import settings
from speak_cli.display import (
    console,
    display_error,
    display_statement,
    render_libraries_table,
    render_moods_table,
    set_theme,
)
from speak_cli.speak import Speak

app = typer.Typer(
    help="Speak - moody nonsense statements from word libraries and templates",
    context_settings={"help_option_names": ["--help", "-h"]},
)


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _create_speak(data_file: str | None, seed: int | None) -> Speak:
    """Build the generator from settings/flags, exiting on bad data."""
    rng = random.Random(seed)
    path = data_file or settings.data_file
    if not path:
        return Speak(rng=rng)
    try:
        return Speak.from_data_file(path, rng=rng)
    except FileNotFoundError as e:
        display_error(str(e), hint="Check --data or SPEAK_DATA_FILE.")
    except ValueError as e:
        display_error(f"Invalid data file: {e}")
    raise typer.Exit(code=1)


@app.callback()
def main(
    theme: str = typer.Option(None, "--theme", "-t", help="Color theme: dark or light"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log template picks and data loading"),
):
    """Generate statements in a chosen mood."""
    set_theme(theme or settings.theme)
    _setup_logging(verbose)


@app.command()
def say(
    mood: str = typer.Option(None, "--mood", "-m", help="Mood name (random if omitted)"),
    stupidity: int = typer.Option(None, "--stupidity", "-s", min=0, max=100, help="Percent chance of grammar errors"),
    count: int = typer.Option(None, "--count", "-n", min=1, help="Number of statements"),
    seed: int = typer.Option(None, "--seed", help="Random seed for reproducible output"),
    data_file: str = typer.Option(None, "--data", "-d", help="YAML file with custom libraries/moods/templates"),
):
    """Print one or more generated statements."""
    speak = _create_speak(data_file, seed if seed is not None else settings.seed)
    mood = mood or settings.mood
    stupidity = stupidity if stupidity is not None else settings.stupidity
    count = count or settings.count

    try:
        statements = speak.get_statements(count, mood, stupidity)
    except LookupError as e:
        display_error(str(e), hint="Run 'speak moods' or 'speak libraries' to list valid names.")
        raise typer.Exit(code=1)

    for statement in statements:
        display_statement(statement)


@app.command()
def expand(
    template: str = typer.Argument(..., help="Template such as '%s %a %o'"),
    mood: str = typer.Option(None, "--mood", "-m", help="Mood name (random if omitted)"),
    stupidity: int = typer.Option(0, "--stupidity", "-s", min=0, max=100, help="Percent chance of grammar errors"),
    seed: int = typer.Option(None, "--seed", help="Random seed for reproducible output"),
    data_file: str = typer.Option(None, "--data", "-d", help="YAML file with custom libraries/moods/templates"),
):
    """Expand a single template without closing punctuation."""
    speak = _create_speak(data_file, seed if seed is not None else settings.seed)
    try:
        result = speak.expand(template, mood or settings.mood, stupidity)
    except LookupError as e:
        display_error(str(e), hint="Run 'speak libraries' to list valid tokens.")
        raise typer.Exit(code=1)
    display_statement(result)


@app.command()
def moods(
    data_file: str = typer.Option(None, "--data", "-d", help="YAML file with custom libraries/moods/templates"),
):
    """List available moods."""
    speak = _create_speak(data_file, None)
    console.print(render_moods_table(speak.moods))


@app.command()
def libraries(
    data_file: str = typer.Option(None, "--data", "-d", help="YAML file with custom libraries/moods/templates"),
):
    """List word libraries and their template tokens."""
    speak = _create_speak(data_file, None)
    console.print(render_libraries_table(speak.libraries))


if __name__ == "__main__":
    app()
