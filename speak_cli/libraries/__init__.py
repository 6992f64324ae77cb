"""Word libraries, moods, selection rules, and the built-in data set."""

from speak_cli.libraries._defaults import (
    DEFAULT_LIBRARIES,
    DEFAULT_MOODS,
    DEFAULT_SEGMENTS,
    DEFAULT_STATEMENTS,
)
from speak_cli.libraries._registry import (
    Mood,
    Registry,
    WordLibrary,
    library_registry,
    mood_registry,
)
from speak_cli.libraries._rules import (
    MoodFilter,
    SelectionContext,
    SelectionRule,
    apply_mood_filter,
    apply_selection_rule,
)

__all__ = [
    "DEFAULT_LIBRARIES",
    "DEFAULT_MOODS",
    "DEFAULT_SEGMENTS",
    "DEFAULT_STATEMENTS",
    "Mood",
    "MoodFilter",
    "Registry",
    "SelectionContext",
    "SelectionRule",
    "WordLibrary",
    "apply_mood_filter",
    "apply_selection_rule",
    "library_registry",
    "mood_registry",
]
