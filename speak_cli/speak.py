"""Statement generator.

``Speak`` owns a library registry, a mood registry, and two template sets:
full statements and short segments. Each call to ``get_statement`` picks a
mood and a template, expands it, and decorates it with closing
punctuation and sometimes an emoticon.
"""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from speak_cli._data_file import load_data_file
from speak_cli._expand import expand_segments, expand_tokens
from speak_cli._random import RandomSource, make_rng, pick, roll
from speak_cli.libraries import (
    DEFAULT_LIBRARIES,
    DEFAULT_MOODS,
    DEFAULT_SEGMENTS,
    DEFAULT_STATEMENTS,
    Mood,
    WordLibrary,
    apply_mood_filter,
    library_registry,
    mood_registry,
)

logger = logging.getLogger(__name__)

EMOTICON_CHANCE = 20  # percent
QUESTIONS_LIBRARY = "questions"
_QUESTION_OPENERS = frozenset({"if"})


class Speak:
    """A configured statement generator.

    Any argument left out falls back to the built-in data. Pass a seeded
    ``random.Random`` as ``rng`` for reproducible output.
    """

    def __init__(
        self,
        libraries: Iterable[WordLibrary] | None = None,
        moods: Iterable[Mood] | None = None,
        statements: Sequence[str] | None = None,
        segments: Sequence[str] | None = None,
        rng: RandomSource | None = None,
    ):
        self.libraries = library_registry(DEFAULT_LIBRARIES if libraries is None else libraries)
        self.moods = mood_registry(DEFAULT_MOODS if moods is None else moods)
        self.statements: tuple[str, ...] = tuple(DEFAULT_STATEMENTS if statements is None else statements)
        self.segments: tuple[str, ...] = tuple(DEFAULT_SEGMENTS if segments is None else segments)
        self.rng: RandomSource = rng if rng is not None else make_rng()

    @classmethod
    def from_data_file(cls, path: Path | str, rng: RandomSource | None = None) -> "Speak":
        """Build a generator from a YAML data file; missing sections use defaults."""
        data = load_data_file(path)
        return cls(
            libraries=data.libraries,
            moods=data.moods,
            statements=data.statements,
            segments=data.segments,
            rng=rng,
        )

    def get_mood(self, name: str | None = None) -> Mood:
        """Return the named mood, or a random one.

        Raises:
            UnknownMoodError: ``name`` is not a registered mood.
        """
        return self.moods.lookup(name, self.rng)

    def get_library(self, name_or_token: str | None = None) -> WordLibrary:
        """Return the library with this name or token, or a random one.

        Raises:
            UnknownLibraryError: nothing matches ``name_or_token``.
        """
        return self.libraries.lookup(name_or_token, self.rng)

    def _is_question(self, text: str) -> bool:
        first_word = text.split(" ")[0]
        if first_word in _QUESTION_OPENERS:
            return True
        if QUESTIONS_LIBRARY in self.libraries:
            return first_word in self.get_library(QUESTIONS_LIBRARY).words
        return False

    def _render(self, template: str, mood: Mood, stupidity: float, segments: Sequence[str]) -> str:
        result = expand_segments(template, segments, self.rng)
        result = expand_tokens(result, stupidity, mood, self.libraries, self.rng)
        return apply_mood_filter(mood.filter, mood.exceptions.apply(result))

    def expand(self, template: str, mood_name: str | None = None, stupidity: float = 0) -> str:
        """Expand a caller-supplied template without closing punctuation."""
        mood = self.get_mood(mood_name)
        return self._render(template, mood, stupidity, self.segments)

    def get_statement(
        self,
        mood_name: str | None = None,
        stupidity: float = 0,
        statements: Sequence[str] | None = None,
        segments: Sequence[str] | None = None,
    ) -> str:
        """Generate one statement.

        Args:
            mood_name: Mood to speak in; random when omitted.
            stupidity: Percent chance (0-100) of picking a bare segment as
                the template and of each placeholder using a random library.
            statements: Statement templates to draw from instead of the
                instance's own.
            segments: Segment templates to draw from instead of the
                instance's own.

        Raises:
            UnknownMoodError: ``mood_name`` is not a registered mood.
            UnknownLibraryError: A template token names no library.
        """
        mood = self.get_mood(mood_name)
        stupidity = stupidity or 0
        statements = statements or self.statements
        segments = segments or self.segments

        if roll(self.rng, 0, 100) <= stupidity:
            template = pick(self.rng, segments)
        else:
            template = pick(self.rng, statements)
        logger.debug(f"mood={mood.name} template={template!r}")

        result = self._render(template, mood, stupidity, segments)

        if self._is_question(result):
            result += "?"
        else:
            result += pick(self.rng, mood.punctuations)

        if roll(self.rng, 0, 100) < EMOTICON_CHANCE and mood.emoticons:
            result += " " + pick(self.rng, mood.emoticons)

        return result

    def get_statements(
        self,
        count: int,
        mood_name: str | None = None,
        stupidity: float = 0,
        statements: Sequence[str] | None = None,
        segments: Sequence[str] | None = None,
    ) -> list[str]:
        """Generate ``count`` statements with the same arguments as ``get_statement``."""
        return [self.get_statement(mood_name, stupidity, statements, segments) for _ in range(count)]
