"""Word libraries, moods, and the registries that look them up.

A library is a named word category addressed from templates by its short
token (``%o`` for objects). A mood is a tone profile: interjections,
closing punctuation, emoticons, and a final text filter.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from speak_cli._errors import UnknownLibraryError, UnknownMoodError
from speak_cli._random import RandomSource
from speak_cli._word_exceptions import WordExceptions
from speak_cli.libraries._rules import MoodFilter, SelectionRule


@dataclass(frozen=True)
class WordLibrary:
    name: str
    token: str
    description: str = ""
    words: tuple[str, ...] = ()
    rule: SelectionRule = SelectionRule.DEFAULT
    exceptions: WordExceptions = field(default_factory=WordExceptions, compare=False)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Name is required")
        if not self.token:
            raise ValueError(f"Token is required (library {self.name!r})")
        object.__setattr__(self, "words", tuple(self.words))

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.name, self.token)


@dataclass(frozen=True)
class Mood:
    name: str
    influencers: tuple[str, ...] = ()
    punctuations: tuple[str, ...] = ()
    emoticons: tuple[str, ...] = ()
    filter: MoodFilter = MoodFilter.NONE
    exceptions: WordExceptions = field(default_factory=WordExceptions, compare=False)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Name is required")
        for attr in ("influencers", "punctuations", "emoticons"):
            object.__setattr__(self, attr, tuple(getattr(self, attr)))

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.name,)


E = TypeVar("E", WordLibrary, Mood)


class Registry(Generic[E]):
    """Read-only lookup over libraries or moods.

    Keys are each entry's ``keys`` (name, plus token for libraries) and
    must be unique across the registry.
    """

    def __init__(self, entries: Iterable[E], kind: str):
        self._entries: tuple[E, ...] = tuple(entries)
        self.kind = kind
        if not self._entries:
            raise ValueError(f"At least one {kind} is required")

        self._index: dict[str, E] = {}
        for entry in self._entries:
            for key in entry.keys:
                if key in self._index and self._index[key] is not entry:
                    raise ValueError(f"Duplicate {kind} key: {key!r}")
                self._index[key] = entry

    def lookup(self, key: str | None, rng: RandomSource) -> E:
        """Entry for ``key``, or a uniformly random entry when key is None."""
        if key is None:
            return rng.choice(self._entries)
        try:
            return self._index[key]
        except KeyError:
            if self.kind == "mood":
                raise UnknownMoodError(key) from None
            raise UnknownLibraryError(key) from None

    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[E]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def library_registry(libraries: Iterable[WordLibrary]) -> Registry[WordLibrary]:
    return Registry(libraries, "library")


def mood_registry(moods: Iterable[Mood]) -> Registry[Mood]:
    return Registry(moods, "mood")
