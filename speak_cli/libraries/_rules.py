"""Per-library word selection rules and per-mood final filters.

Libraries and moods carry an enum tag instead of a callback; the dispatch
functions here hold the behavior so library data stays declarative.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from speak_cli._random import RandomSource, pick
from speak_cli._text import get_last_word

if TYPE_CHECKING:
    from speak_cli.libraries._registry import Mood


class SelectionRule(enum.Enum):
    DEFAULT = "default"
    EMOTIVE_AGREEMENT = "emotive_agreement"        # we am -> we are
    REFLECTION_AGREEMENT = "reflection_agreement"  # cats is -> cats are
    ARTICLE_INSERTION = "article_insertion"        # is apple -> is an apple
    MOOD_INFLUENCERS = "mood_influencers"
    MOOD_PUNCTUATIONS = "mood_punctuations"
    MOOD_EMOTICONS = "mood_emoticons"


class MoodFilter(enum.Enum):
    NONE = "none"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    CAPITALIZE = "capitalize"


VOWELS = frozenset("aeiou")
COPULAS = frozenset({"is", "was"})
PLURAL_REFLECTIONS = {"is": "are", "was": "were"}


@dataclass(frozen=True)
class SelectionContext:
    """Where a placeholder sits and what mood is active."""

    template: str
    position: int
    mood: Mood
    rng: RandomSource

    @property
    def last_word(self) -> str:
        return get_last_word(self.template, self.position)

    @property
    def previous_char(self) -> str:
        if self.position <= 0:
            return ""
        return self.template[self.position - 1]


def _emotive_agreement(word: str, ctx: SelectionContext) -> str:
    if word == "am" and ctx.last_word == "we":
        return "are"
    return word


def _reflection_agreement(word: str, ctx: SelectionContext) -> str:
    if ctx.last_word.endswith("s"):
        return PLURAL_REFLECTIONS.get(word, word)
    return word


def _article_insertion(word: str, ctx: SelectionContext) -> str:
    if ctx.previous_char == "#":
        return re.sub(r"\s", "", word)
    if word and ctx.last_word in COPULAS:
        article = "an" if word[0].lower() in VOWELS else "a"
        return f"{article} {word}"
    return word


def apply_selection_rule(rule: SelectionRule, words: Sequence[str], ctx: SelectionContext) -> str:
    """Choose a word for a placeholder according to ``rule``."""
    if rule is SelectionRule.MOOD_INFLUENCERS:
        return pick(ctx.rng, ctx.mood.influencers)
    if rule is SelectionRule.MOOD_PUNCTUATIONS:
        return pick(ctx.rng, ctx.mood.punctuations)
    if rule is SelectionRule.MOOD_EMOTICONS:
        return pick(ctx.rng, ctx.mood.emoticons)

    word = pick(ctx.rng, words)
    if rule is SelectionRule.EMOTIVE_AGREEMENT:
        return _emotive_agreement(word, ctx)
    if rule is SelectionRule.REFLECTION_AGREEMENT:
        return _reflection_agreement(word, ctx)
    if rule is SelectionRule.ARTICLE_INSERTION:
        return _article_insertion(word, ctx)
    return word


def apply_mood_filter(mood_filter: MoodFilter, text: str) -> str:
    if mood_filter is MoodFilter.UPPERCASE:
        return text.upper()
    if mood_filter is MoodFilter.LOWERCASE:
        return text.lower()
    if mood_filter is MoodFilter.CAPITALIZE:
        return text[:1].upper() + text[1:]
    return text
