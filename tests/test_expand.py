"""Functional tests for token scanning and segment expansion.

Single-word libraries pin each library's pick, so every assertion is exact.
"""

import random

import pytest

from speak_cli._errors import UnknownLibraryError
from speak_cli._expand import expand_segments, expand_tokens
from speak_cli.libraries import (
    DEFAULT_LIBRARIES,
    Mood,
    Registry,
    SelectionRule,
    WordLibrary,
    library_registry,
)
from speak_cli._word_exceptions import WordExceptions


CALM = Mood("calm", ("well",), (".", "..."), (":|",))


def _libraries(objects=("apple",), emotives=("am",), reflections=("is",)):
    return library_registry([
        WordLibrary("sources", "s", words=("we",)),
        WordLibrary("emotives", "emo", words=emotives, rule=SelectionRule.EMOTIVE_AGREEMENT),
        WordLibrary("reflections", "ref", words=reflections, rule=SelectionRule.REFLECTION_AGREEMENT),
        WordLibrary("objects", "o", words=objects, rule=SelectionRule.ARTICLE_INSERTION),
        WordLibrary("influencers", "i", rule=SelectionRule.MOOD_INFLUENCERS),
        WordLibrary("punctuations", "punc", rule=SelectionRule.MOOD_PUNCTUATIONS),
        WordLibrary("emoticons", "icon", rule=SelectionRule.MOOD_EMOTICONS),
    ])


def _expand(template, libraries=None, stupidity=0, mood=CALM, seed=0):
    return expand_tokens(template, stupidity, mood, libraries or _libraries(), random.Random(seed))


class RecordingRegistry(Registry):
    """Registry that remembers every key it was asked for."""

    def __init__(self, entries, kind):
        super().__init__(entries, kind)
        self.keys: list = []

    def lookup(self, key, rng):
        self.keys.append(key)
        return super().lookup(key, rng)


class TestTokenScanning:

    def test_plain_substitution(self):
        assert _expand("i like %o") == "i like apple"

    def test_soft_marker_is_consumed(self):
        assert _expand("%o? rocks") == "apple rocks"
        assert _expand("%o?? rocks") == "apple rocks"

    def test_token_ends_at_first_non_token_char(self):
        assert _expand("%o.tumblr.com") == "apple.tumblr.com"
        assert _expand("%o@%o.com") == "apple@apple.com"

    def test_uppercase_letter_ends_token(self):
        assert _expand("%oX") == "appleX"

    def test_every_placeholder_expanded(self):
        for seed in range(25):
            result = expand_tokens(
                "%s %emo %d, %c %p %o %ref %m %a %sub",
                0, CALM, library_registry(DEFAULT_LIBRARIES), random.Random(seed),
            )
            assert "%" not in result

    def test_one_lookup_per_placeholder(self):
        registry = RecordingRegistry(list(_libraries()), "library")
        expand_tokens("%s %o and %o? with %i", 0, CALM, registry, random.Random(0))
        assert registry.keys == ["s", "o", "o", "i"]

    def test_bare_percent_is_left_alone(self):
        assert _expand("100% %o") == "100% apple"
        assert _expand("50%") == "50%"

    def test_unknown_token_raises(self):
        with pytest.raises(UnknownLibraryError, match="zzz is not a valid library") as exc:
            _expand("a %zzz b")
        assert exc.value.key == "zzz"
        assert isinstance(exc.value, LookupError)

    def test_library_exceptions_applied_to_word(self):
        libraries = library_registry([
            WordLibrary(
                "objects", "o", words=("teh apple",),
                exceptions=WordExceptions({"teh": lambda t: t.replace("teh", "the")}),
            ),
        ])
        assert _expand("eat %o", libraries) == "eat the apple"

    def test_replacement_shifts_following_tokens(self):
        libraries = library_registry([
            WordLibrary("long", "l", words=("a much longer phrase",)),
            WordLibrary("short", "x", words=("y",)),
        ])
        assert _expand("%x %l %x %l", libraries) == "y a much longer phrase y a much longer phrase"


class TestStupidity:

    def test_full_stupidity_never_honors_token(self):
        registry = RecordingRegistry(list(_libraries()), "library")
        expand_tokens("%s %o %o %emo %ref", 100, CALM, registry, random.Random(3))
        assert registry.keys == [None] * 5

    def test_zero_stupidity_always_honors_token(self):
        registry = RecordingRegistry(list(_libraries()), "library")
        for seed in range(20):
            expand_tokens("%s %o", 0, CALM, registry, random.Random(seed))
        assert None not in registry.keys

    def test_full_stupidity_ignores_unknown_tokens(self):
        """The token is discarded before lookup, so even bad tokens resolve."""
        result = _expand("%nope", stupidity=100)
        assert "%" not in result


class TestGrammarRules:

    def test_emotive_agreement_after_we(self):
        assert _expand("%s %emo happy") == "we are happy"

    def test_emotive_untouched_after_other_words(self):
        assert _expand("i %emo happy") == "i am happy"

    def test_emotive_other_forms_untouched_after_we(self):
        libraries = _libraries(emotives=("will be",))
        assert _expand("we %emo happy", libraries) == "we will be happy"

    def test_reflection_plural_after_s(self):
        assert _expand("cats %ref here") == "cats are here"
        assert _expand("dogs %ref here", _libraries(reflections=("was",))) == "dogs were here"

    def test_reflection_unrecognized_form_unchanged(self):
        assert _expand("cats %ref here", _libraries(reflections=("will be",))) == "cats will be here"

    def test_reflection_singular_without_s(self):
        assert _expand("cat %ref here") == "cat is here"

    def test_article_an_before_vowel(self):
        assert _expand("it is %o") == "it is an apple"
        assert _expand("it was %o") == "it was an apple"

    def test_article_a_before_consonant(self):
        assert _expand("it is %o", _libraries(objects=("pear",))) == "it is a pear"

    def test_no_article_after_other_words(self):
        assert _expand("i like %o") == "i like apple"

    def test_hashtag_strips_whitespace_and_skips_article(self):
        libraries = _libraries(objects=("ice cream sandwich",))
        assert _expand("#%o", libraries) == "#icecreamsandwich"
        assert _expand("it is #%o", libraries) == "it is #icecreamsandwich"

    def test_mood_sourced_libraries(self):
        mood = Mood("loud", ("hey",), ("!",), (":D",))
        assert _expand("%i, %o%punc %icon", mood=mood) == "hey, apple! :D"

    def test_mood_sourced_empty_list_gives_empty_string(self):
        mood = Mood("blank")
        assert _expand("[%i]", mood=mood) == "[]"


class TestSegments:

    def test_all_markers_replaced(self):
        result = expand_segments("%seg, then %seg", ("%o", "%s"), random.Random(0))
        assert "%seg" not in result
        first, second = result.split(", then ")
        assert first in ("%o", "%s")
        assert second in ("%o", "%s")

    def test_each_marker_drawn_independently(self):
        results = {
            expand_segments("%seg|%seg", ("a", "b", "c", "d"), random.Random(seed))
            for seed in range(30)
        }
        assert any(left != right for left, right in (r.split("|") for r in results))

    def test_without_markers_unchanged(self):
        assert expand_segments("%o only", ("x",), random.Random(0)) == "%o only"
