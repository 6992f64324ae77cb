"""Tests for last-word lookup and splicing."""

import pytest

from speak_cli._text import get_last_word, splice


@pytest.mark.parametrize(
    "position, expected",
    [
        (15, "quick"),  # on the space before "fox"
        (17, "brown"),  # inside "fox"
        (10, "quick"),  # at the start of "brown"
        (4, "the"),     # at the start of "quick"
    ],
)
def test_get_last_word_before_position(position, expected):
    assert get_last_word("the quick brown fox", position) == expected


@pytest.mark.parametrize("position", [None, 0, 19, 50])
def test_get_last_word_missing_or_out_of_range_reads_from_end(position):
    assert get_last_word("the quick brown fox", position) == "fox"


def test_get_last_word_before_placeholder():
    template = "we %emo happy"
    assert get_last_word(template, template.index("%")) == "we"


def test_get_last_word_single_word_text():
    assert get_last_word("hello") == "hello"
    assert get_last_word("") == ""


def test_splice_replaces_exact_span():
    assert splice("it is %o!", 6, 2, "an apple") == "it is an apple!"
    assert splice("%o", 0, 2, "") == ""
