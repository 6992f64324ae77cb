"""Functional tests for YAML data file parsing and validation."""

import pytest

from speak_cli._data_file import load_data_file, parse_data
from speak_cli._errors import DataFileError
from speak_cli.libraries import MoodFilter, SelectionRule


VALID = """
libraries:
  - name: objects
    token: o
    description: nouns
    rule: article_insertion
    words: [apple, lamp]
    exceptions:
      "\\\\blamp\\\\b": "lava lamp"
  - name: sources
    token: s
    words: [i, we]
moods:
  - name: calm
    influencers: [well]
    punctuations: [".", "..."]
    emoticons: [":|"]
  - name: anger
    punctuations: ["!"]
    filter: uppercase
statements: ["%s like %o"]
segments: ["%o"]
"""


def test_parse_valid_data():
    data = parse_data(VALID)

    objects, sources = data.libraries
    assert objects.name == "objects"
    assert objects.rule is SelectionRule.ARTICLE_INSERTION
    assert objects.words == ("apple", "lamp")
    assert objects.exceptions.apply("a lamp") == "a lava lamp"
    assert sources.rule is SelectionRule.DEFAULT

    calm, anger = data.moods
    assert calm.punctuations == (".", "...")
    assert calm.filter is MoodFilter.NONE
    assert anger.filter is MoodFilter.UPPERCASE

    assert data.statements == ["%s like %o"]
    assert data.segments == ["%o"]


def test_missing_sections_mean_defaults():
    data = parse_data("statements: ['%o']\n")
    assert data.libraries is None
    assert data.moods is None
    assert data.segments is None
    assert data.summary() == "statements=1"


def test_empty_content_means_all_defaults():
    data = parse_data("")
    assert data.summary() == "defaults only"


def test_malformed_yaml():
    with pytest.raises(DataFileError, match="invalid YAML"):
        parse_data("libraries: [unclosed\n")


def test_top_level_must_be_mapping():
    with pytest.raises(DataFileError, match="top level must be a mapping"):
        parse_data("- just\n- a list\n")


def test_unknown_rule_rejected():
    content = "libraries:\n  - {name: things, token: t, rule: telepathy}\n"
    with pytest.raises(DataFileError, match="rule"):
        parse_data(content)


def test_token_must_be_lowercase_letters():
    content = "libraries:\n  - {name: things, token: T1}\n"
    with pytest.raises(DataFileError, match="lowercase letters only"):
        parse_data(content)


def test_missing_name_rejected():
    content = "moods:\n  - {punctuations: ['.']}\n"
    with pytest.raises(DataFileError, match="name"):
        parse_data(content)


def test_invalid_exception_pattern_rejected():
    content = "moods:\n  - name: calm\n    exceptions: {'(unclosed': 'x'}\n"
    with pytest.raises(DataFileError, match="invalid exception pattern"):
        parse_data(content)


def test_nested_segment_marker_rejected():
    with pytest.raises(DataFileError, match="must not contain %seg"):
        parse_data("segments: ['%o and %seg']\n")


def test_error_names_the_source(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("- nope\n", encoding="utf-8")
    with pytest.raises(DataFileError, match="broken.yaml"):
        load_data_file(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Data file not found"):
        load_data_file(tmp_path / "absent.yaml")


def test_data_file_error_is_value_error():
    assert issubclass(DataFileError, ValueError)
