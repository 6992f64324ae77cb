"""YAML data files for custom libraries, moods, and templates.

Every top-level section is optional; a missing section keeps the built-in
data for that part. Exceptions are written as ``{regex: replacement}``
pairs and applied with ``re.sub``.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from speak_cli._errors import DataFileError
from speak_cli._expand import SEGMENT_MARKER
from speak_cli._word_exceptions import WordExceptions
from speak_cli.libraries import Mood, MoodFilter, SelectionRule, WordLibrary

logger = logging.getLogger(__name__)


def _check_patterns(v: dict[str, str]) -> dict[str, str]:
    for pattern in v:
        try:
            re.compile(pattern)
        except re.error as e:
            raise ValueError(f"invalid exception pattern {pattern!r}: {e}")
    return v


class LibrarySpec(BaseModel):
    name: str = Field(min_length=1)
    token: str = Field(min_length=1)
    description: str = Field(default="")
    words: list[str] = Field(default_factory=list)
    rule: SelectionRule = Field(default=SelectionRule.DEFAULT)
    exceptions: dict[str, str] = Field(default_factory=dict)

    @field_validator("token")
    @classmethod
    def _validate_token(cls, v: str) -> str:
        if not re.fullmatch(r"[a-z]+", v):
            raise ValueError(f"token must be lowercase letters only, got '{v}'")
        return v

    @field_validator("exceptions")
    @classmethod
    def _validate_exceptions(cls, v: dict[str, str]) -> dict[str, str]:
        return _check_patterns(v)

    def build(self) -> WordLibrary:
        return WordLibrary(
            name=self.name,
            token=self.token,
            description=self.description,
            words=tuple(self.words),
            rule=self.rule,
            exceptions=WordExceptions.from_replacements(self.exceptions),
        )


class MoodSpec(BaseModel):
    name: str = Field(min_length=1)
    influencers: list[str] = Field(default_factory=list)
    punctuations: list[str] = Field(default_factory=list)
    emoticons: list[str] = Field(default_factory=list)
    filter: MoodFilter = Field(default=MoodFilter.NONE)
    exceptions: dict[str, str] = Field(default_factory=dict)

    @field_validator("exceptions")
    @classmethod
    def _validate_exceptions(cls, v: dict[str, str]) -> dict[str, str]:
        return _check_patterns(v)

    def build(self) -> Mood:
        return Mood(
            name=self.name,
            influencers=tuple(self.influencers),
            punctuations=tuple(self.punctuations),
            emoticons=tuple(self.emoticons),
            filter=self.filter,
            exceptions=WordExceptions.from_replacements(self.exceptions),
        )


class DataFile(BaseModel):
    libraries: Optional[list[LibrarySpec]] = Field(default=None)
    moods: Optional[list[MoodSpec]] = Field(default=None)
    statements: Optional[list[str]] = Field(default=None)
    segments: Optional[list[str]] = Field(default=None)

    @field_validator("segments")
    @classmethod
    def _validate_segments(cls, v: list[str] | None) -> list[str] | None:
        # A nested marker would make segment expansion loop forever
        if v is not None:
            for segment in v:
                if SEGMENT_MARKER in segment:
                    raise ValueError(f"segments must not contain {SEGMENT_MARKER}: {segment!r}")
        return v


@dataclass(frozen=True)
class SpeakData:
    """Built value objects, ready to hand to ``Speak``. ``None`` means default."""

    libraries: list[WordLibrary] | None = None
    moods: list[Mood] | None = None
    statements: list[str] | None = None
    segments: list[str] | None = None

    def summary(self) -> str:
        sections = {
            "libraries": self.libraries,
            "moods": self.moods,
            "statements": self.statements,
            "segments": self.segments,
        }
        return ", ".join(f"{k}={len(v)}" for k, v in sections.items() if v is not None) or "defaults only"


def parse_data(content: str, source: str = "<string>") -> SpeakData:
    """Parse and validate YAML data file content.

    Raises:
        DataFileError: Malformed YAML, wrong structure, or invalid values.
    """
    try:
        raw = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise DataFileError(f"{source}: invalid YAML: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise DataFileError(f"{source}: top level must be a mapping, got {type(raw).__name__}")

    try:
        spec = DataFile.model_validate(raw)
    except ValidationError as e:
        raise DataFileError(f"{source}: {e}") from e

    return SpeakData(
        libraries=[lib.build() for lib in spec.libraries] if spec.libraries is not None else None,
        moods=[mood.build() for mood in spec.moods] if spec.moods is not None else None,
        statements=spec.statements,
        segments=spec.segments,
    )


def load_data_file(path: Path | str) -> SpeakData:
    """Load a YAML data file from disk.

    Raises:
        FileNotFoundError: The file does not exist.
        DataFileError: The file content is invalid.
    """
    path = Path(path).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"Data file not found: {path}")
    data = parse_data(path.read_text(encoding="utf-8"), source=str(path))
    logger.info(f"Loaded data file {path}: {data.summary()}")
    return data
