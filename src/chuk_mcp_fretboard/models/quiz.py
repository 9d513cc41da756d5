"""
Quiz models - trainer settings, generated questions, and answer results.

Settings are validated up front so generators never see an unknown root,
quality, interval or string set. Questions are plain values: generating
one leaves nothing behind, and checking an answer only needs the question.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_fretboard.constants import (
    ANY_STRING_SET,
    DEFAULT_MAX_FRET,
    STRING_SETS,
    ChordTrainerMode,
    IntervalConstraint,
    IntervalTrainerMode,
    NoteTrainerMode,
)
from chuk_mcp_fretboard.core.chord import CHORD_QUALITIES
from chuk_mcp_fretboard.core.interval import INTERVALS
from chuk_mcp_fretboard.core.pitch import STRING_COUNT, PitchClass
from chuk_mcp_fretboard.core.voicing import VoicingKind
from chuk_mcp_fretboard.models.fretboard import HighlightedNote

_ALL_STRINGS = list(range(STRING_COUNT))


def _check_strings(strings: list[int]) -> list[int]:
    for string_index in strings:
        if not 0 <= string_index < STRING_COUNT:
            raise ValueError(f"Invalid string index: {string_index}")
    return strings


def _check_qualities(qualities: list[str]) -> list[str]:
    for key in qualities:
        if key not in CHORD_QUALITIES:
            raise ValueError(f"Unknown chord quality: {key}")
    return qualities


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class ChordTrainerSettings(BaseModel):
    """Options for the chord trainer."""

    roots: list[str] = Field(
        default_factory=lambda: ["C", "F", "G", "A", "D", "E", "B"],
        min_length=1,
        description="Root notes to draw from",
    )
    qualities: list[str] = Field(
        default_factory=lambda: [
            "major",
            "minor",
            "dominant7",
            "major7",
            "minor7",
            "minor7flat5",
        ],
        min_length=1,
        description="Chord quality keys to draw from",
    )
    voicings: list[VoicingKind] = Field(
        default_factory=lambda: [
            VoicingKind.ROOT_POSITION,
            VoicingKind.FIRST_INVERSION,
            VoicingKind.SECOND_INVERSION,
            VoicingKind.DROP_2,
            VoicingKind.DROP_3,
        ],
        min_length=1,
        description="Voicing kinds, in fallback priority order",
    )
    string_sets: list[str] = Field(
        default_factory=lambda: [ANY_STRING_SET, "543", "432", "321", "4321"],
        min_length=1,
        description="String set keys (or 'any')",
    )
    mode: ChordTrainerMode = Field(default=ChordTrainerMode.IDENTIFY)
    max_fret: int = Field(default=DEFAULT_MAX_FRET, ge=0, le=24)

    model_config = {"frozen": True}

    @field_validator("roots")
    @classmethod
    def _canonical_roots(cls, roots: list[str]) -> list[str]:
        return [PitchClass.parse(root).spell() for root in roots]

    @field_validator("qualities")
    @classmethod
    def _known_qualities(cls, qualities: list[str]) -> list[str]:
        return _check_qualities(qualities)

    @field_validator("string_sets")
    @classmethod
    def _known_string_sets(cls, keys: list[str]) -> list[str]:
        for key in keys:
            if key != ANY_STRING_SET and key not in STRING_SETS:
                raise ValueError(f"Unknown string set: {key}")
        return keys


class IntervalTrainerSettings(BaseModel):
    """Options for the interval trainer."""

    root_strings: list[int] = Field(
        default_factory=lambda: list(_ALL_STRINGS),
        min_length=1,
        description="Strings the root may appear on",
    )
    min_fret: int = Field(default=0, ge=0)
    max_fret: int = Field(default=7, ge=0, le=24, description="Highest root fret")
    intervals: list[str] = Field(
        default_factory=lambda: ["M3", "P4", "P5", "m3", "M7", "m7"],
        min_length=1,
        description="Interval short names to draw from",
    )
    constraint: IntervalConstraint = Field(default=IntervalConstraint.ANY)
    mode: IntervalTrainerMode = Field(default=IntervalTrainerMode.FIND)
    search_max_fret: int = Field(
        default=DEFAULT_MAX_FRET, ge=0, le=24, description="Highest fret for interval notes"
    )

    model_config = {"frozen": True}

    @field_validator("root_strings")
    @classmethod
    def _valid_strings(cls, strings: list[int]) -> list[int]:
        return _check_strings(strings)

    @field_validator("intervals")
    @classmethod
    def _known_intervals(cls, intervals: list[str]) -> list[str]:
        for key in intervals:
            if key not in INTERVALS:
                raise ValueError(f"Unknown interval: {key}")
        return intervals

    @model_validator(mode="after")
    def _fret_range(self) -> IntervalTrainerSettings:
        if self.min_fret > self.max_fret:
            raise ValueError("min_fret must not exceed max_fret")
        return self


class NoteTrainerSettings(BaseModel):
    """Options for the note-naming trainer."""

    strings: list[int] = Field(default_factory=lambda: list(_ALL_STRINGS), min_length=1)
    min_fret: int = Field(default=0, ge=0)
    max_fret: int = Field(default=DEFAULT_MAX_FRET, ge=0, le=24)
    naturals_only: bool = Field(default=False, description="Skip sharps")
    mode: NoteTrainerMode = Field(default=NoteTrainerMode.IDENTIFY)

    model_config = {"frozen": True}

    @field_validator("strings")
    @classmethod
    def _valid_strings(cls, strings: list[int]) -> list[int]:
        return _check_strings(strings)

    @model_validator(mode="after")
    def _fret_range(self) -> NoteTrainerSettings:
        if self.min_fret > self.max_fret:
            raise ValueError("min_fret must not exceed max_fret")
        return self


class TheoryTrainerSettings(BaseModel):
    """Options for the chord-symbol trainer."""

    qualities: list[str] = Field(
        default_factory=lambda: [
            "major",
            "minor",
            "diminished",
            "augmented",
            "major7",
            "minor7",
            "dominant7",
            "minor7flat5",
            "diminished7",
        ],
        min_length=1,
        description="Chord quality keys whose symbols are shown",
    )

    model_config = {"frozen": True}

    @field_validator("qualities")
    @classmethod
    def _known_qualities(cls, qualities: list[str]) -> list[str]:
        return _check_qualities(qualities)


# ---------------------------------------------------------------------------
# Questions and answers
# ---------------------------------------------------------------------------


class ChordQuestion(BaseModel):
    """A generated chord trainer question."""

    mode: ChordTrainerMode
    root: str
    quality: str
    voicing: VoicingKind
    string_set: str
    correct_name: str
    target_notes: list[HighlightedNote] = Field(description="Correct positions")
    target_order: list[str] = Field(description="Pitch classes, lowest string first")
    answer_options: list[str] | None = Field(default=None, description="Identify mode only")

    model_config = {"frozen": True}


class IntervalQuestion(BaseModel):
    """A generated interval trainer question."""

    mode: IntervalTrainerMode
    root: HighlightedNote
    interval: str = Field(description="Interval short name")
    correct_note: str
    constraint: IntervalConstraint
    interval_note: HighlightedNote | None = Field(default=None, description="Identify mode only")
    answer_options: list[str] | None = Field(default=None, description="Identify mode only")

    model_config = {"frozen": True}


class NoteQuestion(BaseModel):
    """A generated note trainer question."""

    mode: NoteTrainerMode
    correct_note: str
    position: HighlightedNote | None = Field(default=None, description="Identify mode only")

    model_config = {"frozen": True}


class TheoryQuestion(BaseModel):
    """A generated chord-symbol question."""

    quality: str = Field(description="Chord quality key")
    symbol: str = Field(description="Abbreviation shown, e.g. 'm7' or '°'")
    chord_symbol: str = Field(description="Symbol on a C root, e.g. 'Cm7'")
    correct_answer: str = Field(description="Full quality name")
    answer_options: list[str]

    model_config = {"frozen": True}


class AnswerResult(BaseModel):
    """The verdict on an answer, with highlights to show afterwards."""

    correct: bool
    feedback: str
    highlights: list[HighlightedNote] = Field(default_factory=list)
    counted: bool = Field(
        default=True, description="False when the answer was rejected without grading"
    )

    model_config = {"frozen": True}
