"""
Fretboard positions - string/fret coordinates and position enumeration.

A position carries no note identity of its own; the tuning names it.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass

from chuk_mcp_fretboard.constants import DEFAULT_MAX_FRET
from chuk_mcp_fretboard.core.pitch import STANDARD_TUNING, PitchClass, Tuning


@dataclass(frozen=True, order=True)
class FretPosition:
    """
    A string/fret coordinate.

    string_index is visual: 0 is the highest-pitched string, 5 the lowest.
    Ordering is by string index, then fret.
    """

    string_index: int
    fret: int

    def __post_init__(self) -> None:
        if self.fret < 0:
            raise ValueError(f"Fret must be >= 0, got {self.fret}")

    def pitch_class(self, tuning: Tuning = STANDARD_TUNING) -> PitchClass:
        return tuning.pitch_class_at(self.string_index, self.fret)

    def absolute_pitch(self, tuning: Tuning = STANDARD_TUNING) -> int:
        return tuning.absolute_pitch(self.string_index, self.fret)

    def to_dict(self) -> dict[str, int]:
        return {"string": self.string_index, "fret": self.fret}

    def __str__(self) -> str:
        return f"{self.string_index}:{self.fret}"


def positions_of(
    pitch_classes: Collection[PitchClass],
    strings: Iterable[int] | None = None,
    min_fret: int = 0,
    max_fret: int = DEFAULT_MAX_FRET,
    tuning: Tuning = STANDARD_TUNING,
) -> list[FretPosition]:
    """
    Every position whose pitch class is in the given collection.

    Args:
        pitch_classes: Pitch classes to look for
        strings: Visual string indices to search (default: all)
        min_fret: Lowest fret searched
        max_fret: Highest fret searched
        tuning: Tuning that names the positions

    Returns:
        Positions in string-major, then fret order
    """
    wanted = set(pitch_classes)
    string_indices = range(tuning.string_count) if strings is None else strings
    return [
        FretPosition(string_index, fret)
        for string_index in string_indices
        for fret in range(min_fret, max_fret + 1)
        if tuning.pitch_class_at(string_index, fret) in wanted
    ]


def first_position_of(
    pitch_class: PitchClass,
    strings: Iterable[int],
    max_fret: int = DEFAULT_MAX_FRET,
    exclude: FretPosition | None = None,
    tuning: Tuning = STANDARD_TUNING,
) -> FretPosition | None:
    """
    Lowest fret holding a pitch class, trying the strings in the given order.

    Args:
        pitch_class: Pitch class to find
        strings: Visual string indices, searched in order
        max_fret: Highest fret searched
        exclude: A position that never counts as a match
        tuning: Tuning that names the positions

    Returns:
        The first match, or None
    """
    for string_index in strings:
        for fret in range(max_fret + 1):
            position = FretPosition(string_index, fret)
            if position == exclude:
                continue
            if position.pitch_class(tuning) == pitch_class:
                return position
    return None
