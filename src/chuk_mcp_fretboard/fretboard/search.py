"""
Voicing search - places a chord voicing on a set of strings.

Given a chord, a voicing kind and the strings to use, find one fret per
string such that:
- each string sounds the voicing's pitch class for that string,
- pitch strictly rises from the lowest string to the highest,
- no fret exceeds the search ceiling.

Strings are assigned lowest-pitched first: the voicing's first (lowest)
note goes on the lowest string of the set. Every note takes the lowest
qualifying fret, so the answer is the most compact, lowest-position
realization and is reproducible for answer checking.

An exhausted search and a voicing kind that does not fit the chord are
ordinary outcomes, reported through SearchOutcome rather than raised.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from chuk_mcp_fretboard.constants import DEFAULT_MAX_FRET
from chuk_mcp_fretboard.core.chord import Chord
from chuk_mcp_fretboard.core.pitch import STANDARD_TUNING, PitchClass, Tuning
from chuk_mcp_fretboard.core.voicing import VoicingKind, required_note_count, voicing_order
from chuk_mcp_fretboard.fretboard.positions import FretPosition

logger = logging.getLogger(__name__)


class SearchOutcome(str, Enum):
    FOUND = "found"
    NO_SOLUTION = "no_solution"  # nothing fits under the fret ceiling
    NOT_APPLICABLE = "not_applicable"  # kind/chord or kind/string-set mismatch


@dataclass(frozen=True)
class VoicingQuery:
    """
    Immutable search parameters.

    Raises ValueError on construction for malformed string sets or fret
    ceilings; those are caller errors, not search outcomes.
    """

    chord: Chord
    kind: VoicingKind
    string_set: tuple[int, ...]
    max_fret: int = DEFAULT_MAX_FRET
    tuning: Tuning = STANDARD_TUNING

    def __post_init__(self) -> None:
        object.__setattr__(self, "string_set", tuple(self.string_set))
        if self.max_fret < 0:
            raise ValueError(f"max_fret must be >= 0, got {self.max_fret}")
        if len(set(self.string_set)) != len(self.string_set):
            raise ValueError(f"String set has duplicate strings: {list(self.string_set)}")
        for string_index in self.string_set:
            self.tuning.check_string(string_index)

    @property
    def strings_low_to_high(self) -> tuple[int, ...]:
        """Strings ordered lowest-pitched first (highest visual index first)."""
        return tuple(sorted(self.string_set, reverse=True))


@dataclass(frozen=True)
class VoicingSearchResult:
    """Outcome of a voicing search, with positions when one was found."""

    query: VoicingQuery
    outcome: SearchOutcome
    positions: tuple[FretPosition, ...] = ()
    target_order: tuple[PitchClass, ...] | None = field(default=None)

    @property
    def found(self) -> bool:
        return self.outcome == SearchOutcome.FOUND


def search_voicing(query: VoicingQuery) -> VoicingSearchResult:
    """
    Search for the lowest-position voicing described by the query.

    Returns:
        A result whose outcome is FOUND (positions sorted by string index),
        NOT_APPLICABLE (the voicing kind does not fit the chord, or the
        string count does not match the voicing) or NO_SOLUTION
    """
    target = voicing_order(query.chord, query.kind)
    if target is None:
        logger.debug("%s does not apply to %s", query.kind.value, query.chord)
        return VoicingSearchResult(query, SearchOutcome.NOT_APPLICABLE)

    if len(query.string_set) != required_note_count(query.chord, query.kind):
        logger.debug(
            "%d strings cannot carry a %d-note %s voicing",
            len(query.string_set),
            len(target),
            query.kind.value,
        )
        return VoicingSearchResult(query, SearchOutcome.NOT_APPLICABLE, target_order=target)

    strings = query.strings_low_to_high
    tuning = query.tuning
    lowest = strings[0]

    for start_fret in range(query.max_fret + 1):
        if tuning.pitch_class_at(lowest, start_fret) != target[0]:
            continue
        placed = _complete_from(start_fret, strings, target, query.max_fret, tuning)
        if placed is not None:
            positions = tuple(sorted(placed))
            logger.debug("Placed %s %s at %s", query.chord, query.kind.value, positions)
            return VoicingSearchResult(
                query, SearchOutcome.FOUND, positions=positions, target_order=target
            )

    logger.debug(
        "No %s voicing of %s on strings %s under fret %d",
        query.kind.value,
        query.chord,
        list(query.string_set),
        query.max_fret,
    )
    return VoicingSearchResult(query, SearchOutcome.NO_SOLUTION, target_order=target)


def _complete_from(
    start_fret: int,
    strings: Sequence[int],
    target: Sequence[PitchClass],
    max_fret: int,
    tuning: Tuning,
) -> list[FretPosition] | None:
    """Place the remaining notes above a fixed lowest note, or give up."""
    placed = [FretPosition(strings[0], start_fret)]
    previous_pitch = tuning.absolute_pitch(strings[0], start_fret)

    for string_index, note in zip(strings[1:], target[1:]):
        for fret in range(max_fret + 1):
            if tuning.pitch_class_at(string_index, fret) != note:
                continue
            pitch = tuning.absolute_pitch(string_index, fret)
            if pitch > previous_pitch:
                placed.append(FretPosition(string_index, fret))
                previous_pitch = pitch
                break
        else:
            return None

    return placed


def find_voicing(
    chord: Chord,
    kind: VoicingKind,
    string_set: Sequence[int],
    max_fret: int = DEFAULT_MAX_FRET,
    tuning: Tuning = STANDARD_TUNING,
) -> list[FretPosition] | None:
    """
    Lowest-position voicing of a chord on a set of strings.

    Args:
        chord: The chord to voice
        kind: The voicing shape
        string_set: Visual string indices, one per voicing note
        max_fret: Highest fret any note may use
        tuning: Open-string pitches

    Returns:
        Positions sorted by string index, or None when the voicing does not
        apply or cannot be placed. Use search_voicing to tell those apart.
    """
    result = search_voicing(VoicingQuery(chord, kind, tuple(string_set), max_fret, tuning))
    return list(result.positions) if result.found else None


def is_strictly_ascending(
    positions: Sequence[FretPosition], tuning: Tuning = STANDARD_TUNING
) -> bool:
    """Whether pitch rises from the lowest-pitched string to the highest."""
    ordered = sorted(positions, key=lambda p: p.string_index, reverse=True)
    pitches = [p.absolute_pitch(tuning) for p in ordered]
    return all(low < high for low, high in zip(pitches, pitches[1:]))


def find_chord_tones_anywhere(
    chord: Chord,
    max_fret: int = DEFAULT_MAX_FRET,
    tuning: Tuning = STANDARD_TUNING,
) -> list[FretPosition] | None:
    """
    One position per distinct chord tone, with no string-set constraint.

    Each tone takes the lowest fret it appears on, checking strings from the
    highest-pitched down at each fret. No ordering between tones is
    enforced, so this is a display aid, not a voicing.

    Returns:
        Positions sorted by string index, or None if a tone is missing
    """
    positions: list[FretPosition] = []
    for note in dict.fromkeys(chord.notes):
        found = _lowest_fret_of(note, max_fret, tuning)
        if found is None:
            return None
        positions.append(found)
    return sorted(positions)


def _lowest_fret_of(note: PitchClass, max_fret: int, tuning: Tuning) -> FretPosition | None:
    for fret in range(max_fret + 1):
        for string_index in range(tuning.string_count):
            if tuning.pitch_class_at(string_index, fret) == note:
                return FretPosition(string_index, fret)
    return None
