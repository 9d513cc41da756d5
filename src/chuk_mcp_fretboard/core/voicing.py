"""
Voicing orders - which chord tone goes lowest, which highest.

A voicing is expressed purely as a reordering of the chord's pitch classes,
lowest string to highest. Octaves are not tracked here; the fretboard
search enforces the ascending pitch that realizes the shape.
"""

from __future__ import annotations

from enum import Enum

from chuk_mcp_fretboard.core.chord import Chord
from chuk_mcp_fretboard.core.pitch import PitchClass


class VoicingKind(str, Enum):
    """The voicing shapes a chord can be asked for."""

    ROOT_POSITION = "root_position"  # formula order, any cardinality
    ROOT = "root"  # triads only
    FIRST_INVERSION = "first_inversion"  # triads only
    SECOND_INVERSION = "second_inversion"  # triads only
    DROP_2 = "drop_2"  # four-note chords only
    DROP_3 = "drop_3"  # four-note chords only

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def is_inversion(self) -> bool:
        return self in _INVERSION_STEPS

    @property
    def is_drop(self) -> bool:
        return self in (VoicingKind.DROP_2, VoicingKind.DROP_3)


_LABELS: dict[VoicingKind, str] = {
    VoicingKind.ROOT_POSITION: "Root Position",
    VoicingKind.ROOT: "Root Position",
    VoicingKind.FIRST_INVERSION: "1st Inversion",
    VoicingKind.SECOND_INVERSION: "2nd Inversion",
    VoicingKind.DROP_2: "Drop 2",
    VoicingKind.DROP_3: "Drop 3",
}

_INVERSION_STEPS: dict[VoicingKind, int] = {
    VoicingKind.ROOT: 0,
    VoicingKind.FIRST_INVERSION: 1,
    VoicingKind.SECOND_INVERSION: 2,
}


def required_note_count(chord: Chord, kind: VoicingKind) -> int:
    """Number of strings a voicing of this kind occupies."""
    if kind.is_inversion:
        return 3
    if kind.is_drop:
        return 4
    return chord.cardinality


def is_applicable(chord: Chord, kind: VoicingKind) -> bool:
    """Whether the voicing kind fits the chord's cardinality."""
    return voicing_order(chord, kind) is not None


def voicing_order(chord: Chord, kind: VoicingKind) -> tuple[PitchClass, ...] | None:
    """
    Pitch classes of a voicing, lowest to highest.

    Inversion n of a triad starts the formula order at index n. Drop voicings
    of a seventh chord (root, third, fifth, seventh) are:
        drop 2: fifth, root, third, seventh
        drop 3: third, root, fifth, seventh

    Returns:
        The ordered pitch classes, or None when the kind does not apply to
        the chord (an inversion of a seventh chord, a drop voicing of a triad)
    """
    notes = chord.notes

    if kind == VoicingKind.ROOT_POSITION:
        return notes

    if kind.is_inversion:
        if len(notes) != 3:
            return None
        step = _INVERSION_STEPS[kind]
        return notes[step:] + notes[:step]

    if kind.is_drop:
        if len(notes) != 4:
            return None
        root, third, fifth, seventh = notes
        if kind == VoicingKind.DROP_2:
            return (fifth, root, third, seventh)
        return (third, root, fifth, seventh)

    return None
