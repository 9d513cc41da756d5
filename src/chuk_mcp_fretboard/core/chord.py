"""
Chord primitives - ChordQuality, Chord.

Chord qualities are interval formulas measured from the root. A Chord is a
quality applied to a root, with its notes in formula order (root first).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from chuk_mcp_fretboard.core.interval import Interval, get_interval, note_from_interval
from chuk_mcp_fretboard.core.pitch import PitchClass
from chuk_mcp_fretboard.errors import UnknownCatalogKey

if TYPE_CHECKING:
    from chuk_mcp_fretboard.core.voicing import VoicingKind


@dataclass(frozen=True)
class ChordQuality:
    """
    A chord quality defined by its intervals from the root.

    The first interval is always the unison. The number of intervals is the
    chord's cardinality: 3 for triads, 4 for seventh chords.

    Immutable and hashable.
    """

    key: str
    name: str
    abbreviations: tuple[str, ...]
    intervals: tuple[Interval, ...]

    def __post_init__(self) -> None:
        if not self.intervals or self.intervals[0].semitones != 0:
            raise ValueError(f"Chord quality '{self.key}' must start with the unison")

    @property
    def cardinality(self) -> int:
        return len(self.intervals)

    @property
    def abbreviation(self) -> str:
        """Primary display suffix ('' for major, 'm' for minor, '7' ...)."""
        return self.abbreviations[0] if self.abbreviations else ""

    def __str__(self) -> str:
        return self.name


def _quality(key: str, name: str, abbreviations: tuple[str, ...], formula: str) -> ChordQuality:
    intervals = tuple(get_interval(short_name) for short_name in formula.split())
    return ChordQuality(key, name, abbreviations, intervals)


CHORD_QUALITIES: Mapping[str, ChordQuality] = MappingProxyType(
    {
        quality.key: quality
        for quality in (
            # Triads
            _quality("major", "Major Triad", ("", "maj", "M"), "P1 M3 P5"),
            _quality("minor", "Minor Triad", ("m", "min", "-"), "P1 m3 P5"),
            _quality("diminished", "Diminished Triad", ("dim", "°"), "P1 m3 TT"),
            _quality("augmented", "Augmented Triad", ("aug", "+"), "P1 M3 m6"),
            # Seventh chords
            _quality("major7", "Major Seventh", ("maj7", "M7", "Δ"), "P1 M3 P5 M7"),
            _quality("minor7", "Minor Seventh", ("m7", "min7", "-7"), "P1 m3 P5 m7"),
            _quality("dominant7", "Dominant Seventh", ("7", "dom7"), "P1 M3 P5 m7"),
            _quality(
                "minor7flat5", "Minor Seventh Flat Five", ("m7b5", "ø", "ø7"), "P1 m3 TT m7"
            ),
            _quality("diminished7", "Diminished Seventh", ("dim7", "°7"), "P1 m3 TT M6"),
            # Suspended
            _quality("sus4", "Suspended Fourth", ("sus4", "sus"), "P1 P4 P5"),
            _quality("sus2", "Suspended Second", ("sus2",), "P1 M2 P5"),
        )
    }
)


def get_chord_quality(key: str | ChordQuality) -> ChordQuality:
    """
    Look up a chord quality by catalog key ('minor', 'dominant7').

    Raises:
        UnknownCatalogKey: If the key is not in the catalog
    """
    if isinstance(key, ChordQuality):
        return key
    try:
        return CHORD_QUALITIES[key]
    except KeyError:
        raise UnknownCatalogKey("chord quality", key) from None


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord: a root, a quality, and its notes in formula order.

    notes[i] is the root transposed by quality.intervals[i].
    """

    root: PitchClass
    quality: ChordQuality
    notes: tuple[PitchClass, ...]

    @property
    def cardinality(self) -> int:
        return len(self.notes)

    @property
    def is_triad(self) -> bool:
        return self.cardinality == 3

    @property
    def is_seventh(self) -> bool:
        return self.cardinality == 4

    def display_name(self, kind: VoicingKind | None = None) -> str:
        """
        Chord symbol, e.g. 'Am', 'G7', 'C'.

        Triad inversions render as slash chords with the bass note
        ('C/E' for the first inversion of C major).
        """
        from chuk_mcp_fretboard.core.voicing import VoicingKind

        base = f"{self.root.spell()}{self.quality.abbreviation}"
        if not self.is_triad:
            return base
        if kind == VoicingKind.FIRST_INVERSION:
            return f"{base}/{self.notes[1].spell()}"
        if kind == VoicingKind.SECOND_INVERSION:
            return f"{base}/{self.notes[2].spell()}"
        return base

    def __str__(self) -> str:
        return self.display_name()


def build_chord(root: str | PitchClass, quality: str | ChordQuality) -> Chord:
    """
    Instantiate a chord from a root and a quality.

    Args:
        root: Root pitch class or canonical name
        quality: ChordQuality or catalog key

    Raises:
        InvalidPitchClass: If the root is not a canonical pitch class
        UnknownCatalogKey: If the quality key is not in the catalog
    """
    root_pc = PitchClass.parse(root)
    chord_quality = get_chord_quality(quality)
    notes = tuple(note_from_interval(root_pc, interval) for interval in chord_quality.intervals)
    return Chord(root_pc, chord_quality, notes)
