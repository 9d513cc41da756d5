"""
Interval primitives - the named-interval catalog and interval arithmetic.

Intervals are the building block: chords and scales are formulas of
intervals measured from a root.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from chuk_mcp_fretboard.core.pitch import PitchClass
from chuk_mcp_fretboard.errors import UnknownCatalogKey


@dataclass(frozen=True)
class Interval:
    """
    A named distance in semitones (0-12).

    Only semitones carries meaning in arithmetic; the names are for display.
    """

    name: str
    short_name: str
    semitones: int

    def __post_init__(self) -> None:
        if not 0 <= self.semitones <= 12:
            raise ValueError(f"Interval must span 0-12 semitones, got {self.semitones}")

    def __str__(self) -> str:
        return self.short_name


INTERVALS: Mapping[str, Interval] = MappingProxyType(
    {
        "P1": Interval("Perfect Unison", "P1", 0),
        "m2": Interval("Minor Second", "m2", 1),
        "M2": Interval("Major Second", "M2", 2),
        "m3": Interval("Minor Third", "m3", 3),
        "M3": Interval("Major Third", "M3", 4),
        "P4": Interval("Perfect Fourth", "P4", 5),
        "TT": Interval("Tritone", "TT", 6),
        "P5": Interval("Perfect Fifth", "P5", 7),
        "m6": Interval("Minor Sixth", "m6", 8),
        "M6": Interval("Major Sixth", "M6", 9),
        "m7": Interval("Minor Seventh", "m7", 10),
        "M7": Interval("Major Seventh", "M7", 11),
        "P8": Interval("Perfect Octave", "P8", 12),
    }
)

INTERVAL_LIST: tuple[Interval, ...] = tuple(INTERVALS.values())


def get_interval(short_name: str) -> Interval:
    """
    Look up an interval by short name ('m3', 'P5', 'TT').

    Raises:
        UnknownCatalogKey: If the short name is not in the catalog
    """
    try:
        return INTERVALS[short_name]
    except KeyError:
        raise UnknownCatalogKey("interval", short_name) from None


def note_from_interval(root: str | PitchClass, interval: Interval) -> PitchClass:
    """
    The pitch class an interval above a root.

    Raises:
        InvalidPitchClass: If root is not a canonical pitch class
    """
    return PitchClass.parse(root).transpose(interval.semitones)


def interval_between(note_a: str | PitchClass, note_b: str | PitchClass) -> Interval | None:
    """
    The ascending interval from note_a up to note_b.

    The semitone distance is always 0-11, so the octave is never returned
    (a unison distance yields P1). Returns None if no catalog entry spans
    the distance.
    """
    semitones = (PitchClass.parse(note_b) - PitchClass.parse(note_a) + 12) % 12
    for interval in INTERVAL_LIST:
        if interval.semitones == semitones:
            return interval
    return None
