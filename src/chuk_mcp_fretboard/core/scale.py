"""
Scale primitives - ScaleFormula and scale membership.

Scales are interval formulas from a root, like chords but with no voicing:
the fretboard only asks whether a pitch class belongs to the scale.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from chuk_mcp_fretboard.core.interval import Interval, get_interval, note_from_interval
from chuk_mcp_fretboard.core.pitch import PitchClass
from chuk_mcp_fretboard.errors import UnknownCatalogKey


@dataclass(frozen=True)
class ScaleFormula:
    """
    A scale defined by its intervals from the root.

    Unlike a step pattern, each interval is cumulative: the major scale is
    P1 M2 M3 P4 P5 M6 M7.

    Immutable and hashable.
    """

    key: str
    name: str
    intervals: tuple[Interval, ...]

    def notes(self, root: str | PitchClass) -> tuple[PitchClass, ...]:
        """Scale pitch classes in formula order, starting at the root."""
        return tuple(note_from_interval(root, interval) for interval in self.intervals)

    def __str__(self) -> str:
        return self.name


def _formula(key: str, name: str, formula: str) -> ScaleFormula:
    return ScaleFormula(key, name, tuple(get_interval(s) for s in formula.split()))


SCALE_FORMULAS: Mapping[str, ScaleFormula] = MappingProxyType(
    {
        scale.key: scale
        for scale in (
            _formula("major", "Major Scale", "P1 M2 M3 P4 P5 M6 M7"),
            _formula("naturalMinor", "Natural Minor Scale", "P1 M2 m3 P4 P5 m6 m7"),
            _formula("harmonicMinor", "Harmonic Minor Scale", "P1 M2 m3 P4 P5 m6 M7"),
            _formula("melodicMinorAsc", "Melodic Minor (Ascending)", "P1 M2 m3 P4 P5 M6 M7"),
            _formula("majorPentatonic", "Major Pentatonic Scale", "P1 M2 M3 P5 M6"),
            _formula("minorPentatonic", "Minor Pentatonic Scale", "P1 m3 P4 P5 m7"),
            _formula("blues", "Blues Scale", "P1 m3 P4 TT P5 m7"),
        )
    }
)


def get_scale_formula(key: str | ScaleFormula) -> ScaleFormula:
    """
    Look up a scale formula by catalog key ('major', 'minorPentatonic').

    Raises:
        UnknownCatalogKey: If the key is not in the catalog
    """
    if isinstance(key, ScaleFormula):
        return key
    try:
        return SCALE_FORMULAS[key]
    except KeyError:
        raise UnknownCatalogKey("scale formula", key) from None


def scale_notes(root: str | PitchClass, formula: str | ScaleFormula) -> frozenset[PitchClass]:
    """
    The set of pitch classes in a scale.

    Raises:
        InvalidPitchClass: If the root is not a canonical pitch class
        UnknownCatalogKey: If the formula key is not in the catalog
    """
    return frozenset(get_scale_formula(formula).notes(root))
