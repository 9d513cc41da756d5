"""
Pitch primitives - PitchClass and Tuning.

PitchClass represents the 12 chromatic pitches (octave-independent).
Tuning maps a visual string index (0 = highest-pitched string) to its
open-string pitch, which is all the fretboard needs to name a fretted note.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from chuk_mcp_fretboard.errors import InvalidPitchClass, InvalidStringIndex

# Canonical spellings (sharps only, one name per class)
_SHARP_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

STRING_COUNT = 6


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - E2 and E4 are both PitchClass.E.
    Spelled with sharps only; the enum uses Cs, Ds, etc. for C#, D#.
    """

    C = 0
    Cs = 1  # C#
    D = 2
    Ds = 3  # D#
    E = 4
    F = 5
    Fs = 6  # F#
    G = 7
    Gs = 8  # G#
    A = 9
    As = 10  # A#
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def spell(self) -> str:
        """Get the canonical (sharp) name."""
        return _SHARP_NAMES[self.value]

    @property
    def is_natural(self) -> bool:
        """True for the seven unaltered note names."""
        return "#" not in self.spell()

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % 12)

    @classmethod
    def parse(cls, name: str | PitchClass) -> PitchClass:
        """
        Parse a pitch class from a canonical name like 'C', 'C#', 'a#'.

        Only the twelve sharp spellings parse: enum member names ('Cs')
        and flat spellings do not.

        Raises:
            InvalidPitchClass: If the name is not a canonical pitch class
        """
        if isinstance(name, PitchClass):
            return name
        if not isinstance(name, str):
            raise InvalidPitchClass(name)

        cleaned = name.strip()
        upper = cleaned.upper()
        if upper in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(upper))

        raise InvalidPitchClass(name)

    @classmethod
    def names(cls) -> list[str]:
        """All canonical names in pitch order."""
        return list(_SHARP_NAMES)

    def __str__(self) -> str:
        return self.spell()


def pitch_class_at(open_string: str | PitchClass, fret: int) -> PitchClass:
    """
    Pitch class sounded at a fret of a string.

    Args:
        open_string: Pitch class (or canonical name) of the open string
        fret: Fret number (0 = open)

    Returns:
        The fretted pitch class

    Raises:
        InvalidPitchClass: If open_string is not a canonical name
    """
    return PitchClass.parse(open_string).transpose(fret)


@dataclass(frozen=True)
class Tuning:
    """
    Open-string pitches of a six-string guitar, in visual order.

    Index 0 is the highest-pitched string (high E in standard tuning),
    index 5 the lowest. Pitches are MIDI numbers, so they double as the
    absolute-pitch base for comparing notes across strings.
    """

    name: str
    open_midi: tuple[int, ...]

    STANDARD: ClassVar[Tuning]
    DROP_D: ClassVar[Tuning]

    def __post_init__(self) -> None:
        if len(self.open_midi) != STRING_COUNT:
            raise ValueError(
                f"Tuning must have {STRING_COUNT} strings, got {len(self.open_midi)}"
            )

    @property
    def string_count(self) -> int:
        return len(self.open_midi)

    def check_string(self, string_index: int) -> None:
        """Raise InvalidStringIndex unless string_index is on this tuning."""
        if not 0 <= string_index < self.string_count:
            raise InvalidStringIndex(string_index, self.string_count)

    def open_string(self, string_index: int) -> PitchClass:
        """Pitch class of an open string."""
        self.check_string(string_index)
        return PitchClass.from_midi(self.open_midi[string_index])

    def pitch_class_at(self, string_index: int, fret: int) -> PitchClass:
        """Pitch class at a string/fret position."""
        return pitch_class_at(self.open_string(string_index), fret)

    def absolute_pitch(self, string_index: int, fret: int) -> int:
        """MIDI-like pitch at a string/fret position."""
        self.check_string(string_index)
        return self.open_midi[string_index] + fret

    def open_pitch_classes(self) -> list[PitchClass]:
        """Open-string pitch classes, highest string first."""
        return [PitchClass.from_midi(midi) for midi in self.open_midi]

    def __str__(self) -> str:
        return self.name


# E4 B3 G3 D3 A2 E2
Tuning.STANDARD = Tuning("standard", (64, 59, 55, 50, 45, 40))
Tuning.DROP_D = Tuning("drop D", (64, 59, 55, 50, 45, 38))

STANDARD_TUNING = Tuning.STANDARD

TUNINGS: dict[str, Tuning] = {
    "standard": Tuning.STANDARD,
    "drop_d": Tuning.DROP_D,
}


def absolute_pitch(string_index: int, fret: int, tuning: Tuning = STANDARD_TUNING) -> int:
    """
    Monotonic pitch number of a fretted note.

    Only meaningful for comparing which of two positions sounds higher.

    Raises:
        InvalidStringIndex: If string_index is outside the tuning
    """
    return tuning.absolute_pitch(string_index, fret)


def fretboard_notes(
    tuning: Tuning = STANDARD_TUNING, fret_count: int = 12
) -> list[list[PitchClass]]:
    """
    Pitch class of every position, frets 0..fret_count on each string.

    Rows follow the visual string order (highest string first).
    """
    return [
        [open_pc.transpose(fret) for fret in range(fret_count + 1)]
        for open_pc in tuning.open_pitch_classes()
    ]
