"""
Core music primitives.

These are the pitch-class invariants everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Tuning: Open-string pitches by visual string index
- Interval: Named distance in semitones
- ChordQuality / Chord: Interval formulas and their instances
- VoicingKind: Low-to-high orderings of chord tones
- ScaleFormula: Interval formulas for scale membership
"""

from chuk_mcp_fretboard.core.chord import (
    CHORD_QUALITIES,
    Chord,
    ChordQuality,
    build_chord,
    get_chord_quality,
)
from chuk_mcp_fretboard.core.interval import (
    INTERVAL_LIST,
    INTERVALS,
    Interval,
    get_interval,
    interval_between,
    note_from_interval,
)
from chuk_mcp_fretboard.core.pitch import (
    STANDARD_TUNING,
    TUNINGS,
    PitchClass,
    Tuning,
    absolute_pitch,
    fretboard_notes,
    pitch_class_at,
)
from chuk_mcp_fretboard.core.scale import (
    SCALE_FORMULAS,
    ScaleFormula,
    get_scale_formula,
    scale_notes,
)
from chuk_mcp_fretboard.core.voicing import (
    VoicingKind,
    is_applicable,
    required_note_count,
    voicing_order,
)

__all__ = [
    # Pitch
    "PitchClass",
    "Tuning",
    "STANDARD_TUNING",
    "TUNINGS",
    "pitch_class_at",
    "absolute_pitch",
    "fretboard_notes",
    # Interval
    "Interval",
    "INTERVALS",
    "INTERVAL_LIST",
    "get_interval",
    "note_from_interval",
    "interval_between",
    # Chord
    "ChordQuality",
    "Chord",
    "CHORD_QUALITIES",
    "get_chord_quality",
    "build_chord",
    # Voicing
    "VoicingKind",
    "voicing_order",
    "required_note_count",
    "is_applicable",
    # Scale
    "ScaleFormula",
    "SCALE_FORMULAS",
    "get_scale_formula",
    "scale_notes",
]
