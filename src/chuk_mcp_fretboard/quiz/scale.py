"""
Scale visualizer - every position of a scale, roots marked.
"""

from __future__ import annotations

from chuk_mcp_fretboard.constants import DEFAULT_MAX_FRET, HighlightColor
from chuk_mcp_fretboard.core.pitch import STANDARD_TUNING, PitchClass, Tuning
from chuk_mcp_fretboard.core.scale import ScaleFormula, scale_notes
from chuk_mcp_fretboard.fretboard.positions import positions_of
from chuk_mcp_fretboard.models.fretboard import HighlightedNote, highlight


def scale_highlights(
    root: str | PitchClass,
    formula: str | ScaleFormula,
    max_fret: int = DEFAULT_MAX_FRET,
    tuning: Tuning = STANDARD_TUNING,
) -> list[HighlightedNote]:
    """
    Highlight all positions in a scale up to max_fret.

    Raises:
        InvalidPitchClass: If the root is not a canonical pitch class
        UnknownCatalogKey: If the formula key is not in the catalog
    """
    root_pc = PitchClass.parse(root)
    members = scale_notes(root_pc, formula)
    return [
        highlight(
            position,
            HighlightColor.ROOT if position.pitch_class(tuning) == root_pc else HighlightColor.TONE,
            tuning=tuning,
        )
        for position in positions_of(members, max_fret=max_fret, tuning=tuning)
    ]
