"""
Fretboard layer - positions and the voicing search.

This module provides:
- FretPosition: A string/fret coordinate
- positions_of / first_position_of: Position enumeration
- find_voicing / search_voicing: Chord voicing placement on a string set
"""

from chuk_mcp_fretboard.fretboard.positions import (
    FretPosition,
    first_position_of,
    positions_of,
)
from chuk_mcp_fretboard.fretboard.search import (
    SearchOutcome,
    VoicingQuery,
    VoicingSearchResult,
    find_chord_tones_anywhere,
    find_voicing,
    is_strictly_ascending,
    search_voicing,
)

__all__ = [
    "FretPosition",
    "SearchOutcome",
    "VoicingQuery",
    "VoicingSearchResult",
    "find_chord_tones_anywhere",
    "find_voicing",
    "first_position_of",
    "is_strictly_ascending",
    "positions_of",
    "search_voicing",
]
