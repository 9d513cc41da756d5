#!/usr/bin/env python3
"""
Example: Finding chord voicings on the fretboard.

Places a few chords on named string sets and shows how the search reports
voicings that do not fit or cannot be placed under the fret ceiling.

Usage:
    python examples/find_voicings.py
"""

from chuk_mcp_fretboard.constants import STRING_SETS
from chuk_mcp_fretboard.core import VoicingKind, build_chord
from chuk_mcp_fretboard.fretboard import VoicingQuery, search_voicing


def describe(root: str, quality: str, kind: VoicingKind, string_set: str, max_fret: int = 12):
    chord = build_chord(root, quality)
    result = search_voicing(VoicingQuery(chord, kind, STRING_SETS[string_set], max_fret))

    print(f"{chord.display_name(kind)} ({kind.label}) on strings {string_set}:")
    if not result.found:
        print(f"  {result.outcome.value}")
        return

    # Highest-pitched string first, like a tab
    for position in result.positions:
        note = position.pitch_class().spell()
        print(f"  string {position.string_index}: fret {position.fret:>2} ({note})")


def main() -> None:
    """Demonstrate the voicing search."""
    print("CHUK Fretboard Voicing Demo")
    print("=" * 40)
    print()

    describe("A", "minor", VoicingKind.ROOT, "654")
    describe("C", "major", VoicingKind.FIRST_INVERSION, "321")
    describe("G", "dominant7", VoicingKind.DROP_2, "5432")
    describe("C", "major7", VoicingKind.DROP_3, "4321")
    print()

    print("Outcomes that are not errors:")
    describe("G", "dominant7", VoicingKind.FIRST_INVERSION, "321")
    describe("A", "minor", VoicingKind.ROOT, "654", max_fret=4)


if __name__ == "__main__":
    main()
