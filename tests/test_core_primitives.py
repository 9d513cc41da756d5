"""
Tests for core music primitives.

Tests cover:
- PitchClass and Tuning (pitch.py)
- Interval catalog and arithmetic (interval.py)
- ChordQuality, Chord (chord.py)
- VoicingKind and voicing orders (voicing.py)
- ScaleFormula and scale membership (scale.py)
"""

import pytest

from chuk_mcp_fretboard.core import (
    CHORD_QUALITIES,
    INTERVAL_LIST,
    INTERVALS,
    SCALE_FORMULAS,
    STANDARD_TUNING,
    PitchClass,
    Tuning,
    VoicingKind,
    absolute_pitch,
    build_chord,
    fretboard_notes,
    get_chord_quality,
    get_interval,
    get_scale_formula,
    interval_between,
    is_applicable,
    note_from_interval,
    pitch_class_at,
    required_note_count,
    scale_notes,
    voicing_order,
)
from chuk_mcp_fretboard.errors import InvalidPitchClass, InvalidStringIndex, UnknownCatalogKey

TRIAD_QUALITIES = sorted(key for key, q in CHORD_QUALITIES.items() if q.cardinality == 3)

INVERSION_STEPS = [
    (VoicingKind.ROOT, 0),
    (VoicingKind.FIRST_INVERSION, 1),
    (VoicingKind.SECOND_INVERSION, 2),
]


def _rotate(order: tuple[PitchClass, ...], step: int) -> tuple[PitchClass, ...]:
    step %= len(order)
    return order[step:] + order[:step]


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.E == 4
        assert PitchClass.A == 9
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave in both directions."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B
        assert PitchClass.A.transpose(3) == PitchClass.C

    def test_spell_uses_sharps(self) -> None:
        """Canonical names are sharps."""
        assert PitchClass.Cs.spell() == "C#"
        assert PitchClass.As.spell() == "A#"
        assert str(PitchClass.Fs) == "F#"

    def test_parse_canonical_names(self) -> None:
        """Parsing accepts canonical names in any case."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("c#") == PitchClass.Cs
        assert PitchClass.parse(" G# ") == PitchClass.Gs

    def test_parse_passes_members_through(self) -> None:
        """A PitchClass parses to itself."""
        assert PitchClass.parse(PitchClass.D) == PitchClass.D

    @pytest.mark.parametrize("name", ["Db", "H", "", "C##", "E#", "Cs", "as"])
    def test_parse_rejects_unknown(self, name: str) -> None:
        """Flats, member names and unknown names are rejected."""
        with pytest.raises(InvalidPitchClass):
            PitchClass.parse(name)

    def test_invalid_pitch_class_is_value_error(self) -> None:
        """InvalidPitchClass can be caught as ValueError."""
        with pytest.raises(ValueError):
            PitchClass.parse("Bb")

    def test_is_natural(self) -> None:
        """Naturals have no sharp."""
        assert PitchClass.F.is_natural
        assert not PitchClass.Fs.is_natural

    def test_from_midi(self) -> None:
        """MIDI numbers map to pitch classes."""
        assert PitchClass.from_midi(60) == PitchClass.C
        assert PitchClass.from_midi(40) == PitchClass.E

    def test_names(self) -> None:
        """All twelve names in pitch order."""
        names = PitchClass.names()
        assert len(names) == 12
        assert names[0] == "C"
        assert names[-1] == "B"


class TestPitchClassAt:
    """Tests for fretted pitch lookup."""

    def test_open_string(self) -> None:
        """Fret 0 is the open string."""
        assert pitch_class_at("E", 0) == PitchClass.E

    def test_fretted(self) -> None:
        """Each fret adds a semitone."""
        assert pitch_class_at("E", 5) == PitchClass.A
        assert pitch_class_at("A", 3) == PitchClass.C

    def test_twelfth_fret_is_octave(self) -> None:
        """Fret 12 repeats the open string's pitch class."""
        for name in PitchClass.names():
            assert pitch_class_at(name, 12) == PitchClass.parse(name)

    def test_invalid_open_string(self) -> None:
        """Unknown open-string names are rejected."""
        with pytest.raises(InvalidPitchClass):
            pitch_class_at("X", 3)


class TestTuning:
    """Tests for Tuning."""

    def test_standard_open_strings(self) -> None:
        """Standard tuning, highest string first."""
        assert [pc.spell() for pc in STANDARD_TUNING.open_pitch_classes()] == [
            "E",
            "B",
            "G",
            "D",
            "A",
            "E",
        ]

    def test_pitch_class_at(self) -> None:
        """Positions are named by the tuning."""
        assert STANDARD_TUNING.pitch_class_at(5, 5) == PitchClass.A
        assert STANDARD_TUNING.pitch_class_at(1, 1) == PitchClass.C

    def test_absolute_pitch_orders_strings(self) -> None:
        """The high E is two octaves above the low E."""
        assert absolute_pitch(0, 0) - absolute_pitch(5, 0) == 24

    def test_absolute_pitch_across_strings(self) -> None:
        """Fret 5 on a string matches the next string up, except G to B."""
        assert absolute_pitch(5, 5) == absolute_pitch(4, 0)
        assert absolute_pitch(2, 4) == absolute_pitch(1, 0)

    @pytest.mark.parametrize("string_index", [-1, 6, 10])
    def test_invalid_string_index(self, string_index: int) -> None:
        """Strings outside the tuning raise."""
        with pytest.raises(InvalidStringIndex):
            STANDARD_TUNING.pitch_class_at(string_index, 0)
        with pytest.raises(InvalidStringIndex):
            absolute_pitch(string_index, 0)

    def test_drop_d(self) -> None:
        """Drop D lowers only the low E by a whole step."""
        assert Tuning.DROP_D.open_string(5) == PitchClass.D
        assert Tuning.DROP_D.absolute_pitch(5, 2) == STANDARD_TUNING.absolute_pitch(5, 0)
        assert Tuning.DROP_D.open_string(4) == STANDARD_TUNING.open_string(4)

    def test_requires_six_strings(self) -> None:
        """A tuning has one pitch per string."""
        with pytest.raises(ValueError):
            Tuning("short", (64, 59, 55))

    def test_fretboard_notes(self) -> None:
        """The note grid covers every string and fret."""
        grid = fretboard_notes(fret_count=12)
        assert len(grid) == 6
        assert all(len(row) == 13 for row in grid)
        assert grid[5][5] == PitchClass.A
        assert grid[0][0] == PitchClass.E


class TestInterval:
    """Tests for the interval catalog and arithmetic."""

    def test_catalog(self) -> None:
        """Thirteen intervals from unison to octave."""
        assert len(INTERVAL_LIST) == 13
        assert INTERVALS["P1"].semitones == 0
        assert INTERVALS["TT"].semitones == 6
        assert INTERVALS["P8"].semitones == 12

    def test_get_interval(self) -> None:
        """Lookup by short name."""
        assert get_interval("m3").name == "Minor Third"

    def test_get_interval_unknown(self) -> None:
        """Unknown short names raise."""
        with pytest.raises(UnknownCatalogKey):
            get_interval("A4")

    def test_note_from_interval(self) -> None:
        """Notes above a root."""
        assert note_from_interval("A", get_interval("m3")) == PitchClass.C
        assert note_from_interval("C", get_interval("P5")) == PitchClass.G
        assert note_from_interval("C", get_interval("P8")) == PitchClass.C

    @pytest.mark.parametrize("root", list(PitchClass))
    @pytest.mark.parametrize("interval", INTERVAL_LIST, ids=lambda i: i.short_name)
    def test_note_from_interval_index(self, root: PitchClass, interval) -> None:
        """The note lies the interval's semitones above the root, mod 12."""
        note = note_from_interval(root, interval)
        assert note.value == (root.value + interval.semitones) % 12

    def test_interval_between(self) -> None:
        """Ascending distance between two notes."""
        assert interval_between("C", "G").short_name == "P5"
        assert interval_between("G", "C").short_name == "P4"
        assert interval_between("E", "C").short_name == "m6"
        assert interval_between("B", "F").short_name == "TT"

    def test_unison_not_octave(self) -> None:
        """Identical notes are a unison, never an octave."""
        assert interval_between("D", "D").short_name == "P1"

    @pytest.mark.parametrize("root", list(PitchClass))
    @pytest.mark.parametrize("interval", INTERVAL_LIST, ids=lambda i: i.short_name)
    def test_round_trip(self, root: PitchClass, interval) -> None:
        """Every interval except the octave round-trips through its note."""
        found = interval_between(root, note_from_interval(root, interval))
        if interval.short_name == "P8":
            assert found.short_name == "P1"
        else:
            assert found == interval


class TestChord:
    """Tests for chord qualities and chords."""

    def test_qualities_start_with_unison(self) -> None:
        """Every quality's first interval is the root."""
        for quality in CHORD_QUALITIES.values():
            assert quality.intervals[0].semitones == 0

    def test_cardinality(self) -> None:
        """Triads have three notes, seventh chords four."""
        assert get_chord_quality("minor").cardinality == 3
        assert get_chord_quality("dominant7").cardinality == 4

    def test_build_minor(self) -> None:
        """A minor is A C E."""
        chord = build_chord("A", "minor")
        assert chord.notes == (PitchClass.A, PitchClass.C, PitchClass.E)
        assert chord.is_triad

    def test_build_dominant7(self) -> None:
        """G7 is G B D F."""
        chord = build_chord("G", "dominant7")
        assert [n.spell() for n in chord.notes] == ["G", "B", "D", "F"]
        assert chord.is_seventh

    @pytest.mark.parametrize("root", list(PitchClass))
    @pytest.mark.parametrize("quality_key", sorted(CHORD_QUALITIES))
    def test_notes_follow_formula(self, root: PitchClass, quality_key: str) -> None:
        """notes[i] is the root transposed by intervals[i]."""
        quality = CHORD_QUALITIES[quality_key]
        chord = build_chord(root, quality)
        assert chord.cardinality == quality.cardinality
        for note, interval in zip(chord.notes, quality.intervals):
            assert note == root.transpose(interval.semitones)

    def test_unknown_quality(self) -> None:
        """Unknown quality keys raise a KeyError subclass."""
        with pytest.raises(UnknownCatalogKey) as exc_info:
            build_chord("C", "power")
        assert isinstance(exc_info.value, KeyError)
        assert "power" in str(exc_info.value)

    def test_invalid_root(self) -> None:
        """Flat roots are rejected."""
        with pytest.raises(InvalidPitchClass):
            build_chord("Bb", "major")

    def test_display_name(self) -> None:
        """Chord symbols use the primary abbreviation."""
        assert build_chord("A", "minor").display_name() == "Am"
        assert build_chord("G", "dominant7").display_name() == "G7"
        assert build_chord("C", "major").display_name() == "C"
        assert build_chord("B", "minor7flat5").display_name() == "Bm7b5"

    def test_inversion_slash_names(self) -> None:
        """Triad inversions show the bass note."""
        chord = build_chord("C", "major")
        assert chord.display_name(VoicingKind.FIRST_INVERSION) == "C/E"
        assert chord.display_name(VoicingKind.SECOND_INVERSION) == "C/G"
        assert chord.display_name(VoicingKind.ROOT) == "C"


class TestVoicingOrder:
    """Tests for voicing orders."""

    def test_root_position_is_formula_order(self) -> None:
        """Root position keeps formula order for any chord size."""
        triad = build_chord("C", "major")
        seventh = build_chord("C", "major7")
        assert voicing_order(triad, VoicingKind.ROOT_POSITION) == triad.notes
        assert voicing_order(seventh, VoicingKind.ROOT_POSITION) == seventh.notes

    def test_inversions_rotate(self) -> None:
        """Inversion n starts at the nth chord tone."""
        chord = build_chord("C", "major")
        e, g, c = PitchClass.E, PitchClass.G, PitchClass.C
        assert voicing_order(chord, VoicingKind.ROOT) == (c, e, g)
        assert voicing_order(chord, VoicingKind.FIRST_INVERSION) == (e, g, c)
        assert voicing_order(chord, VoicingKind.SECOND_INVERSION) == (g, c, e)

    @pytest.mark.parametrize("root", list(PitchClass))
    @pytest.mark.parametrize("quality_key", TRIAD_QUALITIES)
    def test_inversions_rotate_every_triad(self, root: PitchClass, quality_key: str) -> None:
        """Each inversion is the root order rotated by its step."""
        chord = build_chord(root, quality_key)
        base = voicing_order(chord, VoicingKind.ROOT)
        assert base == chord.notes
        for kind, step in INVERSION_STEPS:
            assert voicing_order(chord, kind) == _rotate(base, step)

    @pytest.mark.parametrize("root", list(PitchClass))
    @pytest.mark.parametrize("quality_key", TRIAD_QUALITIES)
    def test_rotation_closure(self, root: PitchClass, quality_key: str) -> None:
        """Three more rotations give back each inversion; the remaining steps give the root order."""
        chord = build_chord(root, quality_key)
        base = voicing_order(chord, VoicingKind.ROOT)
        for kind, step in INVERSION_STEPS:
            inverted = voicing_order(chord, kind)
            assert _rotate(inverted, 3) == inverted
            assert _rotate(inverted, 3 - step) == base

    def test_drop_2(self) -> None:
        """Drop 2 puts the fifth in the bass."""
        chord = build_chord("C", "major7")
        assert [n.spell() for n in voicing_order(chord, VoicingKind.DROP_2)] == [
            "G",
            "C",
            "E",
            "B",
        ]

    def test_drop_3(self) -> None:
        """Drop 3 puts the third in the bass."""
        chord = build_chord("C", "major7")
        assert [n.spell() for n in voicing_order(chord, VoicingKind.DROP_3)] == [
            "E",
            "C",
            "G",
            "B",
        ]

    def test_orders_are_permutations(self) -> None:
        """Every applicable voicing uses exactly the chord's notes."""
        for quality in CHORD_QUALITIES:
            chord = build_chord("D", quality)
            for kind in VoicingKind:
                order = voicing_order(chord, kind)
                if order is not None:
                    assert sorted(order) == sorted(chord.notes)
                    assert len(order) == required_note_count(chord, kind)

    def test_not_applicable(self) -> None:
        """Inversions need triads; drop voicings need four notes."""
        triad = build_chord("C", "major")
        seventh = build_chord("G", "dominant7")
        assert voicing_order(seventh, VoicingKind.FIRST_INVERSION) is None
        assert voicing_order(triad, VoicingKind.DROP_2) is None
        assert not is_applicable(triad, VoicingKind.DROP_3)
        assert is_applicable(seventh, VoicingKind.DROP_3)

    def test_required_note_count(self) -> None:
        """String counts per voicing kind."""
        seventh = build_chord("G", "dominant7")
        assert required_note_count(seventh, VoicingKind.ROOT_POSITION) == 4
        assert required_note_count(seventh, VoicingKind.ROOT) == 3
        assert required_note_count(seventh, VoicingKind.DROP_2) == 4

    def test_labels(self) -> None:
        """Kinds have display labels."""
        assert VoicingKind.DROP_2.label == "Drop 2"
        assert VoicingKind.FIRST_INVERSION.label == "1st Inversion"


class TestScale:
    """Tests for scale formulas."""

    def test_c_major(self) -> None:
        """C major has the seven naturals."""
        assert scale_notes("C", "major") == frozenset(
            PitchClass.parse(n) for n in "C D E F G A B".split()
        )

    def test_a_minor_pentatonic(self) -> None:
        """A minor pentatonic is A C D E G."""
        formula = get_scale_formula("minorPentatonic")
        assert [n.spell() for n in formula.notes("A")] == ["A", "C", "D", "E", "G"]

    def test_blues_has_tritone(self) -> None:
        """The blues scale adds the flat five."""
        assert PitchClass.Ds in scale_notes("A", "blues")

    def test_catalog_keys(self) -> None:
        """Expected scales are present."""
        assert {"major", "naturalMinor", "harmonicMinor", "blues"} <= set(SCALE_FORMULAS)

    def test_unknown_scale(self) -> None:
        """Unknown scale keys raise."""
        with pytest.raises(UnknownCatalogKey):
            scale_notes("C", "lydianDominant")
