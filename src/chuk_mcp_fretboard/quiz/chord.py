"""
Chord trainer - question generation and answer checking.

Each attempt draws a root, quality, voicing kind and string set from the
settings. A voicing kind that does not fit the chord is replaced by the
first applicable kind in the settings' priority list; a string set of the
wrong size is replaced by the first enabled set that fits, or by 'any'.
Attempts whose voicing cannot be placed are discarded and redrawn.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from chuk_mcp_fretboard.constants import (
    ANY_STRING_SET,
    DEFAULT_MAX_ATTEMPTS,
    STRING_SETS,
    ChordTrainerMode,
    ErrorMessages,
    FeedbackMessages,
    HighlightColor,
)
from chuk_mcp_fretboard.core.chord import CHORD_QUALITIES, Chord, build_chord
from chuk_mcp_fretboard.core.pitch import STANDARD_TUNING, Tuning
from chuk_mcp_fretboard.core.voicing import (
    VoicingKind,
    is_applicable,
    required_note_count,
    voicing_order,
)
from chuk_mcp_fretboard.errors import QuestionGenerationError
from chuk_mcp_fretboard.fretboard.positions import FretPosition
from chuk_mcp_fretboard.fretboard.search import find_chord_tones_anywhere, find_voicing
from chuk_mcp_fretboard.models.fretboard import HighlightedNote, highlight
from chuk_mcp_fretboard.models.quiz import AnswerResult, ChordQuestion, ChordTrainerSettings

logger = logging.getLogger(__name__)

DISTRACTOR_COUNT = 3


def resolve_voicing_kind(
    chord: Chord, requested: VoicingKind, enabled: Sequence[VoicingKind]
) -> VoicingKind | None:
    """
    The requested kind if it fits the chord, else the first enabled kind that does.
    """
    if is_applicable(chord, requested):
        return requested
    for kind in enabled:
        if is_applicable(chord, kind):
            return kind
    return None


def resolve_string_set(note_count: int, requested: str, enabled: Sequence[str]) -> str | None:
    """
    The requested string set if it has one string per note, else the first
    enabled set that does, else 'any' when enabled.
    """
    if requested == ANY_STRING_SET or len(STRING_SETS[requested]) == note_count:
        return requested
    for key in enabled:
        if key != ANY_STRING_SET and len(STRING_SETS[key]) == note_count:
            return key
    if ANY_STRING_SET in enabled:
        return ANY_STRING_SET
    return None


def chord_question_name(chord: Chord, kind: VoicingKind, string_set: str) -> str:
    """
    Answer text for a chord question, e.g. 'C/E on Str 321', 'G7 (Drop 2) on Str 4321'.
    """
    name = chord.display_name(kind)
    if chord.is_seventh and kind.is_drop:
        name += f" ({kind.label})"
    if string_set != ANY_STRING_SET:
        name += f" on Str {string_set}"
    return name


def place_chord(
    chord: Chord,
    kind: VoicingKind,
    string_set: str,
    max_fret: int,
    tuning: Tuning = STANDARD_TUNING,
) -> list[FretPosition] | None:
    """Positions for a chord question, or None if it cannot be placed."""
    if string_set == ANY_STRING_SET:
        return find_chord_tones_anywhere(chord, max_fret, tuning)
    return find_voicing(chord, kind, STRING_SETS[string_set], max_fret, tuning)


def generate_chord_question(
    settings: ChordTrainerSettings,
    rng: random.Random | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    tuning: Tuning = STANDARD_TUNING,
) -> ChordQuestion:
    """
    Generate a chord trainer question.

    Args:
        settings: Trainer options
        rng: Random source (seed it for reproducible questions)
        max_attempts: Draws before giving up
        tuning: Open-string pitches

    Returns:
        A ChordQuestion; answer_options is set in identify mode only

    Raises:
        QuestionGenerationError: If no playable question was found
    """
    rng = rng or random.Random()

    for _ in range(max_attempts):
        root = rng.choice(settings.roots)
        quality_key = rng.choice(settings.qualities)
        requested_kind = rng.choice(settings.voicings)
        requested_set = rng.choice(settings.string_sets)

        chord = build_chord(root, quality_key)

        kind = resolve_voicing_kind(chord, requested_kind, settings.voicings)
        if kind is None:
            continue

        string_set = resolve_string_set(
            required_note_count(chord, kind), requested_set, settings.string_sets
        )
        if string_set is None:
            continue

        positions = place_chord(chord, kind, string_set, settings.max_fret, tuning)
        if not positions:
            logger.debug("No placement for %s %s on %s", chord, kind.value, string_set)
            continue

        target_order = voicing_order(chord, kind) or chord.notes
        correct_name = chord_question_name(chord, kind, string_set)
        target_notes = [
            highlight(
                position,
                HighlightColor.ROOT
                if position.pitch_class(tuning) == chord.root
                else HighlightColor.TONE,
                tuning=tuning,
            )
            for position in positions
        ]

        answer_options = None
        if settings.mode == ChordTrainerMode.IDENTIFY:
            answer_options = _answer_options(chord, kind, string_set, correct_name, rng)

        return ChordQuestion(
            mode=settings.mode,
            root=chord.root.spell(),
            quality=chord.quality.key,
            voicing=kind,
            string_set=string_set,
            correct_name=correct_name,
            target_notes=target_notes,
            target_order=[note.spell() for note in target_order],
            answer_options=answer_options,
        )

    raise QuestionGenerationError(ErrorMessages.NO_CHORD_QUESTION.format(attempts=max_attempts))


def _answer_options(
    chord: Chord,
    kind: VoicingKind,
    string_set: str,
    correct_name: str,
    rng: random.Random,
) -> list[str]:
    """The correct name plus distractors on the same root, shuffled."""
    others = [key for key in CHORD_QUALITIES if key != chord.quality.key]
    distractors: list[str] = []
    for key in rng.sample(others, k=min(DISTRACTOR_COUNT, len(others))):
        name = chord_question_name(build_chord(chord.root, key), kind, string_set)
        if name != correct_name and name not in distractors:
            distractors.append(name)

    options = [correct_name, *distractors]
    rng.shuffle(options)
    return options


def check_chord_identify(question: ChordQuestion, choice: str) -> AnswerResult:
    """Grade an identify-mode answer by chord name."""
    if choice == question.correct_name:
        return AnswerResult(
            correct=True,
            feedback=FeedbackMessages.CORRECT,
            highlights=[n.recolor(HighlightColor.CORRECT) for n in question.target_notes],
        )
    return AnswerResult(
        correct=False,
        feedback=FeedbackMessages.CHORD_INCORRECT.format(name=question.correct_name),
        highlights=[n.recolor(HighlightColor.INCORRECT) for n in question.target_notes],
    )


def check_chord_build(
    question: ChordQuestion,
    selected: Sequence[FretPosition],
    tuning: Tuning = STANDARD_TUNING,
) -> AnswerResult:
    """
    Grade a build-mode answer: the selected positions must be exactly the
    question's target positions. Positions off the question's string set
    are rejected without grading.
    """
    if question.string_set != ANY_STRING_SET:
        allowed = STRING_SETS[question.string_set]
        if any(p.string_index not in allowed for p in selected):
            return AnswerResult(
                correct=False,
                feedback=FeedbackMessages.WRONG_STRINGS.format(string_set=question.string_set),
                counted=False,
            )

    hints = [n.recolor(HighlightColor.HINT) for n in question.target_notes]
    expected = len(question.target_notes)

    if len(selected) != expected:
        return AnswerResult(
            correct=False,
            feedback=FeedbackMessages.WRONG_NOTE_COUNT.format(
                expected=expected, selected=len(selected)
            ),
            highlights=hints,
        )

    target_positions = {n.position for n in question.target_notes}
    selected_positions = set(selected)

    if selected_positions == target_positions:
        return AnswerResult(
            correct=True,
            feedback=FeedbackMessages.CORRECT,
            highlights=[
                highlight(p, HighlightColor.CORRECT, tuning=tuning) for p in sorted(selected_positions)
            ],
        )

    selected_notes = {p.pitch_class(tuning).spell() for p in selected_positions}
    target_notes = {n.label for n in question.target_notes}
    template = (
        FeedbackMessages.WRONG_POSITIONS
        if selected_notes == target_notes
        else FeedbackMessages.WRONG_NOTES
    )

    misplaced: list[HighlightedNote] = [
        highlight(p, HighlightColor.INCORRECT, tuning=tuning)
        for p in sorted(selected_positions - target_positions)
    ]
    return AnswerResult(
        correct=False,
        feedback=template.format(name=question.correct_name),
        highlights=hints + misplaced,
    )
