"""
Note trainer - name the note at a position, or find a position for a note.
"""

from __future__ import annotations

import random

from chuk_mcp_fretboard.constants import (
    NOTE_POSITION_ATTEMPTS,
    ErrorMessages,
    FeedbackMessages,
    HighlightColor,
    NoteTrainerMode,
)
from chuk_mcp_fretboard.core.pitch import STANDARD_TUNING, Tuning
from chuk_mcp_fretboard.errors import QuestionGenerationError
from chuk_mcp_fretboard.fretboard.positions import FretPosition
from chuk_mcp_fretboard.models.fretboard import highlight
from chuk_mcp_fretboard.models.quiz import AnswerResult, NoteQuestion, NoteTrainerSettings


def random_note_position(
    settings: NoteTrainerSettings,
    rng: random.Random,
    tuning: Tuning = STANDARD_TUNING,
) -> FretPosition | None:
    """A random position inside the practice area, or None after too many misses."""
    for _ in range(NOTE_POSITION_ATTEMPTS):
        position = FretPosition(
            rng.choice(settings.strings), rng.randint(settings.min_fret, settings.max_fret)
        )
        if settings.naturals_only and not position.pitch_class(tuning).is_natural:
            continue
        return position
    return None


def generate_note_question(
    settings: NoteTrainerSettings,
    rng: random.Random | None = None,
    tuning: Tuning = STANDARD_TUNING,
) -> NoteQuestion:
    """
    Generate a note trainer question.

    Raises:
        QuestionGenerationError: If no position in the practice area qualifies
    """
    rng = rng or random.Random()
    position = random_note_position(settings, rng, tuning)
    if position is None:
        raise QuestionGenerationError(ErrorMessages.NO_NOTE_QUESTION)

    note = position.pitch_class(tuning).spell()
    if settings.mode == NoteTrainerMode.IDENTIFY:
        return NoteQuestion(
            mode=settings.mode,
            correct_note=note,
            position=highlight(position, HighlightColor.SELECTED, label="", tuning=tuning),
        )
    return NoteQuestion(mode=settings.mode, correct_note=note)


def in_practice_area(position: FretPosition, settings: NoteTrainerSettings) -> bool:
    return (
        position.string_index in settings.strings
        and settings.min_fret <= position.fret <= settings.max_fret
    )


def check_note_identify(question: NoteQuestion, choice: str) -> AnswerResult:
    """Grade an identify-mode answer by note name."""
    correct = choice.strip().upper() == question.correct_note
    markers = []
    if question.position is not None:
        color = HighlightColor.CORRECT if correct else HighlightColor.INCORRECT
        markers.append(
            question.position.model_copy(update={"color": color, "label": question.correct_note})
        )
    return AnswerResult(
        correct=correct,
        feedback=(
            FeedbackMessages.CORRECT
            if correct
            else FeedbackMessages.NOTE_INCORRECT.format(note=question.correct_note)
        ),
        highlights=markers,
    )


def check_note_find(
    question: NoteQuestion,
    clicked: FretPosition,
    settings: NoteTrainerSettings,
    tuning: Tuning = STANDARD_TUNING,
) -> AnswerResult:
    """
    Grade a find-mode click. Clicks outside the practice area are rejected
    without grading.
    """
    if not in_practice_area(clicked, settings):
        return AnswerResult(
            correct=False, feedback=FeedbackMessages.OUTSIDE_PRACTICE_AREA, counted=False
        )

    clicked_note = clicked.pitch_class(tuning).spell()
    if clicked_note == question.correct_note:
        return AnswerResult(
            correct=True,
            feedback=FeedbackMessages.CORRECT,
            highlights=[highlight(clicked, HighlightColor.CORRECT, tuning=tuning)],
        )
    return AnswerResult(
        correct=False,
        feedback=FeedbackMessages.NOTE_FOUND_INCORRECT.format(
            clicked=clicked_note, note=question.correct_note
        ),
        highlights=[highlight(clicked, HighlightColor.INCORRECT, tuning=tuning)],
    )
