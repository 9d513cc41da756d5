"""
Interval trainer - question generation and answer checking.

A root is placed on an allowed string and fret; the question is the note an
interval above it. In identify mode the interval note is placed too,
respecting the string constraint, and the player names the interval.
"""

from __future__ import annotations

import random

from chuk_mcp_fretboard.constants import (
    DEFAULT_MAX_ATTEMPTS,
    ErrorMessages,
    FeedbackMessages,
    HighlightColor,
    IntervalConstraint,
    IntervalTrainerMode,
)
from chuk_mcp_fretboard.core.interval import (
    Interval,
    get_interval,
    interval_between,
    note_from_interval,
)
from chuk_mcp_fretboard.core.pitch import STANDARD_TUNING, PitchClass, Tuning
from chuk_mcp_fretboard.errors import QuestionGenerationError
from chuk_mcp_fretboard.fretboard.positions import FretPosition, first_position_of
from chuk_mcp_fretboard.models.fretboard import highlight
from chuk_mcp_fretboard.models.quiz import AnswerResult, IntervalQuestion, IntervalTrainerSettings

OPTION_COUNT = 4

_CONSTRAINT_MESSAGES: dict[IntervalConstraint, str] = {
    IntervalConstraint.SAME_STRING: FeedbackMessages.CONSTRAINT_SAME_STRING,
    IntervalConstraint.NEXT_STRING_UP: FeedbackMessages.CONSTRAINT_STRING_UP,
    IntervalConstraint.NEXT_STRING_DOWN: FeedbackMessages.CONSTRAINT_STRING_DOWN,
}


def candidate_strings(
    root: FretPosition,
    constraint: IntervalConstraint,
    allowed: list[int],
    string_count: int,
) -> list[int]:
    """Strings the interval note may sit on, given the root and constraint."""
    if constraint == IntervalConstraint.SAME_STRING:
        return [root.string_index]
    if constraint == IntervalConstraint.NEXT_STRING_UP:
        return [root.string_index - 1] if root.string_index > 0 else []
    if constraint == IntervalConstraint.NEXT_STRING_DOWN:
        return [root.string_index + 1] if root.string_index < string_count - 1 else []
    return list(allowed)


def find_interval_position(
    root: FretPosition,
    target: PitchClass,
    settings: IntervalTrainerSettings,
    tuning: Tuning = STANDARD_TUNING,
) -> FretPosition | None:
    """First position of the target note that satisfies the constraint, never the root itself."""
    strings = candidate_strings(
        root, settings.constraint, settings.root_strings, tuning.string_count
    )
    return first_position_of(
        target, strings, max_fret=settings.search_max_fret, exclude=root, tuning=tuning
    )


def _random_root_position(
    settings: IntervalTrainerSettings, rng: random.Random, tuning: Tuning
) -> FretPosition | None:
    largest = max(get_interval(key).semitones for key in settings.intervals)
    last_string = tuning.string_count - 1

    for _ in range(DEFAULT_MAX_ATTEMPTS):
        string_index = rng.choice(settings.root_strings)
        fret = rng.randint(settings.min_fret, settings.max_fret)
        if settings.constraint == IntervalConstraint.NEXT_STRING_UP and string_index == 0:
            continue
        if settings.constraint == IntervalConstraint.NEXT_STRING_DOWN and string_index == last_string:
            continue
        # Leave room above high roots for wide intervals
        if fret > settings.search_max_fret - 3 and largest > 3:
            continue
        return FretPosition(string_index, fret)
    return None


def generate_interval_question(
    settings: IntervalTrainerSettings,
    rng: random.Random | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    tuning: Tuning = STANDARD_TUNING,
) -> IntervalQuestion:
    """
    Generate an interval trainer question.

    Raises:
        QuestionGenerationError: If no question satisfies the constraints
    """
    rng = rng or random.Random()

    for _ in range(max_attempts):
        root_position = _random_root_position(settings, rng, tuning)
        if root_position is None:
            break

        root_note = root_position.pitch_class(tuning)
        interval = get_interval(rng.choice(settings.intervals))
        correct_note = note_from_interval(root_note, interval)
        root_marker = highlight(root_position, HighlightColor.ROOT, tuning=tuning)

        if settings.mode == IntervalTrainerMode.FIND:
            return IntervalQuestion(
                mode=settings.mode,
                root=root_marker,
                interval=interval.short_name,
                correct_note=correct_note.spell(),
                constraint=settings.constraint,
            )

        interval_position = find_interval_position(root_position, correct_note, settings, tuning)
        if interval_position is None:
            continue

        return IntervalQuestion(
            mode=settings.mode,
            root=root_marker,
            interval=interval.short_name,
            correct_note=correct_note.spell(),
            constraint=settings.constraint,
            interval_note=highlight(interval_position, HighlightColor.INTERVAL, tuning=tuning),
            answer_options=_answer_options(interval, settings.intervals, rng),
        )

    raise QuestionGenerationError(
        ErrorMessages.NO_INTERVAL_QUESTION.format(attempts=max_attempts)
    )


def _answer_options(correct: Interval, enabled: list[str], rng: random.Random) -> list[str]:
    others = sorted({key for key in enabled if key != correct.short_name})
    options = [correct.short_name, *rng.sample(others, k=min(OPTION_COUNT - 1, len(others)))]
    rng.shuffle(options)
    return options


def constraint_violation(
    question: IntervalQuestion, clicked: FretPosition
) -> str | None:
    """Feedback if the clicked string breaks the question's constraint."""
    root_string = question.root.string
    broken = {
        IntervalConstraint.SAME_STRING: clicked.string_index != root_string,
        IntervalConstraint.NEXT_STRING_UP: clicked.string_index != root_string - 1,
        IntervalConstraint.NEXT_STRING_DOWN: clicked.string_index != root_string + 1,
    }.get(question.constraint, False)
    return _CONSTRAINT_MESSAGES[question.constraint] if broken else None


def check_interval_find(
    question: IntervalQuestion,
    clicked: FretPosition,
    settings: IntervalTrainerSettings,
    tuning: Tuning = STANDARD_TUNING,
) -> AnswerResult:
    """
    Grade a find-mode click.

    Clicks that break the string constraint are rejected without grading
    (counted is False).
    """
    violation = constraint_violation(question, clicked)
    if violation is not None:
        return AnswerResult(correct=False, feedback=violation, counted=False)

    interval = get_interval(question.interval)
    clicked_note = clicked.pitch_class(tuning)
    root_marker = question.root.recolor(HighlightColor.HINT)

    if clicked_note.spell() == question.correct_note:
        return AnswerResult(
            correct=True,
            feedback=FeedbackMessages.INTERVAL_CORRECT.format(
                name=interval.name, short_name=interval.short_name
            ),
            highlights=[root_marker, highlight(clicked, HighlightColor.CORRECT, tuning=tuning)],
        )

    clicked_interval = interval_between(question.root.label, clicked_note)
    highlights = [root_marker, highlight(clicked, HighlightColor.INCORRECT, tuning=tuning)]
    correct_position = find_interval_position(
        question.root.position, PitchClass.parse(question.correct_note), settings, tuning
    )
    if correct_position is not None and correct_position != clicked:
        highlights.append(highlight(correct_position, HighlightColor.HINT, tuning=tuning))

    return AnswerResult(
        correct=False,
        feedback=FeedbackMessages.INTERVAL_INCORRECT.format(
            clicked=clicked_note.spell(),
            clicked_interval=(
                f"{clicked_interval.name} ({clicked_interval.short_name})"
                if clicked_interval
                else "an unknown interval"
            ),
            correct=question.correct_note,
            short_name=interval.short_name,
        ),
        highlights=highlights,
    )


def check_interval_identify(question: IntervalQuestion, choice: str) -> AnswerResult:
    """Grade an identify-mode answer by interval short name."""
    interval = get_interval(question.interval)
    markers = [question.root]
    if question.interval_note is not None:
        markers.append(question.interval_note)

    if choice == interval.short_name:
        return AnswerResult(
            correct=True,
            feedback=FeedbackMessages.INTERVAL_CORRECT.format(
                name=interval.name, short_name=interval.short_name
            ),
            highlights=[m.recolor(HighlightColor.CORRECT) for m in markers],
        )
    return AnswerResult(
        correct=False,
        feedback=FeedbackMessages.INTERVAL_NAME_INCORRECT.format(
            name=interval.name, short_name=interval.short_name
        ),
        highlights=[m.recolor(HighlightColor.INCORRECT) for m in markers],
    )
