"""
Chord-symbol trainer - name the chord quality behind a symbol.

A question shows one of a quality's abbreviations ('m7', 'ø', '°7') on a C
root and offers full quality names to choose from.
"""

from __future__ import annotations

import random

from chuk_mcp_fretboard.constants import FeedbackMessages
from chuk_mcp_fretboard.core.chord import CHORD_QUALITIES, ChordQuality
from chuk_mcp_fretboard.models.quiz import AnswerResult, TheoryQuestion, TheoryTrainerSettings

OPTION_COUNT = 4
DISPLAY_ROOT = "C"


def pick_symbol(quality: ChordQuality, rng: random.Random) -> str:
    """A random non-empty abbreviation, else the first one ('' for major)."""
    written = [abbr for abbr in quality.abbreviations if abbr]
    if written:
        return rng.choice(written)
    return quality.abbreviation


def generate_theory_question(
    settings: TheoryTrainerSettings,
    rng: random.Random | None = None,
) -> TheoryQuestion:
    """
    Generate a chord-symbol question.

    Distractors come from the enabled qualities first and are topped up
    from the whole catalog so there are four options whenever possible.
    """
    rng = rng or random.Random()

    key = rng.choice(settings.qualities)
    quality = CHORD_QUALITIES[key]
    symbol = pick_symbol(quality, rng)

    enabled = [CHORD_QUALITIES[k].name for k in dict.fromkeys(settings.qualities) if k != key]
    options = [quality.name, *rng.sample(enabled, k=min(OPTION_COUNT - 1, len(enabled)))]

    spare = [q.name for q in CHORD_QUALITIES.values() if q.name not in options]
    rng.shuffle(spare)
    options.extend(spare[: OPTION_COUNT - len(options)])
    rng.shuffle(options)

    return TheoryQuestion(
        quality=key,
        symbol=symbol,
        chord_symbol=f"{DISPLAY_ROOT}{symbol}",
        correct_answer=quality.name,
        answer_options=options,
    )


def check_theory_answer(question: TheoryQuestion, choice: str) -> AnswerResult:
    """Grade a chosen quality name."""
    if choice == question.correct_answer:
        return AnswerResult(correct=True, feedback=FeedbackMessages.CORRECT)
    return AnswerResult(
        correct=False,
        feedback=FeedbackMessages.THEORY_INCORRECT.format(
            symbol=question.symbol or "(maj)", name=question.correct_answer
        ),
    )
