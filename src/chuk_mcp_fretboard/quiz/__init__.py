"""
Quiz layer - stateless question generators and answer checkers.

Generators take validated settings and a random source and return a
question value; checkers take the question and the player's answer.
"""

from chuk_mcp_fretboard.quiz.chord import (
    check_chord_build,
    check_chord_identify,
    chord_question_name,
    generate_chord_question,
    resolve_string_set,
    resolve_voicing_kind,
)
from chuk_mcp_fretboard.quiz.interval import (
    check_interval_find,
    check_interval_identify,
    generate_interval_question,
)
from chuk_mcp_fretboard.quiz.note import (
    check_note_find,
    check_note_identify,
    generate_note_question,
)
from chuk_mcp_fretboard.quiz.scale import scale_highlights
from chuk_mcp_fretboard.quiz.theory import check_theory_answer, generate_theory_question

__all__ = [
    "check_chord_build",
    "check_chord_identify",
    "check_interval_find",
    "check_interval_identify",
    "check_note_find",
    "check_note_identify",
    "check_theory_answer",
    "chord_question_name",
    "generate_chord_question",
    "generate_interval_question",
    "generate_note_question",
    "generate_theory_question",
    "resolve_string_set",
    "resolve_voicing_kind",
    "scale_highlights",
]
