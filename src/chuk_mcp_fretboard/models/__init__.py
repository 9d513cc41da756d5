"""
Pydantic models for the fretboard system.

This module provides:
- HighlightedNote: Renderer-facing (string, fret, label, color)
- Trainer settings: Chord, interval, note and chord-symbol trainer options
- Questions: Generated quiz questions
- AnswerResult: Verdict and feedback highlights
"""

from chuk_mcp_fretboard.models.fretboard import HighlightedNote, highlight
from chuk_mcp_fretboard.models.quiz import (
    AnswerResult,
    ChordQuestion,
    ChordTrainerSettings,
    IntervalQuestion,
    IntervalTrainerSettings,
    NoteQuestion,
    NoteTrainerSettings,
    TheoryQuestion,
    TheoryTrainerSettings,
)

__all__ = [
    "AnswerResult",
    "ChordQuestion",
    "ChordTrainerSettings",
    "HighlightedNote",
    "IntervalQuestion",
    "IntervalTrainerSettings",
    "NoteQuestion",
    "NoteTrainerSettings",
    "TheoryQuestion",
    "TheoryTrainerSettings",
    "highlight",
]
