"""
Constants and enums for the fretboard system.

No magic strings - use enums and typed maps for constrained values.
"""

from enum import Enum

DEFAULT_MAX_FRET = 12

# Retry limits for quiz question generation
DEFAULT_MAX_ATTEMPTS = 50
NOTE_POSITION_ATTEMPTS = 100

# Key for "no particular string set" in the chord trainer
ANY_STRING_SET = "any"

# Named string sets, keyed by guitar string numbers (6 = low E).
# Values are visual indices (0 = high E).
STRING_SETS: dict[str, tuple[int, ...]] = {
    "543": (2, 3, 4),
    "432": (1, 2, 3),
    "321": (0, 1, 2),
    "654": (3, 4, 5),
    "5432": (1, 2, 3, 4),
    "4321": (0, 1, 2, 3),
}


class TrainerKind(str, Enum):
    """The quiz trainers that presets can configure."""

    CHORD = "chord"
    INTERVAL = "interval"
    NOTE = "note"
    THEORY = "theory"


class ChordTrainerMode(str, Enum):
    IDENTIFY = "identify"  # name the highlighted chord
    BUILD = "build"  # place the named chord on the fretboard


class IntervalTrainerMode(str, Enum):
    FIND = "find"  # click the note an interval above the root
    IDENTIFY = "identify"  # name the interval between two highlighted notes


class NoteTrainerMode(str, Enum):
    IDENTIFY = "identify"  # name the highlighted note
    FIND = "find"  # click a position holding the named note


class IntervalConstraint(str, Enum):
    """Where the interval note must sit relative to the root."""

    ANY = "any"
    SAME_STRING = "same_string"
    NEXT_STRING_UP = "next_string_up"  # higher-pitched neighbour (lower index)
    NEXT_STRING_DOWN = "next_string_down"  # lower-pitched neighbour (higher index)


class HighlightColor(str, Enum):
    """Semantic colors for highlighted fretboard positions."""

    ROOT = "root"
    TONE = "tone"
    INTERVAL = "interval"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    SELECTED = "selected"
    HINT = "hint"


class ErrorMessages:
    """Standardized error messages."""

    PRESET_NOT_FOUND = "Preset '{name}' not found."
    PRESET_WRONG_TRAINER = "Preset '{name}' configures the {trainer} trainer."
    STRING_SET_NOT_FOUND = "Unknown string set: '{key}'. Expected one of: {choices}."
    TUNING_NOT_FOUND = "Unknown tuning: '{name}'. Expected one of: {choices}."
    NO_CHORD_QUESTION = (
        "Failed to generate a playable chord with the current settings "
        "after {attempts} attempts. Please adjust settings."
    )
    NO_INTERVAL_QUESTION = (
        "Could not generate a valid interval question after {attempts} attempts. "
        "Try the 'any' constraint or broader settings."
    )
    NO_NOTE_QUESTION = (
        "Could not generate a question with the current settings. "
        "Try broadening the range or note types."
    )


class FeedbackMessages:
    """Standardized answer feedback."""

    CORRECT = "Correct!"
    CHORD_INCORRECT = "Incorrect. The chord was {name}."
    WRONG_NOTE_COUNT = "Incorrect. Expected {expected} notes, but selected {selected}."
    WRONG_POSITIONS = "Notes are correct, but the positions/voicing are wrong for {name}."
    WRONG_NOTES = "Incorrect notes/positions for {name}."
    INTERVAL_CORRECT = "Correct! That's {name} ({short_name})."
    INTERVAL_INCORRECT = (
        "Incorrect. That was {clicked} ({clicked_interval}). "
        "The correct note was {correct} ({short_name})."
    )
    INTERVAL_NAME_INCORRECT = "Incorrect. The interval was {name} ({short_name})."
    CONSTRAINT_SAME_STRING = "Interval must be on the same string."
    CONSTRAINT_STRING_UP = "Interval must be on the next higher string."
    CONSTRAINT_STRING_DOWN = "Interval must be on the next lower string."
    NOTE_INCORRECT = "Incorrect. The note was {note}."
    NOTE_FOUND_INCORRECT = "Incorrect. That was {clicked}; the target was {note}."
    THEORY_INCORRECT = 'Incorrect. "{symbol}" represents "{name}".'
    WRONG_STRINGS = "Please select notes only on strings: {string_set}"
    OUTSIDE_PRACTICE_AREA = "Clicked outside the current practice area."
