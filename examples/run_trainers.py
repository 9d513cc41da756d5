#!/usr/bin/env python3
"""
Example: Generating and grading trainer questions.

Loads the bundled presets and answers one question from each trainer.

Usage:
    python examples/run_trainers.py
"""

import random

from chuk_mcp_fretboard.fretboard import FretPosition
from chuk_mcp_fretboard.presets import PresetLoader
from chuk_mcp_fretboard.quiz import (
    check_chord_build,
    check_interval_identify,
    check_note_identify,
    check_theory_answer,
    generate_chord_question,
    generate_interval_question,
    generate_note_question,
    generate_theory_question,
)


def main() -> None:
    """Demonstrate the trainers."""
    print("CHUK Fretboard Trainer Demo")
    print("=" * 40)
    print()

    loader = PresetLoader()
    rng = random.Random(2024)

    print("Available presets:")
    for meta in loader.list_presets():
        print(f"  {meta.name} [{meta.trainer.value}]: {meta.description}")
    print()

    chord_preset = loader.get_preset("drop-voicings")
    question = generate_chord_question(chord_preset.settings, rng)
    print(f"Build: {question.correct_name}")
    selected = [FretPosition(n.string, n.fret) for n in question.target_notes]
    print(f"  {check_chord_build(question, selected).feedback}")
    print()

    interval_preset = loader.get_preset("interval-basics")
    question = generate_interval_question(interval_preset.settings, rng)
    print(f"Identify the interval from {question.root.label} to {question.correct_note}")
    print(f"  Options: {', '.join(question.answer_options)}")
    print(f"  {check_interval_identify(question, question.answer_options[0]).feedback}")
    print()

    note_preset = loader.get_preset("natural-notes")
    question = generate_note_question(note_preset.settings, rng)
    print(f"Name the note at string {question.position.string}, fret {question.position.fret}")
    print(f"  {check_note_identify(question, 'E').feedback}")
    print()

    theory_preset = loader.get_preset("chord-symbols")
    question = generate_theory_question(theory_preset.settings, rng)
    print(f"What does {question.chord_symbol} mean?")
    print(f"  Options: {', '.join(question.answer_options)}")
    print(f"  {check_theory_answer(question, question.answer_options[0]).feedback}")


if __name__ == "__main__":
    main()
