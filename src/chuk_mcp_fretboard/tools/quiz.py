"""
Quiz tools - MCP tools for generating and grading trainer questions.

Questions are returned whole (including the answer) so the caller decides
what to reveal. Grading tools take the question back as-is.
"""

from __future__ import annotations

import json
import logging
import random
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel

from chuk_mcp_fretboard.constants import ErrorMessages
from chuk_mcp_fretboard.fretboard import FretPosition
from chuk_mcp_fretboard.models import (
    ChordQuestion,
    ChordTrainerSettings,
    IntervalQuestion,
    IntervalTrainerSettings,
    NoteQuestion,
    NoteTrainerSettings,
    TheoryQuestion,
    TheoryTrainerSettings,
)
from chuk_mcp_fretboard.models.preset import TRAINER_KINDS
from chuk_mcp_fretboard.presets import PresetLoader
from chuk_mcp_fretboard.quiz import (
    check_chord_build,
    check_chord_identify,
    check_interval_find,
    check_interval_identify,
    check_note_find,
    check_note_identify,
    check_theory_answer,
    generate_chord_question,
    generate_interval_question,
    generate_note_question,
    generate_theory_question,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)

SettingsT = TypeVar("SettingsT", bound=BaseModel)


def resolve_settings(
    loader: PresetLoader,
    settings_model: type[SettingsT],
    preset: str | None = None,
    overrides: dict[str, Any] | None = None,
) -> SettingsT:
    """
    Trainer settings from a preset (or the defaults), with overrides applied.

    Raises:
        ValueError: If the preset is missing or configures another trainer
    """
    trainer = TRAINER_KINDS[settings_model]
    if preset is None:
        data: dict[str, Any] = {}
    else:
        found = loader.get_preset(preset)
        if found is None:
            raise ValueError(ErrorMessages.PRESET_NOT_FOUND.format(name=preset))
        if found.trainer != trainer:
            raise ValueError(
                ErrorMessages.PRESET_WRONG_TRAINER.format(name=preset, trainer=found.trainer.value)
            )
        data = found.settings.model_dump()

    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return settings_model.model_validate(data)


def _position(data: dict[str, int]) -> FretPosition:
    return FretPosition(int(data["string"]), int(data["fret"]))


def register_quiz_tools(mcp: ChukMCPServer, loader: PresetLoader) -> dict[str, Any]:
    """
    Register quiz tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The preset loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_presets() -> str:
        """
        List available trainer presets.

        Returns:
            JSON string with preset names, descriptions and trainers

        Example:
            fretboard_list_presets()
        """
        try:
            presets = loader.list_presets()
            return json.dumps(
                {
                    "status": "success",
                    "presets": [p.model_dump(mode="json") for p in presets],
                    "count": len(presets),
                }
            )
        except Exception as e:
            logger.exception("Failed to list presets")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_list_presets"] = fretboard_list_presets

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_chord_question(
        preset: str | None = None,
        mode: str | None = None,
        seed: int | None = None,
    ) -> str:
        """
        Generate a chord trainer question.

        Args:
            preset: Chord trainer preset name (default settings if omitted)
            mode: "identify" or "build" (overrides the preset)
            seed: Random seed for a reproducible question

        Returns:
            JSON string with the question, including its answer

        Example:
            fretboard_chord_question(preset="open-triads", seed=7)
        """
        try:
            settings = resolve_settings(loader, ChordTrainerSettings, preset, {"mode": mode})
            question = generate_chord_question(settings, random.Random(seed))
            return json.dumps({"status": "success", "question": question.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to generate chord question")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_chord_question"] = fretboard_chord_question

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_check_chord_answer(
        question: dict[str, Any],
        choice: str | None = None,
        selected: list[dict[str, int]] | None = None,
    ) -> str:
        """
        Grade a chord trainer answer.

        Args:
            question: The question as returned by fretboard_chord_question
            choice: Chosen chord name (identify mode)
            selected: Selected positions as {"string", "fret"} (build mode)

        Returns:
            JSON string with correct, feedback and highlights

        Example:
            fretboard_check_chord_answer(question=q, choice="Am on Str 654")
        """
        try:
            parsed = ChordQuestion.model_validate(question)
            if selected is not None:
                result = check_chord_build(parsed, [_position(p) for p in selected])
            else:
                result = check_chord_identify(parsed, choice or "")
            return json.dumps({"status": "success", "result": result.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to check chord answer")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_check_chord_answer"] = fretboard_check_chord_answer

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_interval_question(
        preset: str | None = None,
        mode: str | None = None,
        constraint: str | None = None,
        seed: int | None = None,
    ) -> str:
        """
        Generate an interval trainer question.

        Args:
            preset: Interval trainer preset name (default settings if omitted)
            mode: "find" or "identify" (overrides the preset)
            constraint: any, same_string, next_string_up or next_string_down
            seed: Random seed for a reproducible question

        Returns:
            JSON string with the question, including its answer

        Example:
            fretboard_interval_question(mode="identify", constraint="same_string")
        """
        try:
            settings = resolve_settings(
                loader,
                IntervalTrainerSettings,
                preset,
                {"mode": mode, "constraint": constraint},
            )
            question = generate_interval_question(settings, random.Random(seed))
            return json.dumps({"status": "success", "question": question.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to generate interval question")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_interval_question"] = fretboard_interval_question

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_check_interval_answer(
        question: dict[str, Any],
        choice: str | None = None,
        clicked: dict[str, int] | None = None,
        preset: str | None = None,
    ) -> str:
        """
        Grade an interval trainer answer.

        Args:
            question: The question as returned by fretboard_interval_question
            choice: Chosen interval short name (identify mode)
            clicked: Clicked position as {"string", "fret"} (find mode)
            preset: Preset the question was generated from

        Returns:
            JSON string with correct, feedback and highlights

        Example:
            fretboard_check_interval_answer(question=q, clicked={"string": 2, "fret": 4})
        """
        try:
            parsed = IntervalQuestion.model_validate(question)
            if clicked is not None:
                settings = resolve_settings(
                    loader,
                    IntervalTrainerSettings,
                    preset,
                    {"constraint": parsed.constraint.value},
                )
                result = check_interval_find(parsed, _position(clicked), settings)
            else:
                result = check_interval_identify(parsed, choice or "")
            return json.dumps({"status": "success", "result": result.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to check interval answer")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_check_interval_answer"] = fretboard_check_interval_answer

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_note_question(
        preset: str | None = None,
        mode: str | None = None,
        seed: int | None = None,
    ) -> str:
        """
        Generate a note trainer question.

        Args:
            preset: Note trainer preset name (default settings if omitted)
            mode: "identify" or "find" (overrides the preset)
            seed: Random seed for a reproducible question

        Returns:
            JSON string with the question, including its answer

        Example:
            fretboard_note_question(preset="natural-notes")
        """
        try:
            settings = resolve_settings(loader, NoteTrainerSettings, preset, {"mode": mode})
            question = generate_note_question(settings, random.Random(seed))
            return json.dumps({"status": "success", "question": question.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to generate note question")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_note_question"] = fretboard_note_question

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_check_note_answer(
        question: dict[str, Any],
        choice: str | None = None,
        clicked: dict[str, int] | None = None,
        preset: str | None = None,
    ) -> str:
        """
        Grade a note trainer answer.

        Args:
            question: The question as returned by fretboard_note_question
            choice: Chosen note name (identify mode)
            clicked: Clicked position as {"string", "fret"} (find mode)
            preset: Preset the question was generated from

        Returns:
            JSON string with correct, feedback and highlights

        Example:
            fretboard_check_note_answer(question=q, choice="A")
        """
        try:
            parsed = NoteQuestion.model_validate(question)
            if clicked is not None:
                settings = resolve_settings(loader, NoteTrainerSettings, preset)
                result = check_note_find(parsed, _position(clicked), settings)
            else:
                result = check_note_identify(parsed, choice or "")
            return json.dumps({"status": "success", "result": result.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to check note answer")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_check_note_answer"] = fretboard_check_note_answer

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_theory_question(
        preset: str | None = None,
        seed: int | None = None,
    ) -> str:
        """
        Generate a chord-symbol question.

        Shows a chord symbol such as "Cm7", "Cø" or "C°7" and offers full
        chord quality names to choose from.

        Args:
            preset: Chord-symbol trainer preset name (default settings if omitted)
            seed: Random seed for a reproducible question

        Returns:
            JSON string with the question, including its answer

        Example:
            fretboard_theory_question(preset="chord-symbols")
        """
        try:
            settings = resolve_settings(loader, TheoryTrainerSettings, preset)
            question = generate_theory_question(settings, random.Random(seed))
            return json.dumps({"status": "success", "question": question.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to generate theory question")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_theory_question"] = fretboard_theory_question

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_check_theory_answer(question: dict[str, Any], choice: str) -> str:
        """
        Grade a chord-symbol answer.

        Args:
            question: The question as returned by fretboard_theory_question
            choice: Chosen chord quality name

        Returns:
            JSON string with correct and feedback

        Example:
            fretboard_check_theory_answer(question=q, choice="Minor Seventh")
        """
        try:
            parsed = TheoryQuestion.model_validate(question)
            result = check_theory_answer(parsed, choice)
            return json.dumps({"status": "success", "result": result.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to check theory answer")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_check_theory_answer"] = fretboard_check_theory_answer

    return tools
