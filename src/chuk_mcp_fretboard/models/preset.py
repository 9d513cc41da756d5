"""
Preset models - named, shareable trainer settings.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_fretboard.constants import TrainerKind
from chuk_mcp_fretboard.models.quiz import (
    ChordTrainerSettings,
    IntervalTrainerSettings,
    NoteTrainerSettings,
    TheoryTrainerSettings,
)

TrainerSettings = (
    ChordTrainerSettings | IntervalTrainerSettings | NoteTrainerSettings | TheoryTrainerSettings
)

SETTINGS_MODELS: dict[TrainerKind, type[BaseModel]] = {
    TrainerKind.CHORD: ChordTrainerSettings,
    TrainerKind.INTERVAL: IntervalTrainerSettings,
    TrainerKind.NOTE: NoteTrainerSettings,
    TrainerKind.THEORY: TheoryTrainerSettings,
}

TRAINER_KINDS: dict[type[BaseModel], TrainerKind] = {
    model: trainer for trainer, model in SETTINGS_MODELS.items()
}


class Preset(BaseModel):
    """A named set of options for one trainer."""

    name: str
    description: str = ""
    trainer: TrainerKind
    settings: TrainerSettings

    model_config = {"frozen": True}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Preset:
        """Build a preset, validating settings against the trainer's model."""
        trainer = TrainerKind(data.get("trainer", TrainerKind.CHORD.value))
        settings_model = SETTINGS_MODELS[trainer]
        return cls(
            name=data.get("name", "unknown"),
            description=data.get("description", ""),
            trainer=trainer,
            settings=settings_model.model_validate(data.get("settings") or {}),
        )


class PresetMetadata(BaseModel):
    """Lightweight preset listing entry."""

    name: str
    description: str = Field(default="")
    trainer: TrainerKind

    model_config = {"frozen": True}

    @classmethod
    def from_preset(cls, preset: Preset) -> PresetMetadata:
        return cls(name=preset.name, description=preset.description, trainer=preset.trainer)
