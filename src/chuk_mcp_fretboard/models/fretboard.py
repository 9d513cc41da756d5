"""
Fretboard display models - what a renderer needs to draw a position.

The renderer only sees (string, fret, label, color); it never has to know
about chords, scales or voicings.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_fretboard.constants import HighlightColor
from chuk_mcp_fretboard.core.pitch import STANDARD_TUNING, Tuning
from chuk_mcp_fretboard.fretboard.positions import FretPosition


class HighlightedNote(BaseModel):
    """A highlighted fretboard position."""

    string: int = Field(ge=0, le=5, description="Visual string index (0 = high E)")
    fret: int = Field(ge=0, description="Fret number (0 = open)")
    label: str = Field(default="", description="Text drawn on the marker")
    color: HighlightColor = Field(default=HighlightColor.TONE, description="Semantic color")

    model_config = {"frozen": True}

    @property
    def position(self) -> FretPosition:
        return FretPosition(self.string, self.fret)

    def recolor(self, color: HighlightColor) -> HighlightedNote:
        """Same marker with another color."""
        return self.model_copy(update={"color": color})


def highlight(
    position: FretPosition,
    color: HighlightColor = HighlightColor.TONE,
    label: str | None = None,
    tuning: Tuning = STANDARD_TUNING,
) -> HighlightedNote:
    """
    Highlight a position, labelled with its note name unless a label is given.
    """
    if label is None:
        label = position.pitch_class(tuning).spell()
    return HighlightedNote(
        string=position.string_index,
        fret=position.fret,
        label=label,
        color=color,
    )
