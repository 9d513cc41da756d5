"""
Theory tools - MCP tools for the interval, chord and scale catalogs.

Tools for listing catalog entries, building chords, deriving voicing orders
and computing intervals and scale membership.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.core import (
    CHORD_QUALITIES,
    INTERVAL_LIST,
    SCALE_FORMULAS,
    PitchClass,
    VoicingKind,
    build_chord,
    get_scale_formula,
    interval_between,
    required_note_count,
    voicing_order,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_theory_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register music theory tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_chord_qualities() -> str:
        """
        List the chord qualities in the catalog.

        Returns:
            JSON string with each quality's key, name, abbreviations and formula

        Example:
            fretboard_list_chord_qualities()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "qualities": [
                        {
                            "key": q.key,
                            "name": q.name,
                            "abbreviations": list(q.abbreviations),
                            "intervals": [i.short_name for i in q.intervals],
                        }
                        for q in CHORD_QUALITIES.values()
                    ],
                    "count": len(CHORD_QUALITIES),
                }
            )
        except Exception as e:
            logger.exception("Failed to list chord qualities")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_list_chord_qualities"] = fretboard_list_chord_qualities

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_build_chord(root: str, quality: str) -> str:
        """
        Build a chord from a root and a quality key.

        Args:
            root: Root note, sharps only (e.g., "A", "C#")
            quality: Chord quality key (e.g., "minor", "dominant7")

        Returns:
            JSON string with the chord name and its notes in formula order

        Example:
            fretboard_build_chord(root="G", quality="dominant7")
        """
        try:
            chord = build_chord(root, quality)
            return json.dumps(
                {
                    "status": "success",
                    "chord": {
                        "name": chord.display_name(),
                        "root": chord.root.spell(),
                        "quality": chord.quality.key,
                        "notes": [n.spell() for n in chord.notes],
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to build chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_build_chord"] = fretboard_build_chord

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_voicing_order(root: str, quality: str, voicing: str) -> str:
        """
        Get the low-to-high note order of a chord voicing.

        Inversions apply to triads only; drop 2 and drop 3 to four-note
        chords only. Other combinations report "not_applicable".

        Args:
            root: Root note (e.g., "C")
            quality: Chord quality key (e.g., "major7")
            voicing: root_position, root, first_inversion, second_inversion,
                drop_2 or drop_3

        Returns:
            JSON string with the ordered notes, or a not_applicable outcome

        Example:
            fretboard_voicing_order(root="C", quality="major7", voicing="drop_2")
        """
        try:
            chord = build_chord(root, quality)
            kind = VoicingKind(voicing)
            order = voicing_order(chord, kind)
            if order is None:
                return json.dumps(
                    {
                        "status": "success",
                        "outcome": "not_applicable",
                        "message": f"{kind.label} does not apply to {chord.display_name()}",
                    }
                )
            return json.dumps(
                {
                    "status": "success",
                    "outcome": "found",
                    "chord": chord.display_name(kind),
                    "voicing": kind.value,
                    "notes": [n.spell() for n in order],
                    "string_count": required_note_count(chord, kind),
                }
            )
        except Exception as e:
            logger.exception("Failed to derive voicing order")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_voicing_order"] = fretboard_voicing_order

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_interval_between(note_a: str, note_b: str) -> str:
        """
        Get the ascending interval from one note to another.

        Args:
            note_a: Lower note (e.g., "C")
            note_b: Upper note (e.g., "G")

        Returns:
            JSON string with the interval name, short name and semitones

        Example:
            fretboard_interval_between(note_a="C", note_b="G")
        """
        try:
            interval = interval_between(PitchClass.parse(note_a), PitchClass.parse(note_b))
            if interval is None:
                return json.dumps({"status": "error", "message": "No interval found"})
            return json.dumps(
                {
                    "status": "success",
                    "interval": {
                        "name": interval.name,
                        "short_name": interval.short_name,
                        "semitones": interval.semitones,
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to compute interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_interval_between"] = fretboard_interval_between

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_intervals() -> str:
        """
        List the named intervals.

        Returns:
            JSON string with every interval from P1 to P8

        Example:
            fretboard_list_intervals()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "intervals": [
                        {"name": i.name, "short_name": i.short_name, "semitones": i.semitones}
                        for i in INTERVAL_LIST
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to list intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_list_intervals"] = fretboard_list_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_scales() -> str:
        """
        List the scale formulas in the catalog.

        Returns:
            JSON string with each scale's key, name and formula

        Example:
            fretboard_list_scales()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "scales": [
                        {
                            "key": s.key,
                            "name": s.name,
                            "intervals": [i.short_name for i in s.intervals],
                        }
                        for s in SCALE_FORMULAS.values()
                    ],
                    "count": len(SCALE_FORMULAS),
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_list_scales"] = fretboard_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_scale_notes(root: str, scale: str) -> str:
        """
        Get the notes of a scale.

        Args:
            root: Root note (e.g., "A")
            scale: Scale formula key (e.g., "naturalMinor", "blues")

        Returns:
            JSON string with the scale notes in formula order

        Example:
            fretboard_scale_notes(root="A", scale="minorPentatonic")
        """
        try:
            formula = get_scale_formula(scale)
            notes = formula.notes(root)
            return json.dumps(
                {
                    "status": "success",
                    "scale": formula.name,
                    "root": PitchClass.parse(root).spell(),
                    "notes": [n.spell() for n in notes],
                }
            )
        except Exception as e:
            logger.exception("Failed to compute scale notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_scale_notes"] = fretboard_scale_notes

    return tools
