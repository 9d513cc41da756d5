"""
Voicing tools - MCP tools for placing chords and scales on the fretboard.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.constants import (
    DEFAULT_MAX_FRET,
    STRING_SETS,
    ErrorMessages,
    HighlightColor,
)
from chuk_mcp_fretboard.core import TUNINGS, Tuning, VoicingKind, build_chord
from chuk_mcp_fretboard.fretboard import VoicingQuery, search_voicing
from chuk_mcp_fretboard.models import highlight
from chuk_mcp_fretboard.quiz import scale_highlights

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def resolve_tuning(name: str) -> Tuning:
    """Look up a tuning by name, raising ValueError for unknown names."""
    if name not in TUNINGS:
        raise ValueError(
            ErrorMessages.TUNING_NOT_FOUND.format(name=name, choices=", ".join(TUNINGS))
        )
    return TUNINGS[name]


def resolve_strings(strings: list[int] | None, string_set: str | None) -> tuple[int, ...]:
    """Explicit string indices win over a named string set."""
    if strings is not None:
        return tuple(strings)
    if string_set is None:
        raise ValueError("Provide either strings or string_set")
    if string_set not in STRING_SETS:
        raise ValueError(
            ErrorMessages.STRING_SET_NOT_FOUND.format(
                key=string_set, choices=", ".join(STRING_SETS)
            )
        )
    return STRING_SETS[string_set]


def register_voicing_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register fretboard placement tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_find_voicing(
        root: str,
        quality: str,
        voicing: str = VoicingKind.ROOT_POSITION.value,
        strings: list[int] | None = None,
        string_set: str | None = None,
        max_fret: int = DEFAULT_MAX_FRET,
        tuning: str = "standard",
    ) -> str:
        """
        Find the lowest-position voicing of a chord on a set of strings.

        Pitch rises strictly from the lowest string to the highest, one
        chord tone per string. The outcome is "found", "no_solution" (nothing
        fits under max_fret) or "not_applicable" (the voicing does not fit
        the chord, or the string count does not match it).

        Args:
            root: Root note (e.g., "A")
            quality: Chord quality key (e.g., "minor")
            voicing: root_position, root, first_inversion, second_inversion,
                drop_2 or drop_3
            strings: Visual string indices (0 = high E, 5 = low E)
            string_set: Named string set instead of strings (e.g., "543")
            max_fret: Highest fret to search
            tuning: "standard" or "drop_d"

        Returns:
            JSON string with the outcome and positions

        Example:
            fretboard_find_voicing(root="A", quality="minor", voicing="root",
                                   strings=[3, 4, 5])
        """
        try:
            chord = build_chord(root, quality)
            kind = VoicingKind(voicing)
            open_strings = resolve_tuning(tuning)
            query = VoicingQuery(
                chord, kind, resolve_strings(strings, string_set), max_fret, open_strings
            )
            result = search_voicing(query)

            return json.dumps(
                {
                    "status": "success",
                    "outcome": result.outcome.value,
                    "chord": chord.display_name(kind),
                    "voicing": kind.value,
                    "strings": list(query.string_set),
                    "target_order": (
                        [n.spell() for n in result.target_order] if result.target_order else None
                    ),
                    "positions": [
                        highlight(
                            p,
                            HighlightColor.ROOT
                            if p.pitch_class(open_strings) == chord.root
                            else HighlightColor.TONE,
                            tuning=open_strings,
                        ).model_dump(mode="json")
                        for p in result.positions
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to find voicing")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_find_voicing"] = fretboard_find_voicing

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_string_sets() -> str:
        """
        List the named string sets.

        Keys are guitar string numbers (6 = low E); values are visual
        indices (0 = high E).

        Returns:
            JSON string mapping set names to string indices

        Example:
            fretboard_list_string_sets()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "string_sets": {key: list(value) for key, value in STRING_SETS.items()},
                }
            )
        except Exception as e:
            logger.exception("Failed to list string sets")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_list_string_sets"] = fretboard_list_string_sets

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_scale_positions(
        root: str,
        scale: str,
        max_fret: int = DEFAULT_MAX_FRET,
        tuning: str = "standard",
    ) -> str:
        """
        Get every fretboard position of a scale, roots marked.

        Args:
            root: Root note (e.g., "A")
            scale: Scale formula key (e.g., "naturalMinor")
            max_fret: Highest fret to include
            tuning: "standard" or "drop_d"

        Returns:
            JSON string with highlighted positions

        Example:
            fretboard_scale_positions(root="A", scale="minorPentatonic", max_fret=12)
        """
        try:
            notes = scale_highlights(root, scale, max_fret, resolve_tuning(tuning))
            return json.dumps(
                {
                    "status": "success",
                    "positions": [n.model_dump(mode="json") for n in notes],
                    "count": len(notes),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute scale positions")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_scale_positions"] = fretboard_scale_positions

    return tools
