#!/usr/bin/env python3
"""
Async Fretboard MCP Server using chuk-mcp-server

This server provides MCP tools for finding chord voicings on a six-string
guitar and for drilling chords, intervals, note names and chord symbols.
Trainer presets are YAML files - the bundled library can be overridden by
a project-local presets/ directory.

The server provides tools for:
- Interval, chord and scale catalogs
- Lowest-position voicing search on a set of strings
- Scale placement across the fretboard
- Trainer question generation and answer grading
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_fretboard.presets import PresetLoader
from chuk_mcp_fretboard.tools import (
    register_quiz_tools,
    register_theory_tools,
    register_voicing_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-fretboard")

# Paths - bundled library plus project-local overrides
BASE_PATH = Path.cwd()
PRESETS_DIR = BASE_PATH / "presets"
PRESETS_LIBRARY_PATH = Path(__file__).parent / "presets" / "library"

preset_loader = PresetLoader(
    library_path=PRESETS_LIBRARY_PATH,
    project_path=PRESETS_DIR,
)

# Register all tools
theory_tools = register_theory_tools(mcp)
voicing_tools = register_voicing_tools(mcp)
quiz_tools = register_quiz_tools(mcp, preset_loader)

# Export tool functions for direct access
fretboard_list_chord_qualities = theory_tools["fretboard_list_chord_qualities"]
fretboard_build_chord = theory_tools["fretboard_build_chord"]
fretboard_voicing_order = theory_tools["fretboard_voicing_order"]
fretboard_interval_between = theory_tools["fretboard_interval_between"]
fretboard_list_intervals = theory_tools["fretboard_list_intervals"]
fretboard_list_scales = theory_tools["fretboard_list_scales"]
fretboard_scale_notes = theory_tools["fretboard_scale_notes"]

fretboard_find_voicing = voicing_tools["fretboard_find_voicing"]
fretboard_list_string_sets = voicing_tools["fretboard_list_string_sets"]
fretboard_scale_positions = voicing_tools["fretboard_scale_positions"]

fretboard_list_presets = quiz_tools["fretboard_list_presets"]
fretboard_chord_question = quiz_tools["fretboard_chord_question"]
fretboard_check_chord_answer = quiz_tools["fretboard_check_chord_answer"]
fretboard_interval_question = quiz_tools["fretboard_interval_question"]
fretboard_check_interval_answer = quiz_tools["fretboard_check_interval_answer"]
fretboard_note_question = quiz_tools["fretboard_note_question"]
fretboard_check_note_answer = quiz_tools["fretboard_check_note_answer"]
fretboard_theory_question = quiz_tools["fretboard_theory_question"]
fretboard_check_theory_answer = quiz_tools["fretboard_check_theory_answer"]

logger.info("CHUK Fretboard MCP Server initialized")
logger.info(f"  Presets library: {PRESETS_LIBRARY_PATH}")
logger.info(f"  Project presets: {PRESETS_DIR}")
