"""
MCP tool implementations.

Tools are organized by domain:
- theory - Interval, chord, voicing-order and scale catalogs
- voicing - Chord voicing and scale placement on the fretboard
- quiz - Trainer presets, question generation and grading
"""

from chuk_mcp_fretboard.tools.quiz import register_quiz_tools
from chuk_mcp_fretboard.tools.theory import register_theory_tools
from chuk_mcp_fretboard.tools.voicing import register_voicing_tools

__all__ = [
    "register_quiz_tools",
    "register_theory_tools",
    "register_voicing_tools",
]
