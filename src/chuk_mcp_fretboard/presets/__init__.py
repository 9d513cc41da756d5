"""
Preset system - named trainer settings shipped as YAML.
"""

from chuk_mcp_fretboard.presets.loader import PresetLoader

__all__ = ["PresetLoader"]
