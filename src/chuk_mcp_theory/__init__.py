"""
CHUK Theory - music theory value types with an MCP tool surface.

Notes, pitch classes and semitone intervals, plus formula-based scales
and chords that project onto concrete notes.
"""

from chuk_mcp_theory.core import (
    ChordFormula,
    DegreeAlteration,
    DuplicateDegreeError,
    FormulaDegree,
    Note,
    NoteRangeError,
    Octave,
    PitchClass,
    ScaleFormula,
    Semitone,
)

__version__ = "0.1.0"

__all__ = [
    "ChordFormula",
    "DegreeAlteration",
    "DuplicateDegreeError",
    "FormulaDegree",
    "Note",
    "NoteRangeError",
    "Octave",
    "PitchClass",
    "ScaleFormula",
    "Semitone",
    "__version__",
]
