"""
Core theory primitives - the Radix layer.

These are the mathematical invariants that everything else composes on:
- Semitone: Signed distance between pitches
- Octave: Octave index (C4 = middle C)
- PitchClass: The 12 chromatic pitch classes (0-11)
- Note: Absolute pitch as a note number
- DegreeAlteration: Flat/natural/sharp offset of a degree
- FormulaDegree: Degree number plus alteration, resolves to a Semitone
- ScaleFormula: Sorted offset set, projects onto a root Note
- ChordFormula: Ordered degree stack, projects onto a root Note
"""

from chuk_mcp_theory.core.chord import ChordFormula
from chuk_mcp_theory.core.degree import DegreeAlteration, FormulaDegree
from chuk_mcp_theory.core.errors import DuplicateDegreeError, NoteRangeError
from chuk_mcp_theory.core.note import Note
from chuk_mcp_theory.core.pitch import (
    A,
    A_FLAT,
    A_SHARP,
    B,
    B_FLAT,
    C,
    C_SHARP,
    D,
    D_FLAT,
    D_SHARP,
    E,
    E_FLAT,
    F,
    F_SHARP,
    G,
    G_FLAT,
    G_SHARP,
    Octave,
    PitchClass,
    Semitone,
)
from chuk_mcp_theory.core.scale import ScaleFormula

__all__ = [
    # Pitch
    "Semitone",
    "Octave",
    "PitchClass",
    "C",
    "C_SHARP",
    "D_FLAT",
    "D",
    "D_SHARP",
    "E_FLAT",
    "E",
    "F",
    "F_SHARP",
    "G_FLAT",
    "G",
    "G_SHARP",
    "A_FLAT",
    "A",
    "A_SHARP",
    "B_FLAT",
    "B",
    # Note
    "Note",
    # Degrees
    "DegreeAlteration",
    "FormulaDegree",
    # Formulas
    "ScaleFormula",
    "ChordFormula",
    # Errors
    "NoteRangeError",
    "DuplicateDegreeError",
]
