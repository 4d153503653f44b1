"""
Theory summary models - the serialization layer.

Core value types stay plain Python; these pydantic models are the flat,
JSON-ready views of them that the MCP tools return.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_theory.core import ChordFormula, Note, ScaleFormula


class NoteInfo(BaseModel):
    """A note with its derived properties."""

    name: str = Field(..., description="Sharp spelling with octave (e.g., 'C#4')")
    flat_name: str = Field(..., description="Flat spelling with octave (e.g., 'Db4')")
    value: int = Field(..., ge=0, le=255, description="Note number")
    pitch_class: int = Field(..., ge=0, le=11, description="Pitch class (0-11)")
    octave: int = Field(..., description="Octave (C4 = middle C)")
    frequency: float = Field(..., gt=0, description="Equal-tempered frequency in Hz")
    is_midi: bool = Field(..., description="Within MIDI 0-127")

    model_config = {"frozen": True}

    @classmethod
    def from_note(cls, note: Note) -> NoteInfo:
        return cls(
            name=note.spell(),
            flat_name=note.spell(prefer_flats=True),
            value=note.value,
            pitch_class=note.pitch_class().value,
            octave=note.octave().value,
            frequency=round(note.frequency(), 3),
            is_midi=note.is_midi(),
        )


class ScaleInfo(BaseModel):
    """A scale formula, optionally projected onto a root."""

    name: str = Field(..., description="Scale name")
    formula: str = Field(..., description="Degree notation (e.g., '1-2-b3-4-5-b6-b7')")
    offsets: list[int] = Field(default_factory=list, description="Semitone offsets from the root")
    note_count: int = Field(..., ge=0, description="Number of distinct offsets")
    root: str | None = Field(None, description="Root note, when projected")
    notes: list[NoteInfo] = Field(default_factory=list, description="Notes from the root")

    model_config = {"frozen": True}

    @classmethod
    def from_formula(
        cls, name: str, formula: ScaleFormula, root: Note | None = None
    ) -> ScaleInfo:
        notes = formula.notes_from_root(root) if root is not None else ()
        return cls(
            name=name,
            formula=str(formula),
            offsets=list(formula.offsets),
            note_count=formula.note_count(),
            root=str(root) if root is not None else None,
            notes=[NoteInfo.from_note(n) for n in notes],
        )


class ChordInfo(BaseModel):
    """A chord formula, optionally projected onto a root."""

    name: str = Field(..., description="Chord name or formula")
    formula: str = Field(..., description="Degree notation (e.g., '1-3-5-b7')")
    degrees: list[str] = Field(default_factory=list, description="Degrees in insertion order")
    semitones: list[int] = Field(default_factory=list, description="Resolved offsets")
    root: str | None = Field(None, description="Root note, when projected")
    notes: list[NoteInfo] = Field(default_factory=list, description="Notes from the root")

    model_config = {"frozen": True}

    @classmethod
    def from_formula(
        cls, name: str, formula: ChordFormula, root: Note | None = None
    ) -> ChordInfo:
        notes = formula.notes_from_root(root) if root is not None else ()
        return cls(
            name=name,
            formula=str(formula),
            degrees=[str(d) for d in formula.degrees],
            semitones=[s.value for s in formula.semitones()],
            root=str(root) if root is not None else None,
            notes=[NoteInfo.from_note(n) for n in notes],
        )
