"""
Pitch primitives - Semitone, Octave and PitchClass.

These are the foundational types for all pitch-related operations.
Semitone is a signed distance between pitches, the arithmetic base for everything else.
Octave is an octave index (octave 4 holds middle C).
PitchClass represents the 12 chromatic pitches (octave-independent).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import TYPE_CHECKING, ClassVar

from chuk_mcp_theory.constants import (
    NOTE_MAX,
    NOTE_MIN,
    OCTAVE_OFFSET,
    SEMITONES_IN_OCTAVE,
)

if TYPE_CHECKING:
    from chuk_mcp_theory.core.note import Note

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

_INTERVAL_NAMES: dict[int, str] = {
    0: "P1",
    1: "m2",
    2: "M2",
    3: "m3",
    4: "M3",
    5: "P4",
    6: "TT",
    7: "P5",
    8: "m6",
    9: "M6",
    10: "m7",
    11: "M7",
}


@total_ordering
class Semitone:
    """
    A signed distance in semitones.

    This is the fundamental building block - scales are offset sets,
    chords are degree stacks that resolve to offsets, transposition is
    Note + Semitone.

    Backed by a Python int, so it never overflows. The note range is
    enforced where a Semitone is applied to a Note, not here.

    Immutable and hashable.
    """

    __slots__ = ("_value",)
    _value: int

    # Named intervals (class constants)
    UNISON: ClassVar[Semitone]
    MINOR_SECOND: ClassVar[Semitone]
    MAJOR_SECOND: ClassVar[Semitone]
    MINOR_THIRD: ClassVar[Semitone]
    MAJOR_THIRD: ClassVar[Semitone]
    PERFECT_FOURTH: ClassVar[Semitone]
    TRITONE: ClassVar[Semitone]
    PERFECT_FIFTH: ClassVar[Semitone]
    MINOR_SIXTH: ClassVar[Semitone]
    MAJOR_SIXTH: ClassVar[Semitone]
    MINOR_SEVENTH: ClassVar[Semitone]
    MAJOR_SEVENTH: ClassVar[Semitone]
    OCTAVE: ClassVar[Semitone]

    # Short aliases
    P1: ClassVar[Semitone]
    m2: ClassVar[Semitone]
    M2: ClassVar[Semitone]
    m3: ClassVar[Semitone]
    M3: ClassVar[Semitone]
    P4: ClassVar[Semitone]
    TT: ClassVar[Semitone]
    P5: ClassVar[Semitone]
    m6: ClassVar[Semitone]
    M6: ClassVar[Semitone]
    m7: ClassVar[Semitone]
    M7: ClassVar[Semitone]
    P8: ClassVar[Semitone]

    def __init__(self, value: int) -> None:
        """Create a semitone count (positive = up, negative = down)."""
        if isinstance(value, Semitone):
            value = value._value
        object.__setattr__(self, "_value", int(value))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Semitone is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Semitone is immutable")

    @property
    def value(self) -> int:
        """Number of semitones."""
        return self._value

    def pitch_class(self) -> PitchClass:
        """The pitch class this offset lands on, counted from C."""
        return PitchClass(self._value)

    def octave(self) -> Octave:
        """
        Whole octaves contained in this offset.

        Floor division, so -1 semitone is in octave -1, not 0.
        """
        return Octave(self._value // SEMITONES_IN_OCTAVE)

    def invert(self) -> Semitone:
        """
        Invert the interval within an octave.

        M3 (4) -> m6 (8)
        P5 (7) -> P4 (5)
        """
        return Semitone(SEMITONES_IN_OCTAVE - (self._value % SEMITONES_IN_OCTAVE))

    def __add__(self, other: Semitone) -> Semitone:
        """Add two semitone counts."""
        if not isinstance(other, Semitone):
            return NotImplemented
        return Semitone(self._value + other._value)

    def __sub__(self, other: Semitone) -> Semitone:
        """Subtract a semitone count from another."""
        if not isinstance(other, Semitone):
            return NotImplemented
        return Semitone(self._value - other._value)

    def __neg__(self) -> Semitone:
        """Negate (descending instead of ascending)."""
        return Semitone(-self._value)

    def __abs__(self) -> Semitone:
        return Semitone(abs(self._value))

    def __mul__(self, n: int) -> Semitone:
        """Multiply (e.g., two octaves)."""
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        return Semitone(self._value * n)

    def __rmul__(self, n: int) -> Semitone:
        """Right multiply."""
        return self.__mul__(n)

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Semitone):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Semitone) -> bool:
        if not isinstance(other, Semitone):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Semitone({self._value})"

    def __str__(self) -> str:
        """Human-readable interval name."""
        mod = self._value % SEMITONES_IN_OCTAVE
        octaves = self._value // SEMITONES_IN_OCTAVE
        base = _INTERVAL_NAMES[mod]
        if octaves == 0:
            return base
        elif octaves == 1 and mod == 0:
            return "P8"
        else:
            return f"{base}+{octaves}oct" if octaves > 0 else f"{base}{octaves}oct"


# Initialize class constants after class is defined
Semitone.UNISON = Semitone(0)
Semitone.MINOR_SECOND = Semitone(1)
Semitone.MAJOR_SECOND = Semitone(2)
Semitone.MINOR_THIRD = Semitone(3)
Semitone.MAJOR_THIRD = Semitone(4)
Semitone.PERFECT_FOURTH = Semitone(5)
Semitone.TRITONE = Semitone(6)
Semitone.PERFECT_FIFTH = Semitone(7)
Semitone.MINOR_SIXTH = Semitone(8)
Semitone.MAJOR_SIXTH = Semitone(9)
Semitone.MINOR_SEVENTH = Semitone(10)
Semitone.MAJOR_SEVENTH = Semitone(11)
Semitone.OCTAVE = Semitone(12)

# Short aliases
Semitone.P1 = Semitone.UNISON
Semitone.m2 = Semitone.MINOR_SECOND
Semitone.M2 = Semitone.MAJOR_SECOND
Semitone.m3 = Semitone.MINOR_THIRD
Semitone.M3 = Semitone.MAJOR_THIRD
Semitone.P4 = Semitone.PERFECT_FOURTH
Semitone.TT = Semitone.TRITONE
Semitone.P5 = Semitone.PERFECT_FIFTH
Semitone.m6 = Semitone.MINOR_SIXTH
Semitone.M6 = Semitone.MAJOR_SIXTH
Semitone.m7 = Semitone.MINOR_SEVENTH
Semitone.M7 = Semitone.MAJOR_SEVENTH
Semitone.P8 = Semitone.OCTAVE


@dataclass(frozen=True, order=True)
class Octave:
    """
    An octave index, numbered so that middle C (MIDI 60) is in octave 4.

    Any int is a valid Octave; only octaves MIN..MAX hold notes in the
    note range, and composing a Note outside them raises NoteRangeError.
    """

    value: int

    MIN: ClassVar[int] = NOTE_MIN // SEMITONES_IN_OCTAVE - OCTAVE_OFFSET
    MAX: ClassVar[int] = NOTE_MAX // SEMITONES_IN_OCTAVE - OCTAVE_OFFSET

    def note(self, pitch_class: PitchClass | None = None) -> Note:
        """Compose a Note from this octave and a pitch class (default C)."""
        from chuk_mcp_theory.core.note import Note

        return Note.from_parts(pitch_class if pitch_class is not None else PitchClass.C, self)

    def __add__(self, n: int) -> Octave:
        if not isinstance(n, int):
            return NotImplemented
        return Octave(self.value + n)

    def __sub__(self, n: int) -> Octave:
        if not isinstance(n, int):
            return NotImplemented
        return Octave(self.value - n)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Any int converts: PitchClass(13) is C#, PitchClass(-1) is B.
    `name` is the canonical sharp spelling ("C#"); the member identifier
    ("Cs") stays available as `_name_`.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    @classmethod
    def _missing_(cls, value: object) -> PitchClass | None:
        # Euclidean modulo: Python's % is already non-negative for a positive modulus
        if isinstance(value, int):
            return cls(value % SEMITONES_IN_OCTAVE)
        return None

    def transpose(self, semitones: int | Semitone) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass(self.value + int(semitones))

    def interval_to(self, other: PitchClass) -> Semitone:
        """Get the interval from this pitch class to another (ascending)."""
        return Semitone((other.value - self.value) % SEMITONES_IN_OCTAVE)

    def is_accidental(self) -> bool:
        """True for the black keys."""
        return len(_SHARP_NAMES[self.value]) > 1

    def to_midi(self, octave: int | Octave = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (int(octave) + OCTAVE_OFFSET) * SEMITONES_IN_OCTAVE

    @property
    def name(self) -> str:  # type: ignore[override]
        """Canonical sharp name (C, C#, D, ... B)."""
        return _SHARP_NAMES[self.value]

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    def __str__(self) -> str:
        return self.spell()

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % SEMITONES_IN_OCTAVE)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()

        # Try sharp names first
        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        # Try flat names
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Try enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member._name_.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")


# Named pitch classes; enharmonic pairs are the same member
C = PitchClass.C
C_SHARP = PitchClass.Cs
D_FLAT = PitchClass.Cs
D = PitchClass.D
D_SHARP = PitchClass.Ds
E_FLAT = PitchClass.Ds
E = PitchClass.E
F = PitchClass.F
F_SHARP = PitchClass.Fs
G_FLAT = PitchClass.Fs
G = PitchClass.G
G_SHARP = PitchClass.Gs
A_FLAT = PitchClass.Gs
A = PitchClass.A
A_SHARP = PitchClass.As
B_FLAT = PitchClass.As
B = PitchClass.B
