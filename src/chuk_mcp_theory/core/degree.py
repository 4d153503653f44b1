"""
Degree primitives - DegreeAlteration, FormulaDegree.

A formula degree is a position counted from the root (1 = root, 3 = third,
9 = ninth) with an optional alteration. Degrees resolve to semitone offsets
against the major scale, so b7 is 10 semitones and #11 is 18.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from chuk_mcp_theory.constants import DIATONIC_SEMITONES, SEMITONES_IN_OCTAVE, ErrorMessages

from .pitch import Semitone

_DEGREE_SYMBOL = re.compile(r"^\s*(bb|##|b|#|♭♭|♯♯|♭|♯)?\s*(\d+)\s*$")

_SYMBOLS: dict[int, str] = {-2: "bb", -1: "b", 0: "", 1: "#", 2: "##"}
_WORDS: dict[int, str] = {-2: "double flat", -1: "flat", 0: "", 1: "sharp", 2: "double sharp"}
_UNICODE: dict[str, str] = {"♭": "b", "♯": "#"}


class DegreeAlteration(IntEnum):
    """
    A chromatic alteration of a degree.

    The value is the semitone offset applied to the natural degree.
    """

    DOUBLE_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DOUBLE_SHARP = 2

    @property
    def symbol(self) -> str:
        """ASCII accidental prefix ('b', '#', '' for natural)."""
        return _SYMBOLS[self.value]

    def semitone_offset(self) -> Semitone:
        return Semitone(self.value)

    def is_flat(self) -> bool:
        return self.value < 0

    def is_sharp(self) -> bool:
        return self.value > 0

    def is_natural(self) -> bool:
        return self.value == 0

    def opposite(self) -> DegreeAlteration:
        """Flat <-> sharp; natural stays natural."""
        return DegreeAlteration(-self.value)

    @classmethod
    def parse(cls, symbol: str) -> DegreeAlteration:
        """Parse an accidental prefix like 'b', '#', 'bb', '♭' or ''."""
        normalized = "".join(_UNICODE.get(ch, ch) for ch in symbol.strip())
        for value, text in _SYMBOLS.items():
            if text == normalized:
                return cls(value)
        raise ValueError(f"Unknown alteration: {symbol}")

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class FormulaDegree:
    """
    A chord or scale degree with an alteration.

    Degree numbers start at 1 and are unbounded; degrees above 7 are
    compound (9 = 2 + octave, 11 = 4 + octave, 13 = 6 + octave).

    Examples:
        FormulaDegree.natural(3) = major third (4 semitones)
        FormulaDegree.flat(7) = minor seventh (10 semitones)
        FormulaDegree.sharp(11) = sharp eleven (18 semitones)
    """

    number: int
    alteration: DegreeAlteration = DegreeAlteration.NATURAL

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, int) or self.number < 1:
            raise ValueError(ErrorMessages.INVALID_DEGREE.format(degree=self.number))
        # Accept plain ints for the alteration
        object.__setattr__(self, "alteration", DegreeAlteration(self.alteration))

    @classmethod
    def natural(cls, number: int) -> FormulaDegree:
        return cls(number, DegreeAlteration.NATURAL)

    @classmethod
    def flat(cls, number: int) -> FormulaDegree:
        return cls(number, DegreeAlteration.FLAT)

    @classmethod
    def sharp(cls, number: int) -> FormulaDegree:
        return cls(number, DegreeAlteration.SHARP)

    @classmethod
    def double_flat(cls, number: int) -> FormulaDegree:
        return cls(number, DegreeAlteration.DOUBLE_FLAT)

    @classmethod
    def double_sharp(cls, number: int) -> FormulaDegree:
        return cls(number, DegreeAlteration.DOUBLE_SHARP)

    def simple_number(self) -> int:
        """The degree reduced into 1-7 (9 -> 2, 13 -> 6, 8 -> 1)."""
        return (self.number - 1) % 7 + 1

    def to_semitone(self) -> Semitone:
        """
        Resolve to a semitone offset from the root.

        Uses the major scale as the natural reference and adds an octave for
        every 7 degrees: ((n-1)//7)*12 + diatonic[(n-1)%7] + alteration.
        """
        octaves, step = divmod(self.number - 1, 7)
        return Semitone(octaves * SEMITONES_IN_OCTAVE + DIATONIC_SEMITONES[step] + self.alteration)

    def is_extended(self) -> bool:
        """True for compound degrees (above the 7th)."""
        return self.number > 7

    def is_chord_tone(self) -> bool:
        """True for 1, 3, 5, 7 (the tertian triad plus seventh)."""
        return self.number in (1, 3, 5, 7)

    def is_tension(self) -> bool:
        """True for 2, 4, 6, 9, 11, 13."""
        return self.number in (2, 4, 6, 9, 11, 13)

    def describe(self) -> str:
        """Spelled-out name like 'flat 7' or '3'."""
        word = _WORDS[self.alteration.value]
        return f"{word} {self.number}" if word else str(self.number)

    @classmethod
    def parse(cls, symbol: str) -> FormulaDegree:
        """Parse a degree from a string like '3', 'b7', '#11', '♭9'."""
        match = _DEGREE_SYMBOL.match(symbol)
        if match is None:
            raise ValueError(ErrorMessages.INVALID_DEGREE_SYMBOL.format(symbol=symbol))
        prefix, number = match.groups()
        return cls(int(number), DegreeAlteration.parse(prefix or ""))

    def __str__(self) -> str:
        return f"{self.alteration.symbol}{self.number}"

    def __repr__(self) -> str:
        if self.alteration == DegreeAlteration.NATURAL:
            return f"FormulaDegree({self.number})"
        return f"FormulaDegree({self.number}, DegreeAlteration.{self.alteration.name})"
