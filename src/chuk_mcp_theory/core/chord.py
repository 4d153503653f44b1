"""
Chord primitives - ChordFormula.

Chords are ordered stacks of formula degrees ("1-3-5-b7"). Order is kept as
written so a voicing can list the root before its alterations, and the
same pitch may appear twice (1 and 8) as separate voicing members.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar

from chuk_mcp_theory.constants import ErrorMessages

from .degree import DegreeAlteration, FormulaDegree
from .errors import DuplicateDegreeError
from .note import Note
from .pitch import Semitone

_SEPARATORS = re.compile(r"[\s,\-]+")


def _normalize_name(name: str) -> str:
    return name.strip().lower().replace("-", "_").replace(" ", "_")


def _as_degree(degree: object) -> FormulaDegree:
    if isinstance(degree, FormulaDegree):
        return degree
    if isinstance(degree, int) and not isinstance(degree, bool):
        return FormulaDegree(degree)
    raise TypeError(f"Chord degrees must be FormulaDegree or int, got {type(degree).__name__}")


@dataclass(frozen=True)
class ChordFormula:
    """
    A chord defined by its degrees from the root, in insertion order.

    Build incrementally - each call returns a new formula:

        ChordFormula.new()
            .with_degree(FormulaDegree.natural(1))
            .with_degree(FormulaDegree.natural(3))
            .with_degree(FormulaDegree.natural(5))

    A degree number may appear with different alterations (b9 and #9 in an
    altered dominant), but the same (number, alteration) pair may not appear
    twice.

    Immutable and hashable. The name is a label only and does not take part
    in equality.
    """

    degrees: tuple[FormulaDegree, ...] = ()
    name: str = field(default="", compare=False)

    # Triads
    MAJOR_TRIAD: ClassVar[ChordFormula]
    MINOR_TRIAD: ClassVar[ChordFormula]
    DIMINISHED_TRIAD: ClassVar[ChordFormula]
    AUGMENTED_TRIAD: ClassVar[ChordFormula]
    SUS2: ClassVar[ChordFormula]
    SUS4: ClassVar[ChordFormula]
    # Sevenths
    MAJOR_SEVENTH: ClassVar[ChordFormula]
    MINOR_SEVENTH: ClassVar[ChordFormula]
    DOMINANT_SEVENTH: ClassVar[ChordFormula]
    MINOR_MAJOR_SEVENTH: ClassVar[ChordFormula]
    HALF_DIMINISHED_SEVENTH: ClassVar[ChordFormula]
    DIMINISHED_SEVENTH: ClassVar[ChordFormula]
    AUGMENTED_MAJOR_SEVENTH: ClassVar[ChordFormula]
    AUGMENTED_SEVENTH: ClassVar[ChordFormula]
    DOMINANT_SEVENTH_SHARP_FIFTH: ClassVar[ChordFormula]
    DOMINANT_SEVENTH_FLAT_FIFTH: ClassVar[ChordFormula]
    # Extensions
    MAJOR_NINTH: ClassVar[ChordFormula]
    MINOR_NINTH: ClassVar[ChordFormula]
    DOMINANT_NINTH: ClassVar[ChordFormula]
    DOMINANT_SEVENTH_FLAT_NINTH: ClassVar[ChordFormula]
    DOMINANT_SEVENTH_SHARP_NINTH: ClassVar[ChordFormula]
    MAJOR_ELEVENTH: ClassVar[ChordFormula]
    MINOR_ELEVENTH: ClassVar[ChordFormula]
    DOMINANT_ELEVENTH: ClassVar[ChordFormula]
    DOMINANT_SEVENTH_SHARP_ELEVENTH: ClassVar[ChordFormula]
    MAJOR_THIRTEENTH: ClassVar[ChordFormula]
    MINOR_THIRTEENTH: ClassVar[ChordFormula]
    DOMINANT_THIRTEENTH: ClassVar[ChordFormula]
    DOMINANT_THIRTEENTH_FLAT_NINTH: ClassVar[ChordFormula]
    DOMINANT_THIRTEENTH_SHARP_ELEVENTH: ClassVar[ChordFormula]
    # Added tones
    ADD_NINTH: ClassVar[ChordFormula]
    MINOR_ADD_NINTH: ClassVar[ChordFormula]
    SIXTH: ClassVar[ChordFormula]
    MINOR_SIXTH: ClassVar[ChordFormula]
    SIX_NINE: ClassVar[ChordFormula]
    MINOR_SIX_NINE: ClassVar[ChordFormula]
    ALTERED_DOMINANT: ClassVar[ChordFormula]

    def __post_init__(self) -> None:
        degrees = tuple(_as_degree(d) for d in self.degrees)
        seen: set[FormulaDegree] = set()
        for degree in degrees:
            if degree in seen:
                raise DuplicateDegreeError(ErrorMessages.DUPLICATE_DEGREE.format(degree=degree))
            seen.add(degree)
        object.__setattr__(self, "degrees", degrees)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls) -> ChordFormula:
        """An empty formula to build on with with_degree()."""
        return cls()

    @classmethod
    def of(cls, *degrees: FormulaDegree | int, name: str = "") -> ChordFormula:
        """Build a formula from degrees in one call; plain ints are natural degrees."""
        return cls(degrees, name)

    def with_degree(
        self,
        degree: FormulaDegree | int,
        alteration: DegreeAlteration = DegreeAlteration.NATURAL,
    ) -> ChordFormula:
        """
        Return a new formula with the degree appended.

        Args:
            degree: A FormulaDegree, or a degree number combined with `alteration`
            alteration: Alteration used when `degree` is a number

        Raises:
            DuplicateDegreeError: If the same degree and alteration is already present
        """
        if not isinstance(degree, FormulaDegree):
            degree = FormulaDegree(degree, alteration)
        return ChordFormula(self.degrees + (degree,))

    @classmethod
    def parse(cls, formula: str) -> ChordFormula:
        """
        Parse a formula from degree notation like '1-3-5-b7' or '1 b3 5'.

        Raises:
            ValueError: If a degree symbol cannot be parsed
            DuplicateDegreeError: If a degree is repeated
        """
        text = formula.strip()
        if text in ("", "∅"):
            return cls()
        return cls(tuple(FormulaDegree.parse(part) for part in _SEPARATORS.split(text) if part))

    @classmethod
    def by_name(cls, name: str) -> ChordFormula:
        """
        Look up a named chord like 'dominant seventh', 'm7' or 'maj9'.

        Raises:
            ValueError: If the name is unknown
        """
        key = name.strip()
        if key in _CHORD_SYMBOLS:
            return _CHORD_SYMBOLS[key]
        key = _normalize_name(key)
        if key not in _CHORDS:
            raise ValueError(ErrorMessages.UNKNOWN_CHORD.format(name=name))
        return _CHORDS[key]

    @classmethod
    def names(cls) -> list[str]:
        """All registered chord names."""
        return list(_CHORDS)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_empty(self) -> bool:
        return not self.degrees

    def has_degree(
        self,
        degree: FormulaDegree | int,
        alteration: DegreeAlteration = DegreeAlteration.NATURAL,
    ) -> bool:
        """True if this exact degree and alteration is in the formula."""
        if not isinstance(degree, FormulaDegree):
            degree = FormulaDegree(degree, alteration)
        return degree in self.degrees

    def has_any_degree(self, number: int) -> bool:
        """True if the degree number is present with any alteration."""
        return any(d.number == number for d in self.degrees)

    def alterations_of(self, number: int) -> tuple[DegreeAlteration, ...]:
        """Alterations present for a degree number, in insertion order."""
        return tuple(d.alteration for d in self.degrees if d.number == number)

    def semitones(self) -> tuple[Semitone, ...]:
        """Resolve each degree to its offset, in insertion order."""
        return tuple(degree.to_semitone() for degree in self.degrees)

    def notes_from_root(self, root: Note) -> tuple[Note, ...]:
        """
        Project the formula onto a root note.

        One note per degree, in insertion order. Degrees that land on the
        same pitch are kept as separate notes.

        Raises:
            NoteRangeError: If a degree resolves outside the note range
        """
        return tuple(root + offset for offset in self.semitones())

    def union(self, other: ChordFormula) -> ChordFormula:
        """Append the degrees of `other` that are not already present."""
        extra = tuple(d for d in other.degrees if d not in self.degrees)
        return ChordFormula(self.degrees + extra)

    def __iter__(self) -> Iterator[FormulaDegree]:
        return iter(self.degrees)

    def __len__(self) -> int:
        return len(self.degrees)

    def __contains__(self, degree: object) -> bool:
        return degree in self.degrees

    def __str__(self) -> str:
        if self.is_empty():
            return "∅"
        return "-".join(str(degree) for degree in self.degrees)

    def __repr__(self) -> str:
        attr = self.name.upper().replace(" ", "_")
        if self.name and getattr(ChordFormula, attr, None) is self:
            return f"ChordFormula.{attr}"
        return f"ChordFormula.parse({str(self)!r})"


def _chord(formula: str, name: str) -> ChordFormula:
    return ChordFormula(ChordFormula.parse(formula).degrees, name)


# Triads
ChordFormula.MAJOR_TRIAD = _chord("1-3-5", "major triad")
ChordFormula.MINOR_TRIAD = _chord("1-b3-5", "minor triad")
ChordFormula.DIMINISHED_TRIAD = _chord("1-b3-b5", "diminished triad")
ChordFormula.AUGMENTED_TRIAD = _chord("1-3-#5", "augmented triad")
ChordFormula.SUS2 = _chord("1-2-5", "sus2")
ChordFormula.SUS4 = _chord("1-4-5", "sus4")

# Seventh chords
ChordFormula.MAJOR_SEVENTH = _chord("1-3-5-7", "major seventh")
ChordFormula.MINOR_SEVENTH = _chord("1-b3-5-b7", "minor seventh")
ChordFormula.DOMINANT_SEVENTH = _chord("1-3-5-b7", "dominant seventh")
ChordFormula.MINOR_MAJOR_SEVENTH = _chord("1-b3-5-7", "minor major seventh")
ChordFormula.HALF_DIMINISHED_SEVENTH = _chord("1-b3-b5-b7", "half diminished seventh")
ChordFormula.DIMINISHED_SEVENTH = _chord("1-b3-b5-bb7", "diminished seventh")
ChordFormula.AUGMENTED_MAJOR_SEVENTH = _chord("1-3-#5-7", "augmented major seventh")
ChordFormula.AUGMENTED_SEVENTH = _chord("1-3-#5-b7", "augmented seventh")
ChordFormula.DOMINANT_SEVENTH_SHARP_FIFTH = _chord("1-3-#5-b7", "dominant seventh sharp fifth")
ChordFormula.DOMINANT_SEVENTH_FLAT_FIFTH = _chord("1-3-b5-b7", "dominant seventh flat fifth")

# Ninths
ChordFormula.MAJOR_NINTH = _chord("1-3-5-7-9", "major ninth")
ChordFormula.MINOR_NINTH = _chord("1-b3-5-b7-9", "minor ninth")
ChordFormula.DOMINANT_NINTH = _chord("1-3-5-b7-9", "dominant ninth")
ChordFormula.DOMINANT_SEVENTH_FLAT_NINTH = _chord("1-3-5-b7-b9", "dominant seventh flat ninth")
ChordFormula.DOMINANT_SEVENTH_SHARP_NINTH = _chord("1-3-5-b7-#9", "dominant seventh sharp ninth")

# Elevenths
ChordFormula.MAJOR_ELEVENTH = _chord("1-3-5-7-9-11", "major eleventh")
ChordFormula.MINOR_ELEVENTH = _chord("1-b3-5-b7-9-11", "minor eleventh")
ChordFormula.DOMINANT_ELEVENTH = _chord("1-3-5-b7-9-11", "dominant eleventh")
ChordFormula.DOMINANT_SEVENTH_SHARP_ELEVENTH = _chord(
    "1-3-5-b7-#11", "dominant seventh sharp eleventh"
)

# Thirteenths
ChordFormula.MAJOR_THIRTEENTH = _chord("1-3-5-7-9-11-13", "major thirteenth")
ChordFormula.MINOR_THIRTEENTH = _chord("1-b3-5-b7-9-11-13", "minor thirteenth")
ChordFormula.DOMINANT_THIRTEENTH = _chord("1-3-5-b7-9-11-13", "dominant thirteenth")
ChordFormula.DOMINANT_THIRTEENTH_FLAT_NINTH = _chord(
    "1-3-5-b7-b9-13", "dominant thirteenth flat ninth"
)
ChordFormula.DOMINANT_THIRTEENTH_SHARP_ELEVENTH = _chord(
    "1-3-5-b7-9-#11-13", "dominant thirteenth sharp eleventh"
)

# Added-tone chords
ChordFormula.ADD_NINTH = _chord("1-3-5-9", "add ninth")
ChordFormula.MINOR_ADD_NINTH = _chord("1-b3-5-9", "minor add ninth")
ChordFormula.SIXTH = _chord("1-3-5-6", "sixth")
ChordFormula.MINOR_SIXTH = _chord("1-b3-5-6", "minor sixth")
ChordFormula.SIX_NINE = _chord("1-3-5-6-9", "six nine")
ChordFormula.MINOR_SIX_NINE = _chord("1-b3-5-6-9", "minor six nine")

# Altered dominant carries both b9 and #9
ChordFormula.ALTERED_DOMINANT = _chord("1-3-b7-b9-#9-#11-b13", "altered dominant")

_CHORDS: dict[str, ChordFormula] = {
    _normalize_name(formula.name): formula
    for formula in (
        ChordFormula.MAJOR_TRIAD,
        ChordFormula.MINOR_TRIAD,
        ChordFormula.DIMINISHED_TRIAD,
        ChordFormula.AUGMENTED_TRIAD,
        ChordFormula.SUS2,
        ChordFormula.SUS4,
        ChordFormula.MAJOR_SEVENTH,
        ChordFormula.MINOR_SEVENTH,
        ChordFormula.DOMINANT_SEVENTH,
        ChordFormula.MINOR_MAJOR_SEVENTH,
        ChordFormula.HALF_DIMINISHED_SEVENTH,
        ChordFormula.DIMINISHED_SEVENTH,
        ChordFormula.AUGMENTED_MAJOR_SEVENTH,
        ChordFormula.AUGMENTED_SEVENTH,
        ChordFormula.DOMINANT_SEVENTH_SHARP_FIFTH,
        ChordFormula.DOMINANT_SEVENTH_FLAT_FIFTH,
        ChordFormula.MAJOR_NINTH,
        ChordFormula.MINOR_NINTH,
        ChordFormula.DOMINANT_NINTH,
        ChordFormula.DOMINANT_SEVENTH_FLAT_NINTH,
        ChordFormula.DOMINANT_SEVENTH_SHARP_NINTH,
        ChordFormula.MAJOR_ELEVENTH,
        ChordFormula.MINOR_ELEVENTH,
        ChordFormula.DOMINANT_ELEVENTH,
        ChordFormula.DOMINANT_SEVENTH_SHARP_ELEVENTH,
        ChordFormula.MAJOR_THIRTEENTH,
        ChordFormula.MINOR_THIRTEENTH,
        ChordFormula.DOMINANT_THIRTEENTH,
        ChordFormula.DOMINANT_THIRTEENTH_FLAT_NINTH,
        ChordFormula.DOMINANT_THIRTEENTH_SHARP_ELEVENTH,
        ChordFormula.ADD_NINTH,
        ChordFormula.MINOR_ADD_NINTH,
        ChordFormula.SIXTH,
        ChordFormula.MINOR_SIXTH,
        ChordFormula.SIX_NINE,
        ChordFormula.MINOR_SIX_NINE,
        ChordFormula.ALTERED_DOMINANT,
    )
}

# Lead-sheet symbols (case-sensitive: 'M7' and 'm7' differ)
_CHORD_SYMBOLS: dict[str, ChordFormula] = {
    "maj": ChordFormula.MAJOR_TRIAD,
    "m": ChordFormula.MINOR_TRIAD,
    "min": ChordFormula.MINOR_TRIAD,
    "dim": ChordFormula.DIMINISHED_TRIAD,
    "aug": ChordFormula.AUGMENTED_TRIAD,
    "+": ChordFormula.AUGMENTED_TRIAD,
    "maj7": ChordFormula.MAJOR_SEVENTH,
    "M7": ChordFormula.MAJOR_SEVENTH,
    "m7": ChordFormula.MINOR_SEVENTH,
    "7": ChordFormula.DOMINANT_SEVENTH,
    "mMaj7": ChordFormula.MINOR_MAJOR_SEVENTH,
    "m7b5": ChordFormula.HALF_DIMINISHED_SEVENTH,
    "ø7": ChordFormula.HALF_DIMINISHED_SEVENTH,
    "dim7": ChordFormula.DIMINISHED_SEVENTH,
    "°7": ChordFormula.DIMINISHED_SEVENTH,
    "maj9": ChordFormula.MAJOR_NINTH,
    "m9": ChordFormula.MINOR_NINTH,
    "9": ChordFormula.DOMINANT_NINTH,
    "7b9": ChordFormula.DOMINANT_SEVENTH_FLAT_NINTH,
    "7#9": ChordFormula.DOMINANT_SEVENTH_SHARP_NINTH,
    "maj11": ChordFormula.MAJOR_ELEVENTH,
    "m11": ChordFormula.MINOR_ELEVENTH,
    "11": ChordFormula.DOMINANT_ELEVENTH,
    "7#11": ChordFormula.DOMINANT_SEVENTH_SHARP_ELEVENTH,
    "maj13": ChordFormula.MAJOR_THIRTEENTH,
    "m13": ChordFormula.MINOR_THIRTEENTH,
    "13": ChordFormula.DOMINANT_THIRTEENTH,
    "add9": ChordFormula.ADD_NINTH,
    "madd9": ChordFormula.MINOR_ADD_NINTH,
    "6": ChordFormula.SIXTH,
    "m6": ChordFormula.MINOR_SIXTH,
    "6/9": ChordFormula.SIX_NINE,
    "m6/9": ChordFormula.MINOR_SIX_NINE,
    "7alt": ChordFormula.ALTERED_DOMINANT,
}
