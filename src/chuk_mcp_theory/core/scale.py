"""
Scale primitives - ScaleFormula.

A scale formula is a set of semitone offsets from a root. Offsets are kept
sorted and unique, so the same formula always produces the same notes no
matter how it was built. Offsets may run past the octave (a two-octave
major scale is 0..23).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

from chuk_mcp_theory.constants import SEMITONES_IN_OCTAVE, ErrorMessages

from .degree import FormulaDegree
from .note import Note
from .pitch import PitchClass, Semitone

# Degree spelling of each offset within one octave
_DEGREE_NAMES: list[str] = ["1", "b2", "2", "b3", "3", "4", "b5", "5", "b6", "6", "b7", "7"]


def _normalize_name(name: str) -> str:
    return name.strip().lower().replace("-", "_").replace(" ", "_")


@dataclass(frozen=True)
class ScaleFormula:
    """
    A scale defined by its offsets from the root.

    Unlike interval-step patterns, offsets are absolute from the root:
    a major scale is (0, 2, 4, 5, 7, 9, 11).

    Immutable and hashable. The name is a label only and does not take
    part in equality.
    """

    offsets: tuple[int, ...] = ()
    name: str = field(default="", compare=False)

    # Common scale formulas (defined after class)
    MAJOR: ClassVar[ScaleFormula]
    NATURAL_MINOR: ClassVar[ScaleFormula]
    HARMONIC_MINOR: ClassVar[ScaleFormula]
    MELODIC_MINOR: ClassVar[ScaleFormula]
    DORIAN: ClassVar[ScaleFormula]
    PHRYGIAN: ClassVar[ScaleFormula]
    LYDIAN: ClassVar[ScaleFormula]
    MIXOLYDIAN: ClassVar[ScaleFormula]
    LOCRIAN: ClassVar[ScaleFormula]
    MAJOR_PENTATONIC: ClassVar[ScaleFormula]
    MINOR_PENTATONIC: ClassVar[ScaleFormula]
    BLUES: ClassVar[ScaleFormula]
    CHROMATIC: ClassVar[ScaleFormula]
    MAJOR_EXTENDED: ClassVar[ScaleFormula]

    def __post_init__(self) -> None:
        offsets = {int(offset) for offset in self.offsets}
        for offset in offsets:
            if offset < 0:
                raise ValueError(ErrorMessages.NEGATIVE_OFFSET.format(offset=offset))
        object.__setattr__(self, "offsets", tuple(sorted(offsets)))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_semitones(cls, semitones: Iterable[int | Semitone], name: str = "") -> ScaleFormula:
        """
        Build a formula from semitone offsets in any order.

        Duplicates are dropped and offsets are sorted ascending.

        Raises:
            ValueError: If an offset is negative
        """
        return cls(tuple(int(s) for s in semitones), name)

    @classmethod
    def empty(cls) -> ScaleFormula:
        return cls((), "empty")

    @classmethod
    def chromatic(cls) -> ScaleFormula:
        return cls.CHROMATIC

    @classmethod
    def major(cls) -> ScaleFormula:
        return cls.MAJOR

    @classmethod
    def natural_minor(cls) -> ScaleFormula:
        return cls.NATURAL_MINOR

    @classmethod
    def minor(cls) -> ScaleFormula:
        return cls.NATURAL_MINOR

    @classmethod
    def major_pentatonic(cls) -> ScaleFormula:
        return cls.MAJOR_PENTATONIC

    @classmethod
    def minor_pentatonic(cls) -> ScaleFormula:
        return cls.MINOR_PENTATONIC

    @classmethod
    def blues(cls) -> ScaleFormula:
        return cls.BLUES

    @classmethod
    def by_name(cls, name: str) -> ScaleFormula:
        """
        Look up a named scale like 'major', 'natural minor', 'minor-pentatonic'.

        Raises:
            ValueError: If the name is unknown
        """
        key = _normalize_name(name)
        if key not in _SCALES:
            raise ValueError(ErrorMessages.UNKNOWN_SCALE.format(name=name))
        return _SCALES[key]

    @classmethod
    def names(cls) -> list[str]:
        """All registered scale names."""
        return list(_SCALES)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def semitones(self) -> tuple[Semitone, ...]:
        return tuple(Semitone(offset) for offset in self.offsets)

    def note_count(self) -> int:
        """Number of distinct offsets."""
        return len(self.offsets)

    def is_empty(self) -> bool:
        return not self.offsets

    def has_root(self) -> bool:
        return 0 in self.offsets

    def contains_semitone(self, semitone: int | Semitone) -> bool:
        """
        Octave-independent membership test.

        True if the semitone's pitch class matches any offset reduced mod 12,
        so a major scale contains 4, 16 and -8 (all major thirds).
        """
        pitch_class = Semitone(semitone).pitch_class().value
        return any(offset % SEMITONES_IN_OCTAVE == pitch_class for offset in self.offsets)

    def degrees(self) -> tuple[FormulaDegree, ...]:
        """Spell each offset as a degree, compound above the octave (14 -> 9)."""
        result = []
        for offset in self.offsets:
            octaves, step = divmod(offset, SEMITONES_IN_OCTAVE)
            simple = FormulaDegree.parse(_DEGREE_NAMES[step])
            result.append(FormulaDegree(simple.number + 7 * octaves, simple.alteration))
        return tuple(result)

    def notes_from_root(self, root: Note) -> tuple[Note, ...]:
        """
        Project the formula onto a root note.

        Returns:
            Notes in ascending offset order

        Raises:
            NoteRangeError: If an offset pushes a note past the note range
        """
        return tuple(root + Semitone(offset) for offset in self.offsets)

    def pitch_classes(self, root: PitchClass) -> list[PitchClass]:
        """Pitch classes of the scale from a root, without repeats."""
        result: list[PitchClass] = []
        for offset in self.offsets:
            pitch = root.transpose(offset)
            if pitch not in result:
                result.append(pitch)
        return result

    # ------------------------------------------------------------------
    # Set algebra
    # ------------------------------------------------------------------

    def union(self, other: ScaleFormula) -> ScaleFormula:
        return ScaleFormula(self.offsets + other.offsets)

    def intersection(self, other: ScaleFormula) -> ScaleFormula:
        return ScaleFormula(tuple(set(self.offsets) & set(other.offsets)))

    def complement(self) -> ScaleFormula:
        """Offsets within one octave whose pitch class is not in this formula."""
        return ScaleFormula(
            tuple(s for s in range(SEMITONES_IN_OCTAVE) if not self.contains_semitone(s))
        )

    def __or__(self, other: ScaleFormula) -> ScaleFormula:
        if not isinstance(other, ScaleFormula):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: ScaleFormula) -> ScaleFormula:
        if not isinstance(other, ScaleFormula):
            return NotImplemented
        return self.intersection(other)

    def __invert__(self) -> ScaleFormula:
        return self.complement()

    def __len__(self) -> int:
        return len(self.offsets)

    def __str__(self) -> str:
        if self.is_empty():
            return "∅"
        return "-".join(str(degree) for degree in self.degrees())

    def __repr__(self) -> str:
        attr = self.name.upper().replace(" ", "_")
        if self.name and getattr(ScaleFormula, attr, None) is self:
            return f"ScaleFormula.{attr}"
        return f"ScaleFormula({self.offsets!r})"


ScaleFormula.MAJOR = ScaleFormula((0, 2, 4, 5, 7, 9, 11), "major")
ScaleFormula.NATURAL_MINOR = ScaleFormula((0, 2, 3, 5, 7, 8, 10), "natural minor")
ScaleFormula.HARMONIC_MINOR = ScaleFormula((0, 2, 3, 5, 7, 8, 11), "harmonic minor")
ScaleFormula.MELODIC_MINOR = ScaleFormula((0, 2, 3, 5, 7, 9, 11), "melodic minor")
ScaleFormula.DORIAN = ScaleFormula((0, 2, 3, 5, 7, 9, 10), "dorian")
ScaleFormula.PHRYGIAN = ScaleFormula((0, 1, 3, 5, 7, 8, 10), "phrygian")
ScaleFormula.LYDIAN = ScaleFormula((0, 2, 4, 6, 7, 9, 11), "lydian")
ScaleFormula.MIXOLYDIAN = ScaleFormula((0, 2, 4, 5, 7, 9, 10), "mixolydian")
ScaleFormula.LOCRIAN = ScaleFormula((0, 1, 3, 5, 6, 8, 10), "locrian")
ScaleFormula.MAJOR_PENTATONIC = ScaleFormula((0, 2, 4, 7, 9), "major pentatonic")
ScaleFormula.MINOR_PENTATONIC = ScaleFormula((0, 3, 5, 7, 10), "minor pentatonic")
ScaleFormula.BLUES = ScaleFormula((0, 3, 5, 6, 7, 10), "blues")
ScaleFormula.CHROMATIC = ScaleFormula(tuple(range(SEMITONES_IN_OCTAVE)), "chromatic")
ScaleFormula.MAJOR_EXTENDED = ScaleFormula(
    ScaleFormula.MAJOR.offsets + tuple(o + SEMITONES_IN_OCTAVE for o in ScaleFormula.MAJOR.offsets),
    "major extended",
)

_SCALES: dict[str, ScaleFormula] = {
    "major": ScaleFormula.MAJOR,
    "ionian": ScaleFormula.MAJOR,
    "minor": ScaleFormula.NATURAL_MINOR,
    "natural_minor": ScaleFormula.NATURAL_MINOR,
    "aeolian": ScaleFormula.NATURAL_MINOR,
    "harmonic_minor": ScaleFormula.HARMONIC_MINOR,
    "melodic_minor": ScaleFormula.MELODIC_MINOR,
    "dorian": ScaleFormula.DORIAN,
    "phrygian": ScaleFormula.PHRYGIAN,
    "lydian": ScaleFormula.LYDIAN,
    "mixolydian": ScaleFormula.MIXOLYDIAN,
    "locrian": ScaleFormula.LOCRIAN,
    "major_pentatonic": ScaleFormula.MAJOR_PENTATONIC,
    "minor_pentatonic": ScaleFormula.MINOR_PENTATONIC,
    "blues": ScaleFormula.BLUES,
    "chromatic": ScaleFormula.CHROMATIC,
    "major_extended": ScaleFormula.MAJOR_EXTENDED,
    "empty": ScaleFormula.empty(),
}
