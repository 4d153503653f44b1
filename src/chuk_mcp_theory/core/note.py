"""
Note - an absolute pitch.

A Note is a MIDI-style note number. The musically standard MIDI range is
0-127; Note accepts the extended byte range 0-255 as headroom and flags
the MIDI subset with is_midi().

Arithmetic never wraps or saturates: any result outside the note range
raises NoteRangeError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chuk_mcp_theory.constants import (
    A4_FREQUENCY,
    A4_NOTE,
    MIDI_NOTE_MAX,
    MIDI_NOTE_MIN,
    NOTE_MAX,
    NOTE_MIN,
    OCTAVE_OFFSET,
    SEMITONES_IN_OCTAVE,
    ErrorMessages,
)

from .errors import NoteRangeError
from .pitch import Octave, PitchClass, Semitone

_NOTE_NAME = re.compile(r"^\s*([A-Ga-g][#bs]?)\s*(-?\d+)\s*$")


@dataclass(frozen=True, order=True)
class Note:
    """
    An absolute pitch as a note number.

    Examples:
        Note(60) = C4 (middle C)
        Note(69) = A4 (440 Hz)
        Note(60) + Semitone.P5 = Note(67)
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Note value must be an int, got {type(self.value).__name__}")
        if not NOTE_MIN <= self.value <= NOTE_MAX:
            raise NoteRangeError(
                ErrorMessages.NOTE_OUT_OF_RANGE.format(value=self.value, low=NOTE_MIN, high=NOTE_MAX)
            )

    @classmethod
    def from_parts(cls, pitch_class: PitchClass, octave: Octave | int) -> Note:
        """
        Compose a note from a pitch class and an octave.

        Args:
            pitch_class: The pitch class
            octave: The octave (C4 = 60)

        Returns:
            The note

        Raises:
            NoteRangeError: If the octave puts the note outside the note range
        """
        return cls(PitchClass(pitch_class).to_midi(octave))

    @classmethod
    def parse(cls, name: str) -> Note:
        """Parse a note from a string like 'C4', 'C#4', 'Db-1'."""
        match = _NOTE_NAME.match(name)
        if match is None:
            raise ValueError(ErrorMessages.INVALID_NOTE_NAME.format(name=name))
        letter, octave = match.groups()
        return cls.from_parts(PitchClass.parse(letter[0].upper() + letter[1:]), int(octave))

    def pitch_class(self) -> PitchClass:
        """The pitch class of this note."""
        return PitchClass(self.value)

    def octave(self) -> Octave:
        """The octave of this note (MIDI 60 is in octave 4)."""
        return Octave(self.value // SEMITONES_IN_OCTAVE - OCTAVE_OFFSET)

    def as_semitone(self) -> Semitone:
        """Distance from note 0 as a Semitone."""
        return Semitone(self.value)

    def is_midi(self) -> bool:
        """True if this note is in the standard MIDI range (0-127)."""
        return MIDI_NOTE_MIN <= self.value <= MIDI_NOTE_MAX

    def frequency(self, tuning: float = A4_FREQUENCY) -> float:
        """Equal-tempered frequency in Hz, with A4 at `tuning`."""
        return float(tuning * 2.0 ** ((self.value - A4_NOTE) / SEMITONES_IN_OCTAVE))

    def transpose(self, semitones: int | Semitone) -> Note:
        """
        Move by a signed number of semitones.

        Raises:
            NoteRangeError: If the result leaves the note range
        """
        return Note(self.value + int(semitones))

    def shift_octaves(self, octaves: int) -> Note:
        """Move by whole octaves (negative = down)."""
        return self.transpose(octaves * SEMITONES_IN_OCTAVE)

    def shift_up_octaves(self, octaves: int) -> Note:
        """Move up by whole octaves."""
        return self.shift_octaves(octaves)

    def shift_down_octaves(self, octaves: int) -> Note:
        """Move down by whole octaves."""
        return self.shift_octaves(-octaves)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name like 'C#4' (or 'Db4' with prefer_flats)."""
        return f"{self.pitch_class().spell(prefer_flats)}{self.octave().value}"

    def __add__(self, other: Semitone) -> Note:
        """Note + Semitone -> Note."""
        if not isinstance(other, Semitone):
            return NotImplemented
        return self.transpose(other)

    def __sub__(self, other: Semitone | Note) -> Note | Semitone:
        """Note - Semitone -> Note; Note - Note -> Semitone (signed distance)."""
        if isinstance(other, Semitone):
            return self.transpose(-other)
        if isinstance(other, Note):
            return Semitone(self.value - other.value)
        return NotImplemented

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.spell()
