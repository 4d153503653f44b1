"""
MIDI hand-off - note/frequency conversion and mido messages.

This is where theory values leave the library for audio engines and
sequencers. Only in-memory messages are built here; writing files is the
caller's job.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from mido import Message

from chuk_mcp_theory.constants import (
    A4_FREQUENCY,
    A4_NOTE,
    DEFAULT_VELOCITY,
    MIDI_CHANNEL_MAX,
    MIDI_NOTE_MAX,
    MIDI_NOTE_MIN,
    MIDI_VELOCITY_MAX,
    SEMITONES_IN_OCTAVE,
    ErrorMessages,
)
from chuk_mcp_theory.core import Note, NoteRangeError

if TYPE_CHECKING:
    from collections.abc import Iterable


def note_to_frequency(note: Note | int, tuning: float = A4_FREQUENCY) -> float:
    """
    Equal-tempered frequency of a note.

    Args:
        note: A Note or note number
        tuning: Frequency of A4 in Hz

    Returns:
        Frequency in Hz (A4 = tuning)
    """
    if not isinstance(note, Note):
        note = Note(note)
    return note.frequency(tuning)


def frequency_to_note(frequency: float, tuning: float = A4_FREQUENCY) -> Note:
    """
    Nearest MIDI note to a frequency, clamped to 0-127.

    Raises:
        ValueError: If the frequency is not a positive finite number
    """
    if not math.isfinite(frequency) or frequency <= 0:
        raise ValueError(ErrorMessages.INVALID_FREQUENCY.format(frequency=frequency))
    value = round(A4_NOTE + SEMITONES_IN_OCTAVE * math.log2(frequency / tuning))
    return Note(max(MIDI_NOTE_MIN, min(MIDI_NOTE_MAX, value)))


def _validate(note: Note, velocity: int, channel: int) -> None:
    if not note.is_midi():
        raise NoteRangeError(ErrorMessages.NOT_MIDI_NOTE.format(note=note))
    if not 0 <= velocity <= MIDI_VELOCITY_MAX:
        raise ValueError(ErrorMessages.INVALID_VELOCITY.format(velocity=velocity))
    if not 0 <= channel <= MIDI_CHANNEL_MAX:
        raise ValueError(ErrorMessages.INVALID_CHANNEL.format(channel=channel))


def note_on(note: Note, velocity: int = DEFAULT_VELOCITY, channel: int = 0) -> Message:
    """
    Build a note_on message.

    Raises:
        NoteRangeError: If the note is outside MIDI 0-127
        ValueError: If velocity or channel is out of range
    """
    _validate(note, velocity, channel)
    return Message("note_on", channel=channel, note=note.value, velocity=velocity, time=0)


def note_off(note: Note, velocity: int = 0, channel: int = 0) -> Message:
    """Build a note_off message (release velocity defaults to 0)."""
    _validate(note, velocity, channel)
    return Message("note_off", channel=channel, note=note.value, velocity=velocity, time=0)


def chord_messages(
    notes: Iterable[Note],
    velocity: int = DEFAULT_VELOCITY,
    channel: int = 0,
) -> list[Message]:
    """
    Messages for a block chord: every note_on, then every note_off.

    Notes keep their given order; all messages have time=0, the caller
    schedules the gap between the ons and the offs.
    """
    ordered = list(notes)
    return [note_on(n, velocity, channel) for n in ordered] + [
        note_off(n, 0, channel) for n in ordered
    ]
