"""
Tests for MIDI hand-off.

Tests note/frequency conversion and mido message construction.
"""

import math

import pytest

from chuk_mcp_theory.core import ChordFormula, Note, NoteRangeError
from chuk_mcp_theory.midi import (
    chord_messages,
    frequency_to_note,
    note_off,
    note_on,
    note_to_frequency,
)


class TestFrequency:
    """Tests for frequency conversion."""

    def test_note_to_frequency(self) -> None:
        """A4 is 440 Hz."""
        assert note_to_frequency(69) == pytest.approx(440.0)
        assert note_to_frequency(Note(57)) == pytest.approx(220.0)
        assert note_to_frequency(69, tuning=442.0) == pytest.approx(442.0)

    def test_frequency_to_note(self) -> None:
        """Nearest note to a frequency."""
        assert frequency_to_note(440.0) == Note(69)
        assert frequency_to_note(261.63) == Note(60)
        assert frequency_to_note(445.0) == Note(69)

    def test_frequency_to_note_clamps(self) -> None:
        """Results stay within MIDI 0-127."""
        assert frequency_to_note(1.0) == Note(0)
        assert frequency_to_note(100000.0) == Note(127)

    def test_invalid_frequency(self) -> None:
        """Non-positive frequencies are rejected."""
        with pytest.raises(ValueError):
            frequency_to_note(0.0)
        with pytest.raises(ValueError):
            frequency_to_note(-440.0)

    def test_non_finite_frequency(self) -> None:
        """Infinite and NaN frequencies are rejected with the same error."""
        for bad in (math.inf, -math.inf, math.nan):
            with pytest.raises(ValueError, match="Frequency must be > 0"):
                frequency_to_note(bad)


class TestMessages:
    """Tests for mido message construction."""

    def test_note_on(self) -> None:
        """note_on carries note, velocity and channel."""
        msg = note_on(Note(60), velocity=90, channel=2)
        assert msg.type == "note_on"
        assert msg.note == 60
        assert msg.velocity == 90
        assert msg.channel == 2

    def test_note_off(self) -> None:
        """note_off defaults to zero release velocity."""
        msg = note_off(Note(60))
        assert msg.type == "note_off"
        assert msg.velocity == 0

    def test_non_midi_note(self) -> None:
        """Notes above 127 cannot be sent."""
        with pytest.raises(NoteRangeError):
            note_on(Note(128))

    def test_invalid_velocity_and_channel(self) -> None:
        """Velocity and channel are range checked."""
        with pytest.raises(ValueError):
            note_on(Note(60), velocity=128)
        with pytest.raises(ValueError):
            note_on(Note(60), channel=16)

    def test_chord_messages(self) -> None:
        """All note_ons come before all note_offs."""
        notes = ChordFormula.MAJOR_TRIAD.notes_from_root(Note(60))
        messages = chord_messages(notes, velocity=80)
        assert [m.type for m in messages] == ["note_on"] * 3 + ["note_off"] * 3
        assert [m.note for m in messages] == [60, 64, 67, 60, 64, 67]
        assert all(m.velocity == 80 for m in messages[:3])

    def test_chord_messages_from_generator(self) -> None:
        """Any iterable of notes is accepted."""
        messages = chord_messages(Note(n) for n in (48, 55))
        assert len(messages) == 4
