"""
Constants for the theory system.

No magic numbers - ranges, tuning and message templates live here.
"""

# Semitones per octave (the modulus for pitch class arithmetic)
SEMITONES_IN_OCTAVE = 12

# Note range - extended byte range, MIDI is the 0-127 subset
NOTE_MIN = 0
NOTE_MAX = 255

MIDI_NOTE_MIN = 0
MIDI_NOTE_MAX = 127

# Octave numbering: MIDI 60 is C4, so MIDI 0 sits in octave -1
OCTAVE_OFFSET = 1

# Concert pitch
A4_NOTE = 69
A4_FREQUENCY = 440.0

# MIDI message limits
MIDI_VELOCITY_MAX = 127
MIDI_CHANNEL_MAX = 15
DEFAULT_VELOCITY = 100

# Natural semitone distance for simple degrees 1-7 (major scale reference)
DIATONIC_SEMITONES = (0, 2, 4, 5, 7, 9, 11)


class ErrorMessages:
    """Standardized error messages."""

    NOTE_OUT_OF_RANGE = "Note value {value} is outside the note range {low}-{high}."
    NOT_MIDI_NOTE = "Note {note} is outside the MIDI range 0-127."
    INVALID_DEGREE = "Degree number must be >= 1, got {degree}."
    DUPLICATE_DEGREE = "Degree '{degree}' is already in the chord formula."
    NEGATIVE_OFFSET = "Scale offsets must be >= 0, got {offset}."
    UNKNOWN_SCALE = "Unknown scale: '{name}'."
    UNKNOWN_CHORD = "Unknown chord: '{name}'."
    INVALID_NOTE_NAME = "Invalid note name: '{name}'. Expected format like 'C4' or 'Db-1'."
    INVALID_DEGREE_SYMBOL = "Invalid degree symbol: '{symbol}'. Expected format like '3' or 'b7'."
    INVALID_VELOCITY = "Velocity must be 0-127, got {velocity}."
    INVALID_CHANNEL = "Channel must be 0-15, got {channel}."
    INVALID_FREQUENCY = "Frequency must be > 0, got {frequency}."
