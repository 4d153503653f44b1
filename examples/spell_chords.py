#!/usr/bin/env python3
"""
Example: spell scales and chords, then build MIDI messages.

Shows the core theory types composing:
1. Parse a root note
2. Project scale and chord formulas onto it
3. Hand the chord off as mido messages
"""

from chuk_mcp_theory.core import ChordFormula, Note, ScaleFormula, Semitone
from chuk_mcp_theory.midi import chord_messages


def main() -> None:
    root = Note.parse("D4")
    print(f"Root: {root} ({root.value}, {root.frequency():.2f} Hz)")

    for name in ("major", "dorian", "blues"):
        scale = ScaleFormula.by_name(name)
        notes = " ".join(str(n) for n in scale.notes_from_root(root))
        print(f"  {name:<10} {str(scale):<20} {notes}")

    print()
    for symbol in ("maj7", "m7", "7", "7alt"):
        chord = ChordFormula.by_name(symbol)
        notes = " ".join(str(n) for n in chord.notes_from_root(root))
        print(f"  D{symbol:<6} {str(chord):<22} {notes}")

    # Voice a ii-V-I in D major
    print()
    for offset, symbol in ((2, "m7"), (7, "7"), (0, "maj7")):
        chord_root = root + Semitone(offset)
        notes = ChordFormula.by_name(symbol).notes_from_root(chord_root.shift_down_octaves(1))
        messages = chord_messages(notes, velocity=96)
        print(f"  {chord_root.pitch_class().spell()}{symbol}: " + ", ".join(m.hex() for m in messages[: len(notes)]))


if __name__ == "__main__":
    main()
