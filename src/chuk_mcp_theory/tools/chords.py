"""
Chord tools - MCP tools for chord discovery, voicing and MIDI hand-off.

Tools for listing chord formulas, spelling a chord from a root, and
building the note_on/note_off messages for a block chord.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import DEFAULT_VELOCITY
from chuk_mcp_theory.core import ChordFormula
from chuk_mcp_theory.midi import chord_messages
from chuk_mcp_theory.models import ChordInfo
from chuk_mcp_theory.tools.notes import parse_note

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def resolve_chord(chord: str) -> ChordFormula:
    """
    Read a chord from a tool argument.

    Accepts a registered name or symbol ("dominant seventh", "m7") or a
    degree formula ("1-3-5-b7").
    """
    try:
        return ChordFormula.by_name(chord)
    except ValueError:
        logger.debug(f"'{chord}' is not a chord name, parsing as a formula")
    return ChordFormula.parse(chord)


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_chords() -> str:
        """
        List available chord formulas.

        Returns:
            JSON string with chord names and their degree formulas

        Example:
            theory_list_chords()
        """
        try:
            names = ChordFormula.names()
            return json.dumps(
                {
                    "status": "success",
                    "chords": [
                        ChordInfo.from_formula(name, ChordFormula.by_name(name)).model_dump()
                        for name in names
                    ],
                    "count": len(names),
                }
            )
        except Exception as e:
            logger.exception("Failed to list chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_chords"] = theory_list_chords

    @mcp.tool  # type: ignore[arg-type]
    async def theory_chord_notes(root: str, chord: str) -> str:
        """
        Spell a chord from a root note.

        Notes come back in formula order, one per degree.

        Args:
            root: Root note name or number (e.g., "C4")
            chord: Chord name ("minor seventh", "m7") or degree formula ("1-b3-5-b7")

        Returns:
            JSON string with the chord formula, offsets and notes

        Example:
            theory_chord_notes(root="G3", chord="1-3-5-b7-b9")
        """
        try:
            formula = resolve_chord(chord)
            info = ChordInfo.from_formula(chord, formula, parse_note(root))
            return json.dumps({"status": "success", "chord": info.model_dump()})
        except Exception as e:
            logger.exception("Failed to spell chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_chord_notes"] = theory_chord_notes

    @mcp.tool  # type: ignore[arg-type]
    async def theory_chord_messages(
        root: str,
        chord: str,
        velocity: int = DEFAULT_VELOCITY,
        channel: int = 0,
    ) -> str:
        """
        Build MIDI messages for a block chord.

        All note_on messages come first, then all note_off messages.
        Every note must be within MIDI 0-127.

        Args:
            root: Root note name or number
            chord: Chord name or degree formula
            velocity: Note-on velocity (0-127)
            channel: MIDI channel (0-15)

        Returns:
            JSON string with the messages as hex strings

        Example:
            theory_chord_messages(root="C4", chord="maj7", velocity=90)
        """
        try:
            notes = resolve_chord(chord).notes_from_root(parse_note(root))
            messages = chord_messages(notes, velocity, channel)
            return json.dumps(
                {
                    "status": "success",
                    "notes": [str(n) for n in notes],
                    "messages": [
                        {"type": m.type, "note": m.note, "velocity": m.velocity, "hex": m.hex()}
                        for m in messages
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to build chord messages")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_chord_messages"] = theory_chord_messages

    return tools
