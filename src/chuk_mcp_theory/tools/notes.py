"""
Note tools - MCP tools for note inspection and transposition.

Tools for describing notes, transposing them by semitones, and measuring
the interval between two notes.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.core import Note, Semitone
from chuk_mcp_theory.models import NoteInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def parse_note(value: str | int) -> Note:
    """
    Read a note from a tool argument.

    Accepts a note number (60 or "60") or a name ("C4", "Db-1").
    """
    if isinstance(value, int):
        return Note(value)
    text = value.strip()
    if text.lstrip("-").isdigit():
        return Note(int(text))
    return Note.parse(text)


def register_note_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register note tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_describe_note(note: str) -> str:
        """
        Describe a note.

        Returns the note's spellings, number, pitch class, octave and frequency.

        Args:
            note: Note name (e.g., "C4", "F#3") or note number (e.g., "60")

        Returns:
            JSON string with note details

        Example:
            theory_describe_note(note="A4")
        """
        try:
            info = NoteInfo.from_note(parse_note(note))
            return json.dumps({"status": "success", "note": info.model_dump()})
        except Exception as e:
            logger.exception("Failed to describe note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_describe_note"] = theory_describe_note

    @mcp.tool  # type: ignore[arg-type]
    async def theory_transpose_note(note: str, semitones: int) -> str:
        """
        Transpose a note by a number of semitones.

        Fails if the result leaves the note range; notes never wrap.

        Args:
            note: Note name or number
            semitones: Signed semitone count (e.g., 7 for a fifth up, -12 for an octave down)

        Returns:
            JSON string with the original and transposed notes

        Example:
            theory_transpose_note(note="C4", semitones=7)
        """
        try:
            start = parse_note(note)
            result = start + Semitone(semitones)
            return json.dumps(
                {
                    "status": "success",
                    "from": NoteInfo.from_note(start).model_dump(),
                    "to": NoteInfo.from_note(result).model_dump(),
                    "interval": str(Semitone(semitones)),
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_transpose_note"] = theory_transpose_note

    @mcp.tool  # type: ignore[arg-type]
    async def theory_interval(from_note: str, to_note: str) -> str:
        """
        Measure the interval between two notes.

        Args:
            from_note: Starting note name or number
            to_note: Target note name or number

        Returns:
            JSON string with the signed semitone distance and interval name

        Example:
            theory_interval(from_note="C4", to_note="G4")
        """
        try:
            distance = parse_note(to_note) - parse_note(from_note)
            return json.dumps(
                {
                    "status": "success",
                    "semitones": distance.value,
                    "interval": str(distance),
                    "pitch_class_interval": distance.pitch_class().value,
                }
            )
        except Exception as e:
            logger.exception("Failed to measure interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_interval"] = theory_interval

    return tools
