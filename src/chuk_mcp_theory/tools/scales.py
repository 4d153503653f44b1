"""
Scale tools - MCP tools for scale discovery and projection.

Tools for listing scale formulas, spelling a scale from a root, and
testing whether an interval belongs to a scale.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.core import ScaleFormula, Semitone
from chuk_mcp_theory.models import ScaleInfo
from chuk_mcp_theory.tools.notes import parse_note

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_scale_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register scale tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_scales() -> str:
        """
        List available scale formulas.

        Returns:
            JSON string with scale names and their degree formulas

        Example:
            theory_list_scales()
        """
        try:
            names = ScaleFormula.names()
            return json.dumps(
                {
                    "status": "success",
                    "scales": [
                        ScaleInfo.from_formula(name, ScaleFormula.by_name(name)).model_dump()
                        for name in names
                    ],
                    "count": len(names),
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_scales"] = theory_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def theory_scale_notes(root: str, scale: str = "major") -> str:
        """
        Spell a scale from a root note.

        Notes come back in ascending order.

        Args:
            root: Root note name or number (e.g., "C4", "60")
            scale: Scale name (e.g., "major", "natural minor", "blues")

        Returns:
            JSON string with the scale formula and its notes

        Example:
            theory_scale_notes(root="D4", scale="dorian")
        """
        try:
            formula = ScaleFormula.by_name(scale)
            info = ScaleInfo.from_formula(scale, formula, parse_note(root))
            return json.dumps({"status": "success", "scale": info.model_dump()})
        except Exception as e:
            logger.exception("Failed to spell scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_scale_notes"] = theory_scale_notes

    @mcp.tool  # type: ignore[arg-type]
    async def theory_scale_contains(scale: str, semitones: int) -> str:
        """
        Check whether an interval from the root belongs to a scale.

        The test ignores octaves: 4, 16 and -8 are all a major third.

        Args:
            scale: Scale name
            semitones: Interval from the root in semitones

        Returns:
            JSON string with the membership result

        Example:
            theory_scale_contains(scale="major", semitones=4)
        """
        try:
            formula = ScaleFormula.by_name(scale)
            interval = Semitone(semitones)
            return json.dumps(
                {
                    "status": "success",
                    "scale": scale,
                    "semitones": semitones,
                    "interval": str(interval),
                    "contains": formula.contains_semitone(interval),
                }
            )
        except Exception as e:
            logger.exception("Failed to check scale membership")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_scale_contains"] = theory_scale_contains

    return tools
