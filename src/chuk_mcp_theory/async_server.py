#!/usr/bin/env python3
"""
Async Theory MCP Server using chuk-mcp-server

This server provides MCP tools over the theory primitives: notes, pitch
classes, semitone intervals, and formula-based scales and chords.

The server provides tools for:
- Describing and transposing notes, measuring intervals
- Listing scale formulas and spelling scales from a root
- Listing chord formulas, spelling chords, and building MIDI messages
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theory.core import ChordFormula, ScaleFormula
from chuk_mcp_theory.tools import (
    register_chord_tools,
    register_note_tools,
    register_scale_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-theory")

# Register all tools
note_tools = register_note_tools(mcp)
scale_tools = register_scale_tools(mcp)
chord_tools = register_chord_tools(mcp)

# Export tool functions for direct access
theory_describe_note = note_tools["theory_describe_note"]
theory_transpose_note = note_tools["theory_transpose_note"]
theory_interval = note_tools["theory_interval"]

theory_list_scales = scale_tools["theory_list_scales"]
theory_scale_notes = scale_tools["theory_scale_notes"]
theory_scale_contains = scale_tools["theory_scale_contains"]

theory_list_chords = chord_tools["theory_list_chords"]
theory_chord_notes = chord_tools["theory_chord_notes"]
theory_chord_messages = chord_tools["theory_chord_messages"]

logger.info("CHUK Theory MCP Server initialized")
logger.info(f"  Scales: {len(ScaleFormula.names())}")
logger.info(f"  Chords: {len(ChordFormula.names())}")
