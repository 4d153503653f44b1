"""
Pydantic models for the theory system.

This module provides:
- NoteInfo: A note with its derived properties
- ScaleInfo: A scale formula, optionally projected onto a root
- ChordInfo: A chord formula, optionally projected onto a root
"""

from chuk_mcp_theory.models.theory import ChordInfo, NoteInfo, ScaleInfo

__all__ = [
    "ChordInfo",
    "NoteInfo",
    "ScaleInfo",
]
