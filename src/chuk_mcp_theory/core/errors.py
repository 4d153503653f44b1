"""
Errors raised by the core value types.

Both subclass ValueError, so callers that already catch ValueError keep working.
"""

from __future__ import annotations


class NoteRangeError(ValueError):
    """A note value, or the result of note arithmetic, fell outside the note range."""


class DuplicateDegreeError(ValueError):
    """A chord formula already holds the same degree with the same alteration."""
