"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_theory.core import Note


@pytest.fixture
def middle_c() -> Note:
    """Middle C (note 60)."""
    return Note(60)
