"""
Tests for the server entry point.
"""

import pytest

from chuk_mcp_theory.server import build_parser, main


class TestArguments:
    """Tests for command-line parsing."""

    def test_defaults(self) -> None:
        """stdio on port 8000 by default."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert not args.debug

    def test_http(self) -> None:
        """HTTP transport with a port."""
        args = build_parser().parse_args(["--transport", "http", "--port", "9000"])
        assert args.transport == "http"
        assert args.port == 9000

    def test_invalid_transport(self) -> None:
        """Unknown transports are rejected."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "carrier-pigeon"])

    def test_list_tools(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--list-tools prints every tool and exits."""
        main(["--list-tools"])
        lines = capsys.readouterr().out.split()
        assert "theory_describe_note" in lines
        assert "theory_scale_notes" in lines
        assert "theory_chord_messages" in lines
        assert len(lines) == 9
