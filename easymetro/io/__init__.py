"""Input abstractions for the metro line network.

This subpackage turns the human-authored line specification text into
a populated LineNetwork.
"""

from .lines_spec import parse_line_declaration, parse_lines_spec

__all__ = ["parse_line_declaration", "parse_lines_spec"]
