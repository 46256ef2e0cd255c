from __future__ import annotations

"""
Directive Record Models.

Translators produce sequences of these records instead of text. The
emitter is the only component that turns them into CMake source.
"""

from dataclasses import dataclass
from typing import Tuple, Union

# -----------------------------------------------------------------------------
# RECORD TYPES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Directive:
    """
    One CMake command invocation.

    Attributes:
        name: Command name (e.g. 'jucer_project_settings').
        head: Text placed right after the opening parenthesis.
        args: Ordered arguments, one per output line.
        indent: Number of spaces before the command name.
        blank_lines: Empty lines emitted after the closing parenthesis.
    """
    name: str
    head: str = ""
    args: Tuple[str, ...] = ()
    indent: int = 0
    blank_lines: int = 1


@dataclass(frozen=True)
class RawLine:
    """A literal line of text (comment or blank line)."""
    text: str = ""
    blank_lines: int = 0


Record = Union[Directive, RawLine]


def quote(value: str) -> str:
    """Wrap a value in double quotes without escaping."""
    return f'"{value}"'
