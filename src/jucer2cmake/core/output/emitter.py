from __future__ import annotations

"""
Directive Emitter.

Single serialization pass from directive records to CMake source text.
Translators never produce text themselves, so the layout rules below are
the only place where indentation and spacing are decided.
"""

import logging
from typing import Iterable, List

from jucer2cmake.domain.directive_models import RawLine, Record
from jucer2cmake.infra.fs import write_text_file

logger = logging.getLogger(__name__)

ARG_INDENT = "  "

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

def render_record(record: Record) -> List[str]:
    """
    Render one record into output lines, trailing blank lines included.

    A directive without arguments is written on one line as 'name(head)'.
    Otherwise the head stays on the opening line and each argument gets its
    own line:

        name(head
          arg1
          arg2
        )
    """
    if isinstance(record, RawLine):
        return [record.text] + [""] * record.blank_lines

    prefix = " " * record.indent
    if not record.args:
        lines = [f"{prefix}{record.name}({record.head})"]
    else:
        lines = [f"{prefix}{record.name}({record.head}"]
        lines += [f"{prefix}{ARG_INDENT}{arg}" for arg in record.args]
        lines.append(f"{prefix})")

    return lines + [""] * record.blank_lines


def render_directives(records: Iterable[Record]) -> str:
    """
    Serialize records into the final script text.

    Returns:
        str: Script content terminated by a newline.
    """
    lines: List[str] = []
    for record in records:
        lines += render_record(record)
    return "\n".join(lines) + "\n"

# -----------------------------------------------------------------------------
# PERSISTENCE
# -----------------------------------------------------------------------------

def write_output(path: str, text: str) -> None:
    """
    Write the rendered script to disk.

    Raises:
        OSError: If the file cannot be written. A partially written file
                 is not cleaned up.
    """
    write_text_file(path, text)
    logger.info(f"Wrote {path}")
