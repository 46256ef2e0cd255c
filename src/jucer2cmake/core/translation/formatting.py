from __future__ import annotations

"""
Property Formatting.

Turns single property lookups into directive argument tokens. A property
that is absent or empty is never an error: it yields a commented-out
placeholder so the generated script documents every available setting.
"""

import logging
from typing import Iterable, List

from jucer2cmake.domain.errors import PropertyTypeError
from jucer2cmake.domain.project_models import ProjectNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# STRING HELPERS
# -----------------------------------------------------------------------------

def escape(chars_to_escape: str, value: str) -> str:
    """
    Prefix every occurrence of the given characters with a backslash.

    Scans left to right; after an insertion the scan resumes past the
    escaped character, so inserted backslashes are never rescanned.

    Args:
        chars_to_escape: Characters needing a backslash (e.g. '"' or '\\\\').
        value: Raw text.

    Returns:
        str: Escaped text.
    """
    out: List[str] = []
    for c in value:
        if c in chars_to_escape:
            out.append("\\")
        out.append(c)
    return "".join(out)


def placeholder(tag: str) -> str:
    """Commented-out argument for an unset property."""
    return f"# {tag}"


def split(separator: str, value: str) -> List[str]:
    """Split value on separator, keeping empty segments ('' gives [''])."""
    return value.split(separator)


def join(separator: str, items: Iterable[str]) -> str:
    return separator.join(items)

# -----------------------------------------------------------------------------
# PROPERTY FORMATTERS
# -----------------------------------------------------------------------------

def format_setting(node: ProjectNode, tag: str, key: str) -> str:
    """
    Format a text property as 'TAG "value"' with quotes escaped.

    Args:
        node: Node owning the property.
        tag: Directive argument keyword.
        key: Property name.

    Returns:
        str: The argument, or '# TAG' when the property is absent or empty.
    """
    value = node.get_string(key)
    if not value:
        return placeholder(tag)
    escaped = escape('"', value)
    return f'{tag} "{escaped}"'


def format_on_off_setting(node: ProjectNode, tag: str, key: str) -> str:
    """
    Format an integer flag as 'TAG ON' (non-zero) or 'TAG OFF' (zero).

    Args:
        node: Node owning the property.
        tag: Directive argument keyword.
        key: Property name.

    Returns:
        str: The argument, or '# TAG' when the property is absent or
             cannot be read as an integer.
    """
    if not node.has_property(key):
        return placeholder(tag)
    try:
        value = node.get_int(key)
    except PropertyTypeError as e:
        logger.warning(f"{e}; writing {tag} as unset")
        return placeholder(tag)
    return f"{tag} {'ON' if value else 'OFF'}"
