from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path resolution and text I/O primitives used by the translators. Paths are
resolved lexically (no symlink resolution) so that the generated script only
depends on the project layout, not on the machine running the tool.
"""

import os
from typing import List

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_parent_directory(path: str) -> str:
    """Return the absolute directory containing path."""
    return os.path.dirname(os.path.abspath(path))


def get_child_file(base_dir: str, relative_path: str) -> str:
    """
    Resolve a project-relative path against a base directory.

    Absolute paths and home-relative paths ('~') are taken as they are;
    '.' and '..' components are folded lexically.

    Args:
        base_dir: Absolute directory used as anchor.
        relative_path: Path as written in the project descriptor.

    Returns:
        str: Normalized absolute path.
    """
    p = (relative_path or "").strip()
    if not p:
        return os.path.normpath(base_dir)
    if p.startswith("~"):
        return os.path.normpath(os.path.expanduser(p))
    if os.path.isabs(p):
        return os.path.normpath(p)
    return os.path.normpath(os.path.join(base_dir, p))


def get_relative_path_from(path: str, base_dir: str) -> str:
    """
    Express path relative to base_dir.

    Returns the absolute path when the two only share the filesystem root,
    or when no relative form exists (e.g. different drives on Windows).
    """
    try:
        common = os.path.commonpath([os.path.abspath(path), os.path.abspath(base_dir)])
        if os.path.dirname(common) == common:
            return os.path.normpath(path)
        return os.path.relpath(path, base_dir)
    except ValueError:
        return os.path.normpath(path)

# -----------------------------------------------------------------------------
# TEXT I/O API
# -----------------------------------------------------------------------------

def read_lines(path: str) -> List[str]:
    """
    Read a text file as a list of lines without line terminators.

    Raises:
        OSError: If the file cannot be opened.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read().splitlines()


def write_text_file(path: str, text: str) -> None:
    """
    Write text to path with '\\n' line endings, creating parent directories.

    Raises:
        OSError: If the file cannot be written.
    """
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)
