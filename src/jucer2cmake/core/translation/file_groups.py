from __future__ import annotations

"""
File Group Translation.

Walks the MAINGROUP tree depth-first and emits one jucer_project_files()
block (plus its header-only marker) and one jucer_project_resources() block
per run of files, keyed by the '/'-joined group path.

The walk uses an explicit stack of frames instead of recursion. A frame
accumulates the files met since its last flush; it is flushed when a nested
group is entered and once more when its children are exhausted. A group
holding files on both sides of a subgroup therefore produces a block before
and a block after the subgroup's own blocks.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple

from jucer2cmake.domain.constants import FILE_TAG
from jucer2cmake.domain.directive_models import Directive, quote
from jucer2cmake.domain.errors import PropertyTypeError
from jucer2cmake.domain.project_models import ProjectNode

logger = logging.getLogger(__name__)

HEADER_ONLY_PATH_PREFIX = "${JUCER_PROJECT_DIR}/"

# -----------------------------------------------------------------------------
# TRAVERSAL STATE
# -----------------------------------------------------------------------------

@dataclass
class GroupFrame:
    """
    One entry of the traversal stack.

    Attributes:
        name: Group name as written in the descriptor.
        children: Iterator over the group's remaining children.
        file_paths: Source files since the last flush.
        header_only_paths: Subset of file_paths excluded from compilation.
        resource_paths: Resource files since the last flush.
    """
    name: str
    children: Iterator[ProjectNode]
    file_paths: List[str] = field(default_factory=list)
    header_only_paths: List[str] = field(default_factory=list)
    resource_paths: List[str] = field(default_factory=list)

    def add_file(self, file: ProjectNode, compiled_extensions: Sequence[str]) -> None:
        path = file.get_string("file")

        if _int_flag(file, "resource", 0) == 1:
            self.resource_paths.append(path)
            return

        self.file_paths.append(path)
        if has_extension(path, compiled_extensions) and _int_flag(file, "compile", 1) == 0:
            self.header_only_paths.append(path)

    def flush(self, full_group_name: str) -> List[Directive]:
        """Emit the pending blocks under full_group_name and clear them."""
        directives = build_group_directives(
            full_group_name, self.file_paths, self.header_only_paths, self.resource_paths
        )
        self.file_paths = []
        self.header_only_paths = []
        self.resource_paths = []
        return directives

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def translate_file_groups(
        main_group: ProjectNode,
        compiled_extensions: Sequence[str] = (".cpp",),
        include_root_group: bool = True,
) -> List[Directive]:
    """
    Translate the whole group tree into file and resource directives.

    Args:
        main_group: The MAINGROUP node.
        compiled_extensions: Extensions honouring the 'compile' flag.
        include_root_group: Whether the MAINGROUP name starts every full name.

    Returns:
        List[Directive]: Blocks in depth-first document order.
    """
    directives: List[Directive] = []
    stack: List[GroupFrame] = [_enter(main_group)]
    first_named = 0 if include_root_group else 1

    while stack:
        frame = stack[-1]
        item = next(frame.children, None)

        if item is None:
            directives += frame.flush(full_group_name(stack, first_named))
            stack.pop()
            continue

        if item.has_type(FILE_TAG):
            frame.add_file(item, compiled_extensions)
            continue

        directives += frame.flush(full_group_name(stack, first_named))
        stack.append(_enter(item))

    return directives


def full_group_name(stack: Sequence[GroupFrame], first: int = 0) -> str:
    """Join the names of the frames on the stack, root to leaf."""
    return "/".join(frame.name for frame in stack[first:])


def build_group_directives(
        full_group_name: str,
        file_paths: Sequence[str],
        header_only_paths: Sequence[str],
        resource_paths: Sequence[str],
) -> List[Directive]:
    """
    Build the directives for one flushed run of files.

    Empty lists produce no directive at all.
    """
    directives: List[Directive] = []
    group = quote(full_group_name)

    if file_paths:
        # The header-only marker belongs to the block it follows
        directives.append(
            Directive(
                "jucer_project_files",
                head=group,
                args=_quoted(file_paths),
                blank_lines=0 if header_only_paths else 1,
            )
        )
        if header_only_paths:
            args = _quoted(HEADER_ONLY_PATH_PREFIX + p for p in header_only_paths)
            args += ("PROPERTIES HEADER_FILE_ONLY TRUE",)
            directives.append(Directive("set_source_files_properties", args=args))

    if resource_paths:
        directives.append(
            Directive("jucer_project_resources", head=group, args=_quoted(resource_paths))
        )

    return directives


def has_extension(path: str, extensions: Sequence[str]) -> bool:
    """Case-insensitive extension test ('.cpp' matches 'Main.CPP')."""
    ext = os.path.splitext(path)[1].lower()
    return bool(ext) and ext in (e.lower() for e in extensions)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _enter(group: ProjectNode) -> GroupFrame:
    logger.debug(f"Entering group '{group.get_string('name')}'")
    return GroupFrame(name=group.get_string("name"), children=iter(group.children))


def _quoted(values: Iterable[str]) -> Tuple[str, ...]:
    return tuple(quote(v) for v in values)


def _int_flag(file: ProjectNode, key: str, default: int) -> int:
    try:
        return file.get_int(key, default)
    except PropertyTypeError as e:
        logger.warning(f"{e}; assuming {default}")
        return default
