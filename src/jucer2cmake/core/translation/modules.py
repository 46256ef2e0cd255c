from __future__ import annotations

"""
Module Configuration Translation.

Emits one jucer_project_module() block per module declared by the project.
The module options are discovered in the module header, whose
'/** Config: NAME' comment lines announce each configurable flag, and
resolved against the project-wide JUCEOPTIONS node.
"""

import logging
import os
from typing import Callable, List, Optional

from jucer2cmake.domain.constants import (
    EXPORT_FORMATS_TAG,
    JUCE_OPTIONS_TAG,
    MODULE_CONFIG_MARKER,
    MODULE_PATHS_TAG,
    MODULES_TAG,
    OPTION_DISABLED,
    OPTION_ENABLED,
)
from jucer2cmake.domain.directive_models import Directive, quote
from jucer2cmake.domain.project_models import ProjectNode, children_of
from jucer2cmake.infra.fs import get_child_file, read_lines

logger = logging.getLogger(__name__)

HeaderReader = Callable[[str], List[str]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def translate_modules(
        project: ProjectNode,
        jucer_dir: str,
        header_extension: str = ".h",
        header_reader: HeaderReader = read_lines,
) -> List[Directive]:
    """
    Translate every declared module, in declaration order.

    Args:
        project: Root project node.
        jucer_dir: Directory of the project file; module paths are relative to it.
        header_extension: Extension of the module header file.
        header_reader: Returns the lines of a header file; raises OSError.

    Returns:
        List[Directive]: One jucer_project_module() per module.
    """
    module_ids = [m.get_string("id") for m in children_of(project, MODULES_TAG)]
    options = project.child_with_type(JUCE_OPTIONS_TAG)

    directives: List[Directive] = []
    for module_id in module_ids:
        relative_path = module_path(project, module_id)
        header = module_header_path(jucer_dir, relative_path, module_id, header_extension)
        header_lines = _read_header(header, header_reader)

        args = [f"PATH {quote(relative_path)}"]
        args += translate_module_options(header_lines, options)

        directives.append(
            Directive("jucer_project_module", args=(module_id, *args))
        )

    return directives


def module_path(project: ProjectNode, module_id: str) -> str:
    """
    Look up a module's relative path in the first exporter's path table.

    Returns '' when the table or the entry is missing.
    """
    entry = None
    export_formats = project.child_with_type(EXPORT_FORMATS_TAG)
    first_exporter = export_formats.child(0) if export_formats is not None else None
    if first_exporter is not None:
        paths = first_exporter.child_with_type(MODULE_PATHS_TAG)
        if paths is not None:
            entry = paths.child_with_property("id", module_id)

    if entry is None:
        logger.warning(f"No module path declared for '{module_id}'")
        return ""
    return entry.get_string("path")


def module_header_path(
        jucer_dir: str, relative_path: str, module_id: str, header_extension: str = ".h"
) -> str:
    """Location of '<path>/<id>/<id><ext>' relative to the project directory."""
    module_dir = get_child_file(get_child_file(jucer_dir, relative_path), module_id)
    return os.path.join(module_dir, module_id + header_extension)


def translate_module_options(
        header_lines: List[str], options: Optional[ProjectNode]
) -> List[str]:
    """
    Map each config marker line of a module header to a tri-state argument.

    Args:
        header_lines: Lines of the module header, in file order.
        options: The project's JUCEOPTIONS node (may be missing).

    Returns:
        List[str]: 'NAME ON', 'NAME OFF' or '# NAME' per declared option.
    """
    args: List[str] = []
    for line in header_lines:
        if not line.startswith(MODULE_CONFIG_MARKER):
            continue

        option = line[len(MODULE_CONFIG_MARKER):].rstrip()
        value = options.get_string(option) if options is not None else ""

        if value == OPTION_ENABLED:
            args.append(f"{option} ON")
        elif value == OPTION_DISABLED:
            args.append(f"{option} OFF")
        else:
            args.append(f"# {option}")

    return args

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _read_header(path: str, header_reader: HeaderReader) -> List[str]:
    try:
        return header_reader(path)
    except OSError as e:
        logger.warning(f"Cannot read module header '{path}': {e}; no options written")
        return []
