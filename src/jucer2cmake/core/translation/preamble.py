from __future__ import annotations

"""
Script Preamble Translation.

Builds the opening of a Reprojucer script: provenance comment, minimum
CMake version, Reprojucer include and the guard requiring the
'<NAME>_FILE' variable to be defined by whoever configures the build.
"""

from typing import List

from jucer2cmake.domain.constants import APP_NAME, DEFAULT_CMAKE_MINIMUM_VERSION
from jucer2cmake.domain.directive_models import Directive, RawLine, Record


def file_variable_name(jucer_file_name: str) -> str:
    """
    CMake variable holding the project file path.

    Every character that is not an ASCII letter or digit becomes '_',
    e.g. 'My Plugin.jucer' -> 'My_Plugin_jucer_FILE'.
    """
    stem = "".join(c if c.isascii() and c.isalnum() else "_" for c in jucer_file_name)
    return f"{stem}_FILE"


def translate_preamble(
        jucer_file_name: str,
        reprojucer_dir: str,
        cmake_minimum_version: str = DEFAULT_CMAKE_MINIMUM_VERSION,
) -> List[Record]:
    """
    Build the records preceding jucer_project_begin().

    Args:
        jucer_file_name: Base name of the project file.
        reprojucer_dir: Directory of Reprojucer.cmake relative to the script,
                        with forward slashes.
        cmake_minimum_version: Value for cmake_minimum_required().

    Returns:
        List[Record]: Preamble records in output order.
    """
    variable = file_variable_name(jucer_file_name)
    module_path = f"${{CMAKE_CURRENT_LIST_DIR}}/{reprojucer_dir}"

    return [
        RawLine(f"# This file was generated by {APP_NAME} from {jucer_file_name}", 1),
        Directive("cmake_minimum_required", head=f"VERSION {cmake_minimum_version}", blank_lines=2),
        Directive("list", head=f'APPEND CMAKE_MODULE_PATH "{module_path}"', blank_lines=0),
        Directive("include", head="Reprojucer", blank_lines=2),
        Directive("if", head=f"NOT DEFINED {variable}", blank_lines=0),
        Directive(
            "message", head=f'FATAL_ERROR "{variable} must be defined"', indent=2, blank_lines=0
        ),
        Directive("endif"),
        Directive(
            "get_filename_component",
            head=variable,
            args=(f'"${{{variable}}}" ABSOLUTE', 'BASE_DIR "${CMAKE_BINARY_DIR}"'),
            blank_lines=2,
        ),
    ]


def translate_project_end() -> List[Directive]:
    return [Directive("jucer_project_end", blank_lines=0)]
