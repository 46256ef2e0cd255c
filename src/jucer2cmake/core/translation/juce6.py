from __future__ import annotations

"""
JUCE 6 Script Translation.

Alternative output flavour targeting the CMake API that ships with JUCE 6
(find_package(JUCE) and the juce_add_* functions) instead of Reprojucer.
Only the project name and type are carried over.
"""

import logging
from typing import List

from jucer2cmake.domain.constants import AUDIO_PLUGIN_TYPE, JUCE6_ADD_FUNCTIONS
from jucer2cmake.domain.directive_models import Directive, RawLine, Record, quote
from jucer2cmake.domain.errors import UnsupportedProjectTypeError
from jucer2cmake.domain.project_models import ProjectNode

logger = logging.getLogger(__name__)

PLUGIN_FORMATS = ("AU", "VST3", "Standalone")


def translate_juce6(project: ProjectNode) -> List[Record]:
    """
    Build a complete JUCE 6 CMakeLists.txt.

    Args:
        project: Root project node.

    Returns:
        List[Record]: Records in output order.

    Raises:
        UnsupportedProjectTypeError: For project types JUCE 6 cannot add
                                     (e.g. static libraries).
    """
    project_type = project.get_string("projectType")
    project_name = project.get_string("name")

    add_function = JUCE6_ADD_FUNCTIONS.get(project_type)
    if add_function is None:
        raise UnsupportedProjectTypeError(
            f"project type '{project_type}' is not supported by the JUCE 6 output"
        )

    is_plugin = project_type == AUDIO_PLUGIN_TYPE
    cmake_version = "3.15" if is_plugin else "3.12"
    logger.debug(f"JUCE 6 target '{project_name}' added with {add_function}()")

    target_args = ['VERSION "1.0.0"']
    if is_plugin:
        target_args.append("FORMATS " + " ".join(quote(f) for f in PLUGIN_FORMATS))

    return [
        RawLine(""),
        Directive("cmake_minimum_required", head=f"VERSION {cmake_version}"),
        Directive("project", head=quote(project_name), blank_lines=2),
        Directive("find_package", head="JUCE CONFIG REQUIRED", blank_lines=2),
        Directive(add_function, head=project_name, args=tuple(target_args)),
        Directive("juce_generate_juce_header", head=project_name, blank_lines=0),
    ]
