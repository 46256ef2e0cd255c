from __future__ import annotations

"""
Export Target Translation.

Walks the table of supported exporters and, for each one present in the
project, emits a jucer_export_target() block followed by one
jucer_export_target_configuration() block per build configuration.
"""

import logging
from typing import List, Sequence

from jucer2cmake.core.translation.formatting import (
    escape,
    format_setting,
    join,
    placeholder,
    split,
)
from jucer2cmake.domain.constants import (
    CONFIGURATIONS_TAG,
    EXPORT_FORMATS_TAG,
    JUCE_OPTIONS_TAG,
    MODULES_TAG,
    OPTION_ENABLED,
    PLUGIN_HOST_MODULE,
    PLUGIN_HOST_VST3_OPTION,
)
from jucer2cmake.domain.directive_models import Directive, quote
from jucer2cmake.domain.exporters import SUPPORTED_EXPORTERS, ExporterSpec
from jucer2cmake.domain.project_models import ProjectNode, children_of
from jucer2cmake.infra.fs import get_child_file, get_relative_path_from

logger = logging.getLogger(__name__)

BACKSLASH = "\\"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def translate_export_targets(
        project: ProjectNode,
        jucer_dir: str,
        exporters: Sequence[ExporterSpec] = SUPPORTED_EXPORTERS,
) -> List[Directive]:
    """
    Translate every supported exporter found in the project.

    Args:
        project: Root project node.
        jucer_dir: Directory of the project file.
        exporters: Exporter table, iterated in order.

    Returns:
        List[Directive]: Target blocks, each followed by its configurations.
    """
    export_formats = project.child_with_type(EXPORT_FORMATS_TAG)
    if export_formats is None:
        return []

    hosts_vst3 = hosts_vst3_plugins(project)

    directives: List[Directive] = []
    for spec in exporters:
        exporter = export_formats.child_with_type(spec.kind)
        if exporter is None:
            continue

        logger.debug(f"Translating exporter {spec.kind}")
        directives.append(translate_export_target(spec, exporter, hosts_vst3))

        for configuration in children_of(exporter, CONFIGURATIONS_TAG):
            directives.append(
                translate_configuration(spec, exporter, configuration, jucer_dir)
            )

    return directives


def hosts_vst3_plugins(project: ProjectNode) -> bool:
    """True when the project uses the plugin host module with VST3 hosting enabled."""
    modules = project.child_with_type(MODULES_TAG)
    options = project.child_with_type(JUCE_OPTIONS_TAG)
    return (
        modules is not None
        and modules.child_with_property("id", PLUGIN_HOST_MODULE) is not None
        and options is not None
        and options.get_string(PLUGIN_HOST_VST3_OPTION) == OPTION_ENABLED
    )


def translate_export_target(
        spec: ExporterSpec, exporter: ProjectNode, hosts_vst3: bool
) -> Directive:
    """Build the jucer_export_target() block of one exporter."""
    args = [quote(spec.display_name)]

    if hosts_vst3:
        folder = exporter.get_string("vst3Folder") or spec.default_vst3_folder
        args.append(f'VST3_SDK_FOLDER "{escape(BACKSLASH, folder)}"')

    args += [
        format_setting(exporter, "EXTRA_PREPROCESSOR_DEFINITIONS", "extraDefs"),
        format_setting(exporter, "EXTRA_COMPILER_FLAGS", "extraCompilerFlags"),
    ]
    return Directive("jucer_export_target", args=tuple(args))


def translate_configuration(
        spec: ExporterSpec,
        exporter: ProjectNode,
        configuration: ProjectNode,
        jucer_dir: str,
) -> Directive:
    """Build the jucer_export_target_configuration() block of one configuration."""
    args = [
        quote(spec.display_name),
        f"NAME {quote(configuration.get_string('name'))}",
        header_search_paths(
            configuration.get_string("headerPath"),
            jucer_dir,
            exporter.get_string("targetFolder"),
        ),
        format_setting(configuration, "PREPROCESSOR_DEFINITIONS", "defines"),
    ]

    if spec.configuration_policy is not None:
        args += spec.configuration_policy(configuration)

    return Directive("jucer_export_target_configuration", args=tuple(args))


def header_search_paths(raw_value: str, jucer_dir: str, target_folder: str) -> str:
    """
    Rebase the exporter's header search paths onto the project directory.

    Paths in the descriptor are relative to the exporter's target folder;
    Reprojucer expects them relative to the project file. Empty lines are
    dropped and backslashes are escaped for CMake.

    Args:
        raw_value: Newline-separated paths from 'headerPath'.
        jucer_dir: Directory of the project file.
        target_folder: The exporter's 'targetFolder', relative to jucer_dir.

    Returns:
        str: 'HEADER_SEARCH_PATHS "..."' or its placeholder when raw_value is empty.
    """
    if not raw_value:
        return placeholder("HEADER_SEARCH_PATHS")

    target_dir = get_child_file(jucer_dir, target_folder)
    paths = [
        get_relative_path_from(get_child_file(target_dir, p), jucer_dir)
        for p in split("\n", raw_value)
        if p
    ]
    joined = escape(BACKSLASH, join("\n", paths))
    return f'HEADER_SEARCH_PATHS "{joined}"'
