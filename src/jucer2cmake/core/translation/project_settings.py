from __future__ import annotations

"""
Project Settings Translation.

Builds the jucer_project_begin(), jucer_project_settings() and
jucer_audio_plugin_settings() directives from the root project node.
"""

import logging
from typing import List

from jucer2cmake.core.translation.formatting import (
    format_on_off_setting,
    format_setting,
)
from jucer2cmake.domain.constants import AUDIO_PLUGIN_TYPE, PROJECT_TYPE_DESCRIPTIONS
from jucer2cmake.domain.directive_models import Directive
from jucer2cmake.domain.project_models import ProjectNode

logger = logging.getLogger(__name__)

# (argument keyword, property key) pairs, in the order Reprojucer documents them
_PROJECT_SETTINGS_HEAD = (
    ("PROJECT_NAME", "name"),
    ("PROJECT_VERSION", "version"),
    ("COMPANY_NAME", "companyName"),
    ("COMPANY_WEBSITE", "companyWebsite"),
    ("COMPANY_EMAIL", "companyEmail"),
)

_PLUGIN_SETTINGS = (
    ("BUILD_VST", "buildVST", True),
    ("BUILD_AUDIOUNIT", "buildAU", True),
    ("PLUGIN_NAME", "pluginName", False),
    ("PLUGIN_DESCRIPTION", "pluginDesc", False),
    ("PLUGIN_MANUFACTURER", "pluginManufacturer", False),
    ("PLUGIN_MANUFACTURER_CODE", "pluginManufacturerCode", False),
    ("PLUGIN_CODE", "pluginCode", False),
    ("PLUGIN_CHANNEL_CONFIGURATIONS", "pluginChannelConfigs", False),
    ("PLUGIN_IS_A_SYNTH", "pluginIsSynth", True),
    ("PLUGIN_MIDI_INPUT", "pluginWantsMidiIn", True),
    ("PLUGIN_MIDI_OUTPUT", "pluginProducesMidiOut", True),
    ("MIDI_EFFECT_PLUGIN", "pluginIsMidiEffectPlugin", True),
    ("KEY_FOCUS", "pluginEditorRequiresKeys", True),
    ("PLUGIN_AU_EXPORT_PREFIX", "pluginAUExportPrefix", False),
    ("PLUGIN_AU_MAIN_TYPE", "pluginAUMainType", False),
    ("VST_CATEGORY", "pluginVSTCategory", False),
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def project_type_description(project_type: str) -> str:
    """Human-readable project type, or '' for unknown types."""
    return PROJECT_TYPE_DESCRIPTIONS.get(project_type, "")


def translate_project_begin(project: ProjectNode, file_variable: str) -> List[Directive]:
    """
    Open the project block.

    Args:
        project: Root project node.
        file_variable: CMake variable holding the project file path.
    """
    return [
        Directive(
            "jucer_project_begin",
            args=(
                f'PROJECT_FILE "${{{file_variable}}}"',
                format_setting(project, "PROJECT_ID", "id"),
            ),
        )
    ]


def translate_project_settings(project: ProjectNode) -> List[Directive]:
    """
    Translate the general settings and, for plugins, the plugin settings.

    Args:
        project: Root project node.

    Returns:
        List[Directive]: One or two directives.
    """
    project_type = project.get_string("projectType")
    description = project_type_description(project_type)
    if not description:
        logger.warning(f"Unknown project type '{project_type}'")

    args = [format_setting(project, tag, key) for tag, key in _PROJECT_SETTINGS_HEAD]
    args += [
        f'PROJECT_TYPE "{description}"',
        format_setting(project, "BUNDLE_IDENTIFIER", "bundleIdentifier"),
        'BINARYDATACPP_SIZE_LIMIT "Default"',
        format_setting(project, "BINARYDATA_NAMESPACE", "binaryDataNamespace"),
        format_setting(project, "PREPROCESSOR_DEFINITIONS", "defines"),
    ]
    directives = [Directive("jucer_project_settings", args=tuple(args))]

    if project_type == AUDIO_PLUGIN_TYPE:
        directives.append(translate_audio_plugin_settings(project))

    return directives


def translate_audio_plugin_settings(project: ProjectNode) -> Directive:
    """Translate the audio plug-in specific settings."""
    args = []
    for tag, key, is_flag in _PLUGIN_SETTINGS:
        if is_flag:
            args.append(format_on_off_setting(project, tag, key))
        else:
            args.append(format_setting(project, tag, key))
    return Directive("jucer_audio_plugin_settings", args=tuple(args))
