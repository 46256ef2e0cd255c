from __future__ import annotations

"""
Supported Export Targets.

Declarative table of the exporters the translator understands. Each entry
names the descriptor element, the display name used by the Reprojucer
macros, the fallback VST3 SDK folder and an optional policy producing the
extra arguments of each configuration block.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from jucer2cmake.domain.constants import (
    MAC_VST3_SDK_FOLDER,
    OSX_SDK_DEFAULT,
    OSX_SDK_SUFFIX,
    OSX_SDK_USE_DEFAULT,
    OSX_SDKS,
    WINDOWS_VST3_SDK_FOLDER,
)
from jucer2cmake.domain.project_models import ProjectNode

ConfigurationPolicy = Callable[[ProjectNode], List[str]]


@dataclass(frozen=True)
class ExporterSpec:
    """
    Static description of one supported exporter.

    Attributes:
        kind: Element tag under EXPORTFORMATS (e.g. 'XCODE_MAC').
        display_name: Exporter name expected by jucer_export_target().
        default_vst3_folder: Used when the exporter leaves vst3Folder empty.
        configuration_policy: Extra arguments for each configuration block.
    """
    kind: str
    display_name: str
    default_vst3_folder: str
    configuration_policy: Optional[ConfigurationPolicy] = None


# -----------------------------------------------------------------------------
# CONFIGURATION POLICIES
# -----------------------------------------------------------------------------

def validate_osx_sdk(value: str, tag: str, strip_suffix: bool = False) -> str:
    """
    Map a macOS SDK property to a directive argument.

    'default' maps to "Use Default", a listed SDK passes through (optionally
    without its ' SDK' suffix), anything else becomes a placeholder.
    """
    if value == OSX_SDK_DEFAULT:
        return f'{tag} "{OSX_SDK_USE_DEFAULT}"'
    if value in OSX_SDKS:
        if strip_suffix:
            value = value[:-len(OSX_SDK_SUFFIX)]
        return f'{tag} "{value}"'
    return f"# {tag}"


def macos_sdk_policy(configuration: ProjectNode) -> List[str]:
    """Base SDK and deployment target arguments of an Xcode configuration."""
    return [
        validate_osx_sdk(configuration.get_string("osxSDK"), "OSX_BASE_SDK_VERSION"),
        validate_osx_sdk(
            configuration.get_string("osxCompatibility"),
            "OSX_DEPLOYMENT_TARGET",
            strip_suffix=True,
        ),
    ]


# -----------------------------------------------------------------------------
# EXPORTER TABLE
# -----------------------------------------------------------------------------

SUPPORTED_EXPORTERS: Tuple[ExporterSpec, ...] = (
    ExporterSpec("XCODE_MAC", "Xcode (MacOSX)", MAC_VST3_SDK_FOLDER, macos_sdk_policy),
    ExporterSpec("VS2015", "Visual Studio 2015", WINDOWS_VST3_SDK_FOLDER),
    ExporterSpec("VS2013", "Visual Studio 2013", WINDOWS_VST3_SDK_FOLDER),
)
