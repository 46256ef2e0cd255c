from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the element names of the project descriptor, the property keys
read by the translators and the fixed literals of the generated script.
"""

from typing import Dict, Tuple

APP_NAME = "Jucer2CMake"
DEFAULT_OUTPUT_FILENAME = "CMakeLists.txt"
DEFAULT_CMAKE_MINIMUM_VERSION = "3.4"

# -----------------------------------------------------------------------------
# DESCRIPTOR ELEMENTS
# -----------------------------------------------------------------------------

ROOT_TAG = "JUCERPROJECT"
MAIN_GROUP_TAG = "MAINGROUP"
GROUP_TAG = "GROUP"
FILE_TAG = "FILE"
MODULES_TAG = "MODULES"
MODULE_PATHS_TAG = "MODULEPATHS"
EXPORT_FORMATS_TAG = "EXPORTFORMATS"
CONFIGURATIONS_TAG = "CONFIGURATIONS"
JUCE_OPTIONS_TAG = "JUCEOPTIONS"

# -----------------------------------------------------------------------------
# PROJECT TYPES
# -----------------------------------------------------------------------------

AUDIO_PLUGIN_TYPE = "audioplug"

PROJECT_TYPE_DESCRIPTIONS: Dict[str, str] = {
    "guiapp": "GUI Application",
    "consoleapp": "Console Application",
    "library": "Static Library",
    AUDIO_PLUGIN_TYPE: "Audio Plug-in",
}

JUCE6_ADD_FUNCTIONS: Dict[str, str] = {
    "guiapp": "juce_add_gui_app",
    "consoleapp": "juce_add_console_app",
    AUDIO_PLUGIN_TYPE: "juce_add_plugin",
}

# -----------------------------------------------------------------------------
# MODULE OPTIONS
# -----------------------------------------------------------------------------

MODULE_CONFIG_MARKER = "/** Config: "
OPTION_ENABLED = "enabled"
OPTION_DISABLED = "disabled"

PLUGIN_HOST_MODULE = "juce_audio_processors"
PLUGIN_HOST_VST3_OPTION = "JUCE_PLUGINHOST_VST3"

# -----------------------------------------------------------------------------
# EXPORTERS
# -----------------------------------------------------------------------------

MAC_VST3_SDK_FOLDER = "~/SDKs/VST_SDK/VST3_SDK"
WINDOWS_VST3_SDK_FOLDER = "c:\\SDKs\\VST_SDK\\VST3_SDK"

OSX_SDK_DEFAULT = "default"
OSX_SDK_USE_DEFAULT = "Use Default"
OSX_SDK_SUFFIX = " SDK"
OSX_SDKS: Tuple[str, ...] = (
    "10.5 SDK",
    "10.6 SDK",
    "10.7 SDK",
    "10.8 SDK",
    "10.9 SDK",
    "10.10 SDK",
    "10.11 SDK",
    "10.12 SDK",
)
