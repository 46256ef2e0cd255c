from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared sample project descriptors used by integration and E2E tests.
"""

import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Sample Descriptors
# -----------------------------------------------------------------------------
CONSOLE_APP_JUCER = """<?xml version="1.0" encoding="UTF-8"?>
<JUCERPROJECT id="Xy12Zw" name="HelloWorld" projectType="consoleapp" version="1.0.0">
  <MAINGROUP id="mg" name="Source">
    <FILE id="f1" name="Main.cpp" compile="1" resource="0" file="Source/Main.cpp"/>
  </MAINGROUP>
</JUCERPROJECT>
"""

PLUGIN_JUCER = """<?xml version="1.0" encoding="UTF-8"?>
<JUCERPROJECT id="AbC123" name="Gain" projectType="audioplug" version="0.9.1"
              companyName="Acme &quot;Audio&quot;" bundleIdentifier="com.acme.gain"
              buildVST="1" buildAU="0" pluginName="Gain" pluginCode="Gain">
  <MAINGROUP id="mg" name="Gain">
    <GROUP id="g1" name="Source">
      <FILE id="f1" name="PluginProcessor.cpp" compile="1" resource="0"
            file="Source/PluginProcessor.cpp"/>
      <FILE id="f2" name="PluginProcessor.h" compile="0" resource="0"
            file="Source/PluginProcessor.h"/>
      <FILE id="f3" name="Inlined.cpp" compile="0" resource="0" file="Source/Inlined.cpp"/>
    </GROUP>
    <GROUP id="g2" name="Assets">
      <FILE id="f4" name="logo.png" compile="0" resource="1" file="Assets/logo.png"/>
    </GROUP>
  </MAINGROUP>
  <MODULES>
    <MODULE id="juce_core" showAllCode="1"/>
    <MODULE id="juce_audio_processors" showAllCode="1"/>
  </MODULES>
  <JUCEOPTIONS JUCE_FORCE_DEBUG="enabled" JUCE_PLUGINHOST_VST3="enabled"/>
  <EXPORTFORMATS>
    <XCODE_MAC targetFolder="Builds/MacOSX">
      <CONFIGURATIONS>
        <CONFIGURATION name="Debug" isDebug="1" osxSDK="default"
                       osxCompatibility="10.9 SDK" headerPath="../../include"/>
      </CONFIGURATIONS>
      <MODULEPATHS>
        <MODULEPATH id="juce_core" path="modules"/>
        <MODULEPATH id="juce_audio_processors" path="modules"/>
      </MODULEPATHS>
    </XCODE_MAC>
  </EXPORTFORMATS>
</JUCERPROJECT>
"""

JUCE_CORE_HEADER = """/*
  BEGIN_JUCE_MODULE_DECLARATION
   ID: juce_core
  END_JUCE_MODULE_DECLARATION
*/
/** Config: JUCE_FORCE_DEBUG
    Normally, JUCE_DEBUG is set to 1 or 0 based on compiler and project settings.
*/
/** Config: JUCE_LOG_ASSERTIONS
*/
"""


@pytest.fixture
def write_project(tmp_path: Path) -> Callable[[str, str], Path]:
    """
    Return a factory writing a descriptor into a fresh project directory.

    Returns:
        Callable[[str, str], Path]: factory(content, file_name) -> .jucer path.
    """
    def _write(content: str, file_name: str = "Project.jucer") -> Path:
        project_dir = tmp_path / "project"
        project_dir.mkdir(exist_ok=True)
        jucer = project_dir / file_name
        jucer.write_text(content, encoding="utf-8")
        return jucer

    return _write


@pytest.fixture
def reprojucer_file(tmp_path: Path) -> Path:
    """An (empty) Reprojucer.cmake placed under <tmp>/cmake."""
    cmake_dir = tmp_path / "cmake"
    cmake_dir.mkdir(exist_ok=True)
    path = cmake_dir / "Reprojucer.cmake"
    path.write_text("# Reprojucer\n", encoding="utf-8")
    return path


@pytest.fixture
def plugin_project(write_project: Callable[[str, str], Path]) -> Path:
    """Plugin descriptor with a readable juce_core module header on disk."""
    jucer = write_project(PLUGIN_JUCER, "Gain.jucer")
    module_dir = jucer.parent / "modules" / "juce_core"
    module_dir.mkdir(parents=True)
    (module_dir / "juce_core.h").write_text(JUCE_CORE_HEADER, encoding="utf-8")
    return jucer


@pytest.fixture
def console_project(write_project: Callable[[str, str], Path]) -> Path:
    """Minimal console application descriptor."""
    return write_project(CONSOLE_APP_JUCER, "HelloWorld.jucer")
