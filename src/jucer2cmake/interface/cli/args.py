from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into configuration overrides. Usage errors are reported as a
single 'error: <message>' line with exit status 1.
"""

import argparse
from typing import Any, Dict, NoReturn

from jucer2cmake.domain.config import SUPPORTED_MODES
from jucer2cmake.domain.constants import APP_NAME

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser reporting usage errors as one line and exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.exit(1, f"error: {message}\n")


def build_parser() -> ArgumentParser:
    """
    Construct the argument parser for the Jucer2CMake CLI.

    Returns:
        ArgumentParser: Configured parser instance.
    """
    p = ArgumentParser(
        prog="jucer2cmake",
        description=(
            f"{APP_NAME}: translate a Projucer project file into a CMakeLists.txt "
            "written in the current directory."
        ),
    )

    # --- Inputs ---
    p.add_argument(
        "jucer_file",
        metavar="jucer_project_file",
        help="The .jucer file to translate.",
    )
    p.add_argument(
        "reprojucer_file",
        metavar="Reprojucer.cmake_file",
        nargs="?",
        default=None,
        help="The Reprojucer.cmake file (required in reprojucer mode).",
    )

    # --- Output Flavour ---
    p.add_argument(
        "--mode",
        choices=SUPPORTED_MODES,
        default=None,
        help="Target Reprojucer (default) or the JUCE 6 CMake API.",
    )
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with translation settings.",
    )

    # --- Runtime ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated script instead of writing it.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this (rotating) log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}
    if args.mode:
        overrides["mode"] = args.mode
    return overrides
