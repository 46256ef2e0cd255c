from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess. These tests validate argument parsing, exit codes,
stream output (stdout/stderr), and the generated CMakeLists.txt.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "jucer2cmake" / "main.py"


def run_cli(args: List[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH to ensure the package
    is resolvable without being installed in site-packages.

    Args:
        args: List of command line arguments (excluding 'python' and script path).
        cwd: Optional working directory for the subprocess.

    Returns:
        subprocess.CompletedProcess: The result object containing returncode, stdout, and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8"
    )


def test_cli_happy_path_writes_cmakelists(
        tmp_path: Path, console_project: Path, reprojucer_file: Path
) -> None:
    """Standard execution writes CMakeLists.txt into the working directory."""
    build_dir = tmp_path / "build"
    build_dir.mkdir()

    result = run_cli([str(console_project), str(reprojucer_file)], cwd=build_dir)

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    script = (build_dir / "CMakeLists.txt").read_text(encoding="utf-8")
    assert 'list(APPEND CMAKE_MODULE_PATH "${CMAKE_CURRENT_LIST_DIR}/../cmake")' in script
    assert 'jucer_project_files("Source"\n  "Source/Main.cpp"\n)' in script
    assert script.endswith("jucer_project_end()\n")
    assert result.stdout == ""


def test_cli_wrong_argument_count(tmp_path: Path) -> None:
    """No positional arguments: usage error with exit code 1."""
    result = run_cli([], cwd=tmp_path)

    assert result.returncode == 1
    assert result.stderr.startswith("error: ")
    assert not (tmp_path / "CMakeLists.txt").exists()


def test_cli_missing_reprojucer_file(tmp_path: Path, console_project: Path) -> None:
    result = run_cli([str(console_project)], cwd=tmp_path)

    assert result.returncode == 1
    assert result.stderr.strip() == (
        "error: the following arguments are required: Reprojucer.cmake_file"
    )


def test_cli_rejects_foreign_document(tmp_path: Path, reprojucer_file: Path) -> None:
    """A document with another root element is reported, nothing is written."""
    other = tmp_path / "Other.jucer"
    other.write_text("<VisualStudioProject/>", encoding="utf-8")

    result = run_cli([str(other), str(reprojucer_file)], cwd=tmp_path)

    assert result.returncode == 1
    assert result.stderr.strip() == f"error: {other} is not a valid Jucer project."
    assert not (tmp_path / "CMakeLists.txt").exists()


def test_cli_dry_run_prints_script(
        tmp_path: Path, console_project: Path, reprojucer_file: Path
) -> None:
    result = run_cli(["--dry-run", str(console_project), str(reprojucer_file)], cwd=tmp_path)

    assert result.returncode == 0
    assert result.stdout.startswith("# This file was generated by Jucer2CMake from HelloWorld.jucer\n")
    assert not (tmp_path / "CMakeLists.txt").exists()


def test_cli_juce6_mode_from_config_file(tmp_path: Path, console_project: Path) -> None:
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"mode": "juce6"}), encoding="utf-8")

    result = run_cli(["--config", str(config), str(console_project)], cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    script = (tmp_path / "CMakeLists.txt").read_text(encoding="utf-8")
    assert "find_package(JUCE CONFIG REQUIRED)" in script


def test_cli_bad_config_file(tmp_path: Path, console_project: Path, reprojucer_file: Path) -> None:
    result = run_cli(
        ["--config", str(tmp_path / "missing.json"), str(console_project), str(reprojucer_file)],
        cwd=tmp_path,
    )

    assert result.returncode == 1
    assert result.stderr.startswith("error: configuration file not found")


def test_cli_log_file(tmp_path: Path, console_project: Path, reprojucer_file: Path) -> None:
    log_file = tmp_path / "logs" / "jucer2cmake.log"

    result = run_cli(
        ["--debug", "--log-file", str(log_file), str(console_project), str(reprojucer_file)],
        cwd=tmp_path,
    )

    assert result.returncode == 0, result.stderr
    assert "Translating" in log_file.read_text(encoding="utf-8")
