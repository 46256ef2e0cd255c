from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs main() in-process to check exit codes and stream output without
spawning a subprocess.
"""

import logging
from pathlib import Path

import pytest

from jucer2cmake.infra.logging import shutdown_logging
from jucer2cmake.infra.logging.handlers import _HANDLER_TAG_ATTR
from jucer2cmake.interface.cli.app import main


@pytest.fixture(autouse=True)
def detach_logging():
    yield
    root = logging.getLogger()
    shutdown_logging(root)
    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()


def test_main_dry_run_prints_script(console_project: Path, reprojucer_file: Path, capsys) -> None:
    code = main(["--dry-run", str(console_project), str(reprojucer_file)])

    assert code == 0
    out = capsys.readouterr().out
    assert "jucer_project_begin(" in out
    assert out.endswith("jucer_project_end()\n")


def test_main_reports_invalid_project(tmp_path: Path, reprojucer_file: Path, capsys) -> None:
    jucer = tmp_path / "Broken.jucer"
    jucer.write_text("<JUCERPROJECT", encoding="utf-8")

    code = main(["--dry-run", str(jucer), str(reprojucer_file)])

    assert code == 1
    assert capsys.readouterr().err.endswith(f"error: {jucer} is not a valid Jucer project.\n")


def test_main_requires_reprojucer_in_default_mode(console_project: Path, capsys) -> None:
    code = main([str(console_project)])

    assert code == 1
    assert "Reprojucer.cmake_file" in capsys.readouterr().err


def test_main_juce6_mode_needs_no_reprojucer(console_project: Path, capsys) -> None:
    code = main(["--mode", "juce6", "--dry-run", str(console_project)])

    assert code == 0
    assert "juce_add_console_app(HelloWorld" in capsys.readouterr().out
