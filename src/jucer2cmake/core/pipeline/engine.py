from __future__ import annotations

"""
Core translation pipeline.

This module coordinates a complete translation run:
1. Validates the configuration.
2. Loads and validates the project descriptor.
3. Runs the translators in script order, collecting directive records.
4. Serializes the records once.
5. Writes the script (unless in dry-run mode).
"""

import logging
import os
from typing import Any, Dict, List, Optional

from jucer2cmake.core.output.emitter import render_directives, write_output
from jucer2cmake.core.pipeline.validator import validate_config
from jucer2cmake.core.translation.export_targets import translate_export_targets
from jucer2cmake.core.translation.file_groups import translate_file_groups
from jucer2cmake.core.translation.juce6 import translate_juce6
from jucer2cmake.core.translation.modules import HeaderReader, translate_modules
from jucer2cmake.core.translation.preamble import (
    file_variable_name,
    translate_preamble,
    translate_project_end,
)
from jucer2cmake.core.translation.project_settings import (
    translate_project_begin,
    translate_project_settings,
)
from jucer2cmake.domain.config import MODE_JUCE6, MODE_REPROJUCER
from jucer2cmake.domain.constants import MAIN_GROUP_TAG
from jucer2cmake.domain.directive_models import Record
from jucer2cmake.domain.errors import Jucer2CMakeError
from jucer2cmake.domain.project_models import ProjectNode
from jucer2cmake.domain.result_models import (
    TranslationResult,
    create_error_result,
    create_success_result,
)
from jucer2cmake.infra.fs import get_parent_directory, get_relative_path_from, read_lines
from jucer2cmake.infra.project_reader import load_project

logger = logging.getLogger(__name__)


def run_translation(
        jucer_path: str,
        reprojucer_path: Optional[str] = None,
        config: Optional[Dict[str, Any]] = None,
        *,
        output_dir: Optional[str] = None,
        dry_run: bool = False,
) -> TranslationResult:
    """
    Translate a project file into a CMake script.

    Args:
        jucer_path: The .jucer project file.
        reprojucer_path: The Reprojucer.cmake file (required in reprojucer mode).
        config: Raw configuration dictionary (validated here).
        output_dir: Directory receiving the script. Defaults to the CWD.
        dry_run: If True, render the script without writing it.

    Returns:
        TranslationResult: Status, rendered text and emitted block counts.
    """
    logger.info(f"Translating {jucer_path}")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    mode = cfg["mode"]
    jucer_abs = os.path.abspath(jucer_path)
    out_dir = os.path.abspath(output_dir or os.getcwd())
    output_path = os.path.join(out_dir, cfg["output_filename"])

    if mode == MODE_REPROJUCER and not reprojucer_path:
        return create_error_result(
            "a Reprojucer.cmake file is required in reprojucer mode", jucer_abs, mode
        )

    # -------------------------------------------------------------------------
    # 2) Project Loading & Translation
    # -------------------------------------------------------------------------
    try:
        project = load_project(jucer_path)
        if mode == MODE_JUCE6:
            records = translate_juce6(project)
        else:
            records = build_reprojucer_records(
                project, jucer_abs, str(reprojucer_path), out_dir, cfg
            )
    except Jucer2CMakeError as e:
        logger.debug(f"Translation aborted: {e}")
        return create_error_result(str(e), jucer_abs, mode)

    text = render_directives(records)

    # -------------------------------------------------------------------------
    # 3) Persistence
    # -------------------------------------------------------------------------
    if dry_run:
        logger.info("Dry run: script not written")
    else:
        try:
            write_output(output_path, text)
        except OSError as e:
            logger.debug(f"Write failed: {e}")
            return create_error_result(f"cannot write {output_path}: {e}", jucer_abs, mode)

    return create_success_result(
        jucer_abs, output_path, mode, text, records, dry_run=dry_run
    )


def build_reprojucer_records(
        project: ProjectNode,
        jucer_path: str,
        reprojucer_path: str,
        output_dir: str,
        cfg: Dict[str, Any],
        header_reader: HeaderReader = read_lines,
) -> List[Record]:
    """
    Run every Reprojucer translator in script order.

    Args:
        project: Root project node.
        jucer_path: Absolute path of the project file.
        reprojucer_path: Path of Reprojucer.cmake.
        output_dir: Directory of the generated script.
        cfg: Validated configuration.
        header_reader: Source of module header lines.

    Returns:
        List[Record]: Every record of the script, in output order.
    """
    jucer_dir = get_parent_directory(jucer_path)
    jucer_file_name = os.path.basename(jucer_path)
    reprojucer_dir = get_relative_path_from(
        get_parent_directory(reprojucer_path), output_dir
    ).replace("\\", "/")

    records: List[Record] = []
    records += translate_preamble(
        jucer_file_name, reprojucer_dir, cfg["cmake_minimum_version"]
    )
    records += translate_project_begin(project, file_variable_name(jucer_file_name))
    records += translate_project_settings(project)

    main_group = project.child_with_type(MAIN_GROUP_TAG)
    if main_group is not None:
        records += translate_file_groups(
            main_group,
            compiled_extensions=cfg["compiled_extensions"],
            include_root_group=cfg["include_root_group"],
        )
    else:
        logger.warning("Project has no MAINGROUP; no files written")

    records += translate_modules(
        project, jucer_dir, cfg["header_extension"], header_reader=header_reader
    )
    records += translate_export_targets(project, jucer_dir)
    records += translate_project_end()

    return records
