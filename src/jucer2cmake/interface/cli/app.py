from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration loading
and merging, translation, and result reporting. Every failure is reported
as one 'error: <message>' line on stderr with exit status 1.
"""

import sys
from typing import Any, Dict, List, Optional

from jucer2cmake.core.pipeline.engine import run_translation
from jucer2cmake.domain.config import MODE_REPROJUCER, load_config
from jucer2cmake.domain.errors import ConfigError, UsageError
from jucer2cmake.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from jucer2cmake.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, 1 for any failure).
    """
    # 1. Argument parsing phase (usage errors exit here with status 1)
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(
        LoggingConfig(level=log_level, console=True, log_file=args.log_file),
        force=True,
    )

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: Any) -> int:
    # 3. Resolve configuration (defaults < JSON file < command line)
    try:
        raw_conf = _resolve_config(args)
    except (ConfigError, UsageError) as e:
        return _fail(str(e))

    # 4. Translation phase
    try:
        result = run_translation(
            args.jucer_file,
            args.reprojucer_file,
            raw_conf,
            dry_run=bool(args.dry_run),
        )
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
    except Exception as e:
        logger.critical(f"Unexpected failure: {e}", exc_info=True)
        return _fail(str(e))

    if not result.ok:
        return _fail(result.error)

    # 5. Output rendering phase
    if result.dry_run:
        sys.stdout.write(result.text)
    else:
        logger.info(f"{result.directive_count} directives written to {result.output_path}")

    return 0

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _resolve_config(args: Any) -> Dict[str, Any]:
    """
    Merge the configuration sources and check the mode-dependent inputs.

    Raises:
        ConfigError: If the configuration file cannot be used.
        UsageError: If reprojucer mode is selected without a Reprojucer file.
    """
    raw_conf = _merge_config(load_config(args.config_file), cli_args.args_to_overrides(args))

    if raw_conf.get("mode", MODE_REPROJUCER) == MODE_REPROJUCER and not args.reprojucer_file:
        raise UsageError("the following arguments are required: Reprojucer.cmake_file")

    return raw_conf


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None overrides into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out


def _fail(message: str) -> int:
    """Flush pending log records, then print the error line."""
    shutdown_logging()
    print(f"error: {message}", file=sys.stderr)
    return 1

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
