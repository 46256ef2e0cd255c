from __future__ import annotations

"""
Translation Result Models.

Carries the outcome of one translation run from the engine to the
interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from jucer2cmake.domain.directive_models import Directive, Record

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TranslationResult:
    """
    Outcome of a translation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        jucer_path: Absolute path of the translated project file.
        output_path: Target script path (empty on failure).
        mode: Output flavour that was generated.
        dry_run: True when nothing was written to disk.
        text: Rendered script content.
        directive_count: Number of CMake commands generated.
        summary: Number of emitted blocks per command name.
    """
    ok: bool
    error: str

    jucer_path: str
    output_path: str = ""
    mode: str = ""
    dry_run: bool = False

    text: str = ""
    directive_count: int = 0
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(error: str, jucer_path: str, mode: str = "") -> TranslationResult:
    """Create a failed translation result."""
    return TranslationResult(ok=False, error=error, jucer_path=jucer_path, mode=mode)


def create_success_result(
        jucer_path: str,
        output_path: str,
        mode: str,
        text: str,
        records: List[Record],
        dry_run: bool = False,
) -> TranslationResult:
    """
    Create a successful translation result from the generated records.

    Args:
        jucer_path: Translated project file.
        output_path: Script destination.
        mode: Output flavour.
        text: Rendered script.
        records: Records the script was rendered from.
        dry_run: Whether the write was skipped.

    Returns:
        TranslationResult: An immutable success result object.
    """
    summary: Dict[str, Any] = {}
    directives = [r for r in records if isinstance(r, Directive)]
    for d in directives:
        summary[d.name] = summary.get(d.name, 0) + 1

    return TranslationResult(
        ok=True,
        error="",
        jucer_path=jucer_path,
        output_path=output_path,
        mode=mode,
        dry_run=dry_run,
        text=text,
        directive_count=len(directives),
        summary=summary,
    )
