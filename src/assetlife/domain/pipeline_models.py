from __future__ import annotations

"""
Generation Result Models.

Defines the result object and factory functions used to report a
generation run from the engine to the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of a complete generation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Normalized source directory.
        output_path: Normalized target package directory.
        package_name: Logical name of the generated package.
        record_count: Number of embedded records.
        file_count: Number of embedded regular files.
        directory_count: Number of embedded directories.
        total_bytes: Sum of embedded content sizes.
        generated_files: Absolute paths of the written files.
        dry_run: Whether the run skipped deployment.
        summary: Additional execution metadata.
    """
    ok: bool
    error: str

    input_path: str
    output_path: str
    package_name: str

    record_count: int = 0
    file_count: int = 0
    directory_count: int = 0
    total_bytes: int = 0

    generated_files: List[str] = field(default_factory=list)
    dry_run: bool = False

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None
) -> GenerationResult:
    """
    Create a failed generation result.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        dry_run: Whether the run was a simulation.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        GenerationResult: An immutable error result object.
    """
    return GenerationResult(
        ok=False,
        error=error,
        input_path=cfg.get("input_path", ""),
        output_path=cfg.get("output_path", ""),
        package_name=cfg.get("package_name", ""),
        dry_run=dry_run,
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        record_count: int,
        file_count: int,
        directory_count: int,
        total_bytes: int,
        generated_files: List[str],
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None
) -> GenerationResult:
    """
    Create a successful generation result.

    Args:
        cfg: Final configuration used during execution.
        record_count: Number of embedded records.
        file_count: Number of regular files among them.
        directory_count: Number of directories among them.
        total_bytes: Total embedded content size.
        generated_files: Paths written (or that would be written).
        dry_run: Whether deployment was skipped.
        summary_extra: Final execution metrics.

    Returns:
        GenerationResult: An immutable success result object.
    """
    return GenerationResult(
        ok=True,
        error="",
        input_path=cfg.get("input_path", ""),
        output_path=cfg.get("output_path", ""),
        package_name=cfg.get("package_name", ""),
        record_count=record_count,
        file_count=file_count,
        directory_count=directory_count,
        total_bytes=total_bytes,
        generated_files=list(generated_files),
        dry_run=dry_run,
        summary=summary_extra or {},
    )
