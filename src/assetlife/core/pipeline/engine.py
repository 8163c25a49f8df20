from __future__ import annotations

"""
Core generation pipeline.

Coordinates a complete generation run:
1. Validates configuration and paths.
2. Flattens the source tree.
3. Sorts records and remaps their links.
4. Renders the package sources.
5. Deploys the files through a staging area (skipped on dry runs).

Any failure aborts the run before the output directory is touched.
"""

import keyword
import logging
import os
import stat
from typing import Any, Dict, List, Optional

from assetlife.core.analysis.tree_flattener import flatten_tree
from assetlife.core.pipeline.components.emitter import package_sources, regenerate_command
from assetlife.core.pipeline.components.ordering import build_records, validate_records
from assetlife.core.pipeline.stages.validator import normalize_package_name, validate_config
from assetlife.domain.errors import AssetLifeError
from assetlife.domain.pipeline_models import (
    GenerationResult,
    create_error_result,
    create_success_result,
)
from assetlife.infra.fs import deploy_files, normalize_path, relative_path

logger = logging.getLogger(__name__)


def run_generation(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> GenerationResult:
    """
    Execute the full generation pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, build everything in memory but write nothing.

    Returns:
        GenerationResult: Status, counters and generated file paths.
    """
    logger.info("Generation started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    fallback_base = os.getcwd()
    if not cfg["output_path"]:
        msg = "Missing output directory."
        logger.error(msg)
        return create_error_result(msg, cfg, dry_run)

    cfg["input_path"] = normalize_path(cfg["input_path"], fallback_base)
    cfg["output_path"] = normalize_path(cfg["output_path"], fallback_base)
    if not cfg["package_name"]:
        # Default name goes through the same dash correction as explicit names
        name_warnings: List[str] = []
        cfg["package_name"] = normalize_package_name(os.path.basename(cfg["output_path"]), name_warnings)
        for warning in name_warnings:
            logger.warning(f"Configuration Warning: {warning}")

    input_path = cfg["input_path"]
    output_path = cfg["output_path"]
    package_name = cfg["package_name"]

    if not os.path.isdir(input_path):
        msg = f"Invalid input directory: {input_path}"
        logger.error(msg)
        return create_error_result(msg, cfg, dry_run)

    if not package_name.isidentifier() or keyword.iskeyword(package_name):
        msg = f"Invalid package name: '{package_name}' is not a valid Python identifier."
        logger.error(msg)
        return create_error_result(msg, cfg, dry_run)

    # -------------------------------------------------------------------------
    # 2) Flatten, Order & Render (in memory)
    # -------------------------------------------------------------------------
    try:
        command = regenerate_command(relative_path(input_path, output_path), package_name)
        entries = flatten_tree(input_path)
        records = build_records(entries, input_path)
        validate_records(records)
        sources = package_sources(records, package_name, command)
    except AssetLifeError as e:
        logger.error(f"Generation aborted: {e}")
        return create_error_result(str(e), cfg, dry_run)
    except OSError as e:
        msg = f"I/O failure while reading the source tree: {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, dry_run)

    directories = sum(1 for r in records if stat.S_ISDIR(r.mode))
    total_bytes = sum(len(r.content) for r in records)
    logger.info(f"Embedded {len(records)} records ({total_bytes} bytes) as package '{package_name}'.")

    # -------------------------------------------------------------------------
    # 3) Deployment
    # -------------------------------------------------------------------------
    generated: List[str]
    if dry_run:
        logger.info("Dry run: Skipping file deployment to final destination.")
        generated = [os.path.join(output_path, name) for name in sources]
    else:
        try:
            generated = deploy_files(sources, output_path)
        except OSError as e:
            msg = f"Failed to write package to {output_path}: {e}"
            logger.critical(msg)
            return create_error_result(msg, cfg, dry_run)

    summary = {
        "regenerate_command": command,
        "names": [r.name for r in records],
    }

    logger.info("Generation completed successfully.")
    return create_success_result(
        cfg,
        record_count=len(records),
        file_count=len(records) - directories,
        directory_count=directories,
        total_bytes=total_bytes,
        generated_files=generated,
        dry_run=dry_run,
        summary_extra=summary,
    )
