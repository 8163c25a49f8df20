from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution (defaults, optional JSON file, CLI overrides), generation and
result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from assetlife.core.pipeline.engine import run_generation
from assetlife.core.pipeline.stages.validator import validate_config
from assetlife.domain.config import load_config
from assetlife.domain.pipeline_models import GenerationResult
from assetlife.infra.fs import normalize_path
from assetlife.infra.logging import LoggingConfig, configure_logging, get_logger
from assetlife.interface.cli import args as cli_args
from assetlife.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 generation failure, 2 usage or
             input error, 130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration hierarchy: defaults < config file < CLI
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(load_config(args.config_file), overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    logging_conf = LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"] or None,
    )
    configure_logging(logging_conf)
    logger.debug("CLI execution initiated.")

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Pre-flight input verification
    if not clean_conf["input_path"] or not clean_conf["output_path"]:
        msg = i18n.t("cli.errors.missing_paths")
        logger.error(msg)
        parser.print_usage(sys.stderr)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    input_path = normalize_path(clean_conf["input_path"], os.getcwd())
    if not os.path.isdir(input_path):
        msg = i18n.t("cli.errors.path_not_exist", path=input_path)
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Generation phase
    logger.info(f"Targeting input directory: {input_path}")
    try:
        result = run_generation(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-None overrides for keys the base already knows."""
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: GenerationResult) -> None:
    """
    Format and print the generation result to the standard output.

    Args:
        result: The generation result to render.
    """
    if not result.ok:
        print(f"ERROR: {i18n.t('cli.errors.generation_fail', error=result.error)}", file=sys.stderr)
        return

    if result.dry_run:
        print(i18n.t("cli.status.dry_run"))
    else:
        print(i18n.t("cli.status.success"))

    print(i18n.t("cli.status.package", name=result.package_name))
    print(i18n.t("cli.status.output_dir", path=result.output_path))
    print(i18n.t(
        "cli.status.records",
        records=result.record_count,
        files=result.file_count,
        dirs=result.directory_count,
        size=result.total_bytes,
    ))

    if result.generated_files:
        print("\n" + i18n.t("cli.status.generated"))
        for path in result.generated_files:
            print(f"  - {path}")

    command = result.summary.get("regenerate_command")
    if command:
        print(i18n.t("cli.status.regenerate", command=command))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
