from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from assetlife.domain.constants import APP_NAME, APP_VERSION
from assetlife.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the assetlife CLI.

    Usage: assetlife INPUT_DIR OUTPUT_DIR [PACKAGE_NAME] [options]

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=i18n.t("app.description"),
    )

    # --- Generation inputs ---
    p.add_argument("input_path", metavar="INPUT_DIR", nargs="?", default=None,
                   help=i18n.t("cli.args.input"))
    p.add_argument("output_path", metavar="OUTPUT_DIR", nargs="?", default=None,
                   help=i18n.t("cli.args.output"))
    p.add_argument("package_name", metavar="PACKAGE_NAME", nargs="?", default=None,
                   help=i18n.t("cli.args.package"))

    # --- Configuration ---
    p.add_argument(
        "-c", "--config",
        dest="config_file",
        default=None,
        help=i18n.t("cli.args.config"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )

    # --- Runtime behaviour ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help=i18n.t("cli.args.dry_run"),
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Values the user did not supply are left as None so they do not mask
    values coming from a configuration file.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "output_path": args.output_path,
        "package_name": args.package_name,
        "log_file": args.log_file,
        "log_level": None,
    }
    if args.debug:
        overrides["log_level"] = "DEBUG"
    return overrides
