from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between raw configuration sources (JSON file, CLI) and the
generation engine. Coerces types, injects defaults and normalizes the
logging level while collecting human-readable warnings.
"""

import logging
from typing import Any, Dict, List, Tuple

from assetlife.domain.config import get_default_config

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    unknown = sorted(k for k in config if k not in defaults)
    if unknown:
        warnings.append(f"Ignoring unknown config keys: {', '.join(unknown)}.")

    # 2. Field Processing & Normalization
    for field in defaults:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["log_level"] = _normalize_level(merged["log_level"], warnings, strict)
    merged["package_name"] = normalize_package_name(merged["package_name"], warnings, strict)

    return merged, warnings


def normalize_package_name(name: str, warnings: List[str], strict: bool = False) -> str:
    """
    Turn dashes into underscores so directory-style names become identifiers.

    Other invalid names are returned unchanged for the engine to reject.

    Args:
        name: Requested package name (may be empty).
        warnings: Collector for the correction notice.
        strict: If True, raises ValueError instead of correcting.

    Returns:
        str: The corrected or original name.
    """
    if not name or name.isidentifier():
        return name

    candidate = name.replace("-", "_")
    if candidate.isidentifier():
        if strict:
            raise ValueError(f"Invalid field 'package_name': '{name}' is not an identifier.")
        warnings.append(f"Package name '{name}' corrected to '{candidate}'.")
        return candidate
    return name

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _normalize_level(level: str, warnings: List[str], strict: bool) -> str:
    lvl = level.upper()
    if lvl == "WARN":
        lvl = "WARNING"
    if lvl in _LOG_LEVELS:
        return lvl

    msg = f"Invalid field 'log_level': unknown level '{level}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using INFO.")
    return "INFO"
