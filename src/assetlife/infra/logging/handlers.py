from __future__ import annotations

"""
Logging Sinks.

Builds the console and rotating-file handlers that the queue listener
drains into. Every handler created here is marked as owned so teardown
only ever removes handlers this package installed.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from assetlife.infra.logging.config import LoggingConfig

_OWNED_ATTR: str = "_assetlife_owned"


def mark_owned(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _OWNED_ATTR, True)
    return handler


def is_owned(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _OWNED_ATTR, False))


def build_sinks(cfg: LoggingConfig) -> List[logging.Handler]:
    """
    Create the handlers requested by cfg.

    A log file that cannot be opened is reported on stderr and skipped;
    the console sink is unaffected.

    Args:
        cfg: Logging settings.

    Returns:
        List[logging.Handler]: Zero, one or two owned handlers.
    """
    sinks: List[logging.Handler] = []
    if cfg.console:
        sinks.append(_console_sink(cfg))
    if cfg.log_file:
        file_sink = _file_sink(cfg)
        if file_sink is not None:
            sinks.append(file_sink)
    return sinks


def _console_sink(cfg: LoggingConfig) -> logging.Handler:
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(cfg.level_number)
    sh.setFormatter(logging.Formatter(cfg.console_fmt))
    return mark_owned(sh)


def _file_sink(cfg: LoggingConfig) -> Optional[logging.Handler]:
    log_file = str(cfg.log_file)
    try:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(cfg.max_bytes),
            backupCount=int(cfg.backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(cfg.level_number)
    fh.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
    return mark_owned(fh)
