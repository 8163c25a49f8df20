from __future__ import annotations

"""
Logging Settings.

Frozen settings object consumed by configure_logging(). The CLI builds one
from the validated generation configuration.
"""

import logging
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for the logging subsystem.

    Attributes:
        level: Level name ('DEBUG', 'INFO', 'WARN', ...). Unknown names mean INFO.
        console: Whether records are echoed to stderr.
        log_file: Optional rotating log file.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files to keep.
        console_fmt: Format of console lines.
        file_fmt: Format of log file lines.
        datefmt: Timestamp format of log file lines.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @property
    def level_number(self) -> int:
        """Numeric logging level for this configuration."""
        value = logging.getLevelName(str(self.level or "").strip().upper())
        return value if isinstance(value, int) else logging.INFO
