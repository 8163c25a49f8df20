from __future__ import annotations

"""
Generation Error Hierarchy.

Typed failures raised while building an asset package. All of them are
fatal to the current generation run; the engine converts them into a
failed GenerationResult at its boundary.
"""

import stat


class AssetLifeError(Exception):
    """Base class for every generation-time failure."""


class UnsupportedEntryTypeError(AssetLifeError):
    """
    Raised when the source tree holds something other than a regular file
    or a directory (symlink, FIFO, socket, device).

    Attributes:
        path: Offending filesystem path.
        mode: Raw st_mode reported by lstat.
    """

    def __init__(self, path: str, mode: int):
        self.path = path
        self.mode = mode
        super().__init__(f"unsupported file type: {path}, mode {stat.filemode(mode)}")


class PathResolutionError(AssetLifeError):
    """Raised when a path cannot be expressed relative to another one."""

    def __init__(self, path: str, start: str, reason: str = ""):
        self.path = path
        self.start = start
        msg = f"cannot resolve '{path}' relative to '{start}'"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class RecordIntegrityError(AssetLifeError):
    """Raised when a record sequence breaks ordering or linkage rules."""
