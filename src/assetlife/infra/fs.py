from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path normalization, relative path resolution and staged deployment of
generated files. Output is first written to a hidden staging directory
inside the target and only swapped into place once every file has been
produced.
"""

import errno
import logging
import os
import shutil
import tempfile
from typing import Dict, List, Optional

from assetlife.domain.errors import PathResolutionError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def relative_path(path: str, start: str) -> str:
    """
    Express path relative to start.

    Args:
        path: Target path.
        start: Reference directory.

    Returns:
        str: The relative path, using the platform separator.

    Raises:
        PathResolutionError: If no relative path exists (e.g. different
                             drives on Windows).
    """
    try:
        return os.path.relpath(path, start)
    except ValueError as e:
        raise PathResolutionError(path, start, str(e)) from e

# -----------------------------------------------------------------------------
# STAGED DEPLOYMENT API
# -----------------------------------------------------------------------------

def deploy_files(files: Dict[str, str], target_dir: str) -> List[str]:
    """
    Write text files to a staging area, then swap them into target_dir.

    The staging area lives inside target_dir, so each final step is an
    atomic os.replace on one file system. Existing regular files with the
    same names are replaced; any other existing entry (directory, symlink)
    aborts the deployment before anything is written. A target_dir created
    here is removed again if staging fails.

    Args:
        files: Mapping of file name to UTF-8 text content.
        target_dir: Destination directory, created if missing.

    Returns:
        List[str]: Absolute paths of the deployed files.

    Raises:
        OSError: If a destination is occupied by a non-file, or if staging,
                 directory creation or the final replace fails.
    """
    for name in files:
        _check_destination(os.path.join(target_dir, name))

    created = not os.path.isdir(target_dir)
    os.makedirs(target_dir, exist_ok=True)

    deployed: List[str] = []
    try:
        with tempfile.TemporaryDirectory(prefix=".assetlife-", dir=target_dir) as staging_dir:
            logger.debug(f"Using staging directory: {staging_dir}")
            for name, text in files.items():
                with open(os.path.join(staging_dir, name), "w", encoding="utf-8", newline="\n") as f:
                    f.write(text)

            for name in files:
                destination = os.path.join(target_dir, name)
                os.replace(os.path.join(staging_dir, name), destination)
                deployed.append(os.path.abspath(destination))
    except OSError:
        if created and not deployed:
            shutil.rmtree(target_dir, ignore_errors=True)
        raise

    return deployed

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _check_destination(path: str) -> None:
    """Reject destinations that exist but are not plain files."""
    if os.path.islink(path):
        raise FileExistsError(errno.EEXIST, "destination is a symbolic link", path)
    if os.path.isdir(path):
        raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), path)
    if os.path.lexists(path) and not os.path.isfile(path):
        raise FileExistsError(errno.EEXIST, "destination is not a regular file", path)
