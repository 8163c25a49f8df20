from __future__ import annotations

"""
Source Tree Discovery Service.

Walks a source directory and reports every entry together with its lstat
result, so callers see symlinks and special files as what they are
instead of what they point to.
"""

import logging
import os
from typing import Callable, Iterator, NoReturn, Optional, Tuple

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def walk_tree(
        root: str,
        skip: Optional[Callable[[str], bool]] = None,
) -> Iterator[Tuple[str, os.stat_result]]:
    """
    Traverse a directory tree in deterministic top-down order.

    The root is yielded first. Then, for each directory reached by the walk,
    its entries are yielded sorted by name before the walk descends into
    its subdirectories (also in name order). A parent is therefore always
    yielded before any of its children.

    Args:
        root: Directory to traverse.
        skip: Optional predicate on entry names; matching entries are not
              yielded and matching directories are not descended into.

    Yields:
        Tuple[str, os.stat_result]: Absolute path and lstat result.

    Raises:
        OSError: Any listing or stat failure aborts the walk.
    """
    root_abs = os.path.abspath(root)
    yield root_abs, os.lstat(root_abs)

    for dir_path, dirs, files in os.walk(root_abs, onerror=_raise_walk_error):
        # In-place pruning and ordering steer the remainder of the walk
        if skip is not None:
            dirs[:] = [d for d in dirs if not skip(d)]
            files = [f for f in files if not skip(f)]
        dirs.sort()

        for name in sorted(dirs + files):
            path = os.path.join(dir_path, name)
            yield path, os.lstat(path)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _raise_walk_error(error: OSError) -> NoReturn:
    logger.debug(f"Walk aborted on '{error.filename}': {error}")
    raise error
