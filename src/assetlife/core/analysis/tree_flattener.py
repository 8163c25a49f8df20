from __future__ import annotations

"""
Directory Tree Flattener.

Turns a source directory into a flat list of TreeEntry records. Each entry
gets the next index in walk order and is appended to its parent's child
list; once the walk completes, every child list is threaded into a
singly linked sibling chain.
"""

import errno
import logging
import os
import stat
from typing import Dict, List

from assetlife.core.pipeline.components.filters import is_hidden
from assetlife.core.services.scanner import walk_tree
from assetlife.domain.errors import UnsupportedEntryTypeError
from assetlife.domain.tree_models import EntryKind, TreeEntry
from assetlife.embedded.filesystem import NO_INDEX

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def flatten_tree(input_path: str) -> List[TreeEntry]:
    """
    Walk a directory and produce its flattened, index-linked entries.

    Hidden entries are skipped along with their subtrees. Anything that is
    neither a directory nor a regular file aborts the whole walk.

    Args:
        input_path: Source directory.

    Returns:
        List[TreeEntry]: Entries in walk order; entry i has index i.

    Raises:
        FileNotFoundError: If input_path does not exist.
        NotADirectoryError: If input_path is not a directory.
        UnsupportedEntryTypeError: On symlinks, FIFOs, sockets or devices.
        OSError: On any read or stat failure.
    """
    root = os.path.abspath(input_path)
    if not os.path.exists(root):
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), root)
    if not os.path.isdir(root):
        raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), root)

    logger.info(f"Flattening directory tree: {root}")

    entries: List[TreeEntry] = []
    index: Dict[str, int] = {}

    for path, st in walk_tree(root, skip=is_hidden):
        kind = _classify(path, st.st_mode)
        entry = TreeEntry(index=len(entries), path=path, kind=kind)
        if kind is not EntryKind.DIRECTORY:
            entry.content = _read_content(path)

        parent = index.get(os.path.dirname(path))
        if parent is not None and path != root:
            entries[parent].children.append(entry.index)

        index[path] = entry.index
        entries.append(entry)

    _link_siblings(entries)

    logger.debug(f"Flattened {len(entries)} entries from {root}")
    return entries

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _classify(path: str, mode: int) -> EntryKind:
    """Map an lstat mode onto an EntryKind, rejecting special files."""
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if not stat.S_ISREG(mode):
        raise UnsupportedEntryTypeError(path, mode)
    if mode & stat.S_IXUSR:
        return EntryKind.EXECUTABLE
    return EntryKind.REGULAR


def _read_content(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def _link_siblings(entries: List[TreeEntry]) -> None:
    """Thread every child list into a next-pointer chain."""
    for entry in entries:
        children = entry.children
        for pos, child in enumerate(children):
            nxt = children[pos + 1] if pos + 1 < len(children) else NO_INDEX
            entries[child].next = nxt
