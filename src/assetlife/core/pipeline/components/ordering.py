from __future__ import annotations

"""
Record Ordering.

Converts walk-ordered TreeEntries into the name-sorted FileRecord sequence
required by the embedded file system's binary search. Sorting moves
records, so every child and next index is remapped to the new positions
and sibling chains keep their walk order.
"""

import os
import posixpath
from typing import Dict, List, Sequence

from assetlife.domain.errors import PathResolutionError, RecordIntegrityError
from assetlife.domain.tree_models import TreeEntry
from assetlife.embedded.filesystem import NO_INDEX, FileRecord
from assetlife.infra.fs import relative_path


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def embedded_name(root: str, path: str) -> str:
    """
    Compute the '/'-rooted embedded name of a path beneath root.

    Args:
        root: Absolute source directory.
        path: Absolute path of an entry inside root.

    Returns:
        str: Name such as '/css/style.css'; the root maps to '/'.

    Raises:
        PathResolutionError: If path does not lie within root.
    """
    rel = relative_path(path, root)
    if rel == os.pardir or rel.startswith(os.pardir + os.sep):
        raise PathResolutionError(path, root, "entry lies outside the source tree")
    return posixpath.normpath("/" + rel.replace(os.sep, "/"))


def build_records(entries: Sequence[TreeEntry], root: str) -> List[FileRecord]:
    """
    Sort entries by embedded name and remap their links.

    Args:
        entries: Flattener output; entry i must carry index i.
        root: Absolute source directory the entries were taken from.

    Returns:
        List[FileRecord]: Name-sorted records with consistent indices.
    """
    names = [embedded_name(root, e.path) for e in entries]
    order = sorted(range(len(entries)), key=names.__getitem__)
    new_index: Dict[int, int] = {old: new for new, old in enumerate(order)}

    def remap(i: int) -> int:
        return NO_INDEX if i == NO_INDEX else new_index[i]

    records: List[FileRecord] = []
    for old in order:
        entry = entries[old]
        records.append(FileRecord(
            name=names[old],
            content=entry.content,
            mode=entry.kind.mode,
            child=remap(entry.child),
            next=remap(entry.next),
        ))
    return records


def validate_records(records: Sequence[FileRecord]) -> None:
    """
    Check the invariants the embedded file system relies on.

    Names must be strictly increasing, every link must point inside the
    sequence, and every record except the first must be reachable exactly
    once through some child/next chain.

    Raises:
        RecordIntegrityError: On the first violation found.
    """
    total = len(records)
    for i in range(1, total):
        if records[i - 1].name >= records[i].name:
            raise RecordIntegrityError(
                f"records not strictly sorted at {i}: "
                f"{records[i - 1].name!r} >= {records[i].name!r}"
            )

    seen = [False] * total
    for record in records:
        link = record.child
        while link != NO_INDEX:
            if not 0 <= link < total:
                raise RecordIntegrityError(f"link {link} out of range in {record.name!r}")
            if seen[link]:
                raise RecordIntegrityError(f"record {records[link].name!r} linked twice")
            seen[link] = True
            link = records[link].next

    orphans = [records[i].name for i in range(1, total) if not seen[i]]
    if orphans:
        raise RecordIntegrityError(f"unreachable records: {orphans}")
