from __future__ import annotations

"""
Flattened Tree Data Models.

Intermediate records produced by the tree flattener. Entries are numbered
in walk order and keep their absolute filesystem path; the ordering step
later turns them into name-sorted runtime FileRecords.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from assetlife.embedded.filesystem import MODE_DIR, MODE_EXEC, MODE_REGULAR, NO_INDEX

# -----------------------------------------------------------------------------
# ENTRY CLASSIFICATION
# -----------------------------------------------------------------------------

class EntryKind(Enum):
    """Semantic mode of an embedded entry."""
    DIRECTORY = "directory"
    EXECUTABLE = "executable"
    REGULAR = "regular"

    @property
    def mode(self) -> int:
        """Permission bits written into the generated record."""
        return _KIND_MODES[self]


_KIND_MODES = {
    EntryKind.DIRECTORY: MODE_DIR,
    EntryKind.EXECUTABLE: MODE_EXEC,
    EntryKind.REGULAR: MODE_REGULAR,
}

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class TreeEntry:
    """
    One visited file or directory, prior to sorting.

    Attributes:
        index: Position assigned in walk order.
        path: Absolute filesystem path.
        kind: Directory, executable or regular file.
        content: File bytes (empty for directories).
        children: Indices of direct children, in walk order.
        next: Index of the following sibling, or NO_INDEX.
    """
    index: int
    path: str
    kind: EntryKind
    content: bytes = b""
    children: List[int] = field(default_factory=list)
    next: int = NO_INDEX

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def child(self) -> int:
        return self.children[0] if self.children else NO_INDEX
