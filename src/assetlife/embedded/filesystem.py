from __future__ import annotations

"""
Embedded Read-Only File System.

Runtime query engine for a flattened asset tree. All records live in one
name-sorted sequence; a directory points at its first child by index and
siblings point at each other, so a lookup is a binary search and a
directory listing walks an index chain.

This module depends on the standard library only. It is copied verbatim
into every generated asset package.
"""

import bisect
import errno
import io
import os
import posixpath
import stat
from typing import Iterator, List, NamedTuple, Sequence, Tuple

# -----------------------------------------------------------------------------
# RECORD CONSTANTS
# -----------------------------------------------------------------------------

NO_INDEX = -1

MODE_DIR = stat.S_IFDIR | 0o755
MODE_EXEC = 0o755
MODE_REGULAR = 0o644


# -----------------------------------------------------------------------------
# DATA MODELS
# -----------------------------------------------------------------------------

class FileRecord(NamedTuple):
    """
    One file or directory of the embedded tree.

    Attributes:
        name: Slash-separated path rooted at '/'.
        content: Raw file bytes (empty for directories).
        mode: File mode (MODE_DIR, MODE_EXEC or MODE_REGULAR).
        child: Index of the first child, or NO_INDEX.
        next: Index of the next sibling, or NO_INDEX.
    """
    name: str
    content: bytes
    mode: int
    child: int = NO_INDEX
    next: int = NO_INDEX


class FileInfo(NamedTuple):
    """Metadata snapshot returned by stat() and readdir()."""
    name: str
    size: int
    mode: int
    mtime: float = 0.0

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)


def _describe(record: FileRecord) -> FileInfo:
    # basename of "/" is empty; the root keeps its full name
    name = posixpath.basename(record.name) or record.name
    return FileInfo(name=name, size=len(record.content), mode=record.mode)


# -----------------------------------------------------------------------------
# FILE SYSTEM
# -----------------------------------------------------------------------------

class EmbeddedFileSystem:
    """
    Immutable file system over a name-sorted sequence of FileRecords.

    Safe to share between threads: open() never mutates shared state and
    every handle carries its own read position and listing cursor.
    """

    def __init__(self, records: Sequence[FileRecord]):
        self._records: Tuple[FileRecord, ...] = tuple(records)
        self._names: List[str] = [r.name for r in self._records]

    def open(self, name: str) -> EmbeddedFile:
        """
        Open a record by its exact '/'-rooted name.

        Args:
            name: Normalized path, e.g. '/css/style.css'.

        Returns:
            EmbeddedFile: A fresh handle on the record.

        Raises:
            FileNotFoundError: If no record carries that name.
        """
        i = bisect.bisect_left(self._names, name)
        if i >= len(self._names) or self._names[i] != name:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), name)
        return EmbeddedFile(self._records, i)

    def exists(self, name: str) -> bool:
        i = bisect.bisect_left(self._names, name)
        return i < len(self._names) and self._names[i] == name

    def read_bytes(self, name: str) -> bytes:
        """Return the full content of a record."""
        with self.open(name) as f:
            return f.read()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)


# -----------------------------------------------------------------------------
# HANDLES
# -----------------------------------------------------------------------------

class EmbeddedFile:
    """
    Caller-owned handle on one record.

    Content is exposed as a sequential byte stream; directories additionally
    keep a listing cursor that readdir() advances. A handle must not be
    shared between concurrent readers.
    """

    def __init__(self, records: Tuple[FileRecord, ...], index: int):
        self._records = records
        self._record = records[index]
        self._reader = io.BytesIO(self._record.content)
        self._dir_index = self._record.child

    @property
    def name(self) -> str:
        return self._record.name

    @property
    def closed(self) -> bool:
        return self._reader.closed

    def stat(self) -> FileInfo:
        return _describe(self._record)

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes; returns b'' once the content is exhausted."""
        return self._reader.read(size)

    def readinto(self, buffer: bytearray) -> int:
        return self._reader.readinto(buffer)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._reader.seek(offset, whence)

    def tell(self) -> int:
        return self._reader.tell()

    def readdir(self, count: int = 0) -> Tuple[List[FileInfo], bool]:
        """
        List the next children of a directory handle.

        Entries come back in sibling-chain order and the cursor is kept on
        the handle, so successive calls continue where the last one stopped.

        Args:
            count: Maximum number of entries; zero or negative means all.

        Returns:
            Tuple[List[FileInfo], bool]: The entries and an end-of-data flag.
            The flag is set only when count > 0 and the chain ran out before
            count entries were collected. Non-directories yield ([], False).
        """
        entries: List[FileInfo] = []
        if not stat.S_ISDIR(self._record.mode):
            return entries, False

        while self._dir_index != NO_INDEX:
            if 0 < count <= len(entries):
                return entries, False
            entry = self._records[self._dir_index]
            entries.append(_describe(entry))
            self._dir_index = entry.next

        return entries, 0 < count and len(entries) < count

    def close(self) -> None:
        self._reader.close()

    def __enter__(self) -> EmbeddedFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<EmbeddedFile name={self._record.name!r}>"
