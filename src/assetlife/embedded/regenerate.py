from __future__ import annotations

"""
Standalone Asset Package Generator.

Copied verbatim into every generated package next to filesystem.py, so a
package can be rebuilt from its source directory with nothing but the
standard library:

    python regenerate.py INPUT_DIR OUTPUT_DIR PACKAGE_NAME

The assetlife tool renders package sources through this module as well,
which keeps both generators byte-for-byte identical.
"""

import argparse
import os
import posixpath
import shlex
import stat
import sys
import tempfile
from typing import Dict, Iterable, List, NamedTuple, Optional

APP_NAME = "assetlife"
SCRIPT_FILE = "regenerate.py"
RUNTIME_FILE = "filesystem.py"
PACKAGE_FILE = "__init__.py"

# Must stay equal to the constants in filesystem.py
NO_INDEX = -1
MODE_DIR = stat.S_IFDIR | 0o755
MODE_EXEC = 0o755
MODE_REGULAR = 0o644

_HEADER_TEMPLATE = '''\
# Code generated by {app}. DO NOT EDIT.
#
# Regenerate from this directory with:
#     {command}
#
# {script} only needs the standard library; {app} itself is not required.

"""Embedded read-only file system for package '{package}'."""

from .filesystem import (
    EmbeddedFile,
    EmbeddedFileSystem,
    FileInfo,
    FileRecord,
)

__all__ = ["root", "EmbeddedFile", "EmbeddedFileSystem", "FileInfo", "FileRecord"]

_RECORDS = (
'''

_FOOTER = '''\
)

# Root of the embedded file system.
root = EmbeddedFileSystem(_RECORDS)
'''


class Record(NamedTuple):
    name: str
    content: bytes
    mode: int
    child: int = NO_INDEX
    next: int = NO_INDEX


# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

def regenerate_command(rel_input: str, package_name: str) -> str:
    """
    Build the command that regenerates a package from its own directory.

    Args:
        rel_input: Source directory relative to the package directory.
        package_name: Logical package name.

    Returns:
        str: A command line such as: python regenerate.py ../public . public
    """
    rel = rel_input.replace(os.sep, "/")
    return f"python {SCRIPT_FILE} {shlex.quote(rel)} . {shlex.quote(package_name)}"


def render_package(records: Iterable, package_name: str, command: str) -> str:
    """
    Render a package __init__.py from name-sorted, linked records.

    Records only need name, content, mode, child and next attributes.
    """
    parts = [_HEADER_TEMPLATE.format(
        app=APP_NAME, command=command, script=SCRIPT_FILE, package=package_name,
    )]
    for record in records:
        parts.append(
            "    FileRecord(\n"
            f"        name={record.name!r},\n"
            f"        content={record.content!r},\n"
            f"        mode={oct(record.mode)},\n"
            f"        child={record.child},\n"
            f"        next={record.next},\n"
            "    ),\n"
        )
    parts.append(_FOOTER)
    return "".join(parts)


def companion_sources() -> Dict[str, str]:
    """Return the runtime module and this script, read from this directory."""
    here = os.path.dirname(os.path.abspath(__file__))
    sources = {}
    for name in (RUNTIME_FILE, SCRIPT_FILE):
        with open(os.path.join(here, name), "r", encoding="utf-8") as f:
            sources[name] = f.read()
    return sources


# -----------------------------------------------------------------------------
# STANDALONE GENERATION
# -----------------------------------------------------------------------------

def collect_records(input_dir: str) -> List[Record]:
    """
    Walk input_dir and return its name-sorted, linked records.

    Hidden entries are skipped together with everything beneath them.

    Raises:
        ValueError: On anything that is not a directory or regular file.
        OSError: On any listing, stat or read failure.
    """
    root = os.path.abspath(input_dir)
    if not stat.S_ISDIR(os.lstat(root).st_mode):
        raise NotADirectoryError(f"not a directory: {root}")

    found = [("/", b"", MODE_DIR)]
    for dir_path, dirs, files in os.walk(root, onerror=_raise):
        dirs[:] = sorted(d for d in dirs if not d.startswith("."))
        for name in sorted(dirs + [f for f in files if not f.startswith(".")]):
            path = os.path.join(dir_path, name)
            mode = _mode_of(path, os.lstat(path).st_mode)
            content = b""
            if mode != MODE_DIR:
                with open(path, "rb") as f:
                    content = f.read()
            rel = os.path.relpath(path, root).replace(os.sep, "/")
            found.append(("/" + rel, content, mode))

    # Siblings share their parent's prefix, so name order is also sibling order
    found.sort(key=lambda item: item[0])
    children: Dict[str, List[int]] = {}
    for i, (name, _, _) in enumerate(found[1:], start=1):
        children.setdefault(posixpath.dirname(name), []).append(i)

    following = [NO_INDEX] * len(found)
    for kids in children.values():
        for a, b in zip(kids, kids[1:]):
            following[a] = b

    return [
        Record(name, content, mode, children.get(name, [NO_INDEX])[0], following[i])
        for i, (name, content, mode) in enumerate(found)
    ]


def write_package(files: Dict[str, str], output_dir: str) -> None:
    """Stage files inside output_dir, then swap each one into place."""
    os.makedirs(output_dir, exist_ok=True)
    with tempfile.TemporaryDirectory(prefix=".assetlife-", dir=output_dir) as staging:
        for name, text in files.items():
            with open(os.path.join(staging, name), "w", encoding="utf-8", newline="\n") as f:
                f.write(text)
        for name in files:
            os.replace(os.path.join(staging, name), os.path.join(output_dir, name))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog=SCRIPT_FILE, description="Regenerate an embedded asset package.")
    parser.add_argument("input_dir", metavar="INPUT_DIR")
    parser.add_argument("output_dir", metavar="OUTPUT_DIR")
    parser.add_argument("package_name", metavar="PACKAGE_NAME")
    args = parser.parse_args(argv)

    output_dir = os.path.abspath(args.output_dir)
    try:
        rel_input = os.path.relpath(os.path.abspath(args.input_dir), output_dir)
        records = collect_records(args.input_dir)
        files = {PACKAGE_FILE: render_package(
            records, args.package_name, regenerate_command(rel_input, args.package_name),
        )}
        files.update(companion_sources())
        write_package(files, output_dir)
    except (OSError, ValueError) as e:
        print(f"{SCRIPT_FILE}: {e}", file=sys.stderr)
        return 1
    return 0


def _mode_of(path: str, st_mode: int) -> int:
    if stat.S_ISDIR(st_mode):
        return MODE_DIR
    if not stat.S_ISREG(st_mode):
        raise ValueError(f"unsupported file type: {path}, mode {stat.filemode(st_mode)}")
    return MODE_EXEC if st_mode & stat.S_IXUSR else MODE_REGULAR


def _raise(error: OSError) -> None:
    raise error


if __name__ == "__main__":
    sys.exit(main())
