from __future__ import annotations

"""
Unit tests for the Package Source Emitter.

Verifies the generated header, record literals and the copies of the
runtime module and regeneration script shipped with every package.
"""

import ast

from assetlife.core.pipeline.components.emitter import (
    package_sources,
    regenerate_command,
    regenerator_source,
    render_package,
    runtime_source,
)
from assetlife.domain.constants import GENERATED_FILES
from assetlife.embedded import filesystem as runtime_module
from assetlife.embedded import regenerate as regenerate_module
from assetlife.embedded.filesystem import MODE_DIR, MODE_EXEC, MODE_REGULAR, NO_INDEX, FileRecord

_RECORDS = [
    FileRecord("/", b"", MODE_DIR, 1, NO_INDEX),
    FileRecord("/bin", b"", MODE_DIR, 2, 3),
    FileRecord("/bin/run", b"#!/bin/sh\necho 'hi'\n", MODE_EXEC, NO_INDEX, NO_INDEX),
    FileRecord("/data.bin", bytes([0, 1, 254, 255]) + b'"\\', MODE_REGULAR, NO_INDEX, NO_INDEX),
]


def _record_calls(source: str) -> list:
    """Extract FileRecord(...) keyword arguments as literal dicts."""
    tree = ast.parse(source)
    calls = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Call) and getattr(node.func, "id", None) == "FileRecord":
            calls.append({kw.arg: ast.literal_eval(kw.value) for kw in node.keywords})
    return calls


def test_regenerate_command_format() -> None:
    """TC-01: The command runs the shipped script with the relative input path."""
    assert regenerate_command("../public", "assets") == "python regenerate.py ../public . assets"


def test_regenerate_command_quotes_spaces() -> None:
    assert regenerate_command("../my assets", "pkg") == "python regenerate.py '../my assets' . pkg"


def test_rendered_package_header() -> None:
    """TC-02: The module starts with the generated-code marker and the command."""
    source = render_package(_RECORDS, "assets", "python regenerate.py ../public . assets")
    lines = source.splitlines()

    assert lines[0] == "# Code generated by assetlife. DO NOT EDIT."
    assert "#     python regenerate.py ../public . assets" in lines
    assert "# regenerate.py only needs the standard library; assetlife itself is not required." in lines
    assert "from .filesystem import (" in source
    assert "root = EmbeddedFileSystem(_RECORDS)" in source


def test_rendered_package_is_valid_python() -> None:
    """TC-03: The output compiles and its literals reproduce the records."""
    source = render_package(_RECORDS, "assets", "python regenerate.py x . assets")
    compile(source, "<generated>", "exec")

    calls = _record_calls(source)
    assert [FileRecord(**c) for c in calls] == _RECORDS


def test_modes_are_rendered_in_octal() -> None:
    source = render_package(_RECORDS, "assets", "cmd")
    assert "mode=0o40755," in source
    assert "mode=0o755," in source
    assert "mode=0o644," in source


def test_empty_record_set_still_renders() -> None:
    source = render_package([], "empty", "cmd")
    compile(source, "<generated>", "exec")
    assert _record_calls(source) == []


def test_runtime_source_is_the_runtime_module() -> None:
    """TC-04: The shipped runtime is a byte-for-byte copy of the module."""
    with open(runtime_module.__file__, "r", encoding="utf-8") as f:
        expected = f.read()

    source = runtime_source()

    assert source == expected
    assert "class EmbeddedFileSystem" in source
    for line in source.splitlines():
        if line.startswith(("import ", "from ")):
            assert "assetlife" not in line


def test_regenerator_source_is_stdlib_only() -> None:
    """TC-05: The shipped regeneration script imports nothing outside the standard library."""
    with open(regenerate_module.__file__, "r", encoding="utf-8") as f:
        expected = f.read()

    source = regenerator_source()

    assert source == expected
    tree = ast.parse(source)
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom):
            assert node.level == 0
            assert not (node.module or "").startswith("assetlife")
        elif isinstance(node, ast.Import):
            assert all(not alias.name.startswith("assetlife") for alias in node.names)


def test_regenerator_modes_match_runtime() -> None:
    """The script's mode constants must agree with the runtime it ships next to."""
    assert regenerate_module.NO_INDEX == runtime_module.NO_INDEX
    assert regenerate_module.MODE_DIR == runtime_module.MODE_DIR
    assert regenerate_module.MODE_EXEC == runtime_module.MODE_EXEC
    assert regenerate_module.MODE_REGULAR == runtime_module.MODE_REGULAR
    assert regenerate_module.RUNTIME_FILE == "filesystem.py"
    assert regenerate_module.SCRIPT_FILE == "regenerate.py"


def test_package_sources_lists_every_generated_file() -> None:
    """TC-06: A package consists of its records module, the runtime and the script."""
    sources = package_sources(_RECORDS, "assets", "cmd")

    assert list(sources) == ["__init__.py", "filesystem.py", "regenerate.py"]
    assert tuple(sources) == GENERATED_FILES
    assert sources["__init__.py"] == render_package(_RECORDS, "assets", "cmd")
    assert sources["filesystem.py"] == runtime_source()
    assert sources["regenerate.py"] == regenerator_source()
