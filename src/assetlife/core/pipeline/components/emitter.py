from __future__ import annotations

"""
Package Source Emitter.

Renders the Python source of a generated asset package: an __init__.py
holding the record literals, plus verbatim copies of the runtime file
system module it imports and of the standalone regeneration script.

Rendering itself lives in the regeneration script so that a package
rebuilt with it is identical to one built by this tool.
"""

from typing import Dict, Iterable

from assetlife.domain.constants import (
    PACKAGE_INIT_FILE,
    REGENERATE_SCRIPT_FILE,
    RUNTIME_MODULE_FILE,
)
from assetlife.embedded import filesystem as runtime_module
from assetlife.embedded import regenerate as regenerate_module
from assetlife.embedded.filesystem import FileRecord
from assetlife.embedded.regenerate import regenerate_command, render_package

__all__ = [
    "package_sources",
    "regenerate_command",
    "regenerator_source",
    "render_package",
    "runtime_source",
]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def package_sources(
        records: Iterable[FileRecord],
        package_name: str,
        command: str,
) -> Dict[str, str]:
    """
    Render every file of a generated package.

    Args:
        records: Name-sorted records with final indices.
        package_name: Logical package name used in the module docstring.
        command: Regeneration command recorded in the header.

    Returns:
        Dict[str, str]: File name -> source text.
    """
    return {
        PACKAGE_INIT_FILE: render_package(records, package_name, command),
        RUNTIME_MODULE_FILE: runtime_source(),
        REGENERATE_SCRIPT_FILE: regenerator_source(),
    }


def runtime_source() -> str:
    """Return the source of the runtime module shipped with every package."""
    return _read_source(runtime_module.__file__)


def regenerator_source() -> str:
    """Return the source of the standalone regeneration script."""
    return _read_source(regenerate_module.__file__)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _read_source(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
