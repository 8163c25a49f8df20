from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared source-tree fixtures and a loader for generated packages.
"""

import importlib.util
import itertools
import os
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Dict, Iterator, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'assetlife.domain.config'.
    """
    return {
        "input_path": str(tmp_path / "root"),
        "output_path": str(tmp_path / "out" / "public"),
        "package_name": "public",
        "log_level": "INFO",
        "log_file": "",
    }


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create the reference source tree.

    Structure:
    /root
      a.txt      -> "hi"
      /b
        c.txt    -> "yo"
      .hidden    -> "junk"
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_bytes(b"hi")
    (root / "b").mkdir()
    (root / "b" / "c.txt").write_bytes(b"yo")
    (root / ".hidden").write_bytes(b"junk")
    return root


@pytest.fixture
def asset_tree(tmp_path: Path) -> Path:
    """
    Create a richer static-site tree with nesting, binary and empty files.

    Structure:
    /site
      index.html
      empty.txt           (zero bytes)
      /css
        style.css
      /img
        logo.png          (all 256 byte values)
      /js
        app.js
        /vendor
          lib.js
      /.git
        config
      .env
    """
    root = tmp_path / "site"
    (root / "css").mkdir(parents=True)
    (root / "img").mkdir()
    (root / "js" / "vendor").mkdir(parents=True)
    (root / ".git").mkdir()

    (root / "index.html").write_bytes(b"<html><body>hello</body></html>\n")
    (root / "empty.txt").write_bytes(b"")
    (root / "css" / "style.css").write_bytes(b"body { color: #333; }\n")
    (root / "img" / "logo.png").write_bytes(bytes(range(256)))
    (root / "js" / "app.js").write_bytes("console.log('héllo');\n".encode("utf-8"))
    (root / "js" / "vendor" / "lib.js").write_bytes(b"/* lib */\n")
    (root / ".git" / "config").write_bytes(b"[core]\n")
    (root / ".env").write_bytes(b"SECRET=1\n")
    return root


_package_counter = itertools.count()


@pytest.fixture
def load_generated() -> Iterator[Callable[[Path], ModuleType]]:
    """
    Import generated packages under unique module names.

    Every package is loaded from its directory without touching sys.path,
    and removed from sys.modules when the test finishes.
    """
    loaded: List[str] = []

    def _load(pkg_dir: Path) -> ModuleType:
        alias = f"_assetlife_generated_{next(_package_counter)}"
        spec = importlib.util.spec_from_file_location(
            alias,
            str(pkg_dir / "__init__.py"),
            submodule_search_locations=[str(pkg_dir)],
        )
        assert spec is not None and spec.loader is not None
        module = importlib.util.module_from_spec(spec)
        sys.modules[alias] = module
        loaded.append(alias)
        spec.loader.exec_module(module)
        return module

    yield _load

    for alias in loaded:
        for name in [m for m in sys.modules if m == alias or m.startswith(alias + ".")]:
            del sys.modules[name]
