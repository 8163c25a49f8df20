from __future__ import annotations

"""
Domain Constants.

Names and identifiers shared by the generator, the CLI and the emitted
packages.
"""

APP_NAME = "assetlife"
APP_VERSION = "0.1.0"
CURRENT_CONFIG_VERSION = "1.0.0"

# Files written into every generated package
PACKAGE_INIT_FILE = "__init__.py"
RUNTIME_MODULE_FILE = "filesystem.py"
REGENERATE_SCRIPT_FILE = "regenerate.py"

GENERATED_FILES = (PACKAGE_INIT_FILE, RUNTIME_MODULE_FILE, REGENERATE_SCRIPT_FILE)

HIDDEN_PREFIX = "."
