"""
assetlife: embed a directory tree into a Python package as a read-only,
in-memory file system.
"""

from assetlife.domain.constants import APP_VERSION as __version__

__all__ = ["__version__"]
