from __future__ import annotations

"""
Entry Filtering Rules.

Predicates deciding which directory entries take part in an embedded
tree.
"""

import os

from assetlife.domain.constants import HIDDEN_PREFIX


def is_hidden(name: str) -> bool:
    """
    Check whether an entry is hidden (dot-prefixed basename).

    Hidden entries are never embedded, and neither is anything beneath a
    hidden directory.

    Args:
        name: Entry name or path.

    Returns:
        bool: True if the basename starts with a dot.
    """
    return os.path.basename(name).startswith(HIDDEN_PREFIX)
