from __future__ import annotations

"""
Internationalization (i18n) Utility.

User-facing CLI strings live in JSON locale files under
interface/locales. Keys use dot notation ('cli.status.success') and values
are str.format templates.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_DIR = os.path.abspath(
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "interface", "locales")
)


class I18n:
    """
    Lookup table for one locale.

    A locale that is missing or unreadable leaves the table empty; lookups
    then fall back to their default text, or to the key itself.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_dir: str = LOCALES_DIR):
        self._locales_dir = locales_dir
        self._messages: Dict[str, Any] = {}
        self.locale = locale
        self.is_loaded = False
        self.load_locale(locale)

    def load_locale(self, locale: str) -> None:
        """
        Replace the current messages with those of another locale.

        Args:
            locale: Locale identifier, i.e. the JSON file stem.
        """
        file_path = os.path.join(self._locales_dir, f"{locale}.json")
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                messages = json.load(f)
        except FileNotFoundError:
            logger.warning(f"I18n: No locale file at '{file_path}'.")
            messages = None
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Unreadable locale file {file_path}: {e}")
            messages = None

        self.is_loaded = isinstance(messages, dict)
        self._messages = messages if self.is_loaded else {}
        if self.is_loaded:
            self.locale = locale
            logger.debug(f"I18n: Loaded locale '{locale}'")

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve a dot-notation key and fill in its placeholders.

        Args:
            key: Message key, e.g. 'cli.errors.path_not_exist'.
            default: Text used when the key does not resolve to a string.
            **kwargs: Values for the template placeholders.

        Returns:
            str: The formatted message. A template whose placeholders do
                 not match kwargs is returned unformatted.
        """
        template = self._lookup(key)
        if template is None:
            template = key if default is None else default
        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Cannot format '{key}': {e}")
            return template

    def _lookup(self, key: str) -> Optional[str]:
        node: Any = self._messages
        for part in key.split("."):
            if not isinstance(node, dict):
                return None
            node = node.get(part)
        return node if isinstance(node, str) else None


i18n = I18n(DEFAULT_LOCALE)
