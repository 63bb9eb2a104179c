"""Key-value properties - line-oriented `key=value` text.

Rules:
- Lines that are empty or start with `;`, `#` or `'` are comments
- Lines without `=` are skipped
- Split on the first `=`; key and value are trimmed
- A value wrapped in matching "..." or '...' loses the quotes
- First occurrence of a key wins
"""

import logging
import re
from collections.abc import ItemsView
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)

_COMMENT_PREFIXES = (";", "#", "'")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class PropertyStore:
    """Mutable str -> str mapping built from properties text."""

    def __init__(self, data: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(data or {})

    @classmethod
    def from_string(cls, text: str | None) -> "PropertyStore":
        """Parse properties text (None or "" gives an empty store)."""
        store = cls()
        if not text:
            return store

        for line in _LINE_BREAK.split(text):
            if not _should_parse(line):
                continue

            key, _, value = line.partition("=")
            key = key.strip()
            if key in store._data:
                continue

            store._data[key] = _unquote(value.strip())

        logger.debug(f"Parsed {len(store._data)} properties")
        return store

    def get(self, key: str, default: str | None = None) -> str | None:
        """Value for key, or default if the key isn't set."""
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Insert or overwrite key with str(value)."""
        self._data[key] = str(value)

    def items(self) -> ItemsView[str, str]:
        return self._data.items()

    def to_dict(self) -> dict[str, str]:
        return dict(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"PropertyStore({self._data!r})"


def _should_parse(line: str) -> bool:
    if not line or line.startswith(_COMMENT_PREFIXES):
        return False
    return "=" in line


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def parse_properties(text: str | None) -> PropertyStore:
    """
    Parse `key=value` text into a PropertyStore.

    Args:
        text: Properties text; None or "" yields an empty store

    Returns:
        PropertyStore

    Example:
        >>> store = parse_properties('# comment\\nkey1 = "v1"\\nkey1=v2\\nkey2=3\\n')
        >>> store.to_dict()
        {'key1': 'v1', 'key2': '3'}
    """
    return PropertyStore.from_string(text)


def load_properties(path: Path) -> PropertyStore:
    """
    Load and parse a properties file (UTF-8).

    Raises:
        InvalidInputError: If the file doesn't exist
    """
    if not path.exists():
        raise InvalidInputError(f"Properties file not found: {path}", context={"path": str(path)})

    return parse_properties(path.read_text(encoding="utf-8"))
