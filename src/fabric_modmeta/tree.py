"""Structured text parser - JSON text into a typed tree.

The tree is a tagged variant (string | list | object | other). Extraction
methods return None on a shape mismatch instead of raising, so callers decide
what a mismatch means.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import MalformedInputError


class NodeKind(Enum):
    STRING = "string"
    LIST = "list"
    OBJECT = "object"
    OTHER = "other"  # number, boolean, null


@dataclass(frozen=True)
class JsonNode:
    """One node of a parsed JSON document."""

    kind: NodeKind
    value: Any

    @classmethod
    def wrap(cls, value: Any) -> "JsonNode":
        """Wrap a decoded JSON value, tagging it by shape."""
        if isinstance(value, str):
            return cls(NodeKind.STRING, value)
        if isinstance(value, list):
            return cls(NodeKind.LIST, value)
        if isinstance(value, dict):
            return cls(NodeKind.OBJECT, value)
        return cls(NodeKind.OTHER, value)

    @property
    def is_null(self) -> bool:
        return self.kind is NodeKind.OTHER and self.value is None

    def has(self, key: str) -> bool:
        """True if this is an object containing key (any value, including null)."""
        return self.kind is NodeKind.OBJECT and key in self.value

    def get(self, key: str) -> "JsonNode | None":
        """Child node under key, or None if absent or this is not an object."""
        if not self.has(key):
            return None
        return JsonNode.wrap(self.value[key])

    def keys(self) -> list[str]:
        if self.kind is not NodeKind.OBJECT:
            return []
        return list(self.value)

    def as_scalar_text(self) -> str | None:
        """
        Textual form of a scalar node.

        Strings come back verbatim, numbers and booleans as their JSON text
        ("3", "1.5", "true"). Null, lists and objects return None.
        """
        if self.kind is NodeKind.STRING:
            return self.value
        if self.kind is NodeKind.OTHER and self.value is not None:
            return json.dumps(self.value)
        return None

    def as_text(self) -> str:
        """Textual form of any node: scalars as above, null as "", containers as compact JSON."""
        if self.is_null:
            return ""
        scalar = self.as_scalar_text()
        if scalar is not None:
            return scalar
        return json.dumps(self.value, separators=(",", ":"), ensure_ascii=False)

    def as_list(self) -> "list[JsonNode] | None":
        if self.kind is not NodeKind.LIST:
            return None
        return [JsonNode.wrap(item) for item in self.value]

    def as_object(self) -> "dict[str, JsonNode] | None":
        if self.kind is not NodeKind.OBJECT:
            return None
        return {key: JsonNode.wrap(item) for key, item in self.value.items()}


def parse_tree(text: str) -> JsonNode:
    """
    Parse JSON text into a tree rooted at an object node.

    Args:
        text: JSON document text

    Returns:
        Root JsonNode (always NodeKind.OBJECT)

    Raises:
        MalformedInputError: If text is empty, not valid JSON, nested too deeply, or not a JSON object
    """
    if not text:
        raise MalformedInputError("Manifest text is empty")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Invalid JSON: {e}", context={"line": e.lineno, "column": e.colno}) from e
    except RecursionError as e:
        raise MalformedInputError("Manifest nesting too deep") from e

    root = JsonNode.wrap(data)
    if root.kind is not NodeKind.OBJECT:
        raise MalformedInputError(f"Manifest must be a JSON object, got {root.kind.value}")
    return root
