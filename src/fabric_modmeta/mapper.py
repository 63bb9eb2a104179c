"""Manifest mapper - validated tree into ModMetadata.

Assumes validate_manifest() already passed.
"""

import logging

from .exceptions import MalformedInputError
from .schema import ModMetadata
from .tree import JsonNode
from .tree import NodeKind

logger = logging.getLogger(__name__)


def extract_string_map(tree: JsonNode, field: str) -> dict[str, str] | None:
    """
    Extract an object-shaped field as a str -> str mapping.

    Args:
        tree: Manifest root
        field: Top-level key (contact, depends, breaks)

    Returns:
        Mapping of property name to the value's textual form, or None if the
        field is absent or not an object. Non-string values are stringified
        ({"minecraft": 1} -> {"minecraft": "1"}, null -> "").
    """
    node = tree.get(field)
    if node is None:
        return None

    children = node.as_object()
    if children is None:
        logger.debug(f"'{field}' is {node.kind.value}, not an object; treating as absent")
        return None

    return {key: child.as_text() for key, child in children.items()}


def _required_text(tree: JsonNode, field: str) -> str:
    node = tree.get(field)
    text = node.as_scalar_text() if node is not None else None
    if text is None:
        kind = "missing" if node is None else ("null" if node.is_null else node.kind.value)
        raise MalformedInputError(f"'{field}' must be a string, got {kind}", context={"field": field})
    return text


def _optional_text(tree: JsonNode, field: str) -> str | None:
    node = tree.get(field)
    if node is None or node.is_null:
        return None
    text = node.as_scalar_text()
    if text is None:
        raise MalformedInputError(f"'{field}' must be a string, got {node.kind.value}", context={"field": field})
    return text


def _author_name(node: JsonNode) -> str:
    # Fabric allows person objects: {"name": "...", "contact": {...}}
    if node.kind is NodeKind.OBJECT:
        name = node.get("name")
        text = name.as_scalar_text() if name is not None else None
        if text is not None:
            return text
        raise MalformedInputError("Author object without a 'name'", context={"field": "authors"})

    text = node.as_scalar_text()
    if text is None:
        raise MalformedInputError(f"Invalid author entry: {node.kind.value}", context={"field": "authors"})
    return text


def map_manifest(tree: JsonNode) -> ModMetadata:
    """
    Convert a validated manifest tree into a ModMetadata record.

    Args:
        tree: Manifest root that passed validate_manifest()

    Returns:
        Immutable ModMetadata

    Raises:
        MalformedInputError: If a field has the wrong shape (authors not a list,
            required string field holding an object, ...)
    """
    authors_node = tree.get("authors")
    author_nodes = authors_node.as_list() if authors_node is not None else None
    if author_nodes is None:
        raise MalformedInputError("'authors' must be a list", context={"field": "authors"})

    metadata = ModMetadata(
        schema_version=_required_text(tree, "schemaVersion"),
        id=_optional_text(tree, "id"),
        name=_required_text(tree, "name"),
        version=_optional_text(tree, "version"),
        description=_required_text(tree, "description"),
        authors=[_author_name(node) for node in author_nodes],
        contact=extract_string_map(tree, "contact"),
        icon=_optional_text(tree, "icon"),
        environment=_required_text(tree, "environment"),
        depends=extract_string_map(tree, "depends"),
        breaks=extract_string_map(tree, "breaks"),
    )

    logger.debug(f"Mapped manifest for {metadata.name} ({len(metadata.authors)} authors)")
    return metadata
