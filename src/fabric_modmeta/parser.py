"""Manifest pipeline: archive entry -> JSON tree -> validation -> ModMetadata."""

import logging
from pathlib import Path

from .archive import MANIFEST_ENTRY_NAME
from .archive import read_entry
from .exceptions import ModMetadataError
from .mapper import map_manifest
from .schema import ModMetadata
from .tree import parse_tree
from .validator import validate_manifest

logger = logging.getLogger(__name__)


def parse_manifest(text: str) -> ModMetadata:
    """
    Parse fabric.mod.json text into ModMetadata.

    Args:
        text: Manifest JSON text

    Returns:
        ModMetadata with every required field populated

    Raises:
        MalformedInputError: If text is empty, invalid JSON, or a field has the wrong shape
        MissingFieldError: If a required field is missing
    """
    tree = parse_tree(text)
    validate_manifest(tree)
    return map_manifest(tree)


def parse_mod_file(mod_path: str | Path | None, entry_name: str = MANIFEST_ENTRY_NAME) -> ModMetadata:
    """
    Read and parse the manifest of a mod archive.

    Args:
        mod_path: Path to the mod archive (.jar)
        entry_name: Manifest entry name (default fabric.mod.json)

    Returns:
        ModMetadata for the mod

    Raises:
        InvalidInputError: If mod_path is None or empty
        ArchiveOpenError: If the archive can't be opened
        EntryNotFoundError: If the manifest entry is missing
        MalformedInputError: If the manifest is empty, invalid JSON, or wrongly shaped
        MissingFieldError: If a required field is missing

    Example:
        >>> metadata = parse_mod_file(Path("mods/lithium.jar"))
        >>> print(f"{metadata.name} {metadata.version}")
    """
    text = read_entry(mod_path, entry_name)

    try:
        metadata = parse_manifest(text)
    except ModMetadataError as e:
        e.context.setdefault("mod_path", str(mod_path))
        raise

    logger.debug(f"Parsed {entry_name} from {mod_path}: {metadata.name}")
    return metadata
