"""Mods directory scan - convention over configuration.

Convention: every *.jar / *.zip file directly inside a mods directory is a mod
archive. Each one is parsed independently; a broken archive is recorded and
skipped, it never aborts the scan.
"""

import logging
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from .archive import MANIFEST_ENTRY_NAME
from .exceptions import ModMetadataError
from .parser import parse_mod_file
from .schema import ModMetadata

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIXES: tuple[str, ...] = (".jar", ".zip")


class ModScanResult(BaseModel):
    """Outcome of scanning a mods directory (immutable data structure)."""

    model_config = ConfigDict(frozen=True)

    mods: dict[Path, ModMetadata] = Field(default_factory=dict)
    errors: dict[Path, str] = Field(default_factory=dict)

    def has_errors(self) -> bool:
        return bool(self.errors)


def discover_mod_archives(mods_dir: Path, suffixes: tuple[str, ...] = ARCHIVE_SUFFIXES) -> list[Path]:
    """
    List mod archives directly inside mods_dir (not recursive), sorted by path.

    Returns an empty list if mods_dir doesn't exist.
    """
    if not mods_dir.exists() or not mods_dir.is_dir():
        return []

    return sorted(f for f in mods_dir.iterdir() if f.is_file() and f.suffix.lower() in suffixes)


def scan_mod_directory(
    mods_dir: Path,
    entry_name: str = MANIFEST_ENTRY_NAME,
    suffixes: tuple[str, ...] = ARCHIVE_SUFFIXES,
) -> ModScanResult:
    """
    Parse the manifest of every mod archive in mods_dir.

    Args:
        mods_dir: Directory holding mod archives
        entry_name: Manifest entry name inside each archive
        suffixes: Archive file suffixes to consider

    Returns:
        ModScanResult with parsed metadata per archive and an error message
        for each archive that failed

    Example:
        >>> result = scan_mod_directory(Path(".minecraft/mods"))
        >>> for path, metadata in result.mods.items():
        ...     print(f"{path.name}: {metadata.name}")
    """
    mods: dict[Path, ModMetadata] = {}
    errors: dict[Path, str] = {}

    for archive in discover_mod_archives(mods_dir, suffixes):
        try:
            mods[archive] = parse_mod_file(archive, entry_name)
        except ModMetadataError as e:
            logger.warning(f"Skipping {archive.name}: {e}")
            errors[archive] = e.message

    logger.debug(f"Scanned {mods_dir}: {len(mods)} parsed, {len(errors)} failed")
    return ModScanResult(mods=mods, errors=errors)


def list_mod_names(mods_dir: Path) -> list[str]:
    """
    List mod names in mods_dir (helper), in archive path order.

    Example:
        >>> list_mod_names(Path(".minecraft/mods"))
        ['Fabric API', 'Lithium', 'Sodium']
    """
    result = scan_mod_directory(mods_dir)
    return [metadata.name for metadata in result.mods.values()]
