"""Archive entry reader - pull a single named entry out of a mod archive.

Mod archives are plain zip files (.jar). The handle is opened and closed
inside each call; nothing is kept between calls.
"""

import logging
import zipfile
import zlib
from pathlib import Path

from .exceptions import ArchiveOpenError
from .exceptions import EntryNotFoundError
from .exceptions import InvalidInputError
from .exceptions import MalformedInputError

logger = logging.getLogger(__name__)

MANIFEST_ENTRY_NAME = "fabric.mod.json"


def read_entry(mod_path: str | Path | None, entry_name: str = MANIFEST_ENTRY_NAME) -> str:
    """
    Read one entry from a mod archive as text.

    Args:
        mod_path: Path to the archive (.jar / .zip)
        entry_name: Exact name of the entry inside the archive

    Returns:
        Decompressed entry content decoded as UTF-8 (a leading BOM is dropped)

    Raises:
        InvalidInputError: If mod_path is None, empty or "."
        ArchiveOpenError: If the archive is missing, corrupt, encrypted or unreadable
        EntryNotFoundError: If no entry named entry_name exists
        MalformedInputError: If the entry is not valid UTF-8

    Example:
        >>> text = read_entry(Path("mods/sodium.jar"))
        >>> text.startswith("{")
        True
    """
    # Path("") collapses to "."; neither names an archive
    if mod_path is None or str(mod_path) in ("", "."):
        raise InvalidInputError("Invalid mod path provided.")

    context = {"mod_path": str(mod_path), "entry": entry_name}

    try:
        with zipfile.ZipFile(mod_path) as jar:
            try:
                info = jar.getinfo(entry_name)
            except KeyError:
                raise EntryNotFoundError(f"{entry_name} not found in {mod_path}", context=context) from None

            raw = jar.read(info)
    except (OSError, zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError, RuntimeError) as e:
        # zlib.error / EOFError: corrupt or truncated member
        # NotImplementedError: compression method zipfile can't handle
        # RuntimeError: encrypted entry
        raise ArchiveOpenError(f"Failed to open archive {mod_path}: {e}", context=context) from e

    logger.debug(f"Read {len(raw)} bytes from {entry_name} in {mod_path}")

    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"{entry_name} in {mod_path} is not valid UTF-8: {e}", context=context) from e
