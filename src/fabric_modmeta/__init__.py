"""fabric-modmeta - Read and validate fabric.mod.json metadata from mod archives.

Also ships a small `key=value` properties parser for mod configuration text.
"""

from .archive import MANIFEST_ENTRY_NAME
from .archive import read_entry
from .discovery import ModScanResult
from .discovery import discover_mod_archives
from .discovery import list_mod_names
from .discovery import scan_mod_directory
from .exceptions import ArchiveOpenError
from .exceptions import EntryNotFoundError
from .exceptions import InvalidInputError
from .exceptions import MalformedInputError
from .exceptions import MissingFieldError
from .exceptions import ModMetadataError
from .mapper import extract_string_map
from .mapper import map_manifest
from .parser import parse_manifest
from .parser import parse_mod_file
from .properties import PropertyStore
from .properties import load_properties
from .properties import parse_properties
from .schema import ModMetadata
from .tree import JsonNode
from .tree import NodeKind
from .tree import parse_tree
from .validator import REQUIRED_FIELDS
from .validator import validate_manifest

__all__ = [
    # Metadata
    "ModMetadata",
    # Pipeline
    "parse_mod_file",
    "parse_manifest",
    "read_entry",
    "MANIFEST_ENTRY_NAME",
    "parse_tree",
    "JsonNode",
    "NodeKind",
    "validate_manifest",
    "REQUIRED_FIELDS",
    "map_manifest",
    "extract_string_map",
    # Discovery
    "ModScanResult",
    "discover_mod_archives",
    "scan_mod_directory",
    "list_mod_names",
    # Properties
    "PropertyStore",
    "parse_properties",
    "load_properties",
    # Exceptions
    "ModMetadataError",
    "InvalidInputError",
    "ArchiveOpenError",
    "EntryNotFoundError",
    "MalformedInputError",
    "MissingFieldError",
]

__version__ = "0.1.0"
