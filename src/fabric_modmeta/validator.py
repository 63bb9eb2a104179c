"""Manifest validator - required top-level keys.

Presence only: a key counts as present whatever its value. Shape checks
happen in the mapper.
"""

from .exceptions import MissingFieldError
from .tree import JsonNode

# Checked in this order; the first missing one is reported
REQUIRED_FIELDS: tuple[str, ...] = (
    "schemaVersion",
    "name",
    "description",
    "authors",
    "contact",
    "environment",
)


def validate_manifest(tree: JsonNode) -> None:
    """
    Check that every required field is present at the top level.

    Args:
        tree: Parsed manifest root

    Raises:
        MissingFieldError: Naming the first missing field in REQUIRED_FIELDS order
    """
    for field in REQUIRED_FIELDS:
        if not tree.has(field):
            raise MissingFieldError(field)
