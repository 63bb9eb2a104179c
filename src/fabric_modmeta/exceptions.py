"""Mod metadata exceptions.

Every failure names what went wrong and where (archive, entry, field).
"""


class ModMetadataError(Exception):
    """Base exception for mod metadata operations."""

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (archive path, entry, field)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class InvalidInputError(ModMetadataError):
    """Caller passed an empty or missing path."""


class ArchiveOpenError(ModMetadataError):
    """Archive could not be opened or read (missing, corrupt, unsupported)."""


class EntryNotFoundError(ModMetadataError):
    """Archive has no entry with the requested name."""


class MalformedInputError(ModMetadataError):
    """Manifest text is not valid JSON or a field has the wrong shape."""


class MissingFieldError(ModMetadataError):
    """Manifest lacks a required top-level field."""

    def __init__(self, field: str, context: dict | None = None):
        super().__init__(f"Missing '{field}'", context={"field": field, **(context or {})})
        self.field = field
