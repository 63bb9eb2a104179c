"""Mod metadata schema - the typed record produced from fabric.mod.json."""

import json
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Omitted from to_manifest() when unset; contact is always written
_OPTIONAL_FIELDS = ("id", "version", "icon", "depends", "breaks")


class ModMetadata(BaseModel):
    """
    Mod metadata from a fabric.mod.json manifest.

    Attribute names are snake_case; aliases match the manifest keys, and either
    may be used when constructing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_version: str = Field(alias="schemaVersion")
    id: str | None = None
    name: str
    version: str | None = None
    description: str
    authors: tuple[str, ...]
    # None when the manifest value is not an object. Mapping fields are plain
    # dicts: frozen blocks reassignment, not in-place edits of the dict.
    contact: dict[str, str] | None = None
    icon: str | None = None
    environment: str

    # Mod id -> version range
    depends: dict[str, str] | None = None
    breaks: dict[str, str] | None = None

    def to_manifest(self) -> dict[str, Any]:
        """Serialize back to the manifest's JSON shape (camelCase keys)."""
        data = self.model_dump(mode="json", by_alias=True)
        for key in _OPTIONAL_FIELDS:
            if data[key] is None:
                del data[key]
        return data

    def to_json(self, indent: int | None = 2) -> str:
        """Render to_manifest() as JSON text."""
        return json.dumps(self.to_manifest(), indent=indent, ensure_ascii=False)
