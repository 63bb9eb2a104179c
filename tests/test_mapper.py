"""Tests for mapping a manifest tree into ModMetadata."""

import json

import pytest
from fabric_modmeta import MalformedInputError
from fabric_modmeta import extract_string_map
from fabric_modmeta import map_manifest
from fabric_modmeta import parse_tree


def _manifest(**overrides) -> dict:
    data = {
        "schemaVersion": 1,
        "id": "sodium",
        "name": "Sodium",
        "version": "0.5.3",
        "description": "Rendering engine replacement",
        "authors": ["JellySquid", "IMS"],
        "contact": {"homepage": "https://example.com/sodium", "issues": "https://example.com/issues"},
        "icon": "assets/sodium/icon.png",
        "environment": "client",
        "depends": {"fabricloader": ">=0.12.0", "minecraft": "1.20.x"},
        "breaks": {"optifabric": "*"},
    }
    data.update(overrides)
    return {key: value for key, value in data.items() if value is not ...}


def _map(data: dict):
    return map_manifest(parse_tree(json.dumps(data)))


def test_map_full_manifest():
    """Test every field is carried over."""
    metadata = _map(_manifest())

    assert metadata.schema_version == "1"
    assert metadata.id == "sodium"
    assert metadata.name == "Sodium"
    assert metadata.version == "0.5.3"
    assert metadata.description == "Rendering engine replacement"
    assert metadata.authors == ("JellySquid", "IMS")
    assert metadata.contact == {"homepage": "https://example.com/sodium", "issues": "https://example.com/issues"}
    assert metadata.icon == "assets/sodium/icon.png"
    assert metadata.environment == "client"
    assert metadata.depends == {"fabricloader": ">=0.12.0", "minecraft": "1.20.x"}
    assert metadata.breaks == {"optifabric": "*"}


def test_map_optional_fields_absent():
    """Test absent optional fields are left unset."""
    metadata = _map(_manifest(id=..., version=..., icon=..., depends=..., breaks=...))

    assert metadata.id is None
    assert metadata.version is None
    assert metadata.icon is None
    assert metadata.depends is None
    assert metadata.breaks is None


def test_map_optional_null_is_unset():
    """Test null optional scalars are treated as unset."""
    metadata = _map(_manifest(version=None, icon=None))

    assert metadata.version is None
    assert metadata.icon is None


def test_map_empty_authors():
    """Test an empty authors list is legal."""
    assert _map(_manifest(authors=[])).authors == ()


def test_map_authors_preserves_order_and_stringifies():
    """Test authors keep source order; scalars become text; person objects give their name."""
    authors = ["zeta", 7, {"name": "alpha", "contact": {"email": "a@example.com"}}, True]

    assert _map(_manifest(authors=authors)).authors == ("zeta", "7", "alpha", "true")


@pytest.mark.parametrize("authors", ["JellySquid", {"name": "x"}, 3, None])
def test_map_authors_not_a_list(authors):
    """Test non-list authors is malformed input."""
    with pytest.raises(MalformedInputError, match="'authors' must be a list"):
        _map(_manifest(authors=authors))


@pytest.mark.parametrize("entry", [None, ["nested"], {"contact": {}}])
def test_map_invalid_author_entry(entry):
    """Test author entries that have no textual name are rejected."""
    with pytest.raises(MalformedInputError):
        _map(_manifest(authors=["ok", entry]))


@pytest.mark.parametrize("contact", ["https://example.com", ["a"], 1, None])
def test_map_contact_not_object_is_absent(contact):
    """Test a non-object contact degrades to None instead of failing."""
    assert _map(_manifest(contact=contact)).contact is None


@pytest.mark.parametrize("field", ["depends", "breaks"])
def test_map_dependency_maps_not_object_are_absent(field):
    """Test non-object depends/breaks degrade to None."""
    assert getattr(_map(_manifest(**{field: ">=1.0"})), field) is None


def test_map_empty_object_is_empty_map():
    """Test an empty object gives an empty mapping, not None."""
    metadata = _map(_manifest(contact={}, depends={}))

    assert metadata.contact == {}
    assert metadata.depends == {}


def test_map_numeric_scalars_stringified():
    """Test numeric scalar fields become their textual form."""
    metadata = _map(_manifest(schemaVersion=1, version=2, name=42))

    assert metadata.schema_version == "1"
    assert metadata.version == "2"
    assert metadata.name == "42"


@pytest.mark.parametrize("field", ["schemaVersion", "name", "description", "environment"])
@pytest.mark.parametrize("value", [None, {"a": "b"}, ["a"]])
def test_map_required_scalar_wrong_shape(field, value):
    """Test required string fields holding null or containers are rejected."""
    with pytest.raises(MalformedInputError, match=f"'{field}' must be a string") as exc_info:
        _map(_manifest(**{field: value}))

    assert exc_info.value.context["field"] == field


@pytest.mark.parametrize("field", ["version", "icon"])
def test_map_optional_scalar_wrong_shape(field):
    """Test optional string fields holding containers are rejected."""
    with pytest.raises(MalformedInputError, match=f"'{field}'"):
        _map(_manifest(**{field: {"nested": True}}))


def test_extract_string_map_stringifies_values():
    """Test map values of any type pass through as text."""
    tree = parse_tree('{"depends": {"a": "1.0", "b": 2, "c": true, "d": null, "e": [">=1", "<2"]}}')

    assert extract_string_map(tree, "depends") == {"a": "1.0", "b": "2", "c": "true", "d": "", "e": '[">=1","<2"]'}


def test_extract_string_map_absent_field():
    """Test a missing field yields None."""
    assert extract_string_map(parse_tree("{}"), "breaks") is None
