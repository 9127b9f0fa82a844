"""Tests for catalog file validation and loading."""

import json

import pytest

from music_catalog.exceptions import CatalogFileError, InvalidReferenceError
from music_catalog.infrastructure.catalog_file import (
    build_catalog,
    load_catalog,
    validate_catalog_json,
)


@pytest.fixture
def catalog_data():
    """A valid catalog document."""
    return {
        "name": "beatles",
        "albums": [
            {"name": "Abbey Road", "year": 1969},
            {"name": "Let It Be", "year": 1970},
        ],
        "songs": [
            {"name": "Something", "album": "Abbey Road", "duration": 182.0},
            {"name": "Come Together", "album": "Abbey Road", "duration": 259},
            {"name": "Hey Jude", "duration": 431.0},
            {"name": "Get Back", "album": None, "duration": 187.0},
        ],
    }


@pytest.fixture
def catalog_file(tmp_path, catalog_data):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_data))
    return path


class TestValidation:
    """Test catalog schema validation."""

    def test_valid_document(self, catalog_data):
        assert validate_catalog_json(catalog_data) == []

    def test_empty_document_is_valid(self):
        assert validate_catalog_json({}) == []

    def test_missing_duration(self):
        errors = validate_catalog_json({"songs": [{"name": "S"}]})
        assert len(errors) == 1
        assert "songs -> 0" in errors[0]
        assert "duration" in errors[0]

    def test_year_must_be_integer(self):
        errors = validate_catalog_json({"albums": [{"name": "A", "year": "1969"}]})
        assert errors
        assert "albums -> 0 -> year" in errors[0]

    def test_unknown_top_level_key(self):
        errors = validate_catalog_json({"artists": []})
        assert errors
        assert errors[0].startswith("Validation error at root")

    def test_not_an_object(self):
        assert validate_catalog_json([]) != []


class TestBuildCatalog:
    """Test building a catalog from a document."""

    def test_build(self, catalog_data):
        result = build_catalog(catalog_data)
        catalog = result.catalog

        assert catalog.name == "beatles"
        assert not result.has_rejections
        assert sorted(catalog.album_names()) == ["Abbey Road", "Let It Be"]
        assert catalog.count_songs("Abbey Road") == 2
        assert catalog.count_songs_in_no_album() == 2
        assert catalog.longest_song() == "Hey Jude"

    def test_invalid_reference_is_skipped(self, catalog_data):
        catalog_data["songs"].append({"name": "Ghost", "album": "Nowhere", "duration": 1.0})
        result = build_catalog(catalog_data)

        assert result.has_rejections
        assert len(result.rejected) == 1
        assert result.rejected[0].album_name == "Nowhere"
        assert result.catalog.song_count == 4

    def test_strict_raises(self, catalog_data):
        catalog_data["songs"].insert(0, {"name": "Ghost", "album": "Nowhere", "duration": 1.0})
        with pytest.raises(InvalidReferenceError):
            build_catalog(catalog_data, strict=True)

    def test_duplicate_songs_collapse(self, catalog_data):
        catalog_data["songs"].append(dict(catalog_data["songs"][0]))
        result = build_catalog(catalog_data)
        assert result.catalog.count_songs("Abbey Road") == 2

    def test_songs_may_precede_albums_in_file(self):
        data = {
            "songs": [{"name": "S", "album": "A", "duration": 1.0}],
            "albums": [{"name": "A", "year": 2000}],
        }
        assert build_catalog(data).catalog.count_songs("A") == 1


class TestLoadCatalog:
    """Test loading catalog files."""

    def test_load(self, catalog_file):
        result = load_catalog(catalog_file)
        assert result.catalog.song_count == 4
        assert result.catalog.average_duration_of_songs("Abbey Road") == pytest.approx(220.5)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(CatalogFileError, match="Error reading"):
            load_catalog(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{")
        with pytest.raises(CatalogFileError, match="JSON parsing error"):
            load_catalog(path)

    def test_load_schema_violation(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"albums": [{"name": "A"}]}))
        with pytest.raises(CatalogFileError, match="Invalid catalog file"):
            load_catalog(path)
