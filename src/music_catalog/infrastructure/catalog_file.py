"""JSON catalog files: schema, validation and loading.

A catalog file lists albums and songs::

    {
        "albums": [{"name": "Abbey Road", "year": 1969}],
        "songs": [
            {"name": "Something", "album": "Abbey Road", "duration": 182.0},
            {"name": "Hey Jude", "duration": 431.0}
        ]
    }

Albums are added before songs, so a song may reference any album in the file.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import jsonschema

from ..domain.catalog.entities import Catalog
from ..domain.result import partition
from ..exceptions import CatalogFileError, InvalidReferenceError

logger = logging.getLogger(__name__)

CATALOG_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "description": "Optional catalog name"
        },
        "albums": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "year"],
                "properties": {
                    "name": {"type": "string"},
                    "year": {"type": "integer"}
                },
                "additionalProperties": False
            }
        },
        "songs": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "duration"],
                "properties": {
                    "name": {"type": "string"},
                    "album": {
                        "type": ["string", "null"],
                        "description": "Album name; omit or null for songs in no album"
                    },
                    "duration": {"type": "number"}
                },
                "additionalProperties": False
            }
        }
    },
    "additionalProperties": False
}


@dataclass
class LoadResult:
    """A loaded catalog and the songs that were skipped."""

    catalog: Catalog
    rejected: List[InvalidReferenceError] = field(default_factory=list)

    @property
    def has_rejections(self) -> bool:
        return bool(self.rejected)


def validate_catalog_json(data: Any) -> List[str]:
    """Validate a catalog document.

    Returns:
        List of validation error messages, empty when the document is valid
    """
    validator = jsonschema.Draft7Validator(CATALOG_SCHEMA)
    errors = []
    for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path]):
        path = " -> ".join(str(p) for p in error.absolute_path) if error.absolute_path else "root"
        errors.append(f"Validation error at {path}: {error.message}")
    return errors


def build_catalog(data: Dict[str, Any], strict: bool = False) -> LoadResult:
    """Build a catalog from an already validated document.

    Args:
        data: Catalog document
        strict: Raise on the first song with an unknown album instead of skipping it

    Raises:
        InvalidReferenceError: In strict mode, for the first invalid song
    """
    catalog = Catalog(name=data.get("name", "default"))

    for album in data.get("albums", []):
        catalog.add_album(album["name"], int(album["year"]))

    results = []
    for song in data.get("songs", []):
        result = catalog.try_add_song(song["name"], song.get("album"), float(song["duration"]))
        if strict:
            result.or_else_raise()
        results.append(result)

    _, rejected = partition(results)
    for error in rejected:
        logger.warning(f"Skipped song: {error}")

    return LoadResult(catalog=catalog, rejected=rejected)


def load_catalog(file_path: Path, strict: bool = False) -> LoadResult:
    """Load a catalog from a JSON file.

    Raises:
        CatalogFileError: If the file cannot be read, is not JSON or does not
            match the catalog schema
        InvalidReferenceError: In strict mode, for the first invalid song
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogFileError(f"JSON parsing error in {file_path}: {e.msg} at line {e.lineno}, column {e.colno}") from e
    except OSError as e:
        raise CatalogFileError(f"Error reading {file_path}: {e}") from e

    errors = validate_catalog_json(data)
    if errors:
        raise CatalogFileError(f"Invalid catalog file {file_path}: " + "; ".join(errors))

    result = build_catalog(data, strict=strict)
    logger.info(
        f"Loaded {result.catalog.album_count} albums and {result.catalog.song_count} songs "
        f"from {file_path} ({len(result.rejected)} rejected)"
    )
    return result
