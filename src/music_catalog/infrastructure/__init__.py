"""Infrastructure layer: reading catalogs from files."""

from .catalog_file import (
    CATALOG_SCHEMA,
    LoadResult,
    build_catalog,
    load_catalog,
    validate_catalog_json,
)

__all__ = [
    "CATALOG_SCHEMA",
    "LoadResult",
    "build_catalog",
    "load_catalog",
    "validate_catalog_json",
]
