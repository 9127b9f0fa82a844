"""Music Catalog

An in-memory catalog of albums and songs with aggregate queries.
"""

__version__ = "0.1.0"

from .domain.catalog import (
    Album,
    Song,
    Catalog,
    MusicGroup,
    CatalogReportService,
    CatalogReport,
    AlbumSummary,
)
from .exceptions import (
    MusicCatalogError,
    InvalidReferenceError,
    CatalogFileError,
    ConfigurationError,
)

__all__ = [
    # Catalog
    "Album",
    "Song",
    "Catalog",
    "MusicGroup",

    # Reporting
    "CatalogReportService",
    "CatalogReport",
    "AlbumSummary",

    # Errors
    "MusicCatalogError",
    "InvalidReferenceError",
    "CatalogFileError",
    "ConfigurationError",
]
