"""
Domain Layer - Music Catalog

Bounded Contexts:
- Catalog: albums, songs and the queries answered over them
"""

from .catalog import (
    Album,
    Song,
    Catalog,
    MusicGroup,
    CatalogReportService,
    CatalogReport,
    AlbumSummary,
)

# Result pattern for error handling
from .result import (
    Result,
    Success,
    Failure,
    success,
    failure,
    collect,
    partition,
    try_catch,
)

__all__ = [
    # Catalog context
    "Album",
    "Song",
    "Catalog",
    "MusicGroup",
    "CatalogReportService",
    "CatalogReport",
    "AlbumSummary",
    # Result pattern
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "collect",
    "partition",
    "try_catch",
]
