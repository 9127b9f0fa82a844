"""
Catalog Context - Albums, songs and aggregate queries.

This bounded context is responsible for:
- Registering albums and their release years
- Registering songs, keeping album references valid
- Answering ordered listings, counts, averages and superlatives
"""

from .entities import Album, Song, Catalog
from .interfaces import MusicGroup
from .services import CatalogReportService, CatalogReport, AlbumSummary, format_duration

__all__ = [
    # Entities
    "Album",
    "Song",
    "Catalog",
    # Interfaces
    "MusicGroup",
    # Services
    "CatalogReportService",
    "CatalogReport",
    "AlbumSummary",
    "format_duration",
]
