"""Catalog Context Domain Services.

Reporting over a catalog. The service only uses the public catalog
queries, so it works with any ``MusicGroup`` implementation.
"""

import logging
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from ...models.config import ReportConfig
from .interfaces import MusicGroup

logger = logging.getLogger(__name__)


@dataclass
class AlbumSummary:
    """Song count and average duration of one album."""

    name: str
    year: Optional[int]
    song_count: int
    average_duration: Optional[float]

    @property
    def is_empty(self) -> bool:
        return self.song_count == 0


@dataclass
class CatalogReport:
    """Aggregate view of a catalog."""

    total_albums: int
    total_songs: int
    songs_without_album: int
    song_names: List[str]
    albums: List[AlbumSummary] = field(default_factory=list)
    longest_song: Optional[str] = None
    longest_album: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary."""
        return asdict(self)


def format_duration(duration: Optional[float], duration_format: str = "seconds") -> str:
    """Render a duration for display; '-' when absent."""
    if duration is None:
        return "-"
    if duration_format == "minutes":
        minutes, seconds = divmod(duration, 60)
        return f"{int(minutes)}:{seconds:05.2f}"
    return f"{duration:.2f}"


class CatalogReportService:
    """Builds reports from a catalog's queries."""

    def __init__(self, catalog: MusicGroup):
        self.catalog = catalog

    def summarize_album(self, album_name: str, year: Optional[int] = None) -> AlbumSummary:
        """Summarize a single album."""
        return AlbumSummary(
            name=album_name,
            year=year,
            song_count=self.catalog.count_songs(album_name),
            average_duration=self.catalog.average_duration_of_songs(album_name),
        )

    def build(self, config: Optional[ReportConfig] = None) -> CatalogReport:
        """Build a full catalog report."""
        config = config or ReportConfig()

        album_names = self.catalog.album_names()
        if config.sort_albums:
            album_names = sorted(album_names)

        summaries = [self.summarize_album(name, self._year_of(name)) for name in album_names]
        if not config.show_empty_albums:
            summaries = [s for s in summaries if not s.is_empty]

        song_names = self.catalog.ordered_song_names()
        report = CatalogReport(
            total_albums=len(album_names),
            total_songs=len(song_names),
            songs_without_album=self.catalog.count_songs_in_no_album(),
            song_names=song_names,
            albums=summaries,
            longest_song=self.catalog.longest_song(),
            longest_album=self.catalog.longest_album(),
        )
        logger.debug(f"Built report for {report.total_albums} albums and {report.total_songs} songs")
        return report

    def _year_of(self, album_name: str) -> Optional[int]:
        get_album = getattr(self.catalog, "get_album", None)
        if get_album is None:
            return None
        album = get_album(album_name)
        return album.year if album else None
