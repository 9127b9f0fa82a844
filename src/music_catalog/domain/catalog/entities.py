"""Catalog Context Entities.

This module defines the core entities for the Catalog bounded context:
albums, songs, and the catalog that owns both and answers queries over them.
"""

import logging
import math
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, FrozenSet, List, Optional, Set

from ..result import Result, success, failure
from ...exceptions import InvalidReferenceError
from .interfaces import MusicGroup

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Album:
    """A named release and the year it came out."""

    name: str
    year: int

    @property
    def display_name(self) -> str:
        """Get display name with year."""
        return f"{self.name} ({self.year})"


@dataclass(frozen=True, slots=True)
class Song:
    """
    Represents a single song.

    Songs have no generated identity: two songs with the same name, album
    and duration are the same song.
    """

    name: str
    album: Optional[str] = None
    duration: float = 0.0

    @property
    def has_album(self) -> bool:
        """Check if the song is part of an album."""
        return self.album is not None

    def belongs_to(self, album_name: str) -> bool:
        """Check if the song is part of the given album."""
        return self.album is not None and self.album == album_name


@dataclass(eq=False)
class Catalog(MusicGroup):
    """
    Represents the music catalog.

    The catalog maps album names to release years and keeps a set of songs.
    It is append only: albums and songs are never removed, only an album's
    year can be replaced by adding the album again. Every query returns a
    new list or scalar computed over a snapshot taken under the lock.
    """

    name: str = "default"

    _albums: Dict[str, int] = field(default_factory=dict, init=False, repr=False)
    _songs: Set[Song] = field(default_factory=set, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    created_at: datetime = field(default_factory=datetime.now)
    last_updated: Optional[datetime] = None

    # Mutations

    def add_album(self, album_name: str, year: int) -> None:
        """Add an album, overwriting the year if it already exists."""
        with self._lock:
            previous = self._albums.get(album_name)
            self._albums[album_name] = year
            self.last_updated = datetime.now()

        if previous is None:
            logger.debug(f"Added album '{album_name}' ({year})")
        elif previous != year:
            logger.debug(f"Album '{album_name}' year changed from {previous} to {year}")

    def add_song(self, song_name: str, album_name: Optional[str] = None, duration: float = 0.0) -> None:
        """Add a song to the catalog.

        Adding a song equal to one already stored does nothing.

        Raises:
            InvalidReferenceError: If ``album_name`` is given and is not a
                known album. The catalog is left unchanged.
        """
        self.try_add_song(song_name, album_name, duration).or_else_raise()

    def try_add_song(
        self,
        song_name: str,
        album_name: Optional[str] = None,
        duration: float = 0.0
    ) -> Result[Song, InvalidReferenceError]:
        """Add a song, returning the rejection as a Failure instead of raising."""
        song = Song(name=song_name, album=album_name, duration=duration)

        with self._lock:
            if album_name is not None and album_name not in self._albums:
                logger.debug(f"Rejected song '{song_name}': unknown album '{album_name}'")
                return failure(InvalidReferenceError(song_name, album_name))

            if song not in self._songs:
                self._songs.add(song)
                self.last_updated = datetime.now()
                logger.debug(f"Added song {song}")

        return success(song)

    # Snapshots

    @property
    def albums(self) -> Dict[str, int]:
        """Copy of the album name to year mapping."""
        with self._lock:
            return dict(self._albums)

    @property
    def songs(self) -> FrozenSet[Song]:
        """Copy of the stored songs."""
        with self._lock:
            return frozenset(self._songs)

    @property
    def album_count(self) -> int:
        """Get number of albums."""
        return len(self.albums)

    @property
    def song_count(self) -> int:
        """Get number of songs."""
        return len(self.songs)

    def __len__(self) -> int:
        return self.song_count

    def __contains__(self, song: object) -> bool:
        with self._lock:
            return song in self._songs

    def get_album(self, album_name: str) -> Optional[Album]:
        """Get an album by name."""
        year = self.albums.get(album_name)
        return Album(album_name, year) if year is not None else None

    def songs_in_album(self, album_name: str) -> List[Song]:
        """Get the songs of an album."""
        return [s for s in self.songs if s.belongs_to(album_name)]

    # Queries

    def ordered_song_names(self) -> List[str]:
        """All song names in ascending order.

        Names are not de-duplicated: two songs called the same appear twice.
        """
        return sorted(s.name for s in self.songs)

    def album_names(self) -> List[str]:
        return list(self.albums)

    def album_in_year(self, year: int) -> List[str]:
        return [name for name, album_year in self.albums.items() if album_year == year]

    def count_songs(self, album_name: str) -> int:
        """Number of songs in an album; 0 for unknown albums."""
        return len(self.songs_in_album(album_name))

    def count_songs_in_no_album(self) -> int:
        return sum(1 for s in self.songs if not s.has_album)

    def average_duration_of_songs(self, album_name: str) -> Optional[float]:
        """Mean song duration of an album, or None if it has no songs."""
        durations = [s.duration for s in self.songs_in_album(album_name)]
        if not durations:
            return None
        return math.fsum(durations) / len(durations)

    def longest_song(self) -> Optional[str]:
        """Name of a song with the maximum duration.

        Ties are broken arbitrarily.
        """
        songs = self.songs
        if not songs:
            return None
        return max(songs, key=lambda s: s.duration).name

    def longest_album(self) -> Optional[str]:
        """Name of an album with the highest average song duration.

        Albums without songs are skipped. Ties are broken arbitrarily.
        """
        with self._lock:
            album_names = list(self._albums)
            songs = list(self._songs)

        durations: Dict[str, List[float]] = {name: [] for name in album_names}
        for song in songs:
            if song.album is not None:
                durations[song.album].append(song.duration)

        averages = {
            name: math.fsum(values) / len(values)
            for name, values in durations.items()
            if values
        }
        if not averages:
            return None
        return max(averages, key=averages.__getitem__)

    def get_statistics(self) -> Dict[str, object]:
        """Get catalog statistics."""
        songs = self.songs
        return {
            "name": self.name,
            "total_albums": self.album_count,
            "total_songs": len(songs),
            "songs_without_album": sum(1 for s in songs if not s.has_album),
            "total_duration": math.fsum(s.duration for s in songs),
            "created_at": self.created_at.isoformat(),
            "last_updated": self.last_updated.isoformat() if self.last_updated else None,
        }
