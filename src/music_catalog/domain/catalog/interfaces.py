"""Catalog Context Interfaces.

This module defines the abstract interface of a music group: the albums it
released, its songs, and the aggregate queries answered over them.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class MusicGroup(ABC):
    """Albums and songs of a music group plus derived queries."""

    @abstractmethod
    def add_album(self, album_name: str, year: int) -> None:
        """Add an album, overwriting the year if it already exists."""
        pass

    @abstractmethod
    def add_song(self, song_name: str, album_name: Optional[str] = None, duration: float = 0.0) -> None:
        """Add a song, optionally belonging to an existing album."""
        pass

    @abstractmethod
    def ordered_song_names(self) -> List[str]:
        """All song names in ascending order, one entry per song."""
        pass

    @abstractmethod
    def album_names(self) -> List[str]:
        """All album names, in no particular order."""
        pass

    @abstractmethod
    def album_in_year(self, year: int) -> List[str]:
        """Names of the albums released in the given year."""
        pass

    @abstractmethod
    def count_songs(self, album_name: str) -> int:
        """Number of songs in an album."""
        pass

    @abstractmethod
    def count_songs_in_no_album(self) -> int:
        """Number of songs not part of any album."""
        pass

    @abstractmethod
    def average_duration_of_songs(self, album_name: str) -> Optional[float]:
        """Mean song duration of an album, or None if it has no songs."""
        pass

    @abstractmethod
    def longest_song(self) -> Optional[str]:
        """Name of the longest song, or None if there are no songs."""
        pass

    @abstractmethod
    def longest_album(self) -> Optional[str]:
        """Name of the album with the highest average song duration."""
        pass
