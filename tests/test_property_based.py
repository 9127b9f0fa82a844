"""Property-based tests for the catalog.

Uses Hypothesis to generate album and song sequences and verify the
invariants that must hold for any catalog contents.
"""

from __future__ import annotations

import math
from collections import Counter

import pytest
from hypothesis import given, strategies as st

from music_catalog.domain.catalog.entities import Catalog, Song
from music_catalog.exceptions import InvalidReferenceError


album_names = st.sampled_from(["A", "B", "C", "D"])
song_names = st.text(min_size=1, max_size=8)
durations = st.floats(min_value=0.0, max_value=10_000.0, allow_nan=False, allow_infinity=False)

album_ops = st.lists(st.tuples(album_names, st.integers(min_value=1900, max_value=2100)), max_size=20)
song_ops = st.lists(st.tuples(song_names, st.none() | album_names, durations), max_size=40)


def build(albums, songs) -> Catalog:
    """Build a catalog, skipping songs whose album was never added."""
    catalog = Catalog()
    for name, year in albums:
        catalog.add_album(name, year)
    for name, album, duration in songs:
        catalog.try_add_song(name, album, duration)
    return catalog


# ============================================================================
# Album registry
# ============================================================================

@given(album_ops)
def test_albums_keep_last_written_year(albums) -> None:
    """The registry holds the most recent year for every album name."""
    catalog = build(albums, [])
    expected = {}
    for name, year in albums:
        expected[name] = year
    assert catalog.albums == expected


@given(album_ops)
def test_adding_same_album_twice_is_idempotent(albums) -> None:
    once = build(albums, [])
    twice = build(albums + albums, [])
    assert once.albums == twice.albums


# ============================================================================
# Song registry
# ============================================================================

@given(album_ops, song_names, album_names, durations)
def test_unknown_album_never_mutates(albums, name, album, duration) -> None:
    """Adding a song for an unregistered album raises and changes nothing."""
    catalog = build(albums, [])
    if album in catalog.albums:
        return

    before_albums = catalog.albums
    before_songs = catalog.songs
    with pytest.raises(InvalidReferenceError):
        catalog.add_song(name, album, duration)
    assert catalog.albums == before_albums
    assert catalog.songs == before_songs


@given(album_ops, song_ops)
def test_counts_sum_to_distinct_songs(albums, songs) -> None:
    """Per-album counts plus no-album count equal the distinct songs stored."""
    catalog = build(albums, songs + songs)
    total = sum(catalog.count_songs(name) for name in catalog.album_names())
    assert total + catalog.count_songs_in_no_album() == catalog.song_count

    registered = set(catalog.albums)
    expected = {
        Song(name, album, duration)
        for name, album, duration in songs
        if album is None or album in registered
    }
    assert catalog.songs == expected


# ============================================================================
# Queries
# ============================================================================

@given(album_ops, song_ops)
def test_ordered_song_names_sorted_multiset(albums, songs) -> None:
    catalog = build(albums, songs)
    names = catalog.ordered_song_names()
    assert names == sorted(names)
    assert Counter(names) == Counter(s.name for s in catalog.songs)


@given(album_ops, song_ops, album_names)
def test_average_absent_iff_no_songs(albums, songs, album) -> None:
    catalog = build(albums, songs)
    average = catalog.average_duration_of_songs(album)
    count = catalog.count_songs(album)

    assert (average is None) == (count == 0)
    if count:
        durations_in_album = [s.duration for s in catalog.songs if s.album == album]
        assert average == pytest.approx(math.fsum(durations_in_album) / count)


@given(album_ops, song_ops)
def test_longest_album_never_empty(albums, songs) -> None:
    catalog = build(albums, songs)
    longest = catalog.longest_album()

    non_empty = [name for name in catalog.album_names() if catalog.count_songs(name) > 0]
    if not non_empty:
        assert longest is None
        return

    assert longest in non_empty
    best = max(catalog.average_duration_of_songs(name) for name in non_empty)
    assert catalog.average_duration_of_songs(longest) == best


@given(album_ops, song_ops)
def test_longest_song_has_max_duration(albums, songs) -> None:
    catalog = build(albums, songs)
    longest = catalog.longest_song()

    if catalog.song_count == 0:
        assert longest is None
        return

    best = max(s.duration for s in catalog.songs)
    assert longest in {s.name for s in catalog.songs if s.duration == best}
