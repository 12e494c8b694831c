from __future__ import annotations

import json

import pytest

from formats.errors import EncodeError
from formats.types import Playlist
from playlist.export import export_playlists, serialize_playlists
from playlist.importers.dispatcher import import_playlists


def test_serialize_playlists_writes_piped_bundle() -> None:
    playlists = [
        Playlist(name="Road Trip", videos=["b", "a", "b"], type="playlist", visibility="private"),
        Playlist(name="Empty"),
    ]

    bundle = json.loads(serialize_playlists(playlists))

    assert bundle == {
        "format": "Piped",
        "version": 1,
        "playlists": [
            {"name": "Road Trip", "type": "playlist", "visibility": "private", "videos": ["b", "a", "b"]},
            {"name": "Empty", "videos": []},
        ],
    }


def test_export_then_import_is_exact_inverse() -> None:
    playlists = [
        Playlist(name="One", videos=["v1", "v2", "v1"]),
        Playlist(name="Two", videos=[], visibility="unlisted"),
        Playlist(name="Three", videos=["v9"]),
    ]

    imported = import_playlists(serialize_playlists(playlists), "application/json")

    assert imported == playlists


def test_serialize_rejects_non_string_video_ids() -> None:
    with pytest.raises(EncodeError):
        serialize_playlists([Playlist(name="Bad", videos=["ok", 42])])  # type: ignore[list-item]


def test_serialize_rejects_non_playlist_values() -> None:
    with pytest.raises(EncodeError):
        serialize_playlists([{"name": "dict", "videos": []}])  # type: ignore[list-item]


def test_export_playlists_reads_from_source() -> None:
    bundle = json.loads(export_playlists(lambda: [Playlist(name="Solo", videos=["x"])]))

    assert bundle["playlists"] == [{"name": "Solo", "videos": ["x"]}]
