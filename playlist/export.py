"""Playlist export helpers."""

from __future__ import annotations

from typing import Callable, Iterable

from pydantic import ValidationError

from config.settings import PLAYLIST_BUNDLE_FORMAT, PLAYLIST_BUNDLE_VERSION
from formats.documents import PlaylistBundleDocument, PlaylistDocument
from formats.errors import EncodeError
from formats.types import Playlist


def serialize_playlists(playlists: Iterable[Playlist]) -> bytes:
    """Encode playlists as a Piped playlist bundle.

    Rules:
    - Bundle header is ``{"format": "Piped", "version": 1}``.
    - Playlists and their videos keep the order they were supplied in.
    - ``type``/``visibility`` are written only when set.
    """
    try:
        records = [
            PlaylistDocument(
                name=playlist.name,
                type=playlist.type,
                visibility=playlist.visibility,
                videos=playlist.videos,
            )
            for playlist in playlists
        ]
        bundle = PlaylistBundleDocument(
            format=PLAYLIST_BUNDLE_FORMAT,
            version=PLAYLIST_BUNDLE_VERSION,
            playlists=records,
        )
    except (AttributeError, TypeError, ValidationError) as exc:
        raise EncodeError(f"cannot encode playlists: {exc}") from exc
    return bundle.model_dump_json(exclude_none=True).encode("utf-8")


def export_playlists(source: Callable[[], Iterable[Playlist]]) -> bytes:
    """Serialize the playlists returned by the caller-supplied ``source``."""
    return serialize_playlists(source())
