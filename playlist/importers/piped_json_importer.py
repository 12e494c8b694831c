from __future__ import annotations

from formats.documents import PlaylistBundleDocument, load_document
from formats.types import Playlist

from .base import BasePlaylistImporter


class PipedJSONImporter(BasePlaylistImporter):
    def parse(self, file_bytes: bytes) -> list[Playlist]:
        # format/version are not checked; any producer of the same shape loads.
        bundle = load_document(PlaylistBundleDocument, file_bytes, label="playlist bundle")
        return [
            Playlist(
                name=record.name,
                videos=list(record.videos or []),
                type=record.type,
                visibility=record.visibility,
            )
            for record in bundle.playlists or []
        ]
