from __future__ import annotations

from formats.detect import FormatTag, detect_format
from formats.types import Playlist

from .base import BasePlaylistImporter
from .csv_importer import CSVImporter
from .piped_json_importer import PipedJSONImporter

_IMPORTERS: dict[FormatTag, type[BasePlaylistImporter]] = {
    FormatTag.JSON: PipedJSONImporter,
    FormatTag.CSV: CSVImporter,
}


def importer_for(content_type: str | None) -> BasePlaylistImporter:
    return _IMPORTERS[detect_format(content_type)]()


def import_playlists(file_bytes: bytes, content_type: str | None) -> list[Playlist]:
    importer = importer_for(content_type)
    return importer.parse(file_bytes)
