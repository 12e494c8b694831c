from __future__ import annotations

from formats.errors import DecodeError
from formats.text import decode_text, split_lines
from formats.types import Playlist

from .base import BasePlaylistImporter


class CSVImporter(BasePlaylistImporter):
    def parse(self, file_bytes: bytes) -> list[Playlist]:
        return [parse_playlist_csv(decode_text(file_bytes))]


def parse_playlist_csv(text: str) -> Playlist:
    """Parse a single-playlist CSV export (YouTube takeout layout).

    Layout::

        Playlist Id,Channel Id,Time Created,Time Updated,Title,Description,Visibility
        <id>,<channel>,<created>,<updated>,<title>,<description>,<visibility>
        <blank line>
        Video Id,Time Added
        <video id>,<time added>
        ...

    The name is the third field from the end of line 2. Video rows start two
    lines after the first blank line; rows with an empty first field are
    skipped.
    """
    lines = split_lines(text)
    name = _playlist_name(lines)

    split_index = _first_blank_line(lines)
    if split_index is None:
        raise DecodeError("playlist csv has no blank line after the header block")

    videos: list[str] = []
    for line in lines[split_index + 2:]:
        video_id = line.split(",", 1)[0]
        if video_id.strip():
            videos.append(video_id)
    return Playlist(name=name, videos=videos)


def _playlist_name(lines: list[str]) -> str:
    if len(lines) < 2:
        raise DecodeError("playlist csv is missing its metadata row")
    fields = lines[1].split(",")[::-1]
    if len(fields) < 3:
        raise DecodeError(f"playlist csv metadata row has {len(fields)} field(s), expected at least 3")
    return fields[2]


def _first_blank_line(lines: list[str]) -> int | None:
    for idx, line in enumerate(lines):
        if not line.strip():
            return idx
    return None
