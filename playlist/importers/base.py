from __future__ import annotations

from abc import ABC, abstractmethod

from formats.types import Playlist


class BasePlaylistImporter(ABC):
    @abstractmethod
    def parse(self, file_bytes: bytes) -> list[Playlist]:
        """Parse playlist file bytes into canonical playlists."""
        raise NotImplementedError
