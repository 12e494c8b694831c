from .export import export_playlists, serialize_playlists
from .importers.dispatcher import import_playlists

__all__ = ["export_playlists", "import_playlists", "serialize_playlists"]
