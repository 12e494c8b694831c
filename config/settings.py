"""Application settings constants."""

from __future__ import annotations

import os

# Site origin prepended to relative channel paths on subscription export.
YOUTUBE_ORIGIN = "https://www.youtube.com"

# Prefix stripped from subscription urls to recover the bare channel id.
YOUTUBE_CHANNEL_URL_PREFIX = f"{YOUTUBE_ORIGIN}/channel/"

# Takeout CSV rows only count as channels when the first field has this length.
TAKEOUT_CHANNEL_ID_LENGTH = 24

# NewPipe service tag; only the YouTube service (0) is ever emitted.
NEWPIPE_SERVICE_ID = 0

# Playlist bundle header written on export.
PLAYLIST_BUNDLE_FORMAT = "Piped"
PLAYLIST_BUNDLE_VERSION = 1

# Declared content types accepted for each format family.
JSON_CONTENT_TYPES = ("application/json", "application/*", "application/octet-stream")
CSV_CONTENT_TYPES = ("text/csv", "text/comma-separated-values")

_DEFAULT_MAX_IMPORT_BYTES = 5 * 1024 * 1024


def _positive_int_env(name: str, default: int) -> int:
    try:
        parsed = int(str(os.environ.get(name) or "").strip())
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


# Upper bound for uploaded import files; unset, non-numeric or non-positive
# INTERCHANGE_MAX_IMPORT_BYTES values fall back to 5 MiB.
MAX_IMPORT_BYTES = _positive_int_env("INTERCHANGE_MAX_IMPORT_BYTES", _DEFAULT_MAX_IMPORT_BYTES)
