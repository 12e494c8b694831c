from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SubscriptionEntry:
    name: str | None
    url: str  # site-relative channel path, e.g. "/channel/<id>"


@dataclass
class Playlist:
    name: str | None
    videos: list[str] = field(default_factory=list)  # playback order, duplicates kept
    type: str | None = None
    visibility: str | None = None
