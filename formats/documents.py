"""Wire schemas for the JSON interchange documents.

``NewPipeSubscriptionsDocument`` is the subscription export written for
NewPipe-compatible clients; ``ImportedSubscriptionsDocument`` is its read side.
``PlaylistBundleDocument`` is the playlist bundle format used by Piped.
Unknown keys are ignored on read so exports from newer clients
(``app_version`` and friends) still load.
"""

from __future__ import annotations

from pydantic import BaseModel, ValidationError

from formats.errors import DecodeError


class NewPipeSubscription(BaseModel):
    name: str | None = None
    service_id: int = 0
    url: str | None = None


class NewPipeSubscriptionsDocument(BaseModel):
    subscriptions: list[NewPipeSubscription] | None = None


class ImportedSubscription(BaseModel):
    # name and service_id are not read back; only the url identifies the channel.
    url: str | None = None


class ImportedSubscriptionsDocument(BaseModel):
    subscriptions: list[ImportedSubscription] | None = None


class PlaylistDocument(BaseModel):
    name: str | None = None
    type: str | None = None
    visibility: str | None = None
    videos: list[str] | None = None


class PlaylistBundleDocument(BaseModel):
    format: str | None = None
    version: int | None = None
    playlists: list[PlaylistDocument] | None = None


def load_document(model: type[BaseModel], file_bytes: bytes, *, label: str) -> BaseModel:
    """Validate raw JSON bytes against ``model``; any failure becomes ``DecodeError``."""
    if file_bytes.startswith(b"\xef\xbb\xbf"):
        file_bytes = file_bytes[3:]
    try:
        return model.model_validate_json(file_bytes)
    except ValidationError as exc:
        raise DecodeError(f"invalid {label} document: {exc.errors()[0]['msg']}") from exc
