#!/usr/bin/env python3
"""HTTP surface for subscription and playlist import/export."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.responses import Response
from pydantic import BaseModel

from config.settings import MAX_IMPORT_BYTES
from formats.errors import DecodeError, EncodeError, UnsupportedFormatError
from formats.types import Playlist, SubscriptionEntry
from playlist import import_playlists, serialize_playlists
from subscriptions import import_subscriptions, serialize_subscriptions

logger = logging.getLogger(__name__)

app = FastAPI(title="Interchange", docs_url=None, redoc_url=None)


class SubscriptionPayload(BaseModel):
    name: str | None = None
    url: str


class SubscriptionExportRequest(BaseModel):
    subscriptions: list[SubscriptionPayload] = []


class PlaylistPayload(BaseModel):
    name: str | None = None
    videos: list[str] = []
    type: str | None = None
    visibility: str | None = None


class PlaylistExportRequest(BaseModel):
    playlists: list[PlaylistPayload] = []


async def _read_upload(file: UploadFile) -> bytes:
    file_bytes = await file.read()
    await file.close()
    if not file_bytes:
        raise HTTPException(status_code=400, detail="empty_file")
    if len(file_bytes) > MAX_IMPORT_BYTES:
        raise HTTPException(status_code=400, detail="file_too_large")
    return file_bytes


def _conversion_http_error(exc: Exception, filename: str | None) -> HTTPException:
    if isinstance(exc, UnsupportedFormatError):
        logger.warning("Import rejected file=%s content_type=%s", filename, exc.content_type)
        return HTTPException(status_code=400, detail=f"unsupported_file_format ({exc.content_type})")
    logger.warning("Import failed file=%s error=%s", filename, exc)
    return HTTPException(status_code=400, detail=f"invalid_file: {exc}")


def _attachment(body: bytes, filename: str) -> Response:
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}
    return Response(content=body, media_type="application/json", headers=headers)


@app.post("/api/import/subscriptions")
async def import_subscriptions_file(file: UploadFile = File(...)):
    file_bytes = await _read_upload(file)
    try:
        channel_ids = import_subscriptions(file_bytes, file.content_type)
    except (UnsupportedFormatError, DecodeError) as exc:
        raise _conversion_http_error(exc, file.filename) from exc
    logger.info("Imported subscriptions file=%s channels=%d", file.filename, len(channel_ids))
    return {"channel_ids": channel_ids, "count": len(channel_ids)}


@app.post("/api/import/playlists")
async def import_playlists_file(file: UploadFile = File(...)):
    file_bytes = await _read_upload(file)
    try:
        playlists = import_playlists(file_bytes, file.content_type)
    except (UnsupportedFormatError, DecodeError) as exc:
        raise _conversion_http_error(exc, file.filename) from exc
    logger.info("Imported playlists file=%s playlists=%d", file.filename, len(playlists))
    return {
        "playlists": [
            {
                "name": playlist.name,
                "videos": playlist.videos,
                "type": playlist.type,
                "visibility": playlist.visibility,
            }
            for playlist in playlists
        ],
        "count": len(playlists),
    }


@app.post("/api/export/subscriptions")
def export_subscriptions_file(payload: SubscriptionExportRequest):
    entries = [SubscriptionEntry(name=item.name, url=item.url) for item in payload.subscriptions]
    try:
        body = serialize_subscriptions(entries)
    except EncodeError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    logger.info("Exported subscriptions count=%d", len(entries))
    return _attachment(body, "subscriptions.json")


@app.post("/api/export/playlists")
def export_playlists_file(payload: PlaylistExportRequest):
    playlists = [
        Playlist(name=item.name, videos=list(item.videos), type=item.type, visibility=item.visibility)
        for item in payload.playlists
    ]
    try:
        body = serialize_playlists(playlists)
    except EncodeError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    logger.info("Exported playlists count=%d", len(playlists))
    return _attachment(body, "playlists.json")


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    host = os.environ.get("INTERCHANGE_HOST") or "127.0.0.1"
    port = int(os.environ.get("INTERCHANGE_PORT") or "8000")
    uvicorn.run("api.main:app", host=host, port=port, reload=False)
