from __future__ import annotations

from config.settings import YOUTUBE_CHANNEL_URL_PREFIX
from formats.documents import ImportedSubscriptionsDocument, load_document
from formats.errors import DecodeError

from .base import BaseSubscriptionImporter


class NewPipeJSONImporter(BaseSubscriptionImporter):
    def parse(self, file_bytes: bytes) -> list[str]:
        document = load_document(ImportedSubscriptionsDocument, file_bytes, label="subscriptions")

        channel_ids: list[str] = []
        for idx, subscription in enumerate(document.subscriptions or []):
            if subscription.url is None:
                raise DecodeError(f"subscription #{idx} has no url")
            channel_ids.append(subscription.url.removeprefix(YOUTUBE_CHANNEL_URL_PREFIX))
        return channel_ids
