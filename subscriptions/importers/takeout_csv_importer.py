from __future__ import annotations

from config.settings import TAKEOUT_CHANNEL_ID_LENGTH
from formats.text import decode_text, split_lines

from .base import BaseSubscriptionImporter


class TakeoutCSVImporter(BaseSubscriptionImporter):
    """Google Takeout ``subscriptions.csv``.

    Only the first column is looked at. Header and malformed rows are dropped
    rather than rejected: a row counts as a channel when its first field has
    the length of a channel id.
    """

    def parse(self, file_bytes: bytes) -> list[str]:
        text = decode_text(file_bytes)
        channel_ids: list[str] = []
        for line in split_lines(text):
            candidate = line.split(",", 1)[0]
            if len(candidate) == TAKEOUT_CHANNEL_ID_LENGTH:
                channel_ids.append(candidate)
        return channel_ids
