from __future__ import annotations

from formats.detect import FormatTag, detect_format

from .base import BaseSubscriptionImporter
from .newpipe_json_importer import NewPipeJSONImporter
from .takeout_csv_importer import TakeoutCSVImporter

_IMPORTERS: dict[FormatTag, type[BaseSubscriptionImporter]] = {
    FormatTag.JSON: NewPipeJSONImporter,
    FormatTag.CSV: TakeoutCSVImporter,
}


def importer_for(content_type: str | None) -> BaseSubscriptionImporter:
    return _IMPORTERS[detect_format(content_type)]()


def import_subscriptions(file_bytes: bytes, content_type: str | None) -> list[str]:
    """Return the channel ids contained in a subscription export.

    Raises ``UnsupportedFormatError`` for an unknown declared type and
    ``DecodeError`` when the bytes do not match the detected format.
    """
    importer = importer_for(content_type)
    return importer.parse(file_bytes)
