"""Declared content type to format tag mapping."""

from __future__ import annotations

from enum import Enum

from config.settings import CSV_CONTENT_TYPES, JSON_CONTENT_TYPES
from formats.errors import UnsupportedFormatError


class FormatTag(Enum):
    JSON = "json"
    CSV = "csv"


_CONTENT_TYPE_TAGS: dict[str, FormatTag] = {
    **{content_type: FormatTag.JSON for content_type in JSON_CONTENT_TYPES},
    **{content_type: FormatTag.CSV for content_type in CSV_CONTENT_TYPES},
}


def detect_format(content_type: str | None) -> FormatTag:
    """Return the format tag for a declared content type.

    Matching is exact and case-sensitive; parameters such as ``; charset=``
    are not stripped. Anything else raises ``UnsupportedFormatError`` with
    the declared type attached verbatim.
    """
    tag = _CONTENT_TYPE_TAGS.get(content_type) if isinstance(content_type, str) else None
    if tag is None:
        raise UnsupportedFormatError(content_type)
    return tag
