from __future__ import annotations

import pytest

from formats.detect import FormatTag, detect_format
from formats.errors import UnsupportedFormatError


@pytest.mark.parametrize(
    "content_type",
    ["application/json", "application/*", "application/octet-stream"],
)
def test_json_content_types(content_type: str) -> None:
    assert detect_format(content_type) is FormatTag.JSON


@pytest.mark.parametrize("content_type", ["text/csv", "text/comma-separated-values"])
def test_csv_content_types(content_type: str) -> None:
    assert detect_format(content_type) is FormatTag.CSV


@pytest.mark.parametrize(
    "content_type",
    ["text/plain", "Application/JSON", "application/json; charset=utf-8", "text/*", ""],
)
def test_unrecognized_content_type_is_reported_verbatim(content_type: str) -> None:
    with pytest.raises(UnsupportedFormatError) as excinfo:
        detect_format(content_type)

    assert excinfo.value.content_type == content_type


def test_missing_content_type() -> None:
    with pytest.raises(UnsupportedFormatError) as excinfo:
        detect_format(None)

    assert excinfo.value.content_type is None
    assert "(None)" in str(excinfo.value)
