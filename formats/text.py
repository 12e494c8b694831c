from __future__ import annotations

import re

from formats.errors import DecodeError

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def decode_text(file_bytes: bytes) -> str:
    try:
        return file_bytes.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"file is not valid UTF-8: {exc}") from exc


def split_lines(text: str) -> list[str]:
    """Split on ``\\n``, ``\\r`` and ``\\r\\n`` only.

    Unlike ``str.splitlines()``, form feeds, ``\\x1c``-``\\x1e`` and the Unicode
    line/paragraph separators stay inside the line. A trailing line break does
    not produce an extra empty line.
    """
    lines = _LINE_BREAK_RE.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines
