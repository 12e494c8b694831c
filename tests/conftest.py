import sys
from pathlib import Path

import pytest

# Project packages live at the repository root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def takeout_playlist_csv() -> bytes:
    return (
        "Playlist Id,Channel Id,Time Created,Time Updated,Title,Description,Visibility\n"
        "PLxyz,UCabcdefghijklmnopqrstuv,2023-01-01 00:00:00 UTC,2023-02-01 00:00:00 UTC,Road Trip,,Private\n"
        "\n"
        "Video Id,Time Added\n"
        "dQw4w9WgXcQ,2023-01-02 00:00:00 UTC\n"
        "9bZkp7q19f0,2023-01-03 00:00:00 UTC\n"
        "dQw4w9WgXcQ,2023-01-04 00:00:00 UTC\n"
    ).encode("utf-8")
