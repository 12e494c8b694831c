from .detect import FormatTag, detect_format
from .errors import ConversionError, DecodeError, EncodeError, UnsupportedFormatError
from .types import Playlist, SubscriptionEntry

__all__ = [
    "ConversionError",
    "DecodeError",
    "EncodeError",
    "FormatTag",
    "Playlist",
    "SubscriptionEntry",
    "UnsupportedFormatError",
    "detect_format",
]
