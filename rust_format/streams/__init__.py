"""Module des flux de sortie capturés."""

from rust_format.streams.text_stream import INVALID_UTF8_DISPLAY, TextStream

__all__ = [
    "INVALID_UTF8_DISPLAY",
    "TextStream",
]
