"""Entry points with every known raw format registered.

Canon CR2 and Nikon NEF files are TIFF files and are handled as such.
"""

from __future__ import annotations

from . import fuji, jpeg, tiff  # noqa: F401  (importing registers the formats)
from .readers import BytesReader
from .registry import new, open_file


def open_raw(filename):
    """Open a raw file of any known format and return its decoder."""
    return open_file(filename)


def new_decoder(reader):
    """Return a decoder for a reader, or for raw bytes, of any known format."""
    if isinstance(reader, (bytes, bytearray, memoryview)):
        reader = BytesReader(reader)
    return new(reader)