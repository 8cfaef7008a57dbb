"""Locating the Exif block inside a JPEG stream."""

from __future__ import annotations

from .errors import DecoderClosedError, ExifNotFoundError
from .readers import OffsetReader
from .registry import Decoder, register_format

APP1_MARKER = 0xE1
EXIF_HEADER = b"Exif\x00\x00"
JPEG_MAGIC = b"\xff\xd8"

_BUFFER_LENGTH = 4096


def find_exif_offset(reader, marker=APP1_MARKER):
    """Return the offset of the Exif data following the given APP marker."""
    needle = bytes((0xFF, marker))
    base = 0
    while True:
        # Two extra bytes let a marker straddling two reads be found.
        chunk = reader.read_at(_BUFFER_LENGTH + 2, base)
        index = chunk.find(needle)
        if index >= 0:
            break
        if len(chunk) < _BUFFER_LENGTH:
            raise ExifNotFoundError("unable to find the JPEG Exif marker")
        base += _BUFFER_LENGTH
    # Skip the marker and the segment length.
    position = base + index + 4
    if reader.read_at(len(EXIF_HEADER), position) != EXIF_HEADER:
        raise ExifNotFoundError("unable to find the JPEG Exif marker")
    return position + len(EXIF_HEADER)


class JPEG(Decoder):
    """Decoder for a JPEG stream, possibly embedded in a raw file."""

    def __init__(self, reader):
        self._reader = reader

    def exif_reader(self):
        if self._reader is None:
            raise DecoderClosedError("jpeg decoder is closed")
        try:
            offset = find_exif_offset(self._reader)
        except ExifNotFoundError as err:
            raise ExifNotFoundError(f"could not find Exif data: {err}") from err
        return OffsetReader(self._reader, offset)

    def close(self):
        self._reader = None


register_format("jpeg", JPEG_MAGIC, JPEG)