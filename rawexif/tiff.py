"""TIFF based raw files (e.g. Canon CR2, Nikon NEF)."""

from __future__ import annotations

from .errors import DecoderClosedError
from .readers import FileReader
from .registry import Decoder, register_format


class TiffRaw(Decoder):
    """Decoder for TIFF based raw files, whose Exif data is the file itself."""

    def __init__(self, reader):
        self._reader = reader
        self._file = None

    @classmethod
    def open(cls, filename):
        """Open ``filename``; the returned decoder owns the file."""
        file_reader = FileReader(open(filename, "rb"))
        raw = cls(file_reader)
        raw._file = file_reader
        return raw

    def exif_reader(self):
        if self._reader is None:
            raise DecoderClosedError("raw decoder is closed")
        return self._reader

    def close(self):
        self._reader = None
        if self._file is not None:
            self._file.close()
            self._file = None


register_format("tiff", b"MM", TiffRaw)
register_format("tiff", b"II", TiffRaw)