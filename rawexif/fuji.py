"""Fujifilm RAF raw files."""

from __future__ import annotations

from .errors import DecoderClosedError, MagicMismatchError, RawError
from .jpeg import JPEG
from .readers import FileReader, OffsetReader
from .registry import Decoder, register_format

MAGIC = b"FUJIFILMCCD-RAW"
_HEADER_LENGTH = 108


class FujiRaw(Decoder):
    """Decoder for Fujifilm RAF files, whose Exif sits in an embedded JPEG."""

    def __init__(self, reader):
        header = reader.read_at(_HEADER_LENGTH, 0)
        if len(header) < _HEADER_LENGTH:
            raise RawError("unexpected end of data while reading the RAF header")
        if header[:len(MAGIC)] != MAGIC:
            raise MagicMismatchError(
                "the content is not a fujifilm raw file. Magic mismatch"
            )
        camera_field = header[24:56]
        end = camera_field.find(b"\x00")
        if end < 0:
            raise RawError("camera name in the RAF header is not terminated")
        self._reader = reader
        self._file = None
        self.version = header[16:20].decode("latin-1")
        self.camera = camera_field[:end].decode("latin-1")
        self.jpeg_start = int.from_bytes(header[84:88], "big")
        self.jpeg_length = int.from_bytes(header[88:92], "big")

    @classmethod
    def open(cls, filename):
        """Open ``filename``; the returned decoder owns the file."""
        file_reader = FileReader(open(filename, "rb"))
        try:
            raw = cls(file_reader)
        except BaseException:
            file_reader.close()
            raise
        raw._file = file_reader
        return raw

    def exif_reader(self):
        if self._reader is None:
            raise DecoderClosedError("raw decoder is closed")
        return JPEG(OffsetReader(self._reader, self.jpeg_start)).exif_reader()

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None
        self._reader = None


register_format("fujifilm", MAGIC, FujiRaw)