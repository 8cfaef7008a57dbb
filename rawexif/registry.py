"""Format registry: detects a raw format from its magic bytes."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Callable

from .errors import DecoderClosedError, RawError, UnsupportedFormatError
from .readers import FileReader


class Decoder(abc.ABC):
    """A decoder giving access to the Exif data inside a raw file."""

    @abc.abstractmethod
    def exif_reader(self):
        """Return a reader whose offset zero is the start of the Exif data."""

    @abc.abstractmethod
    def close(self):
        """Release the decoder; closing twice is allowed."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


@dataclass(frozen=True)
class Format:
    """A registered format: its name, magic bytes and decoder factory."""

    name: str
    magic: bytes
    decode: Callable[[object], Decoder]

    def matches(self, head: bytes) -> bool:
        return head[:len(self.magic)] == self.magic


_formats: list[Format] = []
_max_magic_length = 0


def register_format(name, magic, decode):
    """Register a format; earlier registrations take precedence."""
    global _max_magic_length
    magic = bytes(magic)
    _max_magic_length = max(_max_magic_length, len(magic))
    _formats.append(Format(name, magic, decode))


def new(reader):
    """Detect the format of ``reader`` and return a decoder for it."""
    head = reader.read_at(_max_magic_length, 0)
    if len(head) < _max_magic_length:
        raise RawError("unexpected end of data while reading the magic bytes")
    for fmt in _formats:
        if fmt.matches(head):
            return fmt.decode(reader)
    raise UnsupportedFormatError("unsupported format")


class _FileDecoder(Decoder):
    """Decoder that owns the file it reads from."""

    def __init__(self, decoder, file_reader):
        self._decoder = decoder
        self._file = file_reader

    def exif_reader(self):
        if self._file is None:
            raise DecoderClosedError("decoder is closed")
        return self._decoder.exif_reader()

    def close(self):
        if self._file is None:
            return
        self._decoder.close()
        self._file.close()
        self._file = None


def open_file(filename):
    """Open ``filename`` and return a decoder for its detected format."""
    reader = FileReader(open(filename, "rb"))
    try:
        decoder = new(reader)
    except BaseException:
        reader.close()
        raise
    return _FileDecoder(decoder, reader)


def close(decoder):
    """Close ``decoder``; raise RawError when there is no decoder."""
    if decoder is None:
        raise RawError("decoder is None")
    decoder.close()