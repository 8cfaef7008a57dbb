"""Random-access byte readers used by the raw decoders."""

from __future__ import annotations

from typing import BinaryIO


def _check_range(size: int, offset: int) -> None:
    if size < 0:
        raise ValueError(f"negative read size: {size}")
    if offset < 0:
        raise ValueError(f"negative read offset: {offset}")


class BytesReader:
    """Random-access reader over an in-memory byte string."""

    def __init__(self, data):
        self._data = bytes(data)

    def read_at(self, size, offset):
        """Return up to ``size`` bytes starting at ``offset``; shorter at the end."""
        _check_range(size, offset)
        return self._data[offset:offset + size]


class FileReader:
    """Random-access reader over a seekable binary file object."""

    def __init__(self, fileobj: BinaryIO):
        self._file = fileobj

    def read_at(self, size, offset):
        """Return up to ``size`` bytes starting at ``offset``; shorter at the end."""
        _check_range(size, offset)
        self._file.seek(offset)
        return self._file.read(size)

    @property
    def closed(self) -> bool:
        return self._file.closed

    def close(self):
        """Close the underlying file object."""
        self._file.close()


class OffsetReader:
    """Reader whose offset zero lies at ``offset`` within another reader."""

    def __init__(self, reader, offset):
        self._reader = reader
        self.offset = offset

    def read_at(self, size, offset):
        """Read from the wrapped reader, shifted by this reader's base offset."""
        _check_range(size, offset)
        return self._reader.read_at(size, offset + self.offset)