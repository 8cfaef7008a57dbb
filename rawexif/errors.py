"""Exceptions raised while locating Exif data in raw images."""


class RawError(Exception):
    """Base class of every error raised by this package."""


class UnsupportedFormatError(RawError):
    """No registered format matches the data's magic bytes."""


class DecoderClosedError(RawError):
    """The decoder has been closed and can no longer be used."""


class ExifNotFoundError(RawError):
    """The Exif block could not be located."""


class MagicMismatchError(RawError):
    """The data does not start with the magic bytes of the expected format."""