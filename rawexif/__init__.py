"""Locate the Exif data embedded in camera raw files (Fujifilm RAF, TIFF-based raws, JPEG)."""

__version__ = "0.1.0"
__all__ = ["errors", "formats", "fuji", "jpeg", "readers", "registry", "tiff"]