# rawexif

`rawexif` finds the Exif block inside camera raw files. It returns a
random-access reader whose offset zero is the start of that block. You can pass
that reader to any Exif/TIFF parser.

Supported containers:

- **Fujifilm RAF**: the Exif is read from the embedded JPEG preview.
- **TIFF-based raws** (Canon CR2, Nikon NEF and other files that start with `II`
  or `MM`): the file is itself the Exif/TIFF stream.
- **JPEG**: the Exif comes from the APP1 segment.

The format is detected from the leading magic bytes of the data.

## Installation

```
pip install rawexif
```

## Usage

```python
from rawexif.formats import open_raw

with open_raw("photo.RAF") as decoder:
    exif = decoder.exif_reader()
    byte_order = exif.read_at(2, 0)   # b"II" or b"MM"
```

Decoders work as context managers, and they also have an explicit `close()`.
`rawexif.registry.close(decoder)` does the same thing, except that it raises
`RawError` when given `None`.

Data that is already in memory can be decoded too. `new_decoder` takes either a
reader or a bytes-like object:

```python
from rawexif.formats import new_decoder

decoder = new_decoder(data)          # bytes, bytearray or memoryview
exif = decoder.exif_reader()
```

Importing `rawexif.formats` registers every known format. The lower-level
`rawexif.registry.new(reader)` and `rawexif.registry.open_file(filename)` only
recognise formats whose modules have already been imported.

You can also use one format directly:

- `rawexif.fuji.FujiRaw.open(path)` or `FujiRaw(reader)`. After parsing the
  header, the decoder exposes `version`, `camera`, `jpeg_start` and
  `jpeg_length`.
- `rawexif.tiff.TiffRaw.open(path)` or `TiffRaw(reader)`.
- `rawexif.jpeg.JPEG(reader)`. The module also provides
  `find_exif_offset(reader, marker=APP1_MARKER)`, which returns the offset of
  the Exif data that follows the given APP marker.

### Readers

Every reader has `read_at(size, offset)`. It returns up to `size` bytes starting
at `offset`, and fewer at the end of the data. A negative size or offset raises
`ValueError`.

- `BytesReader(data)` reads from a bytes-like object.
- `FileReader(fileobj)` reads from a seekable binary file object and has `close()`.
- `OffsetReader(reader, offset)` shifts another reader's origin to `offset`.

### Errors

All errors are in `rawexif.errors` and derive from `RawError`:

- `UnsupportedFormatError`: no registered format matches the magic bytes.
- `MagicMismatchError`: `FujiRaw` was given data that is not a RAF file.
- `ExifNotFoundError`: no Exif APP1 segment was found in the JPEG stream.
- `DecoderClosedError`: `exif_reader()` was called after `close()`.

A plain `RawError` is raised when the data is too short for its magic bytes or
its RAF header.

You can close a decoder more than once without error.

### Custom formats

```python
from rawexif.registry import register_format

register_format("myformat", b"MYRAW", MyDecoder)
```

`MyDecoder` is called with the reader. It must return an object that has
`exif_reader()` and `close()` methods; subclassing `rawexif.registry.Decoder`
provides this. Formats are tried in the order they were registered.

## What it does not do

`rawexif` only locates the Exif block. It does not parse Exif tags, decode image
data, or write files, and it provides no command-line tool.