import pytest

from rawexif.errors import DecoderClosedError, MagicMismatchError, RawError
from rawexif.fuji import FujiRaw
from rawexif.readers import BytesReader

_JPEG = bytes([0xFF, 0xD8, 0xFF, 0xE1, 0x00, 0x10]) + b"Exif\x00\x00II*\x00" + bytes(8)


def _raf(camera=b"FinePix X100\x00", jpeg=_JPEG):
    header = bytearray(108)
    header[0:15] = b"FUJIFILMCCD-RAW"
    header[16:20] = b"0201"
    header[24:24 + len(camera)] = camera
    header[84:88] = (108).to_bytes(4, "big")
    header[88:92] = len(jpeg).to_bytes(4, "big")
    return bytes(header) + jpeg


def test_non_fuji_file_reports_error(tmp_path):
    path = tmp_path / "RAW_CANON.CR2"
    path.write_bytes(b"II*\x00" + bytes(200))
    with pytest.raises(MagicMismatchError):
        FujiRaw.open(path)


def test_fuji_file_is_accepted(tmp_path):
    path = tmp_path / "RAW_FUJI.RAF"
    path.write_bytes(_raf())
    raw = FujiRaw.open(path)
    try:
        assert raw.camera == "FinePix X100"
        assert raw.version == "0201"
        assert raw.jpeg_start == 108
        assert raw.jpeg_length == len(_JPEG)
    finally:
        raw.close()


def test_fuji_file_can_get_exif(tmp_path):
    path = tmp_path / "RAW_FUJI.RAF"
    path.write_bytes(_raf())
    with FujiRaw.open(path) as raw:
        assert raw.exif_reader().read_at(2, 0) == b"II"


def test_fuji_close(tmp_path):
    path = tmp_path / "RAW_FUJI.RAF"
    path.write_bytes(_raf())
    raw = FujiRaw.open(path)
    raw.close()
    raw.close()
    with pytest.raises(DecoderClosedError):
        raw.exif_reader()


def test_from_reader():
    raw = FujiRaw(BytesReader(_raf()))
    assert raw.exif_reader().read_at(4, 0) == b"II*\x00"


def test_truncated_header():
    with pytest.raises(RawError):
        FujiRaw(BytesReader(b"FUJIFILMCCD-RAW"))


def test_unterminated_camera_name():
    with pytest.raises(RawError):
        FujiRaw(BytesReader(_raf(camera=b"C" * 32)))