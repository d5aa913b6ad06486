import struct

import pytest

from bmplab.bmp_io import (
    BmpError,
    BmpHeaderError,
    BmpNotOpenError,
    BmpReader,
    BmpTruncatedError,
    BmpUnsupportedError,
    BmpWriter,
    read_bmp,
    write_bmp,
)


def _headers(width, height, bits, offset, colours_used=0):
    magic = struct.pack("<2sIIi", b"BM", 0, 0, offset)
    info = struct.pack(
        "<IiiIIIiiII", 40, width, height, 1 | (bits << 16), 0, 0, 0, 0, colours_used, 0
    )
    return magic + info


def test_colour_round_trip_with_padding(tmp_path):
    path = tmp_path / "colour.bmp"
    lines = [bytes(range(9)), bytes(range(100, 109))]
    write_bmp(path, 3, 2, 3, lines)
    assert read_bmp(path) == (3, 2, 3, lines)


def test_greyscale_round_trip_with_padding(tmp_path):
    path = tmp_path / "grey.bmp"
    lines = [b"\x07", b"\xff", b"\x00"]
    write_bmp(path, 1, 3, 1, lines)
    assert read_bmp(path) == (1, 3, 1, lines)


def test_colour_header_bytes(tmp_path):
    path = tmp_path / "c.bmp"
    write_bmp(path, 2, 1, 3, [bytes(6)])
    data = path.read_bytes()
    assert data[:2] == b"BM"
    size, reserved, offset = struct.unpack("<IIi", data[2:14])
    assert offset == 54
    assert reserved == 0
    assert size == len(data)
    info = struct.unpack("<IiiIIIiiII", data[14:54])
    assert info[0] == 40
    assert info[1:3] == (2, 1)
    assert info[3] >> 16 == 24
    assert info[3] & 0xFFFF == 1


def test_reader_attributes_and_iteration(tmp_path):
    path = tmp_path / "r.bmp"
    lines = [bytes([i] * 15) for i in range(4)]
    write_bmp(path, 5, 4, 3, lines)
    with BmpReader(path) as reader:
        assert (reader.cols, reader.rows, reader.num_components) == (5, 4, 3)
        assert reader.line_bytes == 15
        assert (reader.line_bytes + reader.alignment_bytes) % 4 == 0
        assert list(reader) == lines


def test_read_past_end_raises(tmp_path):
    path = tmp_path / "e.bmp"
    write_bmp(path, 4, 1, 1, [b"wxyz"])
    with BmpReader(path) as reader:
        assert reader.read_line() == b"wxyz"
        with pytest.raises(BmpNotOpenError):
            reader.read_line()


def test_read_after_close_raises(tmp_path):
    path = tmp_path / "c.bmp"
    write_bmp(path, 4, 1, 1, [b"wxyz"])
    reader = BmpReader(path)
    reader.close()
    with pytest.raises(BmpNotOpenError):
        reader.read_line()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        BmpReader(tmp_path / "absent.bmp")


def test_bad_signature(tmp_path):
    path = tmp_path / "bad.bmp"
    path.write_bytes(b"XY" + bytes(60))
    with pytest.raises(BmpHeaderError):
        BmpReader(path)


def test_truncated_info_header(tmp_path):
    path = tmp_path / "short.bmp"
    path.write_bytes(_headers(1, 1, 24, 54)[:30])
    with pytest.raises(BmpTruncatedError):
        BmpReader(path)


def test_unsupported_bit_depth(tmp_path):
    path = tmp_path / "d16.bmp"
    path.write_bytes(_headers(1, 1, 16, 54) + bytes(4))
    with pytest.raises(BmpUnsupportedError):
        BmpReader(path)


def test_offset_inside_header(tmp_path):
    path = tmp_path / "off.bmp"
    path.write_bytes(_headers(1, 1, 8, 54) + bytes(1024 + 4))
    with pytest.raises(BmpHeaderError):
        BmpReader(path)


def test_small_palette_and_gap_before_data(tmp_path):
    path = tmp_path / "gap.bmp"
    palette = bytes(8)
    gap = b"\xee" * 6
    offset = 54 + len(palette) + len(gap)
    pixels = b"\x01\x02\x03\x04"
    path.write_bytes(_headers(4, 1, 8, offset, colours_used=2) + palette + gap + pixels)
    assert read_bmp(path) == (4, 1, 1, [pixels])


def test_truncated_pixel_data(tmp_path):
    path = tmp_path / "t.bmp"
    path.write_bytes(_headers(4, 2, 24, 54) + bytes(12))
    with BmpReader(path) as reader:
        assert reader.read_line() == bytes(12)
        with pytest.raises(BmpTruncatedError):
            reader.read_line()


def test_writer_rejects_component_count(tmp_path):
    with pytest.raises(BmpUnsupportedError):
        BmpWriter(tmp_path / "x.bmp", 2, 2, 2)
    assert not (tmp_path / "x.bmp").exists()


def test_write_past_end_raises(tmp_path):
    with BmpWriter(tmp_path / "w.bmp", 1, 1, 3) as writer:
        writer.write_line(b"abc")
        with pytest.raises(BmpNotOpenError):
            writer.write_line(b"abc")


def test_write_after_close_raises(tmp_path):
    writer = BmpWriter(tmp_path / "w.bmp", 1, 1, 3)
    writer.close()
    with pytest.raises(BmpNotOpenError):
        writer.write_line(b"abc")


def test_write_wrong_length_line(tmp_path):
    with BmpWriter(tmp_path / "w.bmp", 2, 1, 3) as writer:
        with pytest.raises(ValueError):
            writer.write_line(b"abc")
        assert writer.num_unwritten_rows == 1


def test_write_bmp_too_many_lines(tmp_path):
    with pytest.raises(BmpNotOpenError):
        write_bmp(tmp_path / "m.bmp", 1, 1, 1, [b"a", b"b"])


def test_header_error_caught_as_base_class(tmp_path):
    path = tmp_path / "bad.bmp"
    path.write_bytes(b"XY" + bytes(60))
    with pytest.raises(BmpError) as excinfo:
        BmpReader(path)
    assert isinstance(excinfo.value, BmpHeaderError)


def test_truncated_error_caught_as_base_class(tmp_path):
    path = tmp_path / "short.bmp"
    path.write_bytes(_headers(1, 1, 24, 54)[:30])
    with pytest.raises(BmpError) as excinfo:
        BmpReader(path)
    assert isinstance(excinfo.value, BmpTruncatedError)


def test_unsupported_error_caught_as_base_class(tmp_path):
    with pytest.raises(BmpError) as excinfo:
        BmpWriter(tmp_path / "x.bmp", 2, 2, 4)
    assert isinstance(excinfo.value, BmpUnsupportedError)


def test_not_open_error_caught_as_base_class(tmp_path):
    writer = BmpWriter(tmp_path / "w.bmp", 1, 1, 1)
    writer.close()
    with pytest.raises(BmpError) as excinfo:
        writer.write_line(b"a")
    assert isinstance(excinfo.value, BmpNotOpenError)