"""Line-by-line reading and writing of uncompressed 8-bit and 24-bit BMP files."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator
from typing import BinaryIO

_FILE_HEADER = struct.Struct("<2sIIi")
_INFO_HEADER = struct.Struct("<IiiIIIiiII")
_BASE_HEADER_BYTES = _FILE_HEADER.size + _INFO_HEADER.size  # 54
_INFO_HEADER_SIZE = 40


class BmpError(Exception):
    """Base class for BMP reading and writing errors."""


class BmpHeaderError(BmpError):
    """The file header is malformed."""


class BmpTruncatedError(BmpError):
    """The file ended unexpectedly, or could not be written in full."""


class BmpUnsupportedError(BmpError):
    """The file, or the requested output, uses an unsupported format."""


class BmpNotOpenError(BmpError):
    """The file is not open, or all of its lines have been processed."""


def _alignment(line_bytes: int) -> int:
    """Number of padding bytes that bring a line to a multiple of four."""
    return (4 - line_bytes) & 3


class BmpReader:
    """Reads the lines of a BMP file, bottom line first.

    Components within each line are interleaved in BGR order.
    """

    def __init__(self, path):
        self._file: BinaryIO | None = open(path, "rb")
        try:
            self._read_header()
        except BaseException:
            self.close()
            raise

    def _read_header(self) -> None:
        assert self._file is not None
        magic = self._file.read(_FILE_HEADER.size)
        if magic[:2] != b"BM":
            raise BmpHeaderError("missing 'BM' signature")
        if len(magic) < _FILE_HEADER.size:
            raise BmpTruncatedError("file header is truncated")
        raw = self._file.read(_INFO_HEADER.size)
        if len(raw) != _INFO_HEADER.size:
            raise BmpTruncatedError("info header is truncated")

        _, _, _, offset = _FILE_HEADER.unpack(magic)
        (
            _size,
            width,
            height,
            planes_bits,
            _compression,
            _image_size,
            _xpels,
            _ypels,
            colours_used,
            _colours_important,
        ) = _INFO_HEADER.unpack(raw)

        bit_count = planes_bits >> 16
        if bit_count == 24:
            components = 3
        elif bit_count == 8:
            components = 1
        else:
            raise BmpUnsupportedError(
                f"unsupported bit depth {bit_count}; only 8 and 24 are handled"
            )

        if components != 1:
            palette_entries = 0
        elif colours_used == 0:
            palette_entries = 1 << bit_count
        else:
            palette_entries = colours_used
        header_size = _BASE_HEADER_BYTES + 4 * palette_entries
        if offset < header_size:
            raise BmpHeaderError(
                f"data offset {offset} lies inside the {header_size}-byte header"
            )
        self._file.seek(offset)

        self.num_components = components
        self.cols = width
        self.rows = height
        self.num_unread_rows = height
        self.line_bytes = components * width
        self.alignment_bytes = _alignment(self.line_bytes)

    def read_line(self) -> bytes:
        """Return the next line of samples, without padding."""
        if self._file is None or self.num_unread_rows <= 0:
            raise BmpNotOpenError("no more lines to read")
        self.num_unread_rows -= 1
        line = self._file.read(self.line_bytes)
        if len(line) != self.line_bytes:
            raise BmpTruncatedError("image data is truncated")
        if self.alignment_bytes:
            self._file.read(self.alignment_bytes)
        return line

    def __iter__(self) -> Iterator[bytes]:
        while self._file is not None and self.num_unread_rows > 0:
            yield self.read_line()

    def close(self) -> None:
        """Close the underlying file; further reads raise BmpNotOpenError."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> BmpReader:
        return self

    def __exit__(self, *args) -> None:
        self.close()


class BmpWriter:
    """Writes a BMP file line by line, bottom line first.

    ``num_components`` is 1 for a greyscale image (written with an identity
    palette) or 3 for a colour image with BGR-interleaved lines.
    """

    def __init__(self, path, width, height, num_components):
        if num_components == 1:
            header_bytes = _BASE_HEADER_BYTES + 1024
            bits = 8
        elif num_components == 3:
            header_bytes = _BASE_HEADER_BYTES
            bits = 24
        else:
            raise BmpUnsupportedError(
                f"cannot write {num_components} components; use 1 or 3"
            )
        self.num_components = num_components
        self.cols = width
        self.rows = height
        self.num_unwritten_rows = height
        self.line_bytes = num_components * width
        self.alignment_bytes = _alignment(self.line_bytes)

        file_bytes = header_bytes + (self.line_bytes + self.alignment_bytes) * height
        header = _FILE_HEADER.pack(
            b"BM", file_bytes & 0xFFFFFFFF, 0, header_bytes
        ) + _INFO_HEADER.pack(
            _INFO_HEADER_SIZE, width, height, 1 | (bits << 16), 0, 0, 0, 0, 0, 0
        )

        self._file: BinaryIO | None = open(path, "wb")
        try:
            self._file.write(header)
            if num_components == 1:
                self._file.write(b"".join(bytes((n, n, n, 0)) for n in range(256)))
        except OSError as exc:
            self.close()
            raise BmpTruncatedError("could not write the header") from exc

    def write_line(self, line) -> None:
        """Write the next line of samples; padding is added automatically."""
        if self._file is None or self.num_unwritten_rows <= 0:
            raise BmpNotOpenError("no more lines may be written")
        data = bytes(line)
        if len(data) != self.line_bytes:
            raise ValueError(
                f"line holds {len(data)} bytes, expected {self.line_bytes}"
            )
        self.num_unwritten_rows -= 1
        try:
            self._file.write(data)
            if self.alignment_bytes:
                self._file.write(bytes(self.alignment_bytes))
        except OSError as exc:
            raise BmpTruncatedError("could not write image data") from exc

    def close(self) -> None:
        """Close the underlying file; further writes raise BmpNotOpenError."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> BmpWriter:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def read_bmp(path) -> tuple[int, int, int, list[bytes]]:
    """Read a whole BMP file.

    Returns ``(width, height, num_components, lines)`` with the lines in
    file order, bottom line first.
    """
    with BmpReader(path) as reader:
        lines = [reader.read_line() for _ in range(max(reader.rows, 0))]
        return reader.cols, reader.rows, reader.num_components, lines


def write_bmp(path, width, height, num_components, lines: Iterable) -> None:
    """Write a whole BMP file from its lines, bottom line first."""
    with BmpWriter(path, width, height, num_components) as writer:
        for line in lines:
            writer.write_line(line)