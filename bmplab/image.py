"""Image components held in bordered sample buffers, read from and written to BMP files."""

from __future__ import annotations

import warnings
from collections.abc import Sequence

from .bmp_io import BmpReader, BmpWriter

DEFAULT_BORDER = 16


class Component:
    """One colour plane of an image, surrounded by a border of extra samples.

    Rows are numbered from the top of the image. Samples in the border can be
    addressed with negative indices or indices past the image edge, down to
    ``-border`` and up to ``height + border - 1`` (``width`` likewise).
    """

    def __init__(self, width, height, border=DEFAULT_BORDER):
        if width < 0 or height < 0:
            raise ValueError(f"invalid component size {width}x{height}")
        if border < 0:
            raise ValueError(f"invalid border {border}")
        self.width = width
        self.height = height
        self.border = border
        self.stride = width + 2 * border
        self._samples = [0] * (self.stride * (height + 2 * border))

    def _index(self, row: int, col: int) -> int:
        b = self.border
        if not -b <= row < self.height + b:
            raise IndexError(f"row {row} is outside the buffer")
        if not -b <= col < self.width + b:
            raise IndexError(f"column {col} is outside the buffer")
        return (row + b) * self.stride + col + b

    def get(self, row, col) -> int:
        """Return the sample at ``(row, col)``."""
        return self._samples[self._index(row, col)]

    def set(self, row, col, value) -> None:
        """Store ``value`` at ``(row, col)``."""
        self._samples[self._index(row, col)] = int(value)

    def row(self, row) -> list[int]:
        """Return the image samples of one row, without the border."""
        start = self._index(row, 0)
        return self._samples[start:start + self.width]

    def _store_row(self, row: int, values: Sequence[int]) -> None:
        start = self._index(row, 0)
        self._samples[start:start + self.width] = list(values)


class Image:
    """A set of equally sized components, in BGR order for colour images."""

    def __init__(self, components):
        self.components = list(components)
        sizes = {(c.width, c.height) for c in self.components}
        if len(sizes) > 1:
            raise ValueError("all components must have the same dimensions")

    @property
    def num_components(self) -> int:
        return len(self.components)

    @property
    def width(self) -> int:
        return self.components[0].width if self.components else 0

    @property
    def height(self) -> int:
        return self.components[0].height if self.components else 0

    def _require_components(self) -> None:
        if not self.components:
            raise ValueError("image has no components")

    def add(self, value) -> None:
        """Add ``value`` to every sample of the first component.

        Samples whose sum would exceed 255 are left unchanged.
        """
        self._require_components()
        comp = self.components[0]
        for r in range(comp.height):
            comp._store_row(
                r, [s + value if s + value <= 255 else s for s in comp.row(r)]
            )

    def write_bmp(self, path) -> None:
        """Write the image as a BMP file.

        Samples outside 0..255 keep only their low eight bits; a
        RuntimeWarning reports how many there were.
        """
        self._require_components()
        overflows = 0
        with BmpWriter(path, self.width, self.height, self.num_components) as out:
            for r in reversed(range(self.height)):
                line = bytearray()
                for pixel in zip(*(c.row(r) for c in self.components)):
                    for sample in pixel:
                        if sample & ~0xFF:
                            overflows += 1
                        line.append(sample & 0xFF)
                out.write_line(line)
        if overflows:
            warnings.warn(
                f"{overflows} samples outside 0..255 were wrapped", RuntimeWarning
            )


def read_image(path) -> Image:
    """Read a BMP file into an :class:`Image` with bordered components."""
    with BmpReader(path) as reader:
        n = reader.num_components
        comps = [Component(reader.cols, reader.rows) for _ in range(n)]
        for r in reversed(range(reader.rows)):
            line = reader.read_line()
            for i, comp in enumerate(comps):
                comp._store_row(r, line[i::n])
    return Image(comps)