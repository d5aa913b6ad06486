"""Command that halves one colour channel of a BMP file while copying it."""

from __future__ import annotations

import sys

from .bmp_io import BmpError, read_bmp, write_bmp
from .copy_tool import error_message


def halve_channel(line, planes) -> bytes:
    """Return ``line`` with one channel halved.

    For colour lines (three planes) the green sample of every pixel but the
    last is halved. For greyscale lines (one plane) every sample is halved.
    """
    if planes < 1:
        raise ValueError(f"invalid number of planes {planes}")
    data = bytearray(line)
    for j in range(1 % planes, len(data) - planes + 1, planes):
        data[j] >>= 1
    return bytes(data)


def halve_bmp(source, destination) -> tuple[int, int, int]:
    """Read ``source``, halve one channel of every line, write ``destination``.

    Returns ``(width, height, num_components)`` of the image.
    """
    width, height, planes, lines = read_bmp(source)
    halved = [halve_channel(line, planes) for line in lines]
    write_bmp(destination, width, height, planes, halved)
    return width, height, planes


def main(argv=None) -> int:
    """Halve one channel of the BMP file named first, writing the second."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: bmp-halve <in bmp file> <out bmp file>", file=sys.stderr)
        return 1
    try:
        halve_bmp(args[0], args[1])
    except (OSError, BmpError) as exc:
        print(error_message(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())