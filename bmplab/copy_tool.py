"""Command that copies a BMP file by reading it whole and writing it out again."""

from __future__ import annotations

import sys

from .bmp_io import (
    BmpHeaderError,
    BmpNotOpenError,
    BmpTruncatedError,
    BmpUnsupportedError,
    read_bmp,
    write_bmp,
)

_MESSAGES = (
    (BmpHeaderError, "Error encountered while parsing BMP file header."),
    (
        BmpUnsupportedError,
        "Input uses an unsupported BMP file format.\n"
        "  Current simple example supports only 8-bit and 24-bit data.",
    ),
    (BmpTruncatedError, "Input or output file truncated unexpectedly."),
    (BmpNotOpenError, "Trying to access a file which is not open!(?)"),
    (OSError, "Cannot open supplied input or output file."),
)


def error_message(error) -> str:
    """Return the user-facing message for an error raised while copying."""
    for kind, message in _MESSAGES:
        if isinstance(error, kind):
            return message
    return str(error)


def copy_bmp(source, destination) -> tuple[int, int, int]:
    """Read ``source`` completely, then write it to ``destination``.

    Returns ``(width, height, num_components)`` of the copied image.
    """
    width, height, components, lines = read_bmp(source)
    write_bmp(destination, width, height, components, lines)
    return width, height, components


def main(argv=None) -> int:
    """Copy the BMP file named by the first argument to the second."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: bmp-copy <in bmp file> <out bmp file>", file=sys.stderr)
        return 1
    try:
        copy_bmp(args[0], args[1])
    except (OSError, BmpHeaderError, BmpUnsupportedError,
            BmpTruncatedError, BmpNotOpenError) as exc:
        print(error_message(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())