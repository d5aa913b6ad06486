"""Command that brightens the first component of a BMP file in place."""

from __future__ import annotations

import argparse
import sys

from .bmp_io import BmpError
from .image import read_image

BRIGHTEN_AMOUNT = 60


def main(argv=None) -> int:
    """Add 60 to the first component of the named BMP file and rewrite it."""
    parser = argparse.ArgumentParser(
        description="Brighten the first component of a BMP file in place."
    )
    parser.add_argument("file", help="BMP file to modify")
    args = parser.parse_args(argv)
    try:
        image = read_image(args.file)
        image.add(BRIGHTEN_AMOUNT)
        image.write_bmp(args.file)
    except (BmpError, OSError) as exc:
        print(f"cannot process {args.file}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())