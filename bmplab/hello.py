"""Command that greets with the integer given as its first argument."""

from __future__ import annotations

import re
import sys

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def greeting(argument) -> str:
    """Return the greeting for the integer at the start of ``argument``."""
    match = _LEADING_INT.match(argument)
    if match is None:
        raise ValueError(f"no integer at the start of {argument!r}")
    return f"Hello, my argument is {int(match.group(1))}"


def main(argv=None) -> int:
    """Print a greeting for the first argument, if there is one."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        try:
            print(greeting(args[0]))
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())