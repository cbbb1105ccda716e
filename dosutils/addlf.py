"""Insert a line feed after every carriage return in a byte stream."""

from __future__ import annotations

import sys

CR = b"\r"
CRLF = b"\r\n"


def add_linefeeds(data: bytes) -> bytes:
    """Return *data* with a line feed written after every carriage return."""
    return data.replace(CR, CRLF)


def main(argv: list[str] | None = None) -> int:
    """Filter standard input to standard output."""
    data = sys.stdin.buffer.read()
    sys.stdout.buffer.write(add_linefeeds(data))
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())