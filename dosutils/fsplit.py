"""Split a text file into numbered pieces of a fixed number of lines."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from itertools import islice
from pathlib import Path

USAGE = "Usage:  fsplit {filename} {# of lines}\n"
OUTPUT_PATTERN = "file{}.txt"


def chunk_lines(lines: Iterable[str], max_lines: int) -> Iterator[list[str]]:
    """Yield consecutive groups of at most *max_lines* lines.

    An empty input still yields one empty group, so that one output file
    is always produced.
    """
    if max_lines < 1:
        raise ValueError(f"line count must be positive, got {max_lines}")
    source = iter(lines)
    first = True
    while True:
        chunk = list(islice(source, max_lines))
        if chunk or first:
            yield chunk
        if len(chunk) < max_lines:
            return
        first = False


def split_file(path: str | Path, max_lines: int, directory: str | Path | None = None) -> list[Path]:
    """Split *path* into file1.txt, file2.txt, ... and return the files written."""
    out_dir = Path(directory) if directory is not None else Path.cwd()
    written: list[Path] = []
    with open(path, encoding="latin-1", newline="") as infile:
        for number, chunk in enumerate(chunk_lines(infile, max_lines), start=1):
            target = out_dir / OUTPUT_PATTERN.format(number)
            with open(target, "w", encoding="latin-1", newline="") as outfile:
                outfile.writelines(chunk)
            written.append(target)
    return written


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        sys.stderr.write(USAGE)
        return 1
    path, count = args
    try:
        max_lines = int(count)
    except ValueError:
        sys.stderr.write(USAGE)
        return 1
    if not Path(path).is_file():
        sys.stderr.write("Cannot open file.\n")
        return 1
    try:
        split_file(path, max_lines)
    except ValueError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    except OSError:
        sys.stderr.write("Cannot create output file.\n")
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())