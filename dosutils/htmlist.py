"""Generate HTML index pages listing the files in a directory tree."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from pathlib import Path

VERSION = "0.00"
INDEX_FILE = "index.htm"
FILTER_TITLE = "FTP Photo Archives"
INDEX_TITLE = "FTP Photo Archives"

USAGE = (
    f"\nHTMList v{VERSION}\n"
    "\n"
    "Syntax: HTMList [-opts] {starting directory}\n"
    "Usage : HTML file list generator.\n"
    "Opts  : -? or -h = display this message.\n"
    "        -d = include directories as links.\n"
    "        -r = recursively process subdirectories.\n"
    "        -v = verbose output.\n"
)


def _page(title: str, names: Iterable[str]) -> str:
    items = "".join(f"<LI><A HREF={name}>{name}</A></LI>\n" for name in names)
    return f"<HTML><HEAD><TITLE>{title}</TITLE></HEAD>\n<UL>\n{items}</UL>\n</HTML>\n"


def render_filter_page(names: Iterable[str]) -> str:
    """Return a page with one link per name."""
    return _page(FILTER_TITLE, (name.rstrip("\r\n") for name in names))


def render_index(names: Iterable[str]) -> str:
    """Return an index page linking every name except the index file itself."""
    return _page(
        INDEX_TITLE,
        (name for name in names if name.upper() != INDEX_FILE.upper()),
    )


def write_index(directory: str | Path) -> Path:
    """Write index.htm listing the plain files of *directory*; return its path."""
    directory = Path(directory)
    names = sorted(entry.name for entry in directory.iterdir() if entry.is_file())
    target = directory / INDEX_FILE
    target.write_text(render_index(names))
    return target


def find_directories(root: str | Path, recursive: bool = True) -> list[Path]:
    """Return the subdirectories of *root*, descending into them if *recursive*."""
    root = Path(root)
    if not recursive:
        return sorted(entry for entry in root.iterdir() if entry.is_dir())
    found: list[Path] = []
    for current, dirnames, _files in os.walk(root):
        dirnames.sort()
        found.extend(Path(current) / name for name in dirnames)
    return found


def generate_indexes(root: str | Path, recursive: bool = True, verbose: bool = False) -> list[Path]:
    """Write an index page into every subdirectory of *root*."""
    written = []
    for directory in find_directories(root, recursive):
        if verbose:
            print(f"Changing into {directory}", file=sys.stderr)
        written.append(write_index(directory))
    return written


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(USAGE, end="")
        return 0
    print("*** HTMList Active.")

    recursive = True
    verbose = False
    root: str | None = None
    for arg in args:
        if arg[:1] in ("-", "/"):
            flag = arg[1:2].upper()
            if flag in ("?", "H"):
                print(USAGE, end="")
                return 0
            if flag == "D":
                continue
            if flag == "R":
                recursive = True
            elif flag == "V":
                verbose = True
            else:
                print(f"\nHTMList:  Unrecognized option: {arg}")
                print(USAGE, end="")
                return 1
        elif root is None:
            root = arg

    if verbose:
        tempdir = os.environ.get("TEMP") or os.environ.get("TMP") or ""
        print(f"* Using TEMP dir of: {tempdir}")

    try:
        generate_indexes(root if root is not None else Path.cwd(), recursive, verbose)
    except OSError as exc:
        print(f"* {exc}", file=sys.stderr)
        return 1

    print("*** HTMList Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())