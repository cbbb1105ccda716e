"""Batch-upload files to an FTP host through a generated ftp session script."""

from __future__ import annotations

import glob
import os
import subprocess
import sys
from collections.abc import Iterable
from pathlib import Path

FTP_HOST = "ftp.geocities.com"
SESSION_FILE = "geoput.ftp"

USAGE = (
    "\n"
    "Syntax: geoput username password file {file} {...}\n"
    "Usage : Batch transfers files to GeoCities one file at a time.\n"
    "Opts  : -? or /? = display this message.\n"
)


def build_session_script(username: str, password: str, names: Iterable[str]) -> str:
    """Return an ftp script that connects, uploads and disconnects once per file."""
    parts = ["glob\n", "hash\n"]
    for name in names:
        parts.append(
            f"o {FTP_HOST}\n"
            f"{username}\n"
            f"{password}\n"
            "bin\n"
            f"put {name.rstrip(chr(10))}\n"
            "disconnect\n"
        )
    parts.append("quit\n")
    return "".join(parts)


def list_matching(pattern: str) -> list[str]:
    """Return the bare names matching *pattern*, or the entries of a directory.

    Raises FileNotFoundError when nothing matches.
    """
    if os.path.isdir(pattern):
        names = sorted(os.listdir(pattern))
    else:
        names = sorted(os.path.basename(p) for p in glob.glob(pattern))
    if not names:
        raise FileNotFoundError(pattern)
    return names


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = "geoput"
    if len(args) < 3:
        print(USAGE, end="")
        return 1
    username, password, *patterns = args

    names: list[str] = []
    for pattern in patterns:
        try:
            names.extend(list_matching(pattern))
        except FileNotFoundError:
            print(f"{prog}: Unable to create file list: dir /b {pattern}")
            return 1

    session = Path(SESSION_FILE)
    try:
        session.write_text(build_session_script(username, password, names))
    except OSError:
        print(f"{prog}: Unable to create '{SESSION_FILE}'.")
        return 1

    try:
        result = subprocess.run(["ftp", f"-s:{SESSION_FILE}"], check=False)
        launched = result.returncode == 0
    except OSError:
        launched = False
    if not launched:
        print(f"{prog}: Unable to launch ftp program.")
        return 1

    try:
        session.unlink()
    except OSError:
        print(f"{prog}: Unable to delete ftp session file '{SESSION_FILE}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())