"""Restore short DOS names mangled with a ``~N`` suffix from a directory listing.

Reads the output of a DOS ``dir`` command. For every file entry whose
8.3 name carries a ``~`` marker, it works out the plain 8.3 name the long
name could have had. It renames the file to that short name and then back
to its long name, which drops the ``~N`` marker where no other file clashes.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable
from dataclasses import dataclass

VERSION = "1.08"

MIN_LINE_LENGTH = 44
LONG_NAME_COLUMN = 44
LONG_NAME_LIMIT = 80
TIME_COLON_COLUMN = 39
DIR_MARK_COLUMN = 15
EXTENSION_COLUMN = 9

USAGE = (
    f"\nDirvert V{VERSION}\n\n"
    "Syntax: dir {directory} | dirvert -z\n"
    "        dirvert {directory}\n"
    "        dirvert -z < {dirfile.txt}\n"
    "Usage : Win95 directory long filename fixer (and filter).\n"
    "Opts  : -? or /? = display this message.\n"
    "        -L or /L = lowercase directory filenames.\n"
    "        -Z or /Z = read directory output from standard input (filter).\n"
)


@dataclass(frozen=True)
class RenamePlan:
    """The two renames that turn a ``~N`` DOS name back into a plain one."""

    dos_name: str
    new_name: str
    win_name: str

    @property
    def changeable(self) -> bool:
        """True when the intermediate 8.3 name is valid, i.e. has no space."""
        return " " not in self.new_name

    def commands(self) -> tuple[str, str]:
        """Return the two shell rename commands this plan stands for."""
        return (
            f"rename {self.dos_name} {self.new_name}",
            f'rename {self.new_name} "{self.win_name}"',
        )


def short_name(long_name: str) -> str:
    """Return the 8.3 name made from the first eight and three characters of *long_name*."""
    base, dot, rest = long_name.partition(".")
    name = base[:8] + "."
    if dot:
        name += rest[:3]
    return name


def parse_listing_line(line: str, lowercase: bool = False) -> RenamePlan | None:
    """Return the rename plan for one ``dir`` output line, or None if it is not one."""
    body = line.rstrip("\r\n")
    if len(body) + 1 < MIN_LINE_LENGTH:
        return None
    if body[TIME_COLON_COLUMN] != ":" or body[DIR_MARK_COLUMN] == "<":
        return None
    if not lowercase and "~" not in body:
        return None

    first_space = body.find(" ")
    stem = body if first_space < 0 else body[:first_space]
    dos_name = f"{stem}.{body[EXTENSION_COLUMN:EXTENSION_COLUMN + 3]}"

    long_name = body[LONG_NAME_COLUMN:LONG_NAME_COLUMN + LONG_NAME_LIMIT]
    win_name = long_name.lower() if lowercase else long_name
    return RenamePlan(dos_name=dos_name, new_name=short_name(long_name), win_name=win_name)


def plan_renames(lines: Iterable[str], lowercase: bool = False) -> list[RenamePlan]:
    """Return the rename plans for every changeable file entry in *lines*."""
    plans = []
    for line in lines:
        plan = parse_listing_line(line, lowercase)
        if plan is not None and plan.changeable:
            plans.append(plan)
    return plans


def _rename(source: str, target: str) -> None:
    if os.path.exists(target) and not (
        os.path.exists(source) and os.path.samefile(source, target)
    ):
        raise FileExistsError(target)
    os.rename(source, target)


def _apply(plan: RenamePlan) -> bool:
    for source, target in ((plan.dos_name, plan.new_name), (plan.new_name, plan.win_name)):
        try:
            _rename(source, target)
        except OSError as exc:
            print(f"Unable to rename {source} to {target}: {exc}")
            return False
    return True


def _process(lines: Iterable[str], lowercase: bool) -> int:
    print("dirvert:  Processing directory output.")
    done = 0
    for plan in plan_renames(lines, lowercase):
        if _apply(plan):
            done += 1
    return done


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    args = sys.argv[1:] if argv is None else list(argv)
    filter_mode = False
    lowercase = False

    for arg in args:
        if arg[:1] in ("-", "/"):
            flag = arg[1:2].upper()
            if flag in ("?", "H"):
                print(USAGE, end="")
                return 0
            if flag == "L":
                lowercase = True
            elif flag == "Z":
                filter_mode = True
            else:
                print(f"\nUnrecognized option: {arg}")
                print(USAGE, end="")
                return 0
        else:
            listing = subprocess.run(
                f"dir {arg}", shell=True, capture_output=True, text=True, check=False
            )
            _process(listing.stdout.splitlines(keepends=True), lowercase)
            return listing.returncode

    if not filter_mode:
        print(USAGE, end="")
        return 0

    _process(sys.stdin, lowercase)
    return 0


if __name__ == "__main__":
    sys.exit(main())