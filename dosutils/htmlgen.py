"""Command-line driver that expands HTML templates into .html files."""

from __future__ import annotations

import glob
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from dosutils.macros import DefineError, DefineTable
from dosutils.preprocess import Preprocessor, output_name

VERSION = "0.02"

USAGE = (
    f"\nhtmlgen v{VERSION}\n"
    "\n"
    "Syntax: htmlgen [-opts] {template name} [{template name} {...}]\n"
    "Usage : HTML pre-processor.  Generates .html files from template files.\n"
    "Opts  : -? or /? = display this message.\n"
    "        -dNAME   = define (or NAME=VALUE) a #define value.\n"
    "        -o={DIR} = output .html files to specified directory.\n"
    "      * -z       = read template from stdin (or use no options).\n"
    "\n"
    "* Not currently implemented.\n"
)

_OPTION_PREFIXES = ("-", "/")


class _OptionError(ValueError):
    """A command-line option that stops processing."""

    def __init__(self, message: str, show_usage: bool = False) -> None:
        super().__init__(message)
        self.show_usage = show_usage


@dataclass
class Options:
    """Settings gathered from the command line."""

    defines: DefineTable = field(default_factory=DefineTable)
    outdir: str | None = None
    templates: list[str] = field(default_factory=list)
    help: bool = False
    warnings: list[str] = field(default_factory=list)


def _is_option(arg: str) -> bool:
    return arg[:1] in _OPTION_PREFIXES


def parse_args(argv: Iterable[str]) -> Options:
    """Parse command-line arguments into Options.

    Raises ValueError for a malformed output option, for -z, and for an
    unrecognized option. The argument right after an output option is not
    scanned as an option.
    """
    args = list(argv)
    options = Options()
    skip_next = False
    for arg in args:
        if skip_next:
            skip_next = False
            continue
        if not _is_option(arg):
            continue
        flag = arg[1:2].upper()
        if flag in ("?", "H"):
            options.help = True
            return options
        if flag == "D":
            try:
                options.defines.add(arg[2:], override=False)
            except DefineError as exc:
                options.warnings.append(f"*** {exc}")
        elif flag == "O":
            if arg[2:3] != "=":
                raise _OptionError("Specify output path as: -o=OUTPUTDIR")
            options.outdir = arg[3:]
            skip_next = True
        elif flag == "Z":
            raise _OptionError("-z not implemented yet.")
        else:
            raise _OptionError(f"Unrecognized option: {arg}", show_usage=True)
    options.templates = [arg for arg in args if not _is_option(arg)]
    return options


def expand_templates(patterns: Iterable[str]) -> list[Path]:
    """Return the plain files matching each wildcard pattern, pattern by pattern."""
    found: list[Path] = []
    for pattern in patterns:
        found.extend(sorted(Path(p) for p in glob.glob(pattern) if Path(p).is_file()))
    return found


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write(USAGE)
        return 0

    sys.stderr.write("\n*** HTMLgen Active.\n")

    try:
        options = parse_args(args)
    except _OptionError as exc:
        sys.stderr.write(f"\n{exc}\n")
        if exc.show_usage:
            sys.stderr.write(USAGE)
        return 1

    if options.help:
        sys.stderr.write(USAGE)
        return 0

    for warning in options.warnings:
        print(warning, file=sys.stderr)

    preprocessor = Preprocessor(defines=options.defines)
    for infile in expand_templates(options.templates):
        outfile = output_name(infile, options.outdir)
        try:
            preprocessor.render_file(infile, outfile)
        except OSError:
            if infile.is_file():
                print(f"*** Unable to create: {outfile}", file=sys.stderr)
            else:
                print(f"*** Unable to open: {infile}", file=sys.stderr)

    if preprocessor.if_level > 0:
        sys.stderr.write("*** WARNING:  More #if's than #endif's.\n")

    sys.stderr.write("*** HTMLgen Done.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())