"""Expand HTML template files with include, define and conditional directives."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from enum import Enum
from pathlib import Path
from typing import TextIO

from dosutils.macros import DefineError, DefineTable, split_definition

HEADER = "<!-- These files were created using the HTML Preprocessor -->\n"
OUTPUT_EXTENSION = ".html"


class Directive(Enum):
    """Template directives, matched as line prefixes in this order."""

    INCLUDE = "#include "
    DEFINE = "#define "
    IFDEF = "#ifdef "
    IFNDEF = "#ifndef "
    ELSE = "#else"
    ENDIF = "#endif"
    UNDEFINE = "#undefine "
    REDEFINE = "#redefine "


def _match(line: str) -> Directive | None:
    for directive in Directive:
        if line.startswith(directive.value):
            return directive
    return None


def _chomp(raw: str) -> str:
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw


def output_name(infile: str | Path, outdir: str | Path | None = None) -> Path:
    """Return the .html file a template is rendered to.

    The extension after the last dot of the file name is replaced; a name
    without a dot simply gets the extension appended.
    """
    name = Path(infile).name
    if "." in name:
        name = name[: name.rindex(".")]
    name += OUTPUT_EXTENSION
    return Path(outdir) / name if outdir is not None else Path(name)


class Preprocessor:
    """Expands templates, keeping definitions and the #if depth across calls."""

    def __init__(self, defines: DefineTable | None = None, stream: TextIO | None = None) -> None:
        self.defines = defines if defines is not None else DefineTable()
        self.stream = stream
        self.if_level = 0
        self.warnings: list[str] = []

    def _warn(self, message: str) -> None:
        self.warnings.append(message)
        print(message, file=self.stream if self.stream is not None else sys.stderr)

    def _define(self, spec: str, override: bool) -> None:
        name, _ = split_definition(spec)
        if override and name and name in self.defines:
            self._warn(f"** Redefining: {name}")
        try:
            self.defines.add(spec, override)
        except DefineError as exc:
            self._warn(f"*** {exc}")

    def _include(self, path: str, out: list[str]) -> None:
        try:
            with open(path, encoding="latin-1") as handle:
                self._parse(handle, out, skip=False)
        except OSError:
            self._warn(f"*** Cannot include: {path}")

    def _parse(self, source: Iterator[str] | Iterable[str], out: list[str], skip: bool) -> None:
        lines = iter(source)
        for raw in lines:
            line = self.defines.substitute(_chomp(raw))
            directive = _match(line)
            if directive is None:
                if not skip:
                    out.append(line)
                continue
            argument = line[len(directive.value):]
            if directive is Directive.INCLUDE:
                self._include(argument, out)
            elif directive is Directive.DEFINE:
                self._define(argument, override=False)
            elif directive is Directive.REDEFINE:
                self._define(argument, override=True)
            elif directive is Directive.UNDEFINE:
                self.defines.remove(argument)
            elif directive in (Directive.IFDEF, Directive.IFNDEF):
                self.if_level += 1
                defined = self.defines.is_defined(argument)
                hide = not defined if directive is Directive.IFDEF else defined
                self._parse(lines, out, skip=hide)
            elif directive is Directive.ELSE:
                skip = not skip
            elif directive is Directive.ENDIF:
                self.if_level -= 1
                if self.if_level < 0:
                    self._warn("*** WARNING:  More #endif's than #if's.")
                return

    def process_lines(self, lines: Iterable[str]) -> list[str]:
        """Expand template *lines* and return the output lines without newlines."""
        out: list[str] = []
        self._parse(lines, out, skip=False)
        return out

    def process_text(self, text: str) -> str:
        """Expand a template held in *text* and return the output text."""
        return "".join(f"{line}\n" for line in self.process_lines(text.splitlines(keepends=True)))

    def render_file(self, infile: str | Path, outfile: str | Path) -> Path:
        """Expand the template *infile* into *outfile* and return the output path."""
        target = Path(outfile)
        with open(infile, encoding="latin-1") as source, open(
            target, "w", encoding="latin-1"
        ) as sink:
            sink.write(HEADER)
            print(f"Processing {infile} into {outfile}...")
            for line in self.process_lines(source):
                sink.write(f"{line}\n")
        return target