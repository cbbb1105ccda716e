# dosutils

A handful of small command-line utilities for working with text files,
directory listings and simple HTML pages. Each command is also usable as a
Python module.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Commands

### addlf

Reads standard input as bytes and writes it to standard output, adding a
line feed after every carriage return.

    addlf < input.txt > output.txt

### fsplit

Splits a text file into pieces of a fixed number of lines, written to the
current directory as `file1.txt`, `file2.txt` and so on. An empty input
still produces `file1.txt`. A line count below one is rejected.

    fsplit notes.txt 100

### geoput

Writes an FTP session script, `geoput.ftp`, that connects to
`ftp.geocities.com`, logs in, uploads one file in binary mode and
disconnects, once for every file matching the given patterns (a directory
name stands for all its entries). It then runs `ftp -s:geoput.ftp` and
deletes the script.

    geoput username password "*.html" "*.gif"

A pattern that matches nothing stops the command with an error.

### htmlist

Writes an `index.htm` page into every directory below the starting directory
(the current directory if none is given), descending into subdirectories.
Each page links the plain files of its directory, leaving out the index file
itself.

    htmlist -v .

Options: `-v` verbose output, `-?` or `-h` help. `-r` (recursive) is
already the default; `-d` is accepted and has no effect.

### dirvert

Reads a DOS `dir` listing that shows both short 8.3 names and long names.
For every file whose short name carries a `~` marker, it renames the file to
the plain 8.3 name made from its long name and then back to the long name,
which drops the `~N` marker where no other file clashes. Entries whose
intermediate name would contain a space are left alone; failed renames are
reported and skipped.

    dirvert -z < listing.txt
    dirvert -z -l < listing.txt
    dirvert C:\SOMEDIR

Options: `-z` read the listing from standard input, `-l` lowercase the long
names (and consider every file entry, not only those with `~`), `-?` or `-h`
help. Given a directory, it runs `dir` on it through the shell and processes
that output.

### htmlgen

An HTML preprocessor. Template lines may start with `#include`, `#define`,
`#redefine`, `#undefine`, `#ifdef`, `#ifndef`, `#else` and `#endif`, and
`%NAME%` is replaced by the value of a defined name. Each template matching
the given patterns, such as `page.tpl`, becomes `page.html`, starting with a
comment line naming the preprocessor. Definitions carry over from one
template to the next; at most 30 names can be defined at once.

    htmlgen -dSITE=Home -o=out "*.tpl"

Options: `-dNAME`, `-dNAME=VALUE` or `-d"NAME VALUE"` define a name, `-o=DIR`
write output to `DIR`, `-?` or `-h` help. `-z` (reading from standard
input) is not supported and is rejected.

## Library use

    from dosutils.fsplit import chunk_lines
    from dosutils.macros import DefineTable
    from dosutils.preprocess import Preprocessor

    table = DefineTable()
    table.add("NAME world")
    print(table.substitute("Hello %NAME%"))   # Hello world

    pre = Preprocessor(defines=table)
    print(pre.process_text("#ifdef NAME\nyes\n#else\nno\n#endif\n"))

    print(list(chunk_lines(["a\n", "b\n", "c\n"], 2)))

Other useful functions: `dosutils.addlf.add_linefeeds`,
`dosutils.fsplit.split_file`, `dosutils.geoput.build_session_script`,
`dosutils.htmlist.render_index` and `generate_indexes`,
`dosutils.dirvert.plan_renames` (returning `RenamePlan` objects whose
`commands()` gives the two rename commands), `dosutils.preprocess.output_name`
and `dosutils.htmlgen.parse_args`.

## Limitations

- `geoput` does no FTP itself; it needs an `ftp` program on the path that
  accepts `-s:FILE`.
- `dirvert` with a directory argument needs a shell with a DOS-style `dir`
  command; otherwise feed it a listing with `-z`.
- `htmlist` does not link subdirectories in its pages, and the command line
  offers no non-recursive mode (`find_directories(root, recursive=False)` is
  available from Python).