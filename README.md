# fdlines

`fdlines` reads text from file descriptors one line at a time. It keeps a
separate buffer for each descriptor, so you can switch between several open
descriptors and each one continues where it left off. The package also has
small helpers for characters and strings, and a command that prints files line
by line.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Reading lines

```python
import os
from fdlines.reader import LineReader, get_next_line

fd = os.open("notes.txt", os.O_RDONLY)
reader = LineReader(buffer_size=1, max_fd=1024)
for line in reader.lines(fd):
    print(line)
os.close(fd)
```

- `LineReader(buffer_size=1, max_fd=1024)` sets how many bytes each read
  requests and the highest descriptor number it accepts. A `buffer_size` that
  is not positive, or a negative `max_fd`, raises `ValueError`.
- `LineReader.next_line(fd)` returns the next line without its trailing
  newline, or `None` at end of input. A final line with no newline is still
  returned. Bytes are decoded as UTF-8, and undecodable bytes are kept as
  surrogate escapes.
- `LineReader.lines(fd)` yields the remaining lines of `fd`.
- If `fd` is outside `0..max_fd`, `ValueError` is raised. If `fd` is not an
  int, `TypeError` is raised. A failed read, for example on a closed
  descriptor, raises `OSError`.
- `get_next_line(fd)` does the same as `next_line` through a single reader
  shared by the module. That reader uses `BUFF_SIZE` (1) and `MAX_FD` (1024).

## Printing files

```
fdlines first.txt second.txt
```

The command prints every line of each file in the order given, each followed
by a newline. If a file cannot be opened, read or closed, it prints a message
naming the file and the step that failed, for example
`Error in opening the file: first.txt`. It then stops and exits with status 1.
If no file is named, it prints `Needs at least one file` and exits with status 0.

From Python:

- `fdlines.cli.print_file(path, out=None)` writes the lines of `path` to `out`,
  or to standard output if `out` is not given. It raises
  `fdlines.cli.PrintError` on failure.
- `fdlines.cli.main(argv=None)` runs the command and returns its exit status.

## Character and string helpers

- `fdlines.chars`: `atoi`, `itoa`, `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`, `to_upper`, `to_lower`. The classifiers accept an int
  code point or a one-character string. `to_upper` and `to_lower` return the
  same kind of value they are given.
- `fdlines.search`: `strchr`, `strrchr`, `strstr`, `strnstr`, `strcmp`,
  `strncmp`, `strequ`, `strnequ`, `memchr`, `memcmp`. Searches return an index,
  or `None` when nothing matches. Comparisons return the difference between
  the first pair of codes that differ.
- `fdlines.transform`: `strlcat`, `strsub`, `strjoin`, `strtrim`, `strsplit`,
  `strmap`, `strmapi`. `strlcat(dst, src, dstsize)` returns a tuple: the
  resulting string and the length the full concatenation would have had.
- `fdlines.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`. Each writes to
  the text stream passed as `file`, or to standard output if none is given.

```python
from fdlines.chars import atoi
from fdlines.search import strchr
from fdlines.transform import strsplit

atoi("  -42abc")           # -42
strchr("hello", "l")       # 2
strsplit("**a*bc**", "*")  # ["a", "bc"]
```

## What it does not do

The helpers work on immutable Python strings and bytes and return new values.
None of them fills or copies a caller's buffer in place. Line reading works
only on descriptors that are already open. The package does not open files
itself, except through the `fdlines` command and `print_file`.