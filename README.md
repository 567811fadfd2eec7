# ftkit

A small toolkit of C-flavoured helpers for Python: character classes,
byte-buffer operations, string search and transformation, a singly linked
list, a minimal `printf`, and a buffered line reader that works on raw file
descriptors.

Strings are treated the C way: a NUL character (`"\0"`) ends a string and
anything after it is ignored. Searches return an index, or `None` when
nothing is found.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `ftkit.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower`. Each takes an integer code point or a one-character
  string; case conversion returns the same kind it was given.
- `ftkit.memory`: `bzero`, `memset`, `memcpy`, `memmove`, `memchr`, `memcmp`,
  `calloc` on `bytes`/`bytearray` buffers. Writing functions modify a
  `bytearray` in place; `memmove` copies between two offsets of one buffer;
  `calloc` raises `OverflowError` when the size exceeds 64 bits.
- `ftkit.search`: `atoi`, `itoa`, `strlen`, `strdup`, `strchr`, `strrchr`,
  `strnstr`, `strncmp`. `atoi` and `itoa` work with 32-bit signed values.
- `ftkit.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` write
  straight to a file descriptor.
- `ftkit.transform`: `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`, `strlcpy`, `strlcat`. `strlcpy` and `strlcat` return a pair:
  the resulting text and the length the full result would have had.
- `ftkit.linkedlist`: `LinkedList`, which supports `add_front`, `add_back`,
  `last`, `pop_front`, `clear`, `iterate`, `map`, `len()` and iteration.
- `ftkit.printf`: `render` returns formatted text and `printf` writes it to a
  stream (standard output by default) and returns the character count. The
  conversions are `%c %s %p %d %i %u %x %X %%`; there are no flags, widths or
  precisions. A malformed format raises `FormatError`, a missing or wrong
  argument raises `TypeError`.
- `ftkit.nextline`: `LineReader` and `get_next_line` return one line at a time,
  as `bytes` including its newline, from any number of open file descriptors,
  and `None` at end of input.

## Examples

```python
from ftkit.printf import render
from ftkit.transform import split
from ftkit.linkedlist import LinkedList

render("%d items, %x hex, %s", 42, 255, "done")   # '42 items, ff hex, done'
split("  Hello   World ", " ")                      # ['Hello', 'World']

lst = LinkedList([1, 2, 3])
lst.add_front(0)
list(lst.map(lambda x: x * 10, None))               # [0, 10, 20, 30]
```

```python
import os
from ftkit.nextline import LineReader

reader = LineReader(buffer_size=64)
fd = os.open("notes.txt", os.O_RDONLY)
while (line := reader.read_line(fd)) is not None:
    print(line.decode(), end="")
os.close(fd)
```

## Command line

`ftkit-printf` prints its format argument with the remaining arguments
substituted. Arguments for `%d %i %u %x %X %p` are read as integers (a `0x`
prefix is accepted), `%c` takes the first character of its argument, and `%s`
takes the argument as it is:

```
ftkit-printf "%d and %s" 10 text
```

Backslash escapes in the format are not interpreted. On a bad format or
argument the command prints a message to standard error and exits with
status 1.

With no arguments it prints `10` on two lines: once through `printf` and once
through Python's own `%` formatting, for comparison.