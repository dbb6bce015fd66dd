# ftkit

A small library of helpers for characters, strings, byte buffers, a singly
linked list, simple `printf`-style formatting and buffered line reading.
The routines keep the conventions of classic low-level string and memory
functions (difference-valued comparisons, NUL-terminated bounded copies,
"return the length it would have had") while using Python types: searches
return indices or `None`, and bad counts or arguments raise `ValueError` or
`TypeError`.

It has no dependencies outside the standard library.

## Installation

```
pip install ftkit
```

## Modules

### `ftkit.chars`

`is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print` return booleans;
`to_lower` and `to_upper` change only ASCII letters. Each accepts a
one-character string or an integer code, and the case converters return the
same kind they were given.

### `ftkit.convert`

- `atoi(text)`: skips leading whitespace, takes one optional `+` or `-`, and
  reads digits until the first non-digit; no digits gives `0`.
- `atoi_base(text, base)`: base 2 to 16 (otherwise `ValueError`); in base 16 a
  `0x`/`0X` prefix is skipped, and `-` is recognised only in base 10.
- `itoa(n)`: the decimal form of an integer.

### `ftkit.memory`

Operations on `bytearray` buffers: `memset`, `bzero`, `calloc`, `memchr`
(index of the first match or `None`), `memcmp` (difference of the first
differing bytes), `memcpy`, `memmove(buffer, dest_offset, src_offset, n)`
for overlapping moves inside one buffer, and `realloc(buffer, new_size)`,
which returns a new zero-filled buffer seeded with the first
`new_size // 2` bytes of the old one. Counts reaching past a buffer raise
`ValueError`.

### `ftkit.text`

`strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr` work on `str`
and return indices (or `None`) and code differences. `strlcpy(dest, src, size)`
and `strlcat(dest, src, size)` write NUL-terminated bytes into a `bytearray`
and return the length of the string they tried to create.

### `ftkit.transform`

`split` and `count_words` (empty pieces dropped), `join`, `trim`, `substr`,
`map_indexed`, `iter_indexed` (in-place, a non-`None` result replaces the
item), `is_delim`, the generator `tokenize(text, delimiters)` and the stateful
`Tokenizer`, whose `next_token(delimiters)` may use a different delimiter set
on each call.

### `ftkit.output`

`put_char` (standard output), `put_char_fd`, `put_str_fd`, `put_endl_fd`,
`put_nbr_fd` write to a text stream. `format_string(fmt, *args)` expands
`%c`, `%s`, `%d` and `%i` (`%s` with `None` gives `(null)`; any other
character after `%` is dropped with it); `fprintf(stream, fmt, *args)` writes
that expansion and returns its length.

### `ftkit.linked`

`LinkedList` of `Node(content, next)` objects with `append`, `appendleft`,
`last`, `clear(delete)`, `for_each(func)`, `map(func, delete)`, `len()` and
iteration over contents.

### `ftkit.lines`

`LineReader(fd, buffer_size=10)` reads from a file descriptor or a binary
file object `buffer_size` bytes at a time; `read_line()` returns the next line
as `bytes` including its newline, or `None` at the end. `read_lines` yields
every line.

## Examples

```python
from ftkit.convert import atoi, itoa
from ftkit.transform import split, trim, tokenize
from ftkit.output import format_string

atoi("  -42abc")                  # -42
itoa(-2147483648)                 # "-2147483648"
split("a,,b,c", ",")              # ["a", "b", "c"]
trim("xxhixx", "x")               # "hi"
list(tokenize("a b\tc", " \t"))   # ["a", "b", "c"]
format_string("%s=%d", "x", 7)    # "x=7"
```

```python
import os
from ftkit.lines import read_lines

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in read_lines(fd):
        print(line.decode(), end="")
finally:
    os.close(fd)
```

## What it does not do

ftkit is a library only: it installs no command-line program, and it does
no drawing, windowing or file-format parsing of its own.

## Running the tests

```
pip install "ftkit[test]"
python -m pytest
```