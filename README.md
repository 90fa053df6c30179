# pipex

`pipex` is a small library of text helpers:

- `pipex.textops` holds string functions that follow the rules of the C
  string library.
- `pipex.printf` holds a small `printf` with a fixed set of conversions.
- `pipex.linereader` reads a stream one line at a time and stops when it
  finds binary data.

It has no dependencies outside the standard library.

## Installation

```sh
pip install .
```

To run the tests:

```sh
pip install ".[test]"
pytest
```

## `pipex.textops`

```python
from pipex.textops import atoi, split, strlcpy, strnstr

atoi("   -123abc")          # -123
split(" a  b c ", " ")      # ["a", "b", "c"]
strlcpy("HELLOOOO!", 6)     # ("HELLO", 9)
strnstr("Hello, World!", "World", 13)  # 7
```

- `atoi(text)` skips leading whitespace, accepts one `+` or `-` sign, and
  reads digits until the first character that is not a digit. Text with no
  digits gives 0. The result wraps like a signed 32-bit integer.
- `itoa(number)` returns the decimal string of an `int`. Any other type,
  `bool` included, raises `TypeError`.
- `split(text, separator)` returns the non-empty words between runs of a
  one-character separator. A separator of any other length raises
  `ValueError`.
- `strtrim(text, chars)` strips any of `chars` from both ends. If `chars` is
  `None`, the text is returned unchanged.
- `substr(text, start, length)` returns at most `length` characters starting
  at `start`. If `start` is at or past the end, it returns `""`.
- `strnstr(haystack, needle, length)` returns the index of the first match
  of `needle` that lies wholly within the first `length` characters, or
  `None` if there is none. An empty needle gives 0.
- `strncmp(first, second, count)` and `strcmp(first, second)` return 0 for
  equal strings. Otherwise they return the difference between the code
  points of the first pair of characters that differ. The end of a string
  counts as code point 0.
- `strlcpy(source, size)` returns `(copied, len(source))`. `copied` holds at
  most `size - 1` characters.
- `strlcat(destination, source, size)` returns `(text, length)`. `text` is
  the result of appending `source` within a buffer of `size` slots, one of
  which is kept for the terminator. `length` is the length the full
  concatenation would have had. If `destination` already fills the buffer,
  nothing is appended and `length` is `size + len(source)`.

Functions that take a size, start, length or count raise `ValueError` when
it is negative.

## `pipex.printf`

```python
from pipex.printf import render, printf

render("%s has %d items (%x)", "box", 42, 255)  # "box has 42 items (ff)"
printf("%c%c\n", "o", "k")                       # writes "ok\n", returns 3
```

`render(fmt, *args)` supports these conversions:

| Conversion | Output |
|------------|--------|
| `%c` | a one-character string, or an integer taken modulo 256 |
| `%s` | `str(value)`, or `(null)` for `None` |
| `%p` | `0x` followed by the hex address (an integer, or `id()` of any other object), or `(nil)` for `None` or 0 |
| `%d`, `%i` | signed 32-bit decimal |
| `%u` | unsigned 32-bit decimal |
| `%x`, `%X` | unsigned 32-bit hex, in lower or upper case |
| `%%` | a literal `%` |

- A `%` followed by any other character gives that character.
- A `%` followed only by whitespace, or by nothing, raises
  `PrintfFormatError`, which is a subclass of `ValueError`. A missing
  argument raises it too.
- Surplus arguments are ignored.
- A non-integer given to an integer conversion raises `TypeError`.

`printf(fmt, *args, file=None)` writes the rendered text to `file`, or to
standard output when `file` is `None`, and returns the number of characters
written.

## `pipex.linereader`

```python
import io
from pipex.linereader import LineReader, is_binary

reader = LineReader(io.BytesIO(b"one\ntwo\nthree"), buffer_size=4)
list(reader)   # [b"one\n", b"two\n", b"three"]

is_binary("abc\x01\n")  # True
```

- `LineReader(stream, buffer_size=42)` reads a stream of `bytes` or `str` in
  chunks of `buffer_size`. A `buffer_size` that is not positive raises
  `ValueError`.
- `read_line()` returns the next line, including its newline. It returns
  `None` at the end of the stream or when the pending line holds binary
  data. Iterating over the reader yields lines until that point.
- Within each chunk that is read, any data after a NUL character is dropped.
- `is_binary(stash)` reports whether the text before the first newline
  contains a character outside the printable ASCII range 32 to 126.

## What this package does not do

The package does not start or connect processes. It has no command-line
program and no function that runs commands in a pipeline or redirects files.
It provides only the text, formatting and line-reading helpers described
above.