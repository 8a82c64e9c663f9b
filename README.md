# bunnyquest

Support code for a small tile-based puzzle game, in which a bunny gathers
every collectible on a walled map and then heads for the exit. The package
holds the game's low-level helpers: character and number handling, string
operations, byte-buffer operations, a singly linked list and a buffered
line reader. It has no dependencies beyond the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `bunnyquest.charutils`

- `atoi(text)` parses a leading decimal integer. It skips leading
  whitespace and takes one optional `+` or `-`. Parsing stops at the first
  non-digit, and text without digits gives `0`. The result wraps to the
  signed 32-bit range.
- `itoa(number)` returns the decimal text of a number.
- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` classify
  ASCII characters. Each accepts a one-character string or an integer
  code point.
- `to_lower` and `to_upper` change the case of ASCII letters. They return
  a string or an int, whichever they were given.
- `put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream,
  standard output by default. For `put_str` and `put_endl`, `None` writes
  nothing, apart from the newline that `put_endl` always writes.

### `bunnyquest.textops`

- `strlen(text)` returns the length of the text. `None` counts as empty.
- `find_char(text, char)` and `rfind_char(text, char)` return the index of
  the first or last match, or `None`. Searching for `"\0"` gives the length
  of the text.
- `join_strings(first, second)` concatenates two strings, treating `None`
  as empty.
- `strlcpy(dest, src, size)` and `strlcat(dest, src, size)` are bounded
  copy and append. They return a tuple of the new string and the length the
  full result would have had.
- `strncmp(first, second, count)` compares up to `count` characters. It
  returns the code-point difference at the first mismatch, or `0`.
- `strnstr(haystack, needle, length)` returns the index of `needle` when it
  lies entirely within the first `length` characters, or `None`.
- `substr(text, start, length)` returns up to `length` characters starting
  at `start`. `strtrim(text, charset)` strips characters of `charset` from
  both ends.
- `split(text, separator)` splits on a single-character separator and
  drops empty pieces.
- `strmapi(text, func)` builds a new string from `func(index, char)`.
  `striteri(chars, func)` applies `func(index, char)` to a mutable sequence
  in place.

### `bunnyquest.memory`

These helpers work on `bytes`, `bytearray` and `memoryview` objects. A
count that is negative, or that runs past the end of a buffer, raises
`ValueError`.

- `bzero`, `memset`: zero a buffer or fill it with a byte value.
- `calloc(count, size)`: return a zeroed `bytearray`.
- `realloc(data, count, size)`: return a new zeroed buffer that starts with
  `data`. If `data` is longer than the new buffer, it is truncated.
- `memchr`, `memcmp`: search a buffer for a byte, or compare two buffers.
- `memcpy(dest, src, count)`: copy bytes from one buffer into another.
- `memmove(buffer, dest, src, count)`: move bytes between two offsets of
  the same buffer. The two regions may overlap.

### `bunnyquest.linkedlist`

`LinkedList` is a singly linked list of `Node` objects. A `Node` has a
`content` and a `next` field.

| Member | What it does |
|---|---|
| `push_front`, `push_back` | Add an item at either end and return its node. |
| `last()` | Return the last node. |
| `pop_front(delete)` | Remove the first item and return it. |
| `clear(delete)` | Remove every item. |
| `iterate(func)` | Call `func` on each item in order. |
| `map(func, delete)` | Build a new list. If `func` raises, it clears the partial result with `delete` and re-raises. |

The optional `delete` callback receives each content that is removed. The
list also supports `len()` and iteration.

### `bunnyquest.linereader`

`LineReader(stream, buffer_size=64)` reads a text stream in chunks of
`buffer_size` characters and returns it line by line:

- `read_line()` returns the next line with its newline kept, or `None` at
  the end of the stream.
- Iterating over the reader yields the remaining lines.

`has_newline(text)` tells whether a string contains a newline.

```python
import io
from bunnyquest.linereader import LineReader

reader = LineReader(io.StringIO("1111\n1PCE\n1111"), buffer_size=3)
print(list(reader))  # ['1111\n', '1PCE\n', '1111']
```

## What this package does not do

The package does not include the game itself. There is no map-file loader
or validator, no game state or movement rules, no window or graphics, and
no command to start a game. It provides only the helper modules listed
above.