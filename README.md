# ftkit

A small collection of everyday helpers, grouped by theme. It uses only the
standard library.

- `ftkit.chars`: ASCII character classification and case mapping
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`). Each accepts a one-character string or an integer code. The
  case mappings return the same kind they were given.
- `ftkit.numbers`: `power(number, exponent)`, which works by repeated
  multiplication, and `reverse_bits(num)`, which reverses the bits of an
  unsigned 32-bit value.
- `ftkit.memory`: byte-buffer operations that write into `bytearray` or
  `memoryview` objects (`memset`, `bzero`, `memcpy`, `memccpy`, `memmove`)
  and read from `bytes`, `bytearray` or `memoryview` (`memchr`, `memcmp`),
  plus `calloc(count, size)`, which returns a zero-filled `bytearray`.
  A length larger than a buffer raises `ValueError`.
- `ftkit.strings`: bounded string helpers (`strlen`, `strchr`, `strrchr`,
  `strncmp`, `strlcpy`, `strlcat`, `strnstr`, `strdup`, `substr`, `strjoin`,
  `strtrim`, `split`, `strmapi`). The search functions return an index, or
  `None` when nothing is found. `strlcpy` and `strlcat` return a tuple of
  the resulting text and the length they tried to create.
- `ftkit.conversion`: number parsing and formatting in any base
  (`atoi`, `atoi_base`, `itoa`, `itoa_base`, `convert_base`). A base is a
  string of digit characters. It must have at least two of them, none
  repeated and no sign. An invalid base raises `ValueError`.
- `ftkit.output`: writing characters, strings, numbers and hex dumps
  (`put_char`, `put_str`, `put_endl`, `put_nbr`, `put_nbr_base`, `put_mem`).
  They write to the text stream given as `file`, or to standard output when
  `file` is left out.
- `ftkit.btree`: an unbalanced binary search tree built from `BTreeNode`.
  It provides `insert`, `search`, `level_count` and `nodes_count`, and walks
  the tree with `walk_prefix`, `walk_infix`, `walk_suffix`, `walk_by_level`
  and `apply_by_level`. The walk functions yield the items themselves.
  `walk_by_level` yields `(item, level, is_first)` tuples.
- `ftkit.linked_list`: a singly linked `LinkedList` of `ListNode` cells. It
  has `push_front`, `push_back`, `last`, `clear`, `map` and `for_each`, along
  with iteration and `len`.
- `ftkit.line_reader`: `LineReader` reads newline-separated lines from file
  descriptors in chunks of `buffer_size` bytes and keeps separate pending
  data for each descriptor. It also provides `iter_lines` and `forget`. The
  module-level `get_next_line(fd)` reads through one shared reader and
  returns `None` at end of input.

## Installing

```
pip install .
```

## Examples

```python
from ftkit.conversion import atoi, itoa_base, convert_base
from ftkit.strings import split, strtrim, strchr

atoi("   -42abc")                                # -42
itoa_base(255, "0123456789abcdef")               # "ff"
convert_base("ff", "0123456789abcdef", "01")     # "11111111"
split("  hello   world ", " ")                   # ["hello", "world"]
strtrim("xxhixx", "x")                           # "hi"
strchr("hello", "l")                             # 2
```

```python
from ftkit.btree import insert, walk_infix, level_count

root = None
for value in (5, 2, 8, 1):
    root = insert(root, value, lambda a, b: a - b)
list(walk_infix(root))                           # [1, 2, 5, 8]
level_count(root)                                # 3
```

```python
import io
from ftkit.output import put_mem, put_nbr_base

out = io.StringIO()
put_mem(b"\x00\x7f\xff", out)
put_nbr_base(-10, "01", out)
out.getvalue()                                   # "00 7f ff-1010"
```

```python
import os
from ftkit.line_reader import LineReader

reader = LineReader(buffer_size=64)
fd = os.open("notes.txt", os.O_RDONLY)
for line in reader.iter_lines(fd):
    print(line)
os.close(fd)
```

## What it does not do

ftkit is a library only. It installs no command-line program. Its memory
functions work on Python buffer objects and do not allocate or manage raw
memory.

## Running the tests

```
pip install ".[test]"
pytest
```