# scrapkit

Small building blocks for scraping tools: string helpers, file and
directory helpers, and two growable string containers.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `scrapkit.common`

- `digit_count(number)`: number of decimal digits in a non-negative integer;
  `0` has one digit. A negative number raises `ValueError`.
- `count_occurrences(text, occur)`: how many times `occur` appears in `text`,
  overlapping occurrences included. An empty `occur` raises `ValueError`.
- `find_last(text, occur)`: start index of the last occurrence of `occur`,
  or `None` when there is none. An empty `occur` raises `ValueError`.
- `split(text, delimiter)`: split `text` on any character of `delimiter`,
  dropping empty pieces. An empty delimiter raises `ValueError`.
- `proper_split(text, delimiter)`: like `split`, but an empty `text` raises
  `ValueError`; a trailing delimiter produces no extra piece.
- `index_after(text, occur)`: index just past the first occurrence of
  `occur`, or `None` when there is none.
- `read_file(path, mode="r")`: read a whole file with carriage returns
  dropped. Mode `"r"` returns `str`, mode `"rb"` returns `bytes`; any other
  mode raises `ValueError`.
- `current_time()`: the current local time in `time.ctime` form, for
  example `"Sun Oct  1 13:12:00 2019"`.
- `make_dirs(path)`: create a directory and its parents, like `mkdir -p`,
  and return it as a `Path`. A path holding any of `\ < > ? " : * |`, or with
  no component between slashes, raises `ValueError`.
- `dir_exists(path)`: whether `path` is an existing directory.

```python
from scrapkit.common import index_after, split

split("a/b/c", "/")                         # ["a", "b", "c"]
index_after("https://example.com", "://")   # 8
```

### `scrapkit.string_list.StringList`

A list of strings with an explicit starting capacity (greater than 0) that
doubles when it fills up. `get(index)` raises `IndexError` for an index out
of range, negative ones included. `drain()` returns every string in order
and leaves the list empty. The list supports `len()` and iteration, and
exposes its current `capacity`.

```python
from scrapkit.string_list import StringList

names = StringList(2)
names.add("toto")
names.add("tata")
names.add("tonton")
names.get(1)      # "tata"
names.capacity    # 4
names.drain()     # ["toto", "tata", "tonton"], and the list is now empty
```

### `scrapkit.string_buffer.StringBuffer`

A text buffer that multiplies its capacity by `mul` (greater than 1) as text
is appended; the capacity (greater than 0) always leaves one slot beyond the
content length. `str()` gives the content, `len()` its length, and
`capacity` and `mul` are readable.

```python
from scrapkit.string_buffer import StringBuffer

buffer = StringBuffer(4, 2.0)
buffer.add("hello ")
buffer.add("world")
str(buffer)   # "hello world"
len(buffer)   # 11
```

## What this package does not do

scrapkit only provides the helpers above. It does not download pages,
extract links, map MIME types to file extensions, or run any scraping
sessions, and it installs no command-line program.