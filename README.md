# sckit

A collection of small, dependency-free data structures and utilities.

| Module             | What it offers                                                        |
|--------------------|-----------------------------------------------------------------------|
| `sckit.array`      | `Array`: a growable array with a size bound and an `oom` flag         |
| `sckit.heap`       | `Heap`, `HeapItem`: a min-heap keyed by integers                      |
| `sckit.buffer`     | `Buffer`, `ErrorFlag`, `WrapFlag`: a little-endian binary buffer      |
| `sckit.bufstr`     | Strings, blobs and formatted text stored in a `Buffer`                |
| `sckit.crc32`      | `crc32c()`: CRC-32C (Castagnoli) checksums, computable in pieces      |
| `sckit.cond`       | `Cond`: hand one value from one thread to another                     |
| `sckit.ini`        | An INI reader with sections, comments and continuation lines          |
| `sckit.linkedlist` | `LinkedList`, `ListNode`: a doubly linked list of caller-owned nodes  |

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Array

```python
from sckit.array import Array

arr = Array(["item0", "item1", "item2"])
arr.delete(0)
print(list(arr))        # ['item1', 'item2']
print(arr.last())       # item2
```

`Array` supports `len()`, indexing and iteration, plus `add`, `delete`,
`delete_unordered` (moves the last element into the freed slot),
`delete_last`, `sort(key=None)` and `clear`. Capacity starts at 8 and
doubles; `cap` reports it. With `max_size` set, an `add` that would need to
grow past half of that bound stores nothing and sets `oom` to true until the
next successful `add` or `clear`.

## Heap

```python
from sckit.heap import Heap

heap = Heap()
for priority, name in [(1, "first"), (4, "fourth"), (5, "fifth"), (3, "third"), (2, "second")]:
    heap.add(priority, name)

while (item := heap.pop()) is not None:
    print(item.key, item.data)   # lowest key first
```

`peek()` returns the smallest `HeapItem` without removing it; `peek()` and
`pop()` return `None` on an empty heap. For a max-heap, negate the keys when
adding and again after popping. Growing beyond half of `max_size`, or asking
for an initial `cap` above it, raises `MemoryError`.

## Buffer

```python
from sckit.buffer import Buffer
from sckit import bufstr

buf = Buffer(1024)
buf.put_32(16)
bufstr.put_str(buf, "test")
bufstr.put_fmt(buf, "value is %d", 3)

print(buf.get_32())          # 16
print(bufstr.get_str(buf))   # test
print(bufstr.get_str(buf))   # value is 3
```

Values are little-endian. `put_*` appends and grows the buffer in 4096-byte
steps; `get_*` consumes; `peek_*(pos=None)` reads without consuming;
`set_*(value, pos=None)` overwrites without growing or advancing.

Errors do not raise. A read past the written data returns zero (or zero
bytes), and the `err` property gains `ErrorFlag.CORRUPT`; growth past
`limit` gains `ErrorFlag.OOM`. The flag is sticky: later reads and writes
fail too, so a whole message can be decoded and checked once at the end
with the `valid` property. `clear()` resets positions and flags.

```python
buf = Buffer(16)
buf.put_32(16)
buf.get_32()
buf.get_32()        # nothing left: returns 0
print(buf.valid)    # False
```

Other members: `cap`, `limit` (settable), `rpos` and `wpos` (settable, with
range checks), `size`, `quota`, `reserve`, `shrink`, `compact`,
`mark_read`, `mark_write`, `at`, `rbuf`, `wbuf`, `move_from` (copies as
much as fits without growing), `peek_data`, `set_data`, `get_data`,
`put_raw`, `put_bool`/`get_bool` and `put_double`/`get_double`.

`Buffer.wrap(data, flags)` builds a buffer over existing bytes.
`WrapFlag.REF` uses a `bytearray` in place and never grows it;
`WrapFlag.DATA` makes the contents readable; `WrapFlag.READ` is both.

### Strings, blobs and text

`sckit.bufstr` stores a string as an 8-byte length, the UTF-8 bytes and a
NUL byte; `None` is stored as the length marker alone.

- `put_str(buf, value)`, `put_str_len(buf, value, length)`, `get_str(buf)`
- `put_fmt(buf, fmt, *args)`: writes `fmt % args` as a string
- `put_blob(buf, data)`, `get_blob(buf, length)`
- `put_text(buf, fmt, *args)`: appends to a plain NUL-terminated text
- `str_len(value)`, `blob_len(data)`: encoded sizes

```python
from sckit.buffer import Buffer, WrapFlag
from sckit import bufstr

buf = Buffer.wrap(bytearray(128), WrapFlag.REF)
bufstr.put_text(buf, "Hello")
bufstr.put_text(buf, " world")
print(bytes(buf.rbuf()))     # b'Hello world\x00'
```

## CRC-32C

```python
from sckit.crc32 import crc32c

data = bytes(100)
partial = crc32c(data[:10])
print(crc32c(data[10:], partial) == crc32c(data))   # True
```

## INI files

```python
from sckit.ini import parse_string, iter_items

text = "[Network]\nhostname = example.com\nport = 443\n"

def on_item(item):
    print(item.line, item.section, item.key, item.value)

count = parse_string(text, on_item)   # number of items handled

for item in iter_items(text.splitlines()):
    ...
```

`parse(lines, on_item)` takes any iterable of lines and `parse_file(path,
on_item)` reads a file; both return the number of items handled.
`;` and `#` start comments (at the start of a line, or after a space); keys
end at `=` or `:`; an indented line after an item is reported as another
value of the same key; a leading byte order mark is ignored.

A malformed line raises `IniParseError`; a callback that returns a truthy
value stops parsing with `IniAbortError`, whose `result` holds that value.
Both derive from `IniError` and carry the `line` number. File errors
propagate as `OSError`. The parser only reads: there is no writer.

## Condition handoff

```python
import threading
from sckit.cond import Cond

cond = Cond()
threading.Thread(target=cond.signal, args=("test",)).start()
print(cond.wait())   # test
```

A signal sent before `wait()` is called is kept until it is collected.

## Linked list

```python
from sckit.linkedlist import LinkedList, ListNode

users = LinkedList()
for name in ["first", "second", "third"]:
    users.add_tail(ListNode(name))

print([node.value for node in users])            # ['first', 'second', 'third']
print([node.value for node in reversed(users)])  # ['third', 'second', 'first']
```

Members: `add_head`, `add_tail`, `add_after`, `add_before`, `pop_head`,
`pop_tail`, `remove`, `clear`, `head`, `tail`, `is_empty` and `len()`.
Adding a node that is already in a list moves it rather than duplicating
it. Nodes may be removed while the list is being iterated.

## What this package does not do

It is a library only: it installs no command-line tools, and the INI module
reads configuration but does not write it.