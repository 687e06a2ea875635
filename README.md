# workbench

A handful of small command-line tools and the library code behind them. The
package has no runtime dependencies and supports Python 3.10 and later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### grep-lite

Prints every line that matches a regular expression (Python `re` syntax,
matched anywhere in the line). Each line is prefixed with its zero-based
line number, as in `3: some text`. When no file is given, standard input is
read. An invalid pattern is reported as a usage error.

```
grep-lite PATTERN [INPUT]
grep-lite --version
```

### mandelbrot

Draws a text view of the Mandelbrot set over the region x from -2.0 to 1.0,
y from -1.0 to 1.0.

```
mandelbrot [--max-iters N] [--width W] [--height H]
```

The defaults are 100000 iterations, 100 columns and 24 rows. Each cell is
drawn by how soon its point escapes: ` ` (0–2), `.` (3–5), `•` (6–10),
`*` (11–30), `+` (31–100), `x` (101–200), `$` (201–400), `#` (401–700)
and `%` beyond.

### vfile

Demonstrates an in-memory file: a read while it is closed fails, then the
file is opened, read and closed, and its state and length are printed.

```
vfile
```

### chip8

Runs a small CHIP-8 program that calls an adding subroutine twice and prints
`5 + (10 * 2) + (10 * 2) = 45`.

```
chip8
```

### akv-mem

Works on an append-only key-value store kept in a single file, which is
created if missing. Keys and values are taken as UTF-8 text.

```
akv-mem FILE get KEY
akv-mem FILE delete KEY
akv-mem FILE insert KEY VALUE
akv-mem FILE update KEY VALUE
```

The action name is case-insensitive. `get` prints the stored value as a list
of byte values, for example `[98, 108, 117, 101]`; a missing key is reported
on standard error. Missing arguments or an unknown action print the usage and
exit with status 1.

## Library use

### `workbench.grep_lite`

`process_lines(lines, pattern)` takes any iterable of strings and a pattern
(string or compiled) and yields `(line_number, line)` pairs for the lines
that match, with line endings removed.

### `workbench.mandelbrot`

- `mandelbrot_at_point(cx, cy, max_iters)` returns the iteration at which the
  point escapes, or `max_iters`.
- `calculate_mandelbrot(max_iters, x_min, x_max, y_min, y_max, width, height)`
  returns a list of `height` rows of `width` escape counts.
- `render_mandelbrot(escape_vals)` returns the rows as lines of text.

```python
from workbench.mandelbrot import calculate_mandelbrot, render_mandelbrot

for line in render_mandelbrot(calculate_mandelbrot(1000, -2.0, 1.0, -1.0, 1.0, 60, 20)):
    print(line)
```

### `workbench.vfile`

`File(name, data=b"")` starts in `FileState.CLOSE`. `open()` and `close()`
change its state and return the file; `read()` returns its bytes, or raises
`FileNotOpenError` when the file is not open. `str(file)` gives
`<name, OPEN>` or `<name, CLOSED>`.

### `workbench.chip8`

`Cpu` holds 16 byte registers, 4096 bytes of memory and a 16-entry call
stack. `load(address, data)` copies bytes into memory (raising `ValueError`
if they do not fit) and `run()` executes from the current position until the
`0000` opcode. Supported instructions: `00E0` (ignored), `00EE`, `1nnn`,
`2nnn`, `3xkk`, `4xkk`, `5xy0`, `6xkk`, `7xkk` and `8xy0`–`8xy4`.

Errors derive from `CpuError`: `StackUnderflowError`, `StackOverflowError`
and `UnknownOpcodeError` for any other opcode. An addition whose result
exceeds 255 raises `OverflowError`.

```python
from workbench.chip8 import Cpu

cpu = Cpu()
cpu.registers[0] = 5
cpu.registers[1] = 10
cpu.load(0x000, bytes([0x80, 0x14]))
cpu.run()
print(cpu.registers[0])       # 15
```

### `workbench.actionkv`

`ActionKV(path)` opens (or creates) the store file and can be used as a
context manager. Call `load()` to build the in-memory index from the file.

- `insert(key, value)`, `update(key, value)` append a record and index it.
- `delete(key)` appends a record with an empty value, so `get` then returns
  `b""`.
- `get(key)` returns the latest indexed value or `None`.
- `get_at(position)` returns the `KeyValuePair` stored at a byte offset.
- `find(target)` scans the whole file and returns `(position, value)` for the
  last record with that key, or `None`.
- `insert_but_ignore_index(key, value)` appends and returns the offset
  without touching the index.
- `close()` closes the file.

Each record is written in this order:

- a little-endian CRC-32 checksum of key and value;
- the key length (32-bit, little-endian);
- the value length (32-bit, little-endian);
- the key bytes;
- the value bytes.

A record whose checksum does not match, or whose data is cut short, raises
`DataCorruptionError`.

```python
from workbench.actionkv import ActionKV

with ActionKV("data.akv") as store:
    store.load()
    store.insert(b"colour", b"blue")
    print(store.get(b"colour"))   # b'blue'
```

## Limitations

The store never compacts its file: old and deleted records stay on disk, and
a deleted key is still present with an empty value. The CHIP-8 core has no
display, keyboard, timers or program loader beyond `Cpu.load`.