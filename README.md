# bmplab

A small toolkit for uncompressed Windows BMP images. It reads and writes
8-bit greyscale and 24-bit colour BMP files. A few commands use it to copy
and adjust images. It needs nothing beyond the Python standard library
(Python 3.10 or later).

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Reading and writing lines: `bmplab.bmp_io`

Lines are read and written one at a time, bottom line first, as they are
stored in the file. Colour samples are interleaved in BGR order. Line padding
to a multiple of four bytes is skipped on reading and added on writing.

```python
from bmplab.bmp_io import BmpReader, BmpWriter

with BmpReader("in.bmp") as reader:
    width, height = reader.cols, reader.rows
    components = reader.num_components   # 1 or 3
    lines = list(reader)                 # or reader.read_line() per line

with BmpWriter("out.bmp", width, height, components) as writer:
    for line in lines:
        writer.write_line(line)
```

`read_bmp(path)` returns `(width, height, num_components, lines)`.
`write_bmp(path, width, height, num_components, lines)` writes a whole file.
A greyscale file is written with an identity grey palette.

Errors:

- `BmpHeaderError`: the file does not start with `BM`, or its data offset
  lies inside the header.
- `BmpTruncatedError`: the header or image data ends early, or a write fails.
- `BmpUnsupportedError`: the file is not 8-bit or 24-bit, or a writer is
  asked for a number of components other than 1 or 3.
- `BmpNotOpenError`: a reader or writer is used after it is closed, or
  after all of its lines have been read or written.

All four derive from `BmpError`. A file that cannot be opened raises the
usual `OSError` (for example `FileNotFoundError`). `write_line` raises
`ValueError` if a line does not hold exactly `num_components * width` bytes.

## Component planes: `bmplab.image`

`read_image(path)` returns an `Image` with one `Component` per channel, in
BGR order for colour images. Each component keeps its samples in a buffer
with a border of 16 samples on every side. Rows are numbered from the top.
`Component.get(row, col)` and `Component.set(row, col, value)` reach into the
border with negative indices or indices past the edge. Going beyond the
border raises `IndexError`. `Component.row(row)` returns one row without
the border.

`Image.add(value)` adds `value` to every sample of the first component. A
sample whose sum would exceed 255 is left unchanged. `Image.write_bmp(path)`
saves the image. Samples outside 0..255 keep only their low eight bits, and
a `RuntimeWarning` reports how many there were.

## Commands

    bmp-copy IN.bmp OUT.bmp      # copy a BMP image
    bmp-halve IN.bmp OUT.bmp     # copy, halving one channel
    bmp-brighten IMAGE.bmp       # add 60 to the first component, in place
    bmp-hello 42                 # print "Hello, my argument is 42"

- `bmp-copy` reads the whole input, then writes it unchanged.
- `bmp-halve` halves the green sample of every pixel except the last one in
  each line of a colour image. For a greyscale image it halves every sample.
- `bmp-brighten` uses `Image.add` and `Image.write_bmp` on the named file.
  For a colour image the first component is blue.
- `bmp-hello` reads the integer at the start of its first argument. With no
  argument it prints nothing.

Each command prints a message to standard error and exits with status 1 on
failure.

## Limitations

- Only uncompressed 8-bit and 24-bit files are handled.
- The compression field is not checked.
- On reading, an 8-bit file's palette is skipped and its samples are
  returned as raw palette indices.
- Files stored top-down (negative height) yield no lines.
- There is no viewer and no support for other image formats.