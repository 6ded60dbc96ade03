# coursekit

Small, complete programs from a programming course. It also includes a tool
that pulls exercise starter files out of Markdown chapters.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Extracting exercise files

`coursekit-exerciser` works as a book renderer. It reads the book's render
context as JSON on standard input. The configuration must contain
`output.exerciser.output-directory`, and its value must be a string. That
directory is removed and created again. Each chapter found in the book's
`sections` then gets a subdirectory named after the stem of the chapter's
`path`. Nested `sub_items` chapters are included, and chapters without a path
are skipped. On a missing or malformed setting, the command prints
`Error: ...` to standard error and exits with status 1.

Inside a chapter, a comment of this form writes the contents of the next code
block to `src/main.rs` under the chapter's directory:

    <!-- File src/main.rs -->

The code block may be fenced or indented. Code blocks without such a comment
are ignored. So are comments that no code block follows.

The same work is available from Python:

```python
from coursekit.exerciser import process, process_all

process("out/chapter", markdown_text)      # one chapter's Markdown
process_all(book_dict, "out")              # a parsed book: {"sections": [...]}
```

## The exercises as a library

```python
from coursekit.luhn import luhn
from coursekit.prefix import prefix_matches
from coursekit.matrix import transpose
from coursekit.library import Book, Library
from coursekit.geometry import Point, Polygon, Circle, perimeter
from coursekit.greetings import greeting, wish_happy_birthday, analyze_numbers
from coursekit.compass import Mode, scale, cap, led_position
from coursekit.virtio import RequestType, VirtioBlockRequest

luhn(" 0 0 ")            # True  (spaces are ignored)
luhn("foo")              # False
prefix_matches("/v1/publishers/*/books", "/v1/publishers/foo/books")  # True

transpose([[101, 102, 103], [201, 202, 203], [301, 302, 303]])
# [[101, 201, 301], [102, 202, 302], [103, 203, 303]]

library = Library()
library.add_book(Book("Lord of the Rings", 1954))
library.add_book(Book("Alice's Adventures in Wonderland", 1865))
len(library)                 # 2
library.oldest_book().title  # "Alice's Adventures in Wonderland"

round(Point(12, 13).magnitude(), 2)   # 17.69
Point(16, 16) + Point(-4, 3)          # Point(x=12, y=19)
perimeter(Circle(Point(10, 20), 5))   # about 31.42

greeting("Bob")   # "Hello Bob, it is very nice to meet you!"

Mode.COMPASS.next()                   # Mode.ACCELEROMETER
scale(0, -700, 700, 0, 4)             # 2

VirtioBlockRequest(RequestType.FLUSH, sector=42).as_bytes()
# b'\x04\x00\x00\x00\x00\x00\x00\x00*\x00\x00\x00\x00\x00\x00\x00'
```

Other modules:

- `coursekit.gui`: a text-mode widget toolkit with `Label`, `Button` and
  `Window`. Each widget has a natural `width()` and draws itself with
  `draw_into(buffer)`, where the buffer is anything that has a `write` method.
  `draw()` prints the widget.
- `coursekit.directory`: `DirectoryIterator(path)` yields a directory's entry
  names, `.` and `..` first. It accepts `str` or `bytes` paths and works as a
  context manager. If the directory cannot be opened it raises `OSError`. A
  path that contains a NUL character raises `ValueError`.
- `coursekit.philosophers`: the dining philosophers, with threads
  (`dine(names, rounds)`) and with asyncio tasks
  (`await dine_async(names, rounds)`). Both return every thought in the order
  it was received. They need at least two names.
- `coursekit.linkcheck`: `check_links(url)` follows links within the same
  domain and requests external links once. It returns the URLs that did not
  answer with a 2xx status. A request that fails raises `LinkCheckError`.
  `extract_links(response)` resolves every `<a href>` of a page against the
  page's URL.
- `coursekit.chat`: a WebSocket chat. A `Broadcaster` fans each message out to
  its subscribers and keeps at most 16 messages per subscriber by default.
  The module also provides a connection handler (`handle_connection`), a
  server (`serve(host, port)`) and a client that sends lines from standard
  input (`run_client(uri)`).

## Commands

| Command                  | What it does                                                        |
|--------------------------|---------------------------------------------------------------------|
| `coursekit-exerciser`    | extract exercise files from a render context on standard input      |
| `coursekit-luhn [NUMBER]`| check a card number (a sample one by default) with the Luhn check   |
| `coursekit-transpose`    | print a 3×3 matrix and its transpose                                |
| `coursekit-library`      | demonstrate the book library                                        |
| `coursekit-gui`          | draw a small text window with a label and a button                  |
| `coursekit-ls [PATH]`    | list the entries of a directory (the current one by default)        |
| `coursekit-philosophers` | run the dining philosophers; `--async` uses asyncio, `--rounds N`   |
| `coursekit-linkcheck [URL]` | crawl links from a start page and report the ones that fail      |
| `coursekit-chat-server`  | start the chat server (`--host`, `--port`, default 127.0.0.1:2000)  |
| `coursekit-chat-client`  | connect to the chat server (`--uri`) and chat from standard input   |

## What it does not do

- `coursekit.compass` only maps sensor readings to a position on a 5×5 LED
  grid. It does not read a compass or an accelerometer, and it does not drive
  any display.
- `coursekit.virtio` only encodes a block request header. It does not talk to
  a block device.
- `coursekit.greetings` only builds and prints messages. It does not offer
  them as a service that other processes can call.