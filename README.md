# booktools

Helpers for Markdown books built with mdbook. The package has three parts:

* **Translation.** `mdbook-xgettext` collects the translatable messages of a
  book into a PO template. `mdbook-gettext` puts the translations from an
  `xx.po` file back into the book.
* **Exercises.** `mdbook-exerciser` writes out code blocks that are marked
  with a file-name comment, so that readers get ready-made exercise files.
* **Worked exercises.** These are small modules such as a Luhn checksum,
  path-prefix matching, a text GUI, dining philosophers and a link checker.
  Most of them can be used as a library and started as a command.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Translating a book

### Extracting messages

Add the renderer to `book.toml`:

```toml
[output.xgettext]
pot-file = "messages.pot"
```

mdbook passes the render context to `mdbook-xgettext` as JSON on standard
input. The command writes the catalog to `<destination>/<pot-file>`, creating
the destination directory if needed. The header takes its
`Project-Id-Version` from the book title and its `Language` from the book
language.

Chapter names and part titles are looked up in `<src>/SUMMARY.md`, in book
order, and get the line they appear on there as their source. A title that
cannot be found is an error. Each top-level paragraph, heading, list, block
quote, table, code block and HTML block of the chapters becomes one message,
with `path:line` as its source. When a message occurs more than once, all its
sources are listed together.

### Applying translations

Add the preprocessor to `book.toml` and set the language:

```toml
[book]
language = "ko"

[preprocessor.gettext]
po-dir = "po"   # optional, "po" is the default
```

`mdbook-gettext` reads `[context, book]` as JSON on standard input and writes
the translated book to standard output. It loads `<root>/<po-dir>/<language>.po`
and replaces every message of chapter contents, chapter names and part titles
that has a translation which is not empty, not marked fuzzy and not a plural
entry. Text between messages, such as blank lines, is kept as it is. The book
is returned unchanged when no language is set or when the PO file is missing.
A warning goes to standard error when the calling mdbook version is not
compatible with 0.4.28.

The preprocessor supports every renderer except `xgettext`:
`mdbook-gettext supports xgettext` exits with status 1, and
`mdbook-gettext supports <other>` with status 0.

### From Python

```python
from booktools.extract import extract_msgs
from booktools.catalog import load_po
from booktools.gettext import translate

document = "First paragraph.\n\nSecond paragraph.\n"
for message in extract_msgs(document):
    print(message.line, repr(message.text(document)))

catalog = load_po("po/ko.po")
print(translate(document, catalog))
```

`booktools.extract` also has `LineIndex`, which maps an offset in a document
to its 1-based line number.

`booktools.catalog` reads and writes PO files with `parse_po`, `load_po`,
`dump_po` and `write_po`; malformed input raises `PoParseError`. A `Catalog`
holds a `Metadata` header and `PoMessage` entries, at most one per msgid and
context, and has `find_message(msgid)` (context-free entries only) and
`append_or_update(message)`. `booktools.xgettext` offers `create_catalog(context)`
and `add_message(catalog, msgid, source)`; `booktools.gettext` offers
`translate_book(context, book)`.

## Extracting exercise files

Configure the renderer:

```toml
[output.exerciser]
output-directory = "exercises"
```

In a chapter, put a comment right before a code block:

````markdown
<!-- File src/main.rs -->

```rust
fn main() {}
```
````

`mdbook-exerciser` reads the render context on standard input, removes the
output directory and creates it again. It then writes each marked code block
to `<output-directory>/<chapter file stem>/<file name>`, creating parent
directories. Code blocks without a comment are ignored, and so are comments
that no code block follows. The same work is available as
`booktools.exerciser.process(output_directory, text)` for one chapter and
`booktools.exerciser.process_all(book, output_directory)` for a whole book.

## Worked exercises

| Command                  | Module                    | What it shows                                          |
|--------------------------|---------------------------|--------------------------------------------------------|
| `booktools-library`      | `booktools.library`       | a book collection, `Library` and `Book`                |
| `booktools-matrix`       | `booktools.matrix`        | `transpose` and `pretty_print` of a matrix             |
| `booktools-luhn`         | `booktools.luhn`          | the Luhn checksum of each argument, `luhn(cc_number)`  |
| `booktools-gui`          | `booktools.gui`           | a text GUI drawn from `Window`, `Label`, `Button`      |
| `booktools-philosophers` | `booktools.philosophers`  | dining philosophers with threads and a queue, `dine`   |
| `booktools-links`        | `booktools.links`         | a recursive link checker from the URL given            |
| `booktools-dirs`         | `booktools.dirs`          | listing `.` with `DirectoryIterator`                   |

Some modules are libraries only:

* `booktools.geometry` has `Point`, `Polygon`, `Circle` and `perimeter(shape)`.
* `booktools.paths` has `prefix_matches(prefix, request_path)`. It matches
  request paths against prefixes such as `/v1/publishers/*/books`, where `*`
  stands for any single segment.
* `booktools.greetings` has `greeting(name)` and
  `wish_happy_birthday(name, years)`.

```python
from booktools.paths import prefix_matches
from booktools.geometry import Point

prefix_matches("/v1/publishers", "/v1/publishers/abc/books")  # True
Point(16, 16) + Point(-4, 3)                                    # Point(x=12, y=19)
```

## What the package does not do

The translation and exercise commands do not build books themselves: they
only handle the JSON that mdbook sends them. Plural PO entries and message
contexts are kept when catalogs are read and written, but are not used for
translating.