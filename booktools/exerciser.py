"""Write code blocks marked with a file comment out to files."""

from __future__ import annotations

import json
import logging
import shutil
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

from markdown_it import MarkdownIt

logger = logging.getLogger(__name__)

FILENAME_START = "<!-- File "
FILENAME_END = " -->"


def _filename_from_html(html: str) -> str | None:
    html = html.strip()
    if (
        html.startswith(FILENAME_START)
        and html.endswith(FILENAME_END)
        and len(html) >= len(FILENAME_START) + len(FILENAME_END)
    ):
        return html[len(FILENAME_START) : len(html) - len(FILENAME_END)]
    return None


def _html_fragments(tokens) -> Iterator[tuple[str, str | None]]:
    """Yield ("html", text) and ("code", content) events in document order."""
    for token in tokens:
        if token.type == "html_block":
            for line in token.content.splitlines():
                yield "html", line
        elif token.type == "inline":
            for child in token.children or []:
                if child.type == "html_inline":
                    yield "html", child.content
        elif token.type in ("fence", "code_block"):
            yield "code", token.content


def process(output_directory, input_contents: str) -> None:
    """Write each code block preceded by a ``<!-- File name -->`` comment.

    Code blocks without such a comment, and comments not followed by a code
    block, are ignored.
    """
    output_directory = Path(output_directory)
    tokens = MarkdownIt("commonmark").parse(input_contents)
    next_filename: str | None = None
    for kind, text in _html_fragments(tokens):
        if kind == "html":
            filename = _filename_from_html(text)
            if filename is not None:
                next_filename = filename
                logger.info("Next file: %r", next_filename)
        elif next_filename is not None:
            full_filename = output_directory / next_filename
            logger.info("Opening %s", full_filename)
            full_filename.parent.mkdir(parents=True, exist_ok=True)
            with open(full_filename, "w", encoding="utf-8", newline="") as output:
                output.write(text)
            next_filename = None


def _iter_items(items: Iterable) -> Iterator:
    for item in items:
        yield item
        if isinstance(item, dict) and "Chapter" in item:
            yield from _iter_items(item["Chapter"].get("sub_items") or [])


def process_all(book, output_directory) -> None:
    """Process every chapter of a book into a directory named after it."""
    output_directory = Path(output_directory)
    items = book.get("sections", []) if isinstance(book, dict) else book
    for item in _iter_items(items):
        if not (isinstance(item, dict) and "Chapter" in item):
            continue
        chapter = item["Chapter"]
        logger.debug("Chapter %r / %r", chapter.get("path"), chapter.get("source_path"))
        chapter_path = chapter.get("path")
        if chapter_path is None:
            continue
        stem = Path(chapter_path).stem
        if not stem:
            raise ValueError(f"Chapter {chapter_path!r} has no file stem")
        process(output_directory / stem, chapter.get("content", ""))


def _output_directory(context) -> Path:
    if not isinstance(context, dict):
        raise ValueError("Parsing stdin: expected a JSON object")
    config = context.get("config") or {}
    renderer = (config.get("output") or {}).get("exerciser")
    if renderer is None:
        raise ValueError("Missing output.exerciser configuration")
    if "output-directory" not in renderer:
        raise ValueError(
            "Missing output.exerciser.output-directory configuration value"
        )
    value = renderer["output-directory"]
    if not isinstance(value, str):
        raise ValueError("Expected a string for output.exerciser.output-directory")
    return Path(value)


def main(argv=None) -> int:
    """Render a book's marked code blocks to files; the context comes on stdin."""
    logging.basicConfig()
    try:
        try:
            context = json.load(sys.stdin)
        except ValueError as err:
            raise ValueError(f"Parsing stdin: {err}") from err
        output_directory = _output_directory(context)
        shutil.rmtree(output_directory, ignore_errors=True)
        try:
            output_directory.mkdir()
        except OSError as err:
            raise OSError(
                f"Failed to create output directory {str(output_directory)!r}: {err}"
            ) from err
        process_all(context.get("book") or {}, output_directory)
    except (ValueError, OSError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())