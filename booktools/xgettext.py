"""Book renderer that extracts translatable messages into a PO template."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

from .catalog import Catalog, Metadata, PoMessage, write_po
from .extract import extract_msgs


def add_message(catalog: Catalog, msgid: str, source: str) -> None:
    """Add ``msgid`` with ``source``, appending to the sources of an existing entry."""
    existing = catalog.find_message(msgid)
    sources = f"{existing.source}\n{source}" if existing is not None else source
    catalog.append_or_update(PoMessage(msgid=msgid, source=sources))


def _iter_items(items: Iterable) -> Iterator:
    for item in items:
        yield item
        if isinstance(item, dict) and "Chapter" in item:
            yield from _iter_items(item["Chapter"].get("sub_items") or [])


def _count_lines(text: str) -> int:
    return text.count("\n") + (1 if text and not text.endswith("\n") else 0)


def create_catalog(context: dict) -> Catalog:
    """Build a catalog of summary titles and chapter messages of the book."""
    config = context.get("config") or {}
    book_cfg = config.get("book") or {}
    metadata = Metadata(
        mime_version="1.0",
        content_type="text/plain; charset=UTF-8",
        content_transfer_encoding="8bit",
    )
    if book_cfg.get("title") is not None:
        metadata.project_id_version = book_cfg["title"]
    if book_cfg.get("language") is not None:
        metadata.language = book_cfg["language"]
    catalog = Catalog(metadata)

    items = list(_iter_items((context.get("book") or {}).get("sections") or []))

    # Items come in summary order, so searching onward from the last match
    # gives each title the line it appears on.
    src = Path(book_cfg.get("src") or "src")
    summary_path = src / "SUMMARY.md"
    summary = (Path(context.get("root") or ".") / summary_path).read_text(encoding="utf-8")
    last_idx = 0
    for item in items:
        if not isinstance(item, dict):
            continue
        if "Chapter" in item:
            line = item["Chapter"].get("name", "")
        elif "PartTitle" in item:
            line = item["PartTitle"]
        else:
            continue
        idx = summary.find(line, last_idx)
        if idx < 0:
            raise ValueError(
                f"Could not find {line!r} in SUMMARY.md after line "
                f"{_count_lines(summary[:last_idx])} -- "
                "please remove any formatting from SUMMARY.md"
            )
        last_idx = idx
        add_message(catalog, line, f"{summary_path}:{_count_lines(summary[:last_idx])}")

    for item in items:
        if not (isinstance(item, dict) and "Chapter" in item):
            continue
        chapter = item["Chapter"]
        if chapter.get("path") is None:
            continue
        path = src / chapter["path"]
        content = chapter.get("content", "")
        for msg in extract_msgs(content):
            add_message(catalog, msg.text(content), f"{path}:{msg.line}")

    return catalog


def _pot_file(context: dict) -> str:
    renderer = ((context.get("config") or {}).get("output") or {}).get("xgettext")
    if renderer is None:
        raise ValueError("Could not read output.xgettext configuration")
    if "pot-file" not in renderer:
        raise ValueError("Missing output.xgettext.pot-file config value")
    value = renderer["pot-file"]
    if not isinstance(value, str):
        raise ValueError("Expected a string for output.xgettext.pot-file")
    return value


def main(argv=None) -> int:
    """Write the book's messages to a PO template; the context comes on stdin."""
    try:
        try:
            context = json.load(sys.stdin)
        except ValueError as err:
            raise ValueError(f"Parsing stdin: {err}") from err
        if not isinstance(context, dict):
            raise ValueError("Parsing stdin: expected a JSON object")
        pot_file = _pot_file(context)
        destination = Path(context.get("destination") or ".")
        try:
            destination.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise OSError(f"Could not create {destination}: {err}") from err
        output_path = destination / pot_file
        try:
            catalog = create_catalog(context)
        except (ValueError, OSError) as err:
            raise ValueError(f"Extracting messages: {err}") from err
        try:
            write_po(catalog, output_path)
        except OSError as err:
            raise OSError(f"Writing messages to {output_path}: {err}") from err
    except (ValueError, OSError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())