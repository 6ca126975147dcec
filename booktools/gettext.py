"""Book preprocessor that replaces text with translations from a PO file."""

from __future__ import annotations

import json
import re
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

from .catalog import Catalog, PoParseError, load_po
from .extract import extract_msgs

MDBOOK_VERSION = "0.4.28"

_VERSION = re.compile(
    r"(\d+)\.(\d+)\.(\d+)(-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?"
)


def _translation(catalog: Catalog, msgid: str) -> str:
    message = catalog.find_message(msgid)
    if message is None or message.is_fuzzy or message.is_plural or not message.msgstr:
        return msgid
    return message.msgstr


def translate(text: str, catalog: Catalog) -> str:
    """Replace each message of ``text`` with its translation, keeping the rest."""
    consumed = 0
    output = []
    for msg in extract_msgs(text):
        if consumed < msg.start:
            output.append(text[consumed : msg.start])
        output.append(_translation(catalog, msg.text(text)))
        consumed = msg.end
    output.append(text[consumed:])
    return "".join(output)


def _iter_items(items: Iterable) -> Iterator:
    for item in items:
        yield item
        if isinstance(item, dict) and "Chapter" in item:
            yield from _iter_items(item["Chapter"].get("sub_items") or [])


def translate_book(context: dict, book: dict) -> dict:
    """Translate chapter names, contents and part titles of ``book`` in place."""
    config = context.get("config") or {}
    language = (config.get("book") or {}).get("language")
    if language is None:
        return book

    cfg = (config.get("preprocessor") or {}).get("gettext")
    if cfg is None:
        raise ValueError("Could not read preprocessor.gettext configuration")
    po_dir = cfg.get("po-dir")
    if not isinstance(po_dir, str):
        po_dir = "po"
    path = Path(context.get("root") or ".") / po_dir / f"{language}.po"
    if not path.exists():
        return book

    try:
        catalog = load_po(path)
    except PoParseError as err:
        raise ValueError(f"Could not parse {str(path)!r} as PO file: {err}") from err

    for item in _iter_items(book.get("sections") or []):
        if not isinstance(item, dict):
            continue
        if "Chapter" in item:
            chapter = item["Chapter"]
            chapter["content"] = translate(chapter.get("content", ""), catalog)
            chapter["name"] = translate(chapter.get("name", ""), catalog)
        elif "PartTitle" in item:
            item["PartTitle"] = translate(item["PartTitle"], catalog)
    return book


def _parse_version(text: str) -> tuple[int, int, int, bool]:
    match = _VERSION.fullmatch(text)
    if match is None:
        raise ValueError(f"Invalid version {text!r}")
    major, minor, patch, pre = match.groups()
    return int(major), int(minor), int(patch), pre is not None


def _compatible(required: str, actual: str) -> bool:
    req_major, req_minor, req_patch, _ = _parse_version(required)
    major, minor, patch, prerelease = _parse_version(actual)
    if prerelease or (major, minor, patch) < (req_major, req_minor, req_patch):
        return False
    if req_major > 0:
        return major == req_major
    if req_minor > 0:
        return major == 0 and minor == req_minor
    return (major, minor, patch) == (req_major, req_minor, req_patch)


def _preprocess(stdin, stdout) -> None:
    try:
        data = json.load(stdin)
    except ValueError as err:
        raise ValueError(f"Unable to parse the input: {err}") from err
    if not (isinstance(data, list) and len(data) == 2):
        raise ValueError("Unable to parse the input: expected [context, book]")
    context, book = data
    book_version = context.get("mdbook_version", "")
    if not _compatible(MDBOOK_VERSION, book_version):
        print(
            "Warning: The gettext preprocessor was built against "
            f"mdbook version {MDBOOK_VERSION}, but we're being called "
            f"from version {book_version}",
            file=sys.stderr,
        )
    json.dump(translate_book(context, book), stdout)


def main(argv=None) -> int:
    """Run as a book preprocessor; ``supports <renderer>`` answers by exit code."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 2:
        if args[0] != "supports":
            print(f"Error: unexpected argument {args[0]!r}", file=sys.stderr)
            return 2
        return 1 if args[1] == "xgettext" else 0
    try:
        _preprocess(sys.stdin, sys.stdout)
    except (ValueError, OSError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())