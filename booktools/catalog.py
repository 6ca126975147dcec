"""Gettext PO catalogs: messages, metadata, parsing and writing."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field, fields
from pathlib import Path

_HEADER_FIELDS = (
    ("Project-Id-Version", "project_id_version"),
    ("POT-Creation-Date", "pot_creation_date"),
    ("PO-Revision-Date", "po_revision_date"),
    ("Last-Translator", "last_translator"),
    ("Language-Team", "language_team"),
    ("MIME-Version", "mime_version"),
    ("Content-Type", "content_type"),
    ("Content-Transfer-Encoding", "content_transfer_encoding"),
    ("Language", "language"),
    ("Plural-Forms", "plural_rules"),
)

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}
_QUOTES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}

_KEYWORD = re.compile(r'^(msgctxt|msgid_plural|msgid|msgstr(?:\[\d+\])?)\s+(".*)$')
_PIECES = re.compile(r"[^\n]*\n|[^\n]+")


class PoParseError(ValueError):
    """Raised when text is not a valid PO file."""


@dataclass
class Metadata:
    """The header fields of a catalog."""

    project_id_version: str = ""
    pot_creation_date: str = ""
    po_revision_date: str = ""
    last_translator: str = ""
    language_team: str = ""
    mime_version: str = ""
    content_type: str = ""
    content_transfer_encoding: str = ""
    language: str = ""
    plural_rules: str = ""

    def dump(self) -> str:
        """Return the header as the msgstr of the header entry."""
        return "".join(f"{key}: {getattr(self, attr)}\n" for key, attr in _HEADER_FIELDS)

    @classmethod
    def parse(cls, text: str) -> Metadata:
        """Read header fields from the msgstr of a header entry."""
        attrs = dict(_HEADER_FIELDS)
        values = {}
        for line in text.split("\n"):
            key, sep, value = line.partition(":")
            if sep and key.strip() in attrs:
                values[attrs[key.strip()]] = value.strip()
        return cls(**values)


@dataclass
class PoMessage:
    """One entry of a catalog."""

    msgid: str
    msgstr: str = ""
    source: str = ""
    flags: list[str] = field(default_factory=list)
    msgctxt: str | None = None
    msgid_plural: str | None = None
    msgstr_plural: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    extracted_comments: list[str] = field(default_factory=list)

    @property
    def is_fuzzy(self) -> bool:
        return "fuzzy" in self.flags

    @property
    def is_plural(self) -> bool:
        return self.msgid_plural is not None


class Catalog:
    """An ordered collection of messages, at most one per msgid and context."""

    def __init__(self, metadata: Metadata | None = None, messages=()) -> None:
        self.metadata = metadata if metadata is not None else Metadata()
        self._messages: list[PoMessage] = []
        self._index: dict[tuple[str | None, str], int] = {}
        for message in messages:
            self.append_or_update(message)

    def find_message(self, msgid: str) -> PoMessage | None:
        """Return the context-free message with this msgid, if any."""
        position = self._index.get((None, msgid))
        return None if position is None else self._messages[position]

    def append_or_update(self, message: PoMessage) -> None:
        """Add a message, replacing one with the same msgid and context."""
        key = (message.msgctxt, message.msgid)
        position = self._index.get(key)
        if position is None:
            self._index[key] = len(self._messages)
            self._messages.append(message)
        else:
            self._messages[position] = message

    def __iter__(self) -> Iterator[PoMessage]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)


def _unquote(token: str, lineno: int) -> str:
    if len(token) < 2 or token[0] != '"' or token[-1] != '"':
        raise PoParseError(f"line {lineno}: expected a quoted string, got {token!r}")
    out = []
    chars = iter(token[1:-1])
    for ch in chars:
        if ch == '"':
            raise PoParseError(f"line {lineno}: unescaped quote in {token!r}")
        if ch == "\\":
            escape = next(chars, None)
            if escape is None:
                raise PoParseError(f"line {lineno}: unterminated string {token!r}")
            if escape not in _ESCAPES:
                raise PoParseError(f"line {lineno}: unknown escape \\{escape}")
            out.append(_ESCAPES[escape])
        else:
            out.append(ch)
    return "".join(out)


def _quote(text: str) -> str:
    return "".join(_QUOTES.get(ch, ch) for ch in text)


class _EntryBuilder:
    def __init__(self) -> None:
        self.fields: dict[str, str] = {}
        self.sources: list[str] = []
        self.flags: list[str] = []
        self.comments: list[str] = []
        self.extracted: list[str] = []
        self.current: str | None = None
        self.lineno = 0

    @property
    def has_msgstr(self) -> bool:
        return any(key.startswith("msgstr") for key in self.fields)

    def add_comment(self, line: str) -> None:
        if line.startswith(("#~", "#|")):
            return
        if line.startswith("#:"):
            self.sources.append(line[2:].strip())
        elif line.startswith("#,"):
            self.flags.extend(f.strip() for f in line[2:].split(",") if f.strip())
        elif line.startswith("#."):
            self.extracted.append(line[2:].strip())
        else:
            text = line[1:]
            self.comments.append(text[1:] if text.startswith(" ") else text)

    def build(self) -> PoMessage:
        if "msgid" not in self.fields:
            raise PoParseError(f"line {self.lineno}: entry has no msgid")
        if not self.has_msgstr:
            raise PoParseError(f"line {self.lineno}: entry has no msgstr")
        indexed = sorted(
            (int(key[7:-1]), value)
            for key, value in self.fields.items()
            if key.startswith("msgstr[")
        )
        return PoMessage(
            msgid=self.fields["msgid"],
            msgstr=self.fields.get("msgstr", ""),
            source="\n".join(self.sources),
            flags=self.flags,
            msgctxt=self.fields.get("msgctxt"),
            msgid_plural=self.fields.get("msgid_plural"),
            msgstr_plural=[value for _, value in indexed],
            comments=self.comments,
            extracted_comments=self.extracted,
        )


def _parse_entries(text: str) -> Iterator[PoMessage]:
    builder = _EntryBuilder()
    for lineno, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        if not builder.fields and not builder.lineno:
            builder.lineno = lineno
        if not line:
            if builder.fields:
                yield builder.build()
                builder = _EntryBuilder()
            continue
        if line.startswith("#"):
            if builder.has_msgstr:
                yield builder.build()
                builder = _EntryBuilder()
                builder.lineno = lineno
            builder.add_comment(line)
            continue
        match = _KEYWORD.match(line)
        if match:
            keyword, quoted = match.groups()
            if keyword in ("msgctxt", "msgid") and builder.has_msgstr:
                yield builder.build()
                builder = _EntryBuilder()
                builder.lineno = lineno
            if keyword in builder.fields:
                raise PoParseError(f"line {lineno}: duplicate {keyword}")
            builder.fields[keyword] = _unquote(quoted, lineno)
            builder.current = keyword
            continue
        if line.startswith('"'):
            if builder.current is None:
                raise PoParseError(f"line {lineno}: string without a keyword")
            builder.fields[builder.current] += _unquote(line, lineno)
            continue
        raise PoParseError(f"line {lineno}: unexpected text {line!r}")
    if builder.fields:
        yield builder.build()


def parse_po(text: str) -> Catalog:
    """Parse the text of a PO file into a catalog."""
    catalog = Catalog()
    header_seen = False
    for message in _parse_entries(text):
        if message.msgid == "" and message.msgctxt is None and not header_seen:
            catalog.metadata = Metadata.parse(message.msgstr)
            header_seen = True
        else:
            catalog.append_or_update(message)
    return catalog


def load_po(path) -> Catalog:
    """Read and parse a PO file."""
    return parse_po(Path(path).read_text(encoding="utf-8"))


def _dump_field(keyword: str, value: str) -> list[str]:
    pieces = _PIECES.findall(value)
    if len(pieces) > 1:
        return [f'{keyword} ""'] + [f'"{_quote(piece)}"' for piece in pieces]
    return [f'{keyword} "{_quote(value)}"']


def _dump_entry(message: PoMessage) -> str:
    lines = [f"# {c}" if c else "#" for c in message.comments]
    lines += [f"#. {c}" for c in message.extracted_comments]
    if message.source:
        lines += [f"#: {s}" for s in message.source.split("\n")]
    if message.flags:
        lines.append("#, " + ", ".join(message.flags))
    if message.msgctxt is not None:
        lines += _dump_field("msgctxt", message.msgctxt)
    lines += _dump_field("msgid", message.msgid)
    if message.is_plural:
        lines += _dump_field("msgid_plural", message.msgid_plural)
        plurals = message.msgstr_plural or ["", ""]
        for number, value in enumerate(plurals):
            lines += _dump_field(f"msgstr[{number}]", value)
    else:
        lines += _dump_field("msgstr", message.msgstr)
    return "\n".join(lines) + "\n"


def dump_po(catalog: Catalog) -> str:
    """Return the text of a PO file holding the catalog."""
    entries = [_dump_entry(PoMessage(msgid="", msgstr=catalog.metadata.dump()))]
    entries += [_dump_entry(message) for message in catalog]
    return "\n".join(entries)


def write_po(catalog: Catalog, path) -> None:
    """Write the catalog to a PO file."""
    Path(path).write_text(dump_po(catalog), encoding="utf-8")


__all__ = [
    "Catalog",
    "Metadata",
    "PoMessage",
    "PoParseError",
    "dump_po",
    "load_po",
    "parse_po",
    "write_po",
]