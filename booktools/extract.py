"""Extraction of translatable messages from Markdown documents."""

from __future__ import annotations

import re
from bisect import bisect_left
from dataclasses import dataclass

from markdown_it import MarkdownIt

# Blocks whose full text, from first to last line, forms one message.
_WHOLE_BLOCKS = frozenset(
    {
        "heading_open",
        "bullet_list_open",
        "ordered_list_open",
        "blockquote_open",
        "table_open",
        "fence",
        "code_block",
    }
)


@dataclass
class Message:
    """A translatable message: a span of a document and the line it starts on.

    Offsets are character offsets into the document; ``line`` begins at 1.
    """

    line: int
    start: int
    end: int

    def text(self, document: str) -> str:
        """Return the text of this message as a slice of ``document``."""
        return document[self.start : self.end]

    @property
    def span(self) -> range:
        """The range of document offsets this message covers."""
        return range(self.start, self.end)


class LineIndex:
    """Maps offsets in a document to 1-based line numbers."""

    def __init__(self, document: str) -> None:
        self._newlines = [match.start() for match in re.finditer("\n", document)]

    def line_number(self, offset: int) -> int:
        """Return the line number holding ``offset``."""
        return bisect_left(self._newlines, offset) + 1


def _parser() -> MarkdownIt:
    return MarkdownIt("commonmark").enable(["table", "strikethrough"])


class _Accumulator:
    """Collects messages from the top-level blocks of a document."""

    def __init__(self, document: str) -> None:
        self.document = document
        self.index = LineIndex(document)
        self.line_starts = [0] + [m.end() for m in re.finditer("\n", document)]
        self.msgs: list[Message] = []
        self.message_open = False

    def finish_message(self) -> None:
        self.message_open = False

    def push_message(self, start: int, end: int) -> None:
        if self.message_open and self.msgs:
            self.msgs[-1].end = end
            return
        self.msgs.append(Message(self.index.line_number(start), start, end))
        self.message_open = True

    def _line_bounds(self, number: int) -> tuple[int, int]:
        start = self.line_starts[number]
        if number + 1 < len(self.line_starts):
            return start, self.line_starts[number + 1] - 1
        return start, len(self.document)

    def _line_text(self, number: int) -> str:
        start, end = self._line_bounds(number)
        return self.document[start:end]

    def _last_line(self, begin: int, end: int) -> int:
        last = min(end, len(self.line_starts)) - 1
        while last > begin and not self._line_text(last).strip():
            last -= 1
        return last

    def _content_start(self, number: int) -> int:
        text = self._line_text(number)
        return self.line_starts[number] + len(text) - len(text.lstrip(" \t"))

    def _content_end(self, number: int) -> int:
        return self.line_starts[number] + len(self._line_text(number).rstrip())

    def whole_block(self, begin: int, end: int) -> None:
        last = self._last_line(begin, end)
        self.finish_message()
        self.push_message(self.line_starts[begin], self._line_bounds(last)[1])
        self.finish_message()

    def paragraph(self, begin: int, end: int) -> None:
        last = self._last_line(begin, end)
        self.finish_message()
        self.push_message(self._content_start(begin), self._content_end(last))
        self.finish_message()

    def html_block(self, begin: int, end: int) -> None:
        last = self._last_line(begin, end)
        self.push_message(self._content_start(begin), self._content_end(last))

    def run(self) -> list[Message]:
        for token in _parser().parse(self.document):
            if token.level != 0 or token.nesting == -1 or not token.map:
                continue
            begin, end = token.map
            if token.type in _WHOLE_BLOCKS:
                self.whole_block(begin, end)
            elif token.type == "paragraph_open":
                self.paragraph(begin, end)
            elif token.type == "html_block":
                self.html_block(begin, end)
        for msg in self.msgs:
            msg.end = msg.start + len(msg.text(self.document).rstrip("\n"))
        return self.msgs


def extract_msgs(document: str) -> list[Message]:
    """Extract the translatable messages of a Markdown document, in order."""
    return _Accumulator(document).run()