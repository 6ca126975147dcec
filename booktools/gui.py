"""A small text-mode widget toolkit: labels, buttons and windows."""

from __future__ import annotations

import io
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Protocol


class _Writer(Protocol):
    def write(self, text: str) -> object: ...


def _center(text: str, width: int) -> str:
    """Center ``text`` in ``width`` columns, with the odd space on the right."""
    padding = max(width - len(text), 0)
    left = padding // 2
    return " " * left + text + " " * (padding - left)


class Widget(ABC):
    """Something that can be drawn as lines of text."""

    @abstractmethod
    def width(self) -> int:
        """Natural width of the widget, in characters."""

    @abstractmethod
    def draw_into(self, buffer: _Writer) -> None:
        """Draw the widget into a writable text buffer."""

    def draw(self) -> None:
        """Draw the widget on standard output."""
        buffer = io.StringIO()
        self.draw_into(buffer)
        print(buffer.getvalue())


class Label(Widget):
    """Plain, possibly multi-line, text."""

    def __init__(self, label: str) -> None:
        self.label = label

    def width(self) -> int:
        return max((len(line) for line in self.label.splitlines()), default=0)

    def draw_into(self, buffer: _Writer) -> None:
        buffer.write(f"{self.label}\n")


class Button(Widget):
    """A framed label with an action run when it is clicked."""

    def __init__(self, label: str, callback: Callable[[], object]) -> None:
        self.label = Label(label)
        self.callback = callback

    def click(self) -> None:
        """Run the button's action."""
        self.callback()

    def width(self) -> int:
        return self.label.width() + 8

    def draw_into(self, buffer: _Writer) -> None:
        width = self.width()
        inner = io.StringIO()
        self.label.draw_into(inner)
        border = "+" + "-" * width + "+\n"
        buffer.write(border)
        for line in inner.getvalue().splitlines():
            buffer.write(f"|{_center(line, width)}|\n")
        buffer.write(border)


class Window(Widget):
    """A titled frame holding other widgets stacked vertically."""

    def __init__(self, title: str) -> None:
        self.title = title
        self.widgets: list[Widget] = []

    def add_widget(self, widget: Widget) -> None:
        """Append a widget below the existing ones."""
        self.widgets.append(widget)

    def width(self) -> int:
        return max(
            len(self.title),
            max((widget.width() for widget in self.widgets), default=0),
        )

    def draw_into(self, buffer: _Writer) -> None:
        inner = io.StringIO()
        for widget in self.widgets:
            widget.draw_into(inner)

        width = self.width()
        border = "+-" + "-" * width + "-+\n"
        buffer.write(border)
        buffer.write(f"| {_center(self.title, width)} |\n")
        buffer.write("+=" + "=" * width + "=+\n")
        for line in inner.getvalue().splitlines():
            buffer.write(f"| {line.ljust(width)} |\n")
        buffer.write(border)


def main(argv=None) -> int:
    """Draw a demo window with a label and a button."""
    window = Window("Text GUI Demo 1.23")
    window.add_widget(Label("This is a small text GUI demo."))
    window.add_widget(Button("Click me!", lambda: print("You clicked the button!")))
    window.draw()
    return 0


if __name__ == "__main__":
    sys.exit(main())