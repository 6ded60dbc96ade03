"""A tiny text-mode widget toolkit."""

from __future__ import annotations

import io
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Protocol


class _Writer(Protocol):
    def write(self, text: str) -> object: ...


def _lines(text: str) -> list[str]:
    """Split text into lines; a final newline does not start a new line."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _center(text: str, width: int) -> str:
    padding = max(width - len(text), 0)
    left = padding // 2
    return " " * left + text + " " * (padding - left)


class Widget(ABC):
    """Something that can be drawn as text."""

    @abstractmethod
    def width(self) -> int:
        """Natural width of the widget."""

    @abstractmethod
    def draw_into(self, buffer: _Writer) -> None:
        """Draw the widget into a text buffer."""

    def draw(self) -> None:
        """Draw the widget on standard output."""
        buffer = io.StringIO()
        self.draw_into(buffer)
        print(buffer.getvalue())


class Label(Widget):
    """A piece of possibly multi-line text."""

    def __init__(self, label: str) -> None:
        self.label = label

    def width(self) -> int:
        return max((len(line) for line in _lines(self.label)), default=0)

    def draw_into(self, buffer: _Writer) -> None:
        buffer.write(f"{self.label}\n")


class Button(Widget):
    """A framed label with a callback."""

    def __init__(self, label: str, callback: Callable[[], object]) -> None:
        self.label = Label(label)
        self.callback = callback

    def width(self) -> int:
        return self.label.width() + 8

    def draw_into(self, buffer: _Writer) -> None:
        width = self.width()
        label = io.StringIO()
        self.label.draw_into(label)

        buffer.write(f"+{'-' * width}+\n")
        for line in _lines(label.getvalue()):
            buffer.write(f"|{_center(line, width)}|\n")
        buffer.write(f"+{'-' * width}+\n")


class Window(Widget):
    """A titled frame holding other widgets stacked vertically."""

    def __init__(self, title: str) -> None:
        self.title = title
        self.widgets: list[Widget] = []

    def add_widget(self, widget: Widget) -> None:
        """Append a widget to the window."""
        self.widgets.append(widget)

    def inner_width(self) -> int:
        """Width available inside the borders."""
        return max(
            len(self.title),
            max((widget.width() for widget in self.widgets), default=0),
        )

    def width(self) -> int:
        return self.inner_width() + 4

    def draw_into(self, buffer: _Writer) -> None:
        inner = io.StringIO()
        for widget in self.widgets:
            widget.draw_into(inner)

        inner_width = self.inner_width()
        buffer.write(f"+-{'-' * inner_width}-+\n")
        buffer.write(f"| {_center(self.title, inner_width)} |\n")
        buffer.write(f"+={'=' * inner_width}=+\n")
        for line in _lines(inner.getvalue()):
            buffer.write(f"| {line.ljust(inner_width)} |\n")
        buffer.write(f"+-{'-' * inner_width}-+\n")


def main(argv: list[str] | None = None) -> int:
    """Draw a demonstration window."""
    window = Window("Rust GUI Demo 1.23")
    window.add_widget(Label("This is a small text GUI demo."))
    window.add_widget(Button("Click me!", lambda: print("You clicked the button!")))
    window.draw()
    return 0


if __name__ == "__main__":
    sys.exit(main())