"""Coloured, tagged console output used throughout the game."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO, Any

RGB = tuple[int, int, int]

UNKNOWN_COLOUR: RGB = (255, 0, 0)

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_ITALIC = "\x1b[3m"


@dataclass(frozen=True)
class Context:
    """The kind of a console message: its tag and the colours it is shown in."""

    name: str
    text_colour: RGB | None = None
    title_colour: RGB | None = None
    separator_colour: RGB | None = None

    @property
    def text(self) -> RGB:
        return self.text_colour if self.text_colour is not None else UNKNOWN_COLOUR

    @property
    def title(self) -> RGB:
        return self.title_colour if self.title_colour is not None else self.text

    @property
    def separator(self) -> RGB:
        return self.separator_colour if self.separator_colour is not None else self.title


INFO = Context("info", (255, 255, 255), (255, 220, 255))
DEBUG = Context("debug", (238, 130, 238), (236, 149, 236))
DEBUG_HEADER = Context("debug", (255, 176, 255), (236, 149, 236))
NETWORK_INFO = Context("network", (72, 209, 204))
SUCCESS = Context("success", (124, 252, 0))
FAILURE = Context("failure", (255, 99, 71))
WARNING = Context("warning", (255, 225, 58))
ERROR = Context("error", (255, 99, 71))


def _paint(text: str, rgb: RGB, *emphasis: str, colour: bool) -> str:
    if not colour or not text:
        return text
    r, g, b = rgb
    return f"{''.join(emphasis)}\x1b[38;2;{r};{g};{b}m{text}{_RESET}"


def _owner_name(owner: Any) -> str:
    if owner is None:
        return ""
    if isinstance(owner, str):
        return owner
    if isinstance(owner, type):
        return owner.__name__
    return type(owner).__name__


def format_line(context: Context, message: str, owner: Any = None, colour: bool = False) -> str:
    """Build a line of the form ``[context|owner] message``."""
    owner_text = _owner_name(owner)
    return "".join(
        (
            _paint("[", context.separator, colour=colour),
            _paint(context.name, context.title, _BOLD, colour=colour),
            _paint("|" if owner_text else "", context.separator, colour=colour),
            _paint(owner_text, context.title, _ITALIC, colour=colour),
            _paint("]", context.separator, colour=colour),
            " ",
            _paint(message, context.text, colour=colour),
        )
    )


def log(
    context: Context,
    message: str,
    *args: Any,
    owner: Any = None,
    file: IO[str] | None = None,
) -> None:
    """Format ``message`` with ``args`` and write it as one tagged line."""
    stream = file if file is not None else sys.stdout
    text = message.format(*args) if args else str(message)
    isatty = getattr(stream, "isatty", None)
    colour = bool(isatty and isatty())
    stream.write(format_line(context, text, owner, colour) + "\n")