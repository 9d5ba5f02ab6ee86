from collections.abc import Mapping
from dataclasses import dataclass

MAX_PENDING = 1023

ESCAPE = 0x1B
BACKSPACE = (0x7F, 0x08)
ENTER = (0x0D, 0x0A)
CSI = ord("[")


@dataclass(frozen=True)
class CommandReady:
    text: str


@dataclass(frozen=True)
class ScrollUp:
    pass


@dataclass(frozen=True)
class ScrollDown:
    pass


type Event = CommandReady | ScrollUp | ScrollDown

ARROWS: Mapping[int, Event] = {
    ord("A"): ScrollUp(),
    ord("B"): ScrollDown(),
}


class CommandParser:
    """Turns raw input bytes into prompt edits and editor events.

    Printable characters and backspace only change ``pending``. Enter emits a
    ``CommandReady`` carrying the pending text, which stays in place until
    ``clear`` is called. An escape byte swallows the next two bytes: ``[A``
    and ``[B`` become scroll events, anything else is dropped.
    """

    pending: str
    max_length: int
    lookahead: list[int] | None

    def __init__(self, max_length: int = MAX_PENDING):
        self.pending = ""
        self.max_length = max_length
        self.lookahead = None

    @property
    def in_escape(self) -> bool:
        return self.lookahead is not None

    def feed(self, byte: int) -> Event | None:
        if self.lookahead is not None:
            return self.feed_escape(byte)

        if byte == ESCAPE:
            self.lookahead = []
        elif byte in ENTER:
            return CommandReady(self.pending)
        elif byte in BACKSPACE:
            self.pending = self.pending[:-1]
        elif 0x20 <= byte < 0x7F:
            if len(self.pending) < self.max_length:
                self.pending += chr(byte)

        return None

    def feed_escape(self, byte: int) -> Event | None:
        assert self.lookahead is not None
        self.lookahead.append(byte)
        if len(self.lookahead) < 2:
            return None

        first, second = self.lookahead
        self.lookahead = None

        if first != CSI:
            return None
        return ARROWS.get(second)

    def abandon_escape(self) -> None:
        self.lookahead = None

    def clear(self) -> None:
        self.pending = ""
