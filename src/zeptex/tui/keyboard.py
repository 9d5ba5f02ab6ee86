import os
import sys
from collections.abc import Callable
from dataclasses import dataclass
from types import FrameType


@dataclass(frozen=True)
class Resize:
    pass


type Input = int | Resize


def get_char() -> int | None:
    data = os.read(sys.stdin.fileno(), 1)
    if not data:
        return None
    (char,) = data
    return char


class Keyboard:
    """Single source of input: bytes from the terminal and resize events.

    The resize flag is level triggered. ``on_resize`` is installed as the
    SIGWINCH handler; it only sets the flag and, when a read is blocking,
    cancels it so ``get`` can report the resize before reading again.
    """

    read: Callable[[], int | None]
    resize_pending: bool
    reading: bool

    def __init__(self, read: Callable[[], int | None] = get_char):
        self.read = read
        self.resize_pending = False
        self.reading = False

    def get(self) -> Input | None:
        while True:
            if self.resize_pending:
                self.resize_pending = False
                return Resize()

            try:
                self.reading = True
                try:
                    return self.read()
                finally:
                    self.reading = False
            except Keyboard.CancelledError:
                continue

    def on_resize(self, _signal: int, _frame: FrameType | None) -> None:
        self.resize_pending = True
        if self.reading:
            raise Keyboard.CancelledError()

    class CancelledError(Exception):
        pass
