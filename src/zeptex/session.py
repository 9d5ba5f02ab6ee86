import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .buffer import LineBuffer
from .files import save_lines
from .parser import CommandParser
from .viewport import Viewport, visible_rows_for

type SizeGetter = Callable[[], tuple[int, int]]
type Saver = Callable[[Path, Iterable[str]], bool]


def terminal_size() -> tuple[int, int]:
    columns, lines = os.get_terminal_size()
    return columns, lines


@dataclass
class EditorSession:
    buffer: LineBuffer = field(default_factory=LineBuffer)
    viewport: Viewport = field(default_factory=Viewport)
    parser: CommandParser = field(default_factory=CommandParser)
    path: Path | None = None
    status: str | None = None
    running: bool = True
    get_size: SizeGetter = terminal_size
    save: Saver = save_lines

    @property
    def size(self) -> tuple[int, int]:
        return self.get_size()

    @property
    def visible_rows(self) -> int:
        _, height = self.get_size()
        return visible_rows_for(height)

    def clamp(self) -> None:
        self.viewport.clamp(len(self.buffer), self.visible_rows)

    def scroll_up(self) -> None:
        self.viewport.scroll_up(len(self.buffer), self.visible_rows)

    def scroll_down(self) -> None:
        self.viewport.scroll_down(len(self.buffer), self.visible_rows)

    def scroll_to(self, index: int) -> None:
        self.viewport.scroll_to(index, len(self.buffer), self.visible_rows)
