import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from zeptex.buffer import LineBuffer
from zeptex.parser import CommandParser
from zeptex.session import EditorSession
from zeptex.tui.keyboard import Keyboard

type DirSpec = dict[str, str | bytes]
type DirFactory = Callable[[DirSpec], Path]

STYLE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def read_spec(root: Path) -> DirSpec:
    dir_spec: DirSpec = {}

    for path in sorted(root.rglob("*")):
        if not path.is_file():
            continue
        try:
            file_spec: str | bytes = path.read_text()
        except UnicodeDecodeError:
            file_spec = path.read_bytes()
        dir_spec[str(path.relative_to(root))] = file_spec

    return dir_spec


def write_spec(root: Path, dir_spec: DirSpec) -> None:
    for path, file_spec in dir_spec.items():
        file_path = root / path
        file_path.parent.mkdir(exist_ok=True, parents=True)

        match file_spec:
            case str():
                file_path.write_text(file_spec)
            case bytes():
                file_path.write_bytes(file_spec)


def strip_styles(line: str) -> str:
    return STYLE_PATTERN.sub("", line)


@dataclass
class FakeTerminal:
    width: int = 80
    height: int = 15

    def __call__(self) -> tuple[int, int]:
        return self.width, self.height


@dataclass
class FakeFiles:
    saved: dict[Path, list[str]] = field(default_factory=dict)
    fail: bool = False

    def __call__(self, path: Path, lines: Iterable[str]) -> bool:
        if self.fail:
            return False
        self.saved[path] = list(lines)
        return True


def make_session(
    lines: Iterable[str] = (),
    terminal: FakeTerminal | None = None,
    capacity: int = 1000,
    path: Path | None = None,
    files: FakeFiles | None = None,
) -> EditorSession:
    return EditorSession(
        buffer=LineBuffer(lines, capacity=capacity),
        parser=CommandParser(),
        path=path,
        get_size=terminal or FakeTerminal(),
        save=files or FakeFiles(),
    )


def scripted_keyboard(data: bytes) -> Keyboard:
    chars: Iterator[int] = iter(data)

    def read() -> int | None:
        return next(chars, None)

    return Keyboard(read)


def numbered(count: int) -> list[str]:
    return [f"line {i}" for i in range(1, count + 1)]
