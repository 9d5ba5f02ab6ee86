from collections.abc import Iterable, Iterator

MAX_LINES = 1000


class LineBuffer:
    """Ordered lines of text addressed by 1-based line numbers.

    The buffer never holds more than ``capacity`` lines. Mutations that would
    break that, or that address a line that does not exist, are rejected and
    report ``False`` instead of raising.
    """

    capacity: int
    _lines: list[str]

    def __init__(self, lines: Iterable[str] = (), capacity: int = MAX_LINES):
        self.capacity = capacity
        self._lines = []
        self.load(lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def is_full(self) -> bool:
        return len(self._lines) >= self.capacity

    def get(self, index: int) -> str:
        if not 1 <= index <= len(self._lines):
            raise IndexError(f"line {index} out of range")
        return self._lines[index - 1]

    def insert(self, index: int, text: str) -> bool:
        if self.is_full or index < 1 or index > len(self._lines) + 1:
            return False
        self._lines.insert(index - 1, text)
        return True

    def append(self, text: str) -> bool:
        return self.insert(len(self._lines) + 1, text)

    def delete(self, index: int) -> bool:
        if not 1 <= index <= len(self._lines):
            return False
        del self._lines[index - 1]
        return True

    def load(self, lines: Iterable[str]) -> int:
        self._lines = []
        for line in lines:
            # lines past capacity are dropped
            if self.is_full:
                break
            self._lines.append(line)
        return len(self._lines)
