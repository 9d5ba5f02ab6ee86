from dataclasses import dataclass

# title, blank line, status line, hint bar, prompt
CHROME_ROWS = 5


def visible_rows_for(height: int) -> int:
    return max(height - CHROME_ROWS, 1)


def max_scroll(line_count: int, visible_rows: int) -> int:
    return max(line_count - visible_rows, 0)


@dataclass
class Viewport:
    scroll_offset: int = 0

    def clamp(self, line_count: int, visible_rows: int) -> int:
        self.scroll_offset = min(
            max(self.scroll_offset, 0), max_scroll(line_count, visible_rows)
        )
        return self.scroll_offset

    def scroll_up(self, line_count: int, visible_rows: int) -> None:
        if self.scroll_offset > 0:
            self.scroll_offset -= 1
        self.clamp(line_count, visible_rows)

    def scroll_down(self, line_count: int, visible_rows: int) -> None:
        if self.scroll_offset < max_scroll(line_count, visible_rows):
            self.scroll_offset += 1
        self.clamp(line_count, visible_rows)

    def scroll_to(self, index: int, line_count: int, visible_rows: int) -> None:
        # index is a 1-based line number that has to end up on screen
        if index > self.scroll_offset + visible_rows:
            self.scroll_offset = index - visible_rows
        elif index - 1 < self.scroll_offset:
            self.scroll_offset = max(index - 1, 0)
        self.clamp(line_count, visible_rows)

    def pull_back(self, line_count: int) -> None:
        if self.scroll_offset >= line_count:
            self.scroll_offset = max(line_count - 1, 0)

    def visible_range(self, line_count: int, visible_rows: int) -> range:
        return range(self.scroll_offset, self.scroll_offset + visible_rows)
