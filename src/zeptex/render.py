from collections.abc import Sequence

from .buffer import LineBuffer
from .config import DisplayConfig
from .tui.drawable import Drawable
from .tui.rows import Rows
from .tui.spread import Spread
from .tui.text import Text, TextStyle
from .viewport import Viewport, visible_rows_for

TITLE = DisplayConfig().title
PLACEHOLDER = DisplayConfig().placeholder
PROMPT = ": "

TITLE_STYLE = TextStyle(fg="bright white", bold=True)
HINT_STYLE = TextStyle(fg="bright white", bold=True)
PLACEHOLDER_STYLE = TextStyle(fg="bright black")
STATUS_STYLE = TextStyle(fg="yellow")

HINTS: Sequence[str] = (
    "i N TEXT -- insert line|",
    "a TEXT -- append line|",
    "d N -- delete line|",
    "↑/↓ scroll|",
    "w <filename> -- save|",
    "q -- Quit|",
)


def render_screen(
    buffer: LineBuffer,
    viewport: Viewport,
    pending: str,
    status: str | None,
    width: int,
    height: int,
    title: str = TITLE,
    placeholder: str = PLACEHOLDER,
) -> Drawable:
    """Project the editor state onto the screen, top to bottom.

    Nothing is mutated here: the viewport is expected to be clamped for the
    given height already.
    """
    visible_rows = visible_rows_for(height)

    return Rows(
        [
            Text(title, TITLE_STYLE, align="center"),
            Text(),
            render_lines(buffer, viewport, visible_rows, placeholder),
            render_status(status),
            render_hints(),
            render_prompt(pending, width),
        ]
    )


def render_lines(
    buffer: LineBuffer,
    viewport: Viewport,
    visible_rows: int,
    placeholder: str,
) -> Drawable:
    rows: list[Drawable] = []
    lines = buffer.lines

    for index in viewport.visible_range(len(lines), visible_rows):
        if index < len(lines):
            rows.append(Text(f"{index + 1:>3} | {lines[index]}"))
        else:
            rows.append(Text(placeholder, PLACEHOLDER_STYLE))

    return Rows(rows)


def render_status(status: str | None) -> Drawable:
    if status is None:
        return Text()
    return Text(status, STATUS_STYLE)


def render_hints() -> Drawable:
    return Spread([Text(hint, HINT_STYLE) for hint in HINTS])


def render_prompt(pending: str, width: int) -> Drawable:
    # keep the end of a long command in view
    room = max(width - len(PROMPT), 0)
    if len(pending) > room:
        pending = pending[len(pending) - room :]
    return Text(PROMPT + pending)
