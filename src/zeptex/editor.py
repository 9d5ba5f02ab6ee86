import logging
import signal
import sys
import termios
import tty
from collections.abc import Callable
from contextlib import ExitStack
from pathlib import Path

from .buffer import LineBuffer
from .config import Config, DisplayConfig
from .dispatcher import dispatch
from .files import load_lines
from .parser import CommandParser, CommandReady, ScrollDown, ScrollUp
from .render import render_screen
from .session import EditorSession
from .tui.keyboard import Input, Keyboard, Resize

logger = logging.getLogger(__name__)

ENTER_SCREEN = "\x1b[?25l\x1b[?1049h"
LEAVE_SCREEN = "\x1b[?1049l\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J\x1b[H"
NEXT_LINE = "\x1b[1E"


def write_and_flush(content: str) -> None:
    sys.stdout.write(content)
    sys.stdout.flush()


class Editor:
    session: EditorSession
    keyboard: Keyboard
    display: DisplayConfig
    write: Callable[[str], None]

    should_draw: bool

    def __init__(
        self,
        session: EditorSession,
        keyboard: Keyboard,
        display: DisplayConfig | None = None,
        write: Callable[[str], None] = write_and_flush,
    ):
        self.session = session
        self.keyboard = keyboard
        self.display = display or DisplayConfig()
        self.write = write
        self.should_draw = True

    def screen(self) -> list[str]:
        # the size is asked for again on every draw so resizes are picked up
        width, height = self.session.size
        self.session.clamp()

        drawable = render_screen(
            self.session.buffer,
            self.session.viewport,
            self.session.parser.pending,
            self.session.status,
            width,
            height,
            title=self.display.title,
            placeholder=self.display.placeholder,
        )
        return list(drawable.render(width))

    def draw(self) -> None:
        self.write(CLEAR_SCREEN + NEXT_LINE.join(self.screen()))

    def handle_input(self, char: Input) -> None:
        match char:
            case Resize():
                logger.debug("terminal resized to %s", self.session.size)
                self.session.parser.abandon_escape()
                self.session.clamp()

            case int():
                match self.session.parser.feed(char):
                    case CommandReady(text):
                        dispatch(self.session, text)
                    case ScrollUp():
                        self.session.scroll_up()
                    case ScrollDown():
                        self.session.scroll_down()
                    case None:
                        pass

        self.should_draw = True

    def run(self) -> None:
        while self.session.running:
            if self.should_draw:
                self.should_draw = False
                self.draw()

            char = self.keyboard.get()
            if char is None:
                logger.info("input closed, leaving the editor")
                self.session.parser.abandon_escape()
                break

            self.handle_input(char)


def open_session(path: Path | None, config: Config) -> EditorSession:
    buffer = LineBuffer(capacity=config.buffer.max_lines)

    if path is not None:
        lines = load_lines(path)
        if buffer.load(lines) < len(lines):
            logger.warning(
                "%s has %d lines, only the first %d were loaded",
                path,
                len(lines),
                buffer.capacity,
            )

    return EditorSession(
        buffer=buffer,
        parser=CommandParser(config.prompt.max_length),
        path=path,
    )


def edit(path: Path | None, config: Config) -> None:
    session = open_session(path, config)
    keyboard = Keyboard()
    editor = Editor(session, keyboard, config.display)

    with ExitStack() as stack:
        # setup resize signal
        prev_handler = signal.signal(signal.SIGWINCH, keyboard.on_resize)
        stack.callback(signal.signal, signal.SIGWINCH, prev_handler)

        # setup cbreak mode
        attrs = tty.setcbreak(sys.stdin, termios.TCSAFLUSH)
        stack.callback(termios.tcsetattr, sys.stdin, termios.TCSAFLUSH, attrs)

        # hide cursor and switch to alternative buffer
        write_and_flush(ENTER_SCREEN)
        stack.callback(write_and_flush, LEAVE_SCREEN)

        editor.run()
