import logging
from pathlib import Path

from .command import (
    Append,
    Command,
    Delete,
    Insert,
    Invalid,
    Quit,
    Save,
    parse_command,
)
from .session import EditorSession

logger = logging.getLogger(__name__)


def dispatch(session: EditorSession, text: str) -> Command:
    """Parse a confirmed prompt line and run it against the session.

    The pending prompt text is cleared unless the command was rejected with a
    reason, in which case it is kept so it can be corrected.
    """
    command = parse_command(text)
    session.status = None

    match command:
        case Insert(line_no, content):
            insert(session, line_no, content)
        case Append(content):
            append(session, content)
        case Delete(line_no):
            delete(session, line_no)
        case Save(path):
            save(session, path)
        case Quit():
            session.running = False
        case Invalid(reason):
            logger.debug("rejected command %r: %s", text, reason)
            if reason is not None:
                session.status = reason
                return command

    session.parser.clear()
    return command


def insert(session: EditorSession, line_no: int, text: str) -> None:
    if not session.buffer.insert(line_no, text):
        logger.debug("insert at line %d rejected", line_no)
        return
    session.scroll_to(line_no)


def append(session: EditorSession, text: str) -> None:
    if not session.buffer.append(text):
        logger.debug("append rejected, buffer holds %d lines", len(session.buffer))
        return
    session.scroll_to(len(session.buffer))


def delete(session: EditorSession, line_no: int) -> None:
    if not session.buffer.delete(line_no):
        logger.debug("delete of line %d rejected", line_no)
        return
    session.viewport.pull_back(len(session.buffer))
    session.clamp()


def save(session: EditorSession, path: str | None) -> None:
    if path is not None:
        target = Path(path)
    elif session.path is not None:
        target = session.path
    else:
        return

    if session.save(target, session.buffer.lines):
        session.status = f"written {len(session.buffer)} lines to {target}"
    else:
        session.status = f"could not write {target}"
