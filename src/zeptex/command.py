import re
from dataclasses import dataclass

INSERT_USAGE = "Use: i <line> <text>"
APPEND_USAGE = "Use: a <text>"

DELETE_PATTERN = re.compile(r"d\s*([+-]?\d+)", re.ASCII)
LINE_NUMBER_PATTERN = re.compile(r"\d+", re.ASCII)
SAVE_PATTERN = re.compile(r"w\s*(\S+)")


@dataclass(frozen=True)
class Insert:
    line_no: int
    text: str


@dataclass(frozen=True)
class Append:
    text: str


@dataclass(frozen=True)
class Delete:
    line_no: int


@dataclass(frozen=True)
class Save:
    path: str | None


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Invalid:
    # None means the command is dropped without telling the user
    reason: str | None


type Command = Insert | Append | Delete | Save | Quit | Invalid


def parse_command(text: str) -> Command:
    match text[:1]:
        case "i":
            return parse_insert(text)
        case "a":
            return parse_append(text)
        case "d":
            return parse_delete(text)
        case "w":
            return parse_save(text)
        case "q" if text == "q":
            return Quit()
        case _:
            return Invalid("unknown command")


def parse_insert(text: str) -> Command:
    if text[1:2] != " ":
        return Invalid(f"Invalid insert syntax. {INSERT_USAGE}")

    rest = text[2:]
    line_no, sep, content = rest.partition(" ")
    if not sep:
        return Invalid(f"Missing text after line number. {INSERT_USAGE}")

    if not LINE_NUMBER_PATTERN.fullmatch(line_no) or int(line_no) <= 0:
        return Invalid(f"Invalid line number. {INSERT_USAGE}")

    return Insert(int(line_no), content)


def parse_append(text: str) -> Command:
    if text[1:2] != " ":
        return Invalid(f"Invalid append syntax. {APPEND_USAGE}")

    content = text[2:]
    if not content:
        return Invalid(f"No text to append. {APPEND_USAGE}")

    return Append(content)


def parse_delete(text: str) -> Command:
    # trailing text after the number is ignored, like sscanf("d %d")
    match = DELETE_PATTERN.match(text)
    if match is None:
        return Invalid(None)
    return Delete(int(match[1]))


def parse_save(text: str) -> Command:
    # first whitespace separated token is the path, like sscanf("w %255s")
    match = SAVE_PATTERN.match(text)
    if match is None:
        return Save(None)
    return Save(match[1])
