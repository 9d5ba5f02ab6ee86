from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Literal, override

from .drawable import Drawable

type TextColor = Literal["default", "yellow", "bright black", "bright white"]
type TextAlign = Literal["left", "center"]

FG_CODES: Mapping[TextColor, int] = {
    "default": 39,
    "yellow": 33,
    "bright black": 90,
    "bright white": 97,
}


@dataclass(frozen=True)
class TextStyle:
    fg: TextColor = "default"
    bold: bool = False

    @property
    def style_code(self) -> str:
        codes: list[int] = []
        if self.bold:
            codes.append(1)
        if self.fg != "default":
            codes.append(FG_CODES[self.fg])

        if not codes:
            return ""
        return f"\x1b[{';'.join(map(str, codes))}m"

    @property
    def reset_code(self) -> str:
        if not self.style_code:
            return ""
        return "\x1b[0m"


DEFAULT_TEXT_STYLE = TextStyle()


class Text(Drawable):
    """A single line of text, cut off at the available width."""

    text: str
    style: TextStyle
    align: TextAlign

    def __init__(
        self,
        text: str = "",
        style: TextStyle = DEFAULT_TEXT_STYLE,
        align: TextAlign = "left",
    ):
        self.text = text
        self.style = style
        self.align = align

    @override
    def base_width(self) -> int:
        return len(self.text)

    @override
    def render(self, width: int) -> Iterator[str]:
        text = self.text[:width]

        match self.align:
            case "left":
                padding = ""
            case "center":
                padding = " " * max((width - len(text)) // 2, 0)

        if text:
            yield f"{padding}{self.style.style_code}{text}{self.style.reset_code}"
        else:
            yield ""
