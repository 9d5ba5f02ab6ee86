from collections.abc import Iterator, Sequence
from typing import override

from .drawable import Drawable
from .text import Text


class Spread(Drawable):
    """Texts laid out on one line with equal gaps filling the width.

    When the texts alone are wider than the line the gaps shrink to a single
    space and whatever does not fit is cut off.
    """

    texts: Sequence[Text]

    def __init__(self, texts: Sequence[Text]):
        self.texts = texts

    @override
    def base_width(self) -> int:
        return sum(text.base_width() for text in self.texts)

    def gap(self, width: int) -> int:
        if len(self.texts) < 2:
            return 0
        space = width - self.base_width()
        if space <= 0:
            return 1
        return max(space // (len(self.texts) - 1), 1)

    @override
    def render(self, width: int) -> Iterator[str]:
        gap = self.gap(width)
        parts: list[str] = []
        remaining = width

        for i, text in enumerate(self.texts):
            if i and remaining > 0:
                parts.append(" " * min(gap, remaining))
                remaining -= gap
            if remaining <= 0:
                break
            (part,) = text.render(remaining)
            parts.append(part)
            remaining -= min(text.base_width(), remaining)

        yield "".join(parts)
