from collections.abc import Iterator, Sequence
from typing import override

from .drawable import Drawable


class Rows(Drawable):
    drawables: Sequence[Drawable]

    def __init__(self, drawables: Sequence[Drawable] = ()):
        self.drawables = drawables

    @override
    def base_width(self) -> int:
        return max((drawable.base_width() for drawable in self.drawables), default=0)

    @override
    def render(self, width: int) -> Iterator[str]:
        for drawable in self.drawables:
            yield from drawable.render(width)
