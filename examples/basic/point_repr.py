"""A readable __repr__ in one chained expression."""

from reprkit import SHORT_PREFIX_STYLE, ReprBuilder


class Point:
    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return ReprBuilder(self, SHORT_PREFIX_STYLE).append("x", self.x).append("y", self.y).build()


print(Point(1, 2))  # Point[x=1,y=2]
