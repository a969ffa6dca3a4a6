"""Merge a parent class's fields with append_super, and switch styles."""

from reprkit import MULTI_LINE_STYLE, SHORT_PREFIX_STYLE, ReprBuilder, default_style_context


class Shape:
    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return ReprBuilder(self).append("name", self.name).build()


class Polygon(Shape):
    def __init__(self, name: str, vertices: list[tuple[int, int]]) -> None:
        super().__init__(name)
        self.vertices = vertices

    def __repr__(self) -> str:
        return (
            ReprBuilder(self)
            .append_super(super().__repr__())
            .append("vertices", self.vertices)
            .append("sides", self.vertices, full_detail=False)
            .build()
        )


square = Polygon("square", [(0, 0), (0, 1), (1, 1), (1, 0)])

with default_style_context(SHORT_PREFIX_STYLE):
    print(square)  # Polygon[name=square,vertices={{0,0},{0,1},{1,1},{1,0}},sides=<size=4>]

with default_style_context(MULTI_LINE_STYLE):
    print(square)
