from __future__ import annotations

from typing import Iterable, Tuple

from linesquares.constants import FORE_COLOR
from linesquares.rendering.geometry import RowGeometry, RowLayout


class RowRenderer:
    """Draw row geometry with arcade primitives.

    Geometry arrives in y-down surface coordinates; arcade is y-up, so every
    point is flipped against the surface height.
    """

    def __init__(self, color: Tuple[int, int, int] = FORE_COLOR):
        self.color = color

    def render(self, arcade, layout: RowLayout, rows: Iterable[RowGeometry]) -> None:
        height = layout.height
        stroke = layout.stroke_width
        cap_radius = stroke / 2
        for row in rows:
            for quad in row.squares:
                if not quad.visible:
                    continue
                arcade.draw_polygon_filled([(x, height - y) for x, y in quad.points], self.color)
            for line in row.lines:
                x1, y1 = line.start[0], height - line.start[1]
                x2, y2 = line.end[0], height - line.end[1]
                arcade.draw_line(x1, y1, x2, y2, self.color, stroke)
                # Round caps.
                arcade.draw_circle_filled(x1, y1, cap_radius, self.color)
                arcade.draw_circle_filled(x2, y2, cap_radius, self.color)
