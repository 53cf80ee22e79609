"""Pure mapping from a row's scale to the shapes that depict it.

Coordinates are surface coordinates with the origin at the top-left corner and
y growing downward, so rotations by a positive angle turn clockwise on screen.
Renderers targeting a y-up backend flip the y axis themselves.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from linesquares.constants import LINE_COUNT, ROW_COUNT, SIZE_FACTOR, SQUARES_PER_LINE, STROKE_FACTOR
from linesquares.utils.scale_math import divide_scale

Point = Tuple[float, float]


@dataclass(frozen=True, slots=True)
class Frame:
    """2D affine transform; x' = a*x + c*y + e, y' = b*x + d*y + f."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def translate(self, dx: float, dy: float) -> Frame:
        return Frame(
            self.a, self.b, self.c, self.d,
            self.a * dx + self.c * dy + self.e,
            self.b * dx + self.d * dy + self.f,
        )

    def rotate(self, degrees: float) -> Frame:
        rad = math.radians(degrees)
        cos = math.cos(rad)
        sin = math.sin(rad)
        return Frame(
            self.a * cos + self.c * sin,
            self.b * cos + self.d * sin,
            -self.a * sin + self.c * cos,
            -self.b * sin + self.d * cos,
            self.e,
            self.f,
        )

    def scale(self, sx: float, sy: float) -> Frame:
        return Frame(self.a * sx, self.b * sx, self.c * sy, self.d * sy, self.e, self.f)

    def apply(self, x: float, y: float) -> Point:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)


@dataclass(frozen=True, slots=True)
class LineSegment:
    start: Point
    end: Point


@dataclass(frozen=True, slots=True)
class Quad:
    """Filled rectangle after transformation (corners in drawing order)."""
    points: Tuple[Point, Point, Point, Point]
    fill: float  # local fill progress in [0, 1]

    @property
    def visible(self) -> bool:
        return self.fill > 0.0


@dataclass(frozen=True, slots=True)
class RowLayout:
    """Per-frame sizing shared by every row on a surface."""
    width: float
    height: float
    row_count: int
    gap: float
    size: float
    stroke_width: float

    def center(self, index: int) -> Point:
        return (self.width / 2, self.gap * (index + 1))


@dataclass(frozen=True, slots=True)
class RowGeometry:
    index: int
    scale: float
    lines: Tuple[LineSegment, ...]
    squares: Tuple[Quad, ...]


def compute_layout(width: float, height: float, row_count: int = ROW_COUNT) -> RowLayout:
    """Evenly spaced slots with one slot of margin above and below the rows."""
    gap = height / (row_count + 1)
    return RowLayout(
        width=width,
        height=height,
        row_count=row_count,
        gap=gap,
        size=gap / SIZE_FACTOR,
        stroke_width=min(width, height) / STROKE_FACTOR,
    )


def _square_quads(frame: Frame, size: float, line_index: int, sc: float) -> List[Quad]:
    quads: List[Quad] = []
    for k in range(SQUARES_PER_LINE):
        local = frame.translate(-size + size * line_index, 0.0).scale(1.0, 1.0 - 2 * k)
        fill = divide_scale(sc, k, LINE_COUNT)
        h = size * fill
        quads.append(Quad(
            points=(local.apply(0.0, 0.0), local.apply(size, 0.0), local.apply(size, h), local.apply(0.0, h)),
            fill=fill,
        ))
    return quads


def row_geometry(layout: RowLayout, index: int, scale: float) -> RowGeometry:
    sc1 = divide_scale(scale, 0, 2)
    sc2 = divide_scale(scale, 1, 2)
    size = layout.size
    base = Frame().translate(*layout.center(index))
    lines: List[LineSegment] = []
    squares: List[Quad] = []
    for j in range(LINE_COUNT):
        sc2j = divide_scale(sc2, j, LINE_COUNT)
        frame = base.rotate(90.0 * (1 - 2 * j) * divide_scale(sc1, j, LINE_COUNT))
        lines.append(LineSegment(frame.apply(0.0, 0.0), frame.apply(0.0, -size)))
        squares.extend(_square_quads(frame, size, j, sc2j))
    return RowGeometry(index=index, scale=scale, lines=tuple(lines), squares=tuple(squares))


def scene_geometry(layout: RowLayout, scales) -> List[RowGeometry]:
    """Geometry for every row in index order."""
    return [row_geometry(layout, i, scale) for i, scale in enumerate(scales)]
