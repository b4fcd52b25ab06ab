"""Enemy formations: point layouts relative to a reference position."""

from __future__ import annotations

import math
from enum import Enum
from typing import List, Optional, Tuple

Point = Tuple[int, int]


class FormationType(Enum):
    RECTANGLE = "RECTANGLE"
    TRIANGLE = "TRIANGLE"
    CIRCLE = "CIRCLE"


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class Formation:
    """Builder describing a shape of spawn points."""

    def __init__(self) -> None:
        self.kind: Optional[FormationType] = None
        self.width = 0
        self.height = 0
        self.solid = True
        self.spacing: Point = (0, 0)

    def with_type(self, kind: FormationType) -> "Formation":
        self.kind = kind
        return self

    def with_size(self, width: int, height: int) -> "Formation":
        self.width = width
        self.height = height
        return self

    def with_solidity(self, solid: bool) -> "Formation":
        self.solid = solid
        return self

    def with_spacing(self, spacing: Point) -> "Formation":
        self.spacing = (int(spacing[0]), int(spacing[1]))
        return self

    def points(self, reference: Point) -> List[Point]:
        if self.kind is FormationType.RECTANGLE:
            return self._rect_points(reference)
        if self.kind is FormationType.TRIANGLE:
            return self._triangle_points(reference)
        if self.kind is FormationType.CIRCLE:
            return self._circle_points(reference)
        raise ValueError("Unknown formation type!")

    def _rect_points(self, reference: Point) -> List[Point]:
        rx, ry = reference
        sx, sy = self.spacing
        last_row, last_col = self.height - 1, self.width - 1
        return [
            (rx + col * sx, ry + row * sy)
            for row in range(self.height)
            for col in range(self.width)
            if self.solid or row in (0, last_row) or col in (0, last_col)
        ]

    def _triangle_points(self, reference: Point) -> List[Point]:
        rx, ry = reference
        sx, sy = self.spacing
        points = []
        for row in range(self.height):
            in_row = self.width - row
            offset = _div(row * sx, 2)
            for col in range(in_row):
                if not self.solid and col not in (0, in_row - 1) and row != 0:
                    continue
                points.append((rx + offset + col * sx, ry + row * sy))
        return points

    def _circle_points(self, reference: Point) -> List[Point]:
        spacing = self.spacing[0]
        if spacing <= 0:
            raise ValueError("circle formation needs a positive horizontal spacing")
        diameter_points = self.width
        radius = _div(diameter_points, 2) * spacing
        cx, cy = reference[0], reference[1] + radius

        if self.solid:
            steps = range(-radius, radius + 1, spacing)
            return [
                (cx + i, cy + j)
                for i in steps
                for j in steps
                if i * i + j * j <= radius * radius
            ]

        count = int(max(2 * math.pi * radius / spacing, float(diameter_points)))
        points = []
        for i in range(count):
            angle = 2 * math.pi * i / count
            points.append(
                (cx + int(radius * math.cos(angle)), cy + int(radius * math.sin(angle)))
            )
        return points