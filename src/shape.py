# Paraflake
# Copyright 2025 - Ricardo Quesada

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Self

logger = logging.getLogger(__name__)


@dataclass
class Point:
    """Represents a point in 2D space.

    Unlike most geometry helpers, a Point is mutable: rotate() and translate()
    update it in place. Paths clone points whenever they copy them, so two
    Paths never share a Point.
    """

    x: float
    y: float

    def __str__(self) -> str:
        return f"G1 X{self.x:.2f} Y{self.y:.2f}"

    def rotate(self, theta: float) -> None:
        """Rotates the point around the origin. theta is in radians, counter-clockwise."""
        old_x = self.x
        old_y = self.y
        cos_theta = math.cos(theta)
        sin_theta = math.sin(theta)
        self.x = old_x * cos_theta - old_y * sin_theta
        self.y = old_x * sin_theta + old_y * cos_theta

    def translate(self, dx: float, dy: float) -> None:
        self.x = self.x + dx
        self.y = self.y + dy

    def clone(self) -> Self:
        return Point(self.x, self.y)


class Path:
    """Represents a mutable path composed of a sequence of points."""

    def __init__(self, path: list[Point] | None = None):
        """Initializes the Path with a list of points.

        The list is copied, the points are not.
        """
        self.path = list(path) if path is not None else []

    def __eq__(self, other):
        """Overrides the default '==' behavior."""
        if not isinstance(other, Path):
            return NotImplemented
        return self.path == other.path

    __hash__ = None

    def __len__(self) -> int:
        return len(self.path)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.path)

    def __str__(self) -> str:
        return "".join(f"{point}\n" for point in self.path)

    def append_point(self, point: Point) -> None:
        """Appends a point to the end of the path. The point is not cloned."""
        self.path.append(point)

    def extend(self, other: Self) -> None:
        """Appends a clone of every point of another path, in order."""
        for point in other.path:
            self.path.append(point.clone())

    def clone(self) -> Self:
        return Path([point.clone() for point in self.path])

    def rotate(self, theta: float) -> None:
        """Rotates the whole path around the origin."""
        for point in self.path:
            point.rotate(theta)

    def translate(self, dx: float, dy: float) -> None:
        for point in self.path:
            point.translate(dx, dy)

    def mirror_across_x_axis(self) -> None:
        for point in self.path:
            point.y = -point.y

    def reverse(self) -> None:
        self.path.reverse()

    def draw(self, renderer) -> None:
        """
        Draws the path as a closed polyline.

        Args:
            renderer: Any object that follows the renderer.Renderer protocol.
                It receives begin_path(), move_to() for the first point,
                line_to() for the rest and finally close_path().
        """
        if not self.path:
            logger.debug("Empty path, nothing to draw")
            return

        renderer.begin_path()
        first = self.path[0]
        renderer.move_to(first.x, first.y)
        for point in self.path[1:]:
            renderer.line_to(point.x, point.y)
        renderer.close_path()
