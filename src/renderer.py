# Paraflake
# Copyright 2025 - Ricardo Quesada

import logging
from typing import Protocol

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPainterPath, QPen

from shape import Path

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Anything that can draw a closed polyline, one segment at a time."""

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def close_path(self) -> None: ...


class QPainterPathRenderer:
    """Renderer that records the drawn polyline into a QPainterPath."""

    def __init__(self):
        self._painter_path = QPainterPath()

    def begin_path(self) -> None:
        self._painter_path = QPainterPath()

    def move_to(self, x: float, y: float) -> None:
        self._painter_path.moveTo(QPointF(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._painter_path.lineTo(QPointF(x, y))

    def close_path(self) -> None:
        self._painter_path.closeSubpath()

    @property
    def painter_path(self) -> QPainterPath:
        return self._painter_path


def render_to_qimage(
    path: Path,
    size: tuple[int, int],
    scale: float = 1.0,
    stroke_color: str = "#000000",
    background_color: str = "#ffffff",
    stroke_width: float = 1.0,
) -> QImage:
    """
    Renders a Path to a QImage.

    The origin is placed at the center of the image and the Y axis points up.

    Args:
        path: The Path to render.
        size: A tuple (width, height) in pixels.
        scale: Pixels per path unit.
        stroke_color: Color name of the outline.
        background_color: Color name used to fill the image.
        stroke_width: Width of the outline, in pixels.

    Returns:
        The rendered ARGB32 QImage.
    """
    width, height = size
    image = QImage(width, height, QImage.Format.Format_ARGB32)
    image.fill(QColor(background_color))

    renderer = QPainterPathRenderer()
    path.draw(renderer)
    if renderer.painter_path.isEmpty():
        logger.info("Nothing to render, returning background only image")
        return image

    painter = QPainter(image)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.translate(width / 2, height / 2)
    painter.scale(scale, -scale)

    pen = QPen(QColor(stroke_color))
    # Keep the width in pixels, regardless of the scale
    pen.setCosmetic(True)
    pen.setWidthF(stroke_width)
    painter.setPen(pen)
    painter.setBrush(Qt.BrushStyle.NoBrush)
    painter.drawPath(renderer.painter_path)
    painter.end()
    return image
