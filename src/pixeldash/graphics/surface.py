"""Resizable render surface backed by a numpy RGB buffer."""

import logging

import numpy as np
from numpy.typing import NDArray

from pixeldash.graphics.primitives import Color, clear, draw_rect, draw_text

logger = logging.getLogger(__name__)


class RenderSurface:
    """Drawing target the game renders into.

    Exposes the three operations the game needs (clear, fill a rectangle,
    draw text). A zero-sized surface accepts every call and draws nothing.
    """

    def __init__(self, width: int = 0, height: int = 0,
                 background: Color = (0, 0, 0)) -> None:
        self.background = background
        self._buffer: NDArray[np.uint8] = np.zeros((0, 0, 3), dtype=np.uint8)
        self.resize(width, height)

    @property
    def width(self) -> int:
        return self._buffer.shape[1]

    @property
    def height(self) -> int:
        return self._buffer.shape[0]

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def buffer(self) -> NDArray[np.uint8]:
        return self._buffer

    def resize(self, width: int, height: int) -> None:
        width, height = max(0, int(width)), max(0, int(height))
        if (width, height) == (self.width, self.height):
            return
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)
        self._buffer[:, :] = self.background
        logger.debug(f"Surface resized to {width}x{height}")

    def clear(self) -> None:
        if self.is_empty:
            return
        clear(self._buffer, self.background)

    def fill_rect(self, x: float, y: float, width: float, height: float,
                  color: Color) -> None:
        if self.is_empty:
            return
        draw_rect(self._buffer, int(round(x)), int(round(y)),
                  int(round(width)), int(round(height)), color)

    def draw_text(self, text: str, x: float, y: float, color: Color,
                  scale: int = 2) -> None:
        if self.is_empty:
            return
        draw_text(self._buffer, text, int(x), int(y), color, scale=scale)

    def get_buffer(self) -> NDArray[np.uint8]:
        """Get copy of current buffer."""
        return self._buffer.copy()
