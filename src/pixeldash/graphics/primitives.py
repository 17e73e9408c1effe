"""Basic drawing primitives for PIXELDASH render buffers."""

from typing import Tuple, Optional
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def clear(buffer: Buffer, color: Color = (0, 0, 0)) -> None:
    """Clear buffer to a solid color."""
    buffer[:, :] = color


def draw_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
) -> None:
    """Fill a rectangle on the buffer, clipped to its bounds.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
    """
    h, w = buffer.shape[:2]

    x1 = max(0, min(x, w))
    y1 = max(0, min(y, h))
    x2 = max(0, min(x + width, w))
    y2 = max(0, min(y + height, h))

    buffer[y1:y2, x1:x2] = color


def draw_text(
    buffer: Buffer,
    text: str,
    x: int,
    y: int,
    color: Color,
    font: Optional[dict] = None,
    scale: int = 1,
) -> Tuple[int, int]:
    """Draw text using a bitmap font.

    Args:
        buffer: Target numpy array (height, width, 3)
        text: Text string to draw
        x: Starting x coordinate
        y: Top y coordinate
        color: RGB color tuple
        font: Bitmap font dictionary (char -> 2D array). Uses built-in if None.
        scale: Scale factor for font size

    Returns:
        Tuple of (width, height) of rendered text in pixels
    """
    if font is None:
        font = _get_default_font()

    h, w = buffer.shape[:2]
    cursor_x = x
    char_height = 5 * scale

    for char in text:
        if char == ' ':
            cursor_x += 4 * scale
            continue

        char_data = font.get(char.upper(), font.get('?', []))
        if not char_data:
            cursor_x += 4 * scale
            continue

        char_width = len(char_data[0])

        for row_idx, row in enumerate(char_data):
            for col_idx, pixel in enumerate(row):
                if not pixel:
                    continue
                px = cursor_x + col_idx * scale
                py = y + row_idx * scale
                x1, y1 = max(0, px), max(0, py)
                x2, y2 = min(w, px + scale), min(h, py + scale)
                if x1 < x2 and y1 < y2:
                    buffer[y1:y2, x1:x2] = color

        cursor_x += (char_width + 1) * scale

    return cursor_x - x, char_height


def text_width(text: str, scale: int = 1, font: Optional[dict] = None) -> int:
    """Width in pixels that draw_text would use for ``text``."""
    if font is None:
        font = _get_default_font()
    width = 0
    for char in text:
        char_data = font.get(char.upper(), font.get('?', []))
        if char == ' ' or not char_data:
            width += 4 * scale
        else:
            width += (len(char_data[0]) + 1) * scale
    return width


def _get_default_font() -> dict:
    """Return a simple 3x5 bitmap font for basic characters."""
    # Each character is a list of rows, each row is a list of 0/1 pixels
    return _DEFAULT_FONT


_DEFAULT_FONT = {
    'A': [[0,1,0], [1,0,1], [1,1,1], [1,0,1], [1,0,1]],
    'B': [[1,1,0], [1,0,1], [1,1,0], [1,0,1], [1,1,0]],
    'C': [[0,1,1], [1,0,0], [1,0,0], [1,0,0], [0,1,1]],
    'D': [[1,1,0], [1,0,1], [1,0,1], [1,0,1], [1,1,0]],
    'E': [[1,1,1], [1,0,0], [1,1,0], [1,0,0], [1,1,1]],
    'F': [[1,1,1], [1,0,0], [1,1,0], [1,0,0], [1,0,0]],
    'G': [[0,1,1], [1,0,0], [1,0,1], [1,0,1], [0,1,1]],
    'H': [[1,0,1], [1,0,1], [1,1,1], [1,0,1], [1,0,1]],
    'I': [[1,1,1], [0,1,0], [0,1,0], [0,1,0], [1,1,1]],
    'J': [[0,0,1], [0,0,1], [0,0,1], [1,0,1], [0,1,0]],
    'K': [[1,0,1], [1,0,1], [1,1,0], [1,0,1], [1,0,1]],
    'L': [[1,0,0], [1,0,0], [1,0,0], [1,0,0], [1,1,1]],
    'M': [[1,0,1], [1,1,1], [1,0,1], [1,0,1], [1,0,1]],
    'N': [[1,0,1], [1,1,1], [1,1,1], [1,0,1], [1,0,1]],
    'O': [[0,1,0], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    'P': [[1,1,0], [1,0,1], [1,1,0], [1,0,0], [1,0,0]],
    'Q': [[0,1,0], [1,0,1], [1,0,1], [1,1,1], [0,1,1]],
    'R': [[1,1,0], [1,0,1], [1,1,0], [1,0,1], [1,0,1]],
    'S': [[0,1,1], [1,0,0], [0,1,0], [0,0,1], [1,1,0]],
    'T': [[1,1,1], [0,1,0], [0,1,0], [0,1,0], [0,1,0]],
    'U': [[1,0,1], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    'V': [[1,0,1], [1,0,1], [1,0,1], [0,1,0], [0,1,0]],
    'W': [[1,0,1], [1,0,1], [1,0,1], [1,1,1], [1,0,1]],
    'X': [[1,0,1], [1,0,1], [0,1,0], [1,0,1], [1,0,1]],
    'Y': [[1,0,1], [1,0,1], [0,1,0], [0,1,0], [0,1,0]],
    'Z': [[1,1,1], [0,0,1], [0,1,0], [1,0,0], [1,1,1]],
    '0': [[0,1,0], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    '1': [[0,1,0], [1,1,0], [0,1,0], [0,1,0], [1,1,1]],
    '2': [[0,1,0], [1,0,1], [0,0,1], [0,1,0], [1,1,1]],
    '3': [[1,1,0], [0,0,1], [0,1,0], [0,0,1], [1,1,0]],
    '4': [[1,0,1], [1,0,1], [1,1,1], [0,0,1], [0,0,1]],
    '5': [[1,1,1], [1,0,0], [1,1,0], [0,0,1], [1,1,0]],
    '6': [[0,1,1], [1,0,0], [1,1,0], [1,0,1], [0,1,0]],
    '7': [[1,1,1], [0,0,1], [0,1,0], [0,1,0], [0,1,0]],
    '8': [[0,1,0], [1,0,1], [0,1,0], [1,0,1], [0,1,0]],
    '9': [[0,1,0], [1,0,1], [0,1,1], [0,0,1], [1,1,0]],
    '?': [[0,1,0], [1,0,1], [0,0,1], [0,0,0], [0,1,0]],
    '!': [[0,1,0], [0,1,0], [0,1,0], [0,0,0], [0,1,0]],
    '.': [[0,0,0], [0,0,0], [0,0,0], [0,0,0], [0,1,0]],
    ',': [[0,0,0], [0,0,0], [0,0,0], [0,1,0], [1,0,0]],
    ':': [[0,0,0], [0,1,0], [0,0,0], [0,1,0], [0,0,0]],
    '-': [[0,0,0], [0,0,0], [1,1,1], [0,0,0], [0,0,0]],
}
