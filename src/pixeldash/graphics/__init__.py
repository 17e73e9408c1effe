"""Graphics module for PIXELDASH rendering."""

from pixeldash.graphics.primitives import draw_rect, draw_text, clear
from pixeldash.graphics.surface import RenderSurface
from pixeldash.graphics.palette import Palette, PaletteSwitcher, load_palettes
from pixeldash.graphics.renderer import draw

__all__ = [
    "draw_rect",
    "draw_text",
    "clear",
    "RenderSurface",
    "Palette",
    "PaletteSwitcher",
    "load_palettes",
    "draw",
]
