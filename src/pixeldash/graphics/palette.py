"""
Colour palettes supplied by the host page, and palette switching.

The game only ever needs three colours. A palette may be missing any of
them; missing values fall back to the defaults below.
"""

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional

import yaml

from pixeldash.core.deferred import DeferredTask
from pixeldash.core.events import EventBus, theme_changed_event

logger = logging.getLogger(__name__)

DEFAULT_PLAYER = "#38BDF8"
DEFAULT_OBSTACLE = "#EF4444"
DEFAULT_ACCENT = "#38BDF8"

SWITCH_LABEL = "Switch Theme"
LOADING_LABEL = "Loading"


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Convert '#RRGGBB' (or 'RGB') to an RGB tuple."""
    hex_color = value.strip().lstrip("#")
    if len(hex_color) == 3:
        hex_color = "".join(c * 2 for c in hex_color)
    if len(hex_color) != 6:
        raise ValueError(f"Not a hex colour: {value!r}")
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


@dataclass
class Palette:
    """Theme colour set consumed by the renderer."""
    player: Optional[str] = DEFAULT_PLAYER
    obstacle: Optional[str] = DEFAULT_OBSTACLE
    accent: Optional[str] = DEFAULT_ACCENT
    name: str = "default"
    complaint: str = ""

    def to_rgb(self, color_name: str) -> tuple[int, int, int]:
        """Resolve a colour slot to RGB, falling back to the default."""
        defaults = {
            "player": DEFAULT_PLAYER,
            "obstacle": DEFAULT_OBSTACLE,
            "accent": DEFAULT_ACCENT,
        }
        value = getattr(self, color_name, None)
        if value:
            try:
                return hex_to_rgb(value)
            except ValueError:
                logger.warning(f"Palette {self.name}: bad {color_name} colour {value!r}")
        return hex_to_rgb(defaults[color_name])


def load_palettes(path: Path) -> Dict[str, Palette]:
    """Load named palettes from a YAML mapping.

    A missing file yields an empty mapping; callers fall back to defaults.
    """
    if not path.exists():
        logger.warning(f"Palette file not found: {path}")
        return {}

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    palettes = {}
    for name, entry in data.items():
        entry = entry or {}
        palettes[name] = Palette(
            player=entry.get("player"),
            obstacle=entry.get("obstacle"),
            accent=entry.get("accent"),
            name=name,
            complaint=str(entry.get("complaint", "")).strip(),
        )
    logger.info(f"Loaded {len(palettes)} palettes from {path.name}")
    return palettes


class PaletteSwitcher:
    """Switches between named palettes with a short loading phase.

    The new palette is applied after ``delay_s``. A switch requested while
    another is loading supersedes it; the older completion never runs, so a
    stale label cannot overwrite the newer one.
    """

    def __init__(
        self,
        palettes: Dict[str, Palette],
        apply: Callable[[Palette], None],
        event_bus: Optional[EventBus] = None,
        delay_s: float = 0.1,
        rng: Optional[random.Random] = None,
    ):
        self.palettes = palettes
        self._apply = apply
        self._event_bus = event_bus
        self._rng = rng or random.Random()
        self._task = DeferredTask(delay_s, self._complete)
        self.current: Optional[str] = None
        self.label = SWITCH_LABEL

    @property
    def loading(self) -> bool:
        return self._task.pending

    def switch(self, name: str) -> bool:
        """Start switching to ``name``. Requires a running event loop."""
        if name not in self.palettes:
            logger.warning(f"Unknown palette: {name}")
            return False
        self.current = name
        self.label = LOADING_LABEL
        self._task.schedule(name)
        return True

    def switch_random(self) -> Optional[str]:
        """Pick any palette other than the current one.

        Ignored while a switch is still loading.
        """
        if self.loading:
            return None
        available = [n for n in self.palettes if n != self.current]
        if not available:
            return None
        name = self._rng.choice(available)
        self.switch(name)
        return name

    def switch_auto(self, prefers_dark: bool) -> bool:
        return self.switch("midnight" if prefers_dark else "mint")

    def _complete(self, name: str) -> None:
        palette = self.palettes[name]
        self.label = palette.complaint or SWITCH_LABEL
        self._apply(palette)
        if self._event_bus is not None:
            self._event_bus.emit(theme_changed_event(name, palette.complaint))
