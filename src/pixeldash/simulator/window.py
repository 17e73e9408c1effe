"""
Simulator window using pygame.

Plays the part of the host page: owns the drawing surface, forwards raw
input to the game, resizes the playfield with the window and drives the
frame host from its own loop.
"""

import asyncio
import logging
from typing import Optional

import numpy as np
import pygame

from ..config.settings import Settings
from ..core.events import Event, EventBus, EventType
from ..core.state import GameState, StateContext
from ..game.announcer import Announcer
from ..game.input import InputMapper
from ..game.runner import RunnerGame
from ..game.scheduler import FrameHost
from ..graphics.palette import PaletteSwitcher, load_palettes
from ..graphics.surface import RenderSurface

logger = logging.getLogger(__name__)

BG_COLOR = (15, 18, 28)
TEXT_COLOR = (220, 220, 235)
DIM_COLOR = (120, 120, 140)


class SimulatorWindow:
    """
    Main simulator window.

    Keyboard Mapping:
        SPACE: Jump / start / retry
        TAB: Toggle focus on the start/retry control
        RETURN: Activate the control when focused
        T: Switch to a random palette
        L: Toggle log viewer
        ESC / Q: Exit simulator
    Mouse / touch:
        Click or tap: Jump, or start/retry on the control
    """

    def __init__(self, settings: Settings, event_bus: Optional[EventBus] = None) -> None:
        self.settings = settings
        self.config = settings.window
        self.event_bus = event_bus or EventBus()

        self.host = FrameHost()
        self.surface = RenderSurface(self.config.width, self.config.height, BG_COLOR)
        self.game = RunnerGame(settings.game, self.host, self.surface, self.event_bus)
        self.input = InputMapper(self.game)
        self.announcer = Announcer(self.event_bus)
        self.switcher = PaletteSwitcher(
            load_palettes(settings.palettes_path),
            self.game.update_palette,
            self.event_bus,
        )

        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._font: Optional[pygame.font.Font] = None
        self._small_font: Optional[pygame.font.Font] = None
        self._running = False
        self._control_rect = pygame.Rect(0, 0, 0, 0)
        self._control_focused = False
        self.game.state_machine.add_listener(self._on_state_change)

        # Log viewer
        self._show_log = False
        self._log_buffer: list[str] = []
        self._max_log_lines = 12
        self._setup_log_capture()

        logger.info("SimulatorWindow created")

    def _setup_log_capture(self) -> None:
        """Setup log capturing for the log viewer."""
        class SimulatorLogHandler(logging.Handler):
            def __init__(self, window: 'SimulatorWindow'):
                super().__init__()
                self.window = window

            def emit(self, record):
                msg = self.format(record)
                self.window._log_buffer.append(msg)
                if len(self.window._log_buffer) > self.window._max_log_lines * 2:
                    self.window._log_buffer = self.window._log_buffer[-self.window._max_log_lines:]

        handler = SimulatorLogHandler(self)
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter('%(levelname).1s %(name)s: %(message)s'))
        logging.getLogger().addHandler(handler)

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)
        self._screen = pygame.display.set_mode(
            (self.config.width, self.config.height),
            pygame.RESIZABLE
        )
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont(None, 28)
        self._small_font = pygame.font.SysFont(None, 18)

        logger.info(f"Pygame initialized: {self.config.width}x{self.config.height}")

    # Input

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.VIDEORESIZE:
                self.game.resize(event.w, event.h)

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                # Touches also arrive as emulated mouse events
                if getattr(event, "touch", False):
                    continue
                if event.button == 1:
                    self.input.pointer_down(on_control=self._on_control(event.pos))

            elif event.type == pygame.FINGERDOWN:
                w, h = self._screen.get_size()
                pos = (int(event.x * w), int(event.y * h))
                self.input.touch_start(on_control=self._on_control(pos))

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._running = False
        elif key == pygame.K_SPACE:
            activates_control = self._control_focused and self.game.overlay_visible
            self.input.space_key(control_focused=self._control_focused)
            if activates_control:
                # Focused control is activated by the key itself
                self.input.pointer_down(on_control=True)
        elif key == pygame.K_RETURN:
            if self._control_focused and self.game.overlay_visible:
                self.input.pointer_down(on_control=True)
        elif key == pygame.K_TAB:
            self._control_focused = not self._control_focused
        elif key == pygame.K_t:
            self.switcher.switch_random()
        elif key == pygame.K_l:
            self._show_log = not self._show_log

    def _on_state_change(self, old: GameState, new: GameState, context: StateContext) -> None:
        # The control is hidden while running, so it cannot keep focus
        if new == GameState.RUNNING:
            self._control_focused = False

    def _on_control(self, pos: tuple[int, int]) -> bool:
        return self.game.overlay_visible and self._control_rect.collidepoint(pos)

    # Rendering

    def _render(self) -> None:
        """Render all UI elements."""
        if not self._screen:
            return

        self._screen.fill(BG_COLOR)
        if not self.surface.is_empty:
            frame = pygame.surfarray.make_surface(
                np.ascontiguousarray(self.surface.buffer.swapaxes(0, 1))
            )
            self._screen.blit(frame, (0, 0))

        if self.game.overlay_visible:
            self._render_overlay()

        self._render_status_line()
        if self._show_log:
            self._render_log_panel()

        pygame.display.flip()

    def _render_overlay(self) -> None:
        w, h = self._screen.get_size()
        accent = self.game.palette.to_rgb("accent")

        if self.game.overlay_text:
            text = self._font.render(self.game.overlay_text, True, TEXT_COLOR)
            self._screen.blit(text, text.get_rect(center=(w // 2, h // 2 - 30)))

        label = self._font.render(self.game.control_label, True, BG_COLOR)
        rect = label.get_rect(center=(w // 2, h // 2 + 10)).inflate(32, 16)
        self._control_rect = rect
        pygame.draw.rect(self._screen, accent, rect, border_radius=4)
        if self._control_focused:
            pygame.draw.rect(self._screen, TEXT_COLOR, rect.inflate(6, 6), 2, border_radius=6)
        self._screen.blit(label, label.get_rect(center=rect.center))

    def _render_status_line(self) -> None:
        w, h = self._screen.get_size()
        theme = self._small_font.render(f"[T] {self.switcher.label}", True, DIM_COLOR)
        self._screen.blit(theme, (8, 8))
        announcement = self.announcer.last_message
        if announcement:
            line = self._small_font.render(announcement, True, DIM_COLOR)
            self._screen.blit(line, (8, h - 20))

    def _render_log_panel(self) -> None:
        y = 28
        for line in self._log_buffer[-self._max_log_lines:]:
            text = self._small_font.render(line[:100], True, DIM_COLOR)
            self._screen.blit(text, (8, y))
            y += 14

    # Main loop

    async def run(self) -> None:
        """Main simulator loop."""
        self._init_pygame()
        self._running = True
        self.switcher.switch_auto(self.config.prefers_dark)

        logger.info("Simulator started")

        while self._running:
            self._handle_events()

            # Host frame opportunity; the game's scheduler gates the tick rate
            self.host.run_pending(float(pygame.time.get_ticks()))

            self._render()

            if self._clock:
                self._clock.tick(self.config.host_fps)

            # Yield to other tasks (deferred palette switches)
            await asyncio.sleep(0)

        self.event_bus.emit(Event(EventType.SHUTDOWN, source="simulator"))
        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        self.announcer.close()
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        """Stop the simulator."""
        self._running = False
