"""Maps raw host input signals to game commands."""

import logging
from typing import Optional

from pixeldash.game.commands import Command
from pixeldash.game.runner import RunnerGame

logger = logging.getLogger(__name__)


class InputMapper:
    """Translates pointer, touch and key signals into commands.

    Handlers never touch simulation state; they only submit commands and
    the game's state decides whether they count.
    """

    def __init__(self, game: RunnerGame):
        self.game = game

    def _submit(self, command: Command) -> Command:
        self.game.submit(command)
        return command

    def pointer_down(self, on_control: bool = False) -> Command:
        """Mouse press. A press on the start/retry control starts a run."""
        if on_control:
            return self._submit(Command.START)
        return self._submit(Command.JUMP)

    def touch_start(self, on_control: bool = False) -> Optional[Command]:
        """Finger down. Touches on the control are left to its click."""
        if on_control:
            return None
        return self._submit(Command.JUMP)

    def space_key(self, control_focused: bool = False) -> Command:
        """Space bar: start/retry from the overlay, otherwise jump.

        With focus on the control the key activates the control itself,
        so it is not treated as a start here.
        """
        game = self.game
        if not game.is_running and game.overlay_visible and not control_focused:
            return self._submit(Command.START)
        return self._submit(Command.JUMP)
