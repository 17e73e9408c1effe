"""Input commands queued between host input and the simulation tick."""

from collections import deque
from enum import Enum
from typing import Deque, List


class Command(Enum):
    JUMP = "jump"
    START = "start"  # start or retry


class CommandQueue:
    """FIFO of pending commands, drained once per tick."""

    def __init__(self) -> None:
        self._items: Deque[Command] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, command: Command) -> None:
        self._items.append(command)

    def drain(self) -> List[Command]:
        items = list(self._items)
        self._items.clear()
        return items

    def clear(self) -> None:
        self._items.clear()
