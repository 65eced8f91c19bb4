"""Keyboard state tracking across frames."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class KeyState(Enum):
    NONE = 0
    DOWN = 1
    UP = 2
    PRESS = 3


class Input:
    """Tracks which keys went down, came up or are held between two updates."""

    KEY_MAX = 256

    def __init__(self) -> None:
        self._current = [False] * self.KEY_MAX
        self._states = [KeyState.NONE] * self.KEY_MAX

    def _check(self, key: int) -> int:
        if not 0 <= key < self.KEY_MAX:
            raise IndexError(f"key code out of range: {key}")
        return key

    def update(self, pressed: Iterable[int]) -> None:
        """Take the set of key codes held now and work out each key's transition."""
        held = {self._check(key) for key in pressed}
        previous = self._current
        self._current = [key in held for key in range(self.KEY_MAX)]
        self._states = [
            _transition(old, new) for old, new in zip(previous, self._current)
        ]

    def state(self, key: int) -> KeyState:
        return self._states[self._check(key)]

    def is_key_down(self, key: int) -> bool:
        return self.state(key) is KeyState.DOWN

    def is_key_up(self, key: int) -> bool:
        return self.state(key) is KeyState.UP

    def is_key_press(self, key: int) -> bool:
        return self.state(key) is KeyState.PRESS


def _transition(old: bool, new: bool) -> KeyState:
    if new:
        return KeyState.PRESS if old else KeyState.DOWN
    return KeyState.UP if old else KeyState.NONE